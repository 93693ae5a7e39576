"""Barge command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class BargeCommand(CommandHandler):
    """Jump to the spot directly behind the holder."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.BARGE,
            description="swaps you into the spot right after the holder",
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        queue.barge(user)
        return CommandResult(message=f"{user.mention} barged to the front!")
