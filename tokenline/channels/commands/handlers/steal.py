"""Steal command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class StealCommand(CommandHandler):
    """Take the token from whoever holds it."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.STEAL,
            description="takes the token, removing the current holder from the queue",
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        displaced = queue.steal(user)
        return CommandResult(
            message=f"{user.mention} stole the token from {displaced.mention}!",
            displaced=displaced,
        )
