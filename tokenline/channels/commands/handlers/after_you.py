"""AfterYou command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class AfterYouCommand(CommandHandler):
    """Let the next person go first."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.AFTER_YOU,
            description="swaps places with the person behind you",
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        queue.step_back(user)
        return CommandResult()
