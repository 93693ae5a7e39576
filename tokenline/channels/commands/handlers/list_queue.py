"""List command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class ListCommand(CommandHandler):
    """Show the current line without changing it."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.LIST,
            description="shows who holds the token and who is waiting",
            mutates=False,
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        return CommandResult()
