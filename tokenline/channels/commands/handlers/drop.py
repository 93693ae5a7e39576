"""Drop command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class DropCommand(CommandHandler):
    """Leave the line, releasing the token if held."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.DROP,
            description="removes yourself from the queue",
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        queue.leave(user)
        return CommandResult(message=f"{user.mention} dropped the token")
