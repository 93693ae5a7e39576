"""Get command handler."""

from tokenline.channels.commands.base import CommandDefinition, CommandHandler
from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


class GetCommand(CommandHandler):
    """Join the back of the line (or take the token if nobody has it)."""

    @property
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        return CommandDefinition(
            command=Command.GET,
            description="adds yourself to the queue",
        )

    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        queue.join(user)
        return CommandResult(message=f"{user.mention} joined the queue")
