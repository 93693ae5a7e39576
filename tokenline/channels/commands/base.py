"""Base types for queue command handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tokenline.model.command import Command
from tokenline.model.result import CommandResult
from tokenline.model.user import User
from tokenline.runtime.queue.token_queue import TokenQueue


@dataclass(frozen=True)
class CommandDefinition:
    """Command metadata.

    Attributes:
        command: Which command this handler serves.
        description: One-line help text.
        mutates: Whether the handler needs exclusive access to the queue.
    """

    command: Command
    description: str
    mutates: bool = True

    @property
    def name(self) -> str:
        return self.command.value


class CommandHandler(ABC):
    """Runs one command against a queue that the router has already locked."""

    @property
    @abstractmethod
    def definition(self) -> CommandDefinition:
        """Command metadata."""
        ...

    @abstractmethod
    def handle(self, queue: TokenQueue, user: User) -> CommandResult:
        """Execute the command.

        Args:
            queue: The channel's queue, locked for read or write per ``definition.mutates``.
            user: The user who sent the command.

        Returns:
            CommandResult carrying the action message. The router fills in members.

        Raises:
            QueueError: If the queue rejects the operation.
        """
        ...
