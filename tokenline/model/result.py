"""Result of running a command against a queue."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tokenline.model.user import User

if TYPE_CHECKING:
    from tokenline.runtime.errors import QueueError


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a queue command.

    Attributes:
        members: Ordered snapshot of the queue after the command; index 0 holds the token.
        message: Optional description of the action just taken.
        displaced: The former holder, set only when the token was stolen.
        error: Domain error when the command was rejected (queue left unchanged).
    """

    members: tuple[User, ...] = ()
    message: str | None = None
    displaced: User | None = None
    error: "QueueError | None" = None

    @property
    def ok(self) -> bool:
        """True when the command succeeded."""
        return self.error is None
