"""Error taxonomy for token queues.

Domain errors (``QueueError`` subclasses) are expected, user-facing
conditions. They are raised before any mutation, so the queue is unchanged
when one is seen. ``LockFailureError`` is different: it means a queue's lock
was poisoned by an earlier crash and the request cannot be served.
"""


class QueueError(Exception):
    """Base class for rejected queue operations."""

    message = "Queue operation rejected"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class AlreadyQueuedError(QueueError):
    """The user is already in the queue."""

    message = "You are already in the queue!"


class NotQueuedError(QueueError):
    """The user is not in the queue."""

    message = "You are not in the queue!"


class AtEndError(QueueError):
    """The user is last and cannot step back further."""

    message = "You are at the end of the queue!"


class AlreadyHoldingError(QueueError):
    """The user already holds the token."""

    message = "You are already holding the token!"


class AlreadyNextError(QueueError):
    """The user is already directly behind the holder."""

    message = "You are already at the start of the queue!"


class LockFailureError(RuntimeError):
    """A queue lock could not be acquired because it is poisoned."""
