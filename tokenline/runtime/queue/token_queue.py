"""Ordered, duplicate-free waiting line for one channel's token."""

import logging

from tokenline.model.user import User
from tokenline.runtime.errors import (
    AlreadyHoldingError,
    AlreadyNextError,
    AlreadyQueuedError,
    AtEndError,
    NotQueuedError,
)

logger = logging.getLogger(__name__)


class TokenQueue:
    """The line of users waiting for a channel's token.

    The user at position 0 holds the token. A user appears at most once,
    compared by ``user_id``. Every mutating method validates first and raises
    a QueueError without touching state when the operation is not allowed.

    Not thread-safe on its own; QueueRegistry provides the locking.

    Example:
        >>> queue = TokenQueue()
        >>> queue.join(User("U1", "ann"))
        >>> queue.join(User("U2", "bob"))
        >>> queue.user_names()
        ['ann', 'bob']
    """

    def __init__(self) -> None:
        self._users: list[User] = []

    def __len__(self) -> int:
        return len(self._users)

    def __repr__(self) -> str:
        return f"TokenQueue({self.user_names()!r})"

    def _position(self, user: User) -> int:
        """Index of user, raising NotQueuedError when absent."""
        try:
            return self._users.index(user)
        except ValueError:
            raise NotQueuedError() from None

    def size(self) -> int:
        """Number of users in the line; 0 means nobody holds the token."""
        return len(self._users)

    @property
    def holder(self) -> User | None:
        """The user holding the token, if any."""
        return self._users[0] if self._users else None

    def is_holding(self, user: User) -> bool:
        """Test whether the given user holds the token."""
        return bool(self._users) and self._users[0] == user

    def snapshot(self) -> tuple[User, ...]:
        """Immutable copy of the line, holder first."""
        return tuple(self._users)

    def user_names(self) -> list[str]:
        """Display names in line order."""
        return [u.user_name for u in self._users]

    def join(self, user: User) -> None:
        """Append user to the tail of the line.

        Raises:
            AlreadyQueuedError: If the user is already in the line.
        """
        if user in self._users:
            raise AlreadyQueuedError()
        self._users.append(user)
        logger.debug(f"{user.user_id} joined at position {len(self._users) - 1}")

    def leave(self, user: User) -> None:
        """Remove user, keeping everyone else in order.

        Raises:
            NotQueuedError: If the user is not in the line.
        """
        pos = self._position(user)
        del self._users[pos]
        logger.debug(f"{user.user_id} left from position {pos}")

    def step_back(self, user: User) -> None:
        """Swap user with the person directly behind them.

        Raises:
            NotQueuedError: If the user is not in the line.
            AtEndError: If the user is already last.
        """
        pos = self._position(user)
        if pos >= len(self._users) - 1:
            raise AtEndError()
        self._users[pos], self._users[pos + 1] = self._users[pos + 1], self._users[pos]
        logger.debug(f"{user.user_id} stepped back to position {pos + 1}")

    def barge(self, user: User) -> None:
        """Swap user into position 1, directly behind the holder.

        Whoever stood at position 1 takes the user's old place.

        Raises:
            NotQueuedError: If the user is not in the line.
            AlreadyHoldingError: If the user holds the token.
            AlreadyNextError: If the user is already at position 1.
        """
        pos = self._position(user)
        if pos == 0:
            raise AlreadyHoldingError()
        if pos == 1:
            raise AlreadyNextError()
        self._users[pos], self._users[1] = self._users[1], self._users[pos]
        logger.debug(f"{user.user_id} barged from position {pos} to 1")

    def steal(self, user: User) -> User:
        """Take the token from the current holder.

        The user is swapped into position 0 and the entry left behind at the
        user's old position, which is now the former holder, is removed. The
        former holder is therefore dropped from the line entirely.

        Returns:
            The former holder.

        Raises:
            NotQueuedError: If the user is not in the line.
            AlreadyHoldingError: If the user already holds the token.
        """
        pos = self._position(user)
        if pos == 0:
            raise AlreadyHoldingError()
        self._users[pos], self._users[0] = self._users[0], self._users[pos]
        displaced = self._users.pop(pos)
        logger.debug(f"{user.user_id} stole the token from {displaced.user_id}")
        return displaced
