"""Reader/writer lock with poisoning."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from tokenline.runtime.errors import LockFailureError

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Writers are preferred: once a writer is waiting, new readers queue behind
    it. An exception escaping a write scope poisons the lock unless it is an
    instance of one of the ``recoverable`` types; after that every
    acquisition raises LockFailureError.

    Example:
        >>> lock = ReadWriteLock(recoverable=(KeyError,))
        >>> with lock.write():
        ...     data["x"] = 1
        >>> with lock.read():
        ...     print(data["x"])
    """

    def __init__(
        self,
        name: str = "lock",
        recoverable: tuple[type[BaseException], ...] = (),
    ) -> None:
        """Initialize the lock.

        Args:
            name: Label used in log and error messages.
            recoverable: Exception types that leave guarded data intact and
                therefore do not poison the lock when raised by a writer.
        """
        self.name = name
        self._recoverable = recoverable
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        """Whether a writer crashed while holding the lock."""
        with self._cond:
            return self._poisoned

    def _check_poisoned(self, mode: str) -> None:
        """Raise if poisoned. Caller must hold self._cond."""
        if self._poisoned:
            raise LockFailureError(f"unable to lock {self.name} ({mode})")

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold a shared scope for the duration of the block."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._check_poisoned("r")
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold an exclusive scope for the duration of the block."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            if self._poisoned:
                self._cond.notify_all()
                self._check_poisoned("w")
            self._writer = True
        try:
            yield
        except self._recoverable:
            raise
        except BaseException:
            with self._cond:
                self._poisoned = True
            logger.error(f"{self.name} poisoned by a failed write", exc_info=True)
            raise
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
