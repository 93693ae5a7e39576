"""Registry of per-channel token queues.

The key->queue mapping is guarded by a single mutex that is only taken when a
queue may need to be created. Each queue has its own ReadWriteLock, so traffic
on one channel never waits on another.
"""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TypeVar

from tokenline.model.user import ChannelKey
from tokenline.runtime.errors import QueueError
from tokenline.runtime.locks import ReadWriteLock
from tokenline.runtime.queue.token_queue import TokenQueue

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class QueueEntry:
    """A queue together with the lock guarding it."""

    key: ChannelKey
    queue: TokenQueue = field(default_factory=TokenQueue)
    lock: ReadWriteLock = field(init=False)

    def __post_init__(self) -> None:
        self.lock = ReadWriteLock(name=f"token {self.key}", recoverable=(QueueError,))


class QueueRegistry:
    """Lazily creates and hands out one TokenQueue per channel key.

    Thread-safe. Queues live for the lifetime of the registry.

    Example:
        >>> registry = QueueRegistry()
        >>> key = ChannelKey("T1", "C1")
        >>> with registry.write(key) as queue:
        ...     queue.join(User("U1", "ann"))
        >>> registry.with_read(key, lambda q: q.user_names())
        ['ann']
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[ChannelKey, QueueEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _entry(self, key: ChannelKey) -> QueueEntry:
        """Get or atomically create the entry for a key."""
        # dict reads are atomic, so known keys skip the registry mutex
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = QueueEntry(key=key)
                self._entries[key] = entry
                logger.info(f"Created token queue for {key}")
            return entry

    def resolve(self, key: ChannelKey) -> TokenQueue:
        """Return the queue for a key, creating an empty one on first use.

        At most one queue is ever created per key, even when several threads
        resolve an unseen key at the same time.

        Args:
            key: Team and channel identifying the queue.

        Returns:
            The single TokenQueue for this key.
        """
        return self._entry(key).queue

    def keys(self) -> list[ChannelKey]:
        """Keys of all queues created so far. Never creates a queue."""
        with self._lock:
            return list(self._entries)

    @contextmanager
    def read(self, key: ChannelKey) -> Iterator[TokenQueue]:
        """Yield the queue for a key under a shared scope.

        Raises:
            LockFailureError: If the queue's lock is poisoned.
        """
        entry = self._entry(key)
        with entry.lock.read():
            yield entry.queue

    @contextmanager
    def write(self, key: ChannelKey) -> Iterator[TokenQueue]:
        """Yield the queue for a key under an exclusive scope.

        QueueError raised inside the block propagates without poisoning the
        lock; any other exception poisons it.

        Raises:
            LockFailureError: If the queue's lock is poisoned.
        """
        entry = self._entry(key)
        with entry.lock.write():
            yield entry.queue

    def with_read(self, key: ChannelKey, fn: Callable[[TokenQueue], T]) -> T:
        """Call fn(queue) under a shared scope and return its result."""
        with self.read(key) as queue:
            return fn(queue)

    def with_write(self, key: ChannelKey, fn: Callable[[TokenQueue], T]) -> T:
        """Call fn(queue) under an exclusive scope and return its result."""
        with self.write(key) as queue:
            return fn(queue)
