"""Tests for QueueRegistry."""

import threading
import time

import pytest

from tokenline.model.user import ChannelKey, User
from tokenline.runtime.errors import LockFailureError, NotQueuedError
from tokenline.runtime.queue.registry import QueueRegistry
from tokenline.runtime.queue.token_queue import TokenQueue

A = User("UA", "ann")
B = User("UB", "bob")


@pytest.fixture
def registry() -> QueueRegistry:
    """Create a fresh registry."""
    return QueueRegistry()


def test_resolve_creates_empty_queue(registry: QueueRegistry):
    """First resolve of a key creates an empty queue."""
    key = ChannelKey("T1", "C1")
    assert key not in registry

    queue = registry.resolve(key)

    assert isinstance(queue, TokenQueue)
    assert queue.size() == 0
    assert key in registry
    assert len(registry) == 1


def test_resolve_returns_same_instance(registry: QueueRegistry):
    """Repeated resolves return the same queue."""
    key = ChannelKey("T1", "C1")
    assert registry.resolve(key) is registry.resolve(key)
    assert registry.resolve(ChannelKey("T1", "C1")) is registry.resolve(key)
    assert len(registry) == 1


def test_keys_does_not_create(registry: QueueRegistry):
    """Listing keys never creates a queue."""
    assert registry.keys() == []
    registry.resolve(ChannelKey("T1", "C1"))
    assert registry.keys() == [ChannelKey("T1", "C1")]


def test_cross_channel_isolation(registry: QueueRegistry):
    """Queues for different channels or teams are independent."""
    k11 = ChannelKey("T1", "C1")
    k12 = ChannelKey("T1", "C2")
    k21 = ChannelKey("T2", "C1")

    with registry.write(k11) as queue:
        queue.join(A)
    with registry.write(k12) as queue:
        queue.join(B)

    assert registry.with_read(k11, lambda q: q.snapshot()) == (A,)
    assert registry.with_read(k12, lambda q: q.snapshot()) == (B,)
    assert registry.with_read(k21, lambda q: q.snapshot()) == ()
    assert len(registry) == 3


def test_with_write_returns_fn_result(registry: QueueRegistry):
    """with_write returns whatever fn returns."""
    key = ChannelKey("T1", "C1")
    registry.with_write(key, lambda q: q.join(A))
    registry.with_write(key, lambda q: q.join(B))

    displaced = registry.with_write(key, lambda q: q.steal(B))

    assert displaced == A
    assert registry.with_read(key, lambda q: q.user_names()) == ["bob"]


def test_domain_error_leaves_lock_usable(registry: QueueRegistry):
    """A QueueError in a write scope propagates without poisoning."""
    key = ChannelKey("T1", "C1")

    with pytest.raises(NotQueuedError):
        registry.with_write(key, lambda q: q.leave(A))

    registry.with_write(key, lambda q: q.join(A))
    assert registry.with_read(key, lambda q: q.is_holding(A))


def test_crash_in_write_scope_poisons_only_that_queue(registry: QueueRegistry):
    """A crash poisons its own queue; other channels keep working."""
    bad = ChannelKey("T1", "C1")
    good = ChannelKey("T1", "C2")

    with pytest.raises(RuntimeError):
        with registry.write(bad):
            raise RuntimeError("crash mid-mutation")

    with pytest.raises(LockFailureError):
        registry.with_read(bad, lambda q: q.size())
    with pytest.raises(LockFailureError):
        registry.with_write(bad, lambda q: q.join(A))

    registry.with_write(good, lambda q: q.join(A))
    assert registry.with_read(good, lambda q: q.size()) == 1


def test_concurrent_resolve_creates_one_queue(registry: QueueRegistry):
    """N threads resolving an unseen key all observe one queue."""
    key = ChannelKey("T1", "C-new")
    n = 16
    start = threading.Barrier(n, timeout=5)
    seen: list[TokenQueue] = []
    seen_lock = threading.Lock()

    def worker():
        start.wait()
        queue = registry.resolve(key)
        with seen_lock:
            seen.append(queue)

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert len(seen) == n
    assert all(q is seen[0] for q in seen)
    assert len(registry) == 1


def test_concurrent_joins_are_all_applied(registry: QueueRegistry):
    """Concurrent writers on one queue lose no updates."""
    key = ChannelKey("T1", "C1")
    n = 20
    start = threading.Barrier(n, timeout=5)

    def worker(i: int):
        start.wait()
        registry.with_write(key, lambda q: q.join(User(f"U{i}", f"user{i}")))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    members = registry.with_read(key, lambda q: q.snapshot())
    assert len(members) == n
    assert len({u.user_id for u in members}) == n


def test_readers_never_see_partial_mutation(registry: QueueRegistry):
    """Snapshots taken during concurrent steals are always consistent."""
    key = ChannelKey("T1", "C1")
    users = [User(f"U{i}", f"user{i}") for i in range(6)]
    stop = threading.Event()
    bad: list[tuple[User, ...]] = []

    def writer():
        while not stop.is_set():
            with registry.write(key) as queue:
                for u in users:
                    if u not in queue.snapshot():
                        queue.join(u)
                queue.steal(queue.snapshot()[-1])
            time.sleep(0.0005)

    def reader():
        for _ in range(200):
            snap = registry.with_read(key, lambda q: q.snapshot())
            if len({u.user_id for u in snap}) != len(snap):
                bad.append(snap)
            # Writer scope always ends with exactly five members
            if snap and len(snap) != len(users) - 1:
                bad.append(snap)

    tw = threading.Thread(target=writer)
    readers = [threading.Thread(target=reader) for _ in range(3)]
    tw.start()
    for t in readers:
        t.start()
    for t in readers:
        t.join(timeout=10)
    stop.set()
    tw.join(timeout=5)

    assert bad == []
