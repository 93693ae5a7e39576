"""Token queues and the per-channel registry that guards them."""

from tokenline.runtime.queue.registry import QueueEntry, QueueRegistry
from tokenline.runtime.queue.token_queue import TokenQueue

__all__ = ["QueueEntry", "QueueRegistry", "TokenQueue"]
