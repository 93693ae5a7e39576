"""Runtime state for Tokenline: queues, their registry, and locking."""
