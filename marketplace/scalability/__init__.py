"""Scalability layer: per-entity distributed locking and bounded persistence retry. No FastAPI."""

from marketplace.scalability.distributed_lock import DistributedLock, InMemoryLockBackend
from marketplace.scalability.retry import PersistenceRetry

__all__ = [
    "DistributedLock",
    "InMemoryLockBackend",
    "PersistenceRetry",
]
