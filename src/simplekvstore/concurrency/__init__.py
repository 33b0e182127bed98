"""Locking primitives used by the store."""
from simplekvstore.concurrency.rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
