"""Store: a thread-safe map from string keys to KeyValue records.

One dict, one ReadWriteLock:
  set:                       write lock, replace the entry
  get, len, in:              read lock, single dict access
  get_all, get_snapshot:     read lock held for the full traversal
  get_with_prefix,
  get_keys_containing,
  get_values_containing:     read lock held for the full linear scan

Every traversal builds a fresh list or dict before the lock is
released, so callers inspect results without holding anything and
without seeing later writes. Records are frozen, so handing the same
KeyValue object to several callers is safe.
"""
from __future__ import annotations

import logging

from simplekvstore.concurrency.rwlock import ReadWriteLock
from simplekvstore.domain.lookup import Lookup
from simplekvstore.domain.record import KeyValue
from simplekvstore.domain.types import Key, Value
from simplekvstore.store.queries import KeyContains, Predicate, Prefix, ValueContains

log = logging.getLogger(__name__)


class Store:
    """In-process key-value container.

    Keys are unique and unordered. The only mutation is set(); there is
    no delete, expiry or eviction. Share one instance between threads
    by passing it around explicitly.
    """

    __slots__ = ("_data", "_lock")

    def __init__(self) -> None:
        self._data: dict[Key, KeyValue] = {}
        self._lock = ReadWriteLock()
        log.debug("created empty store %#x", id(self))

    def set(self, key: Key, value: Value) -> None:
        """Insert or overwrite the record for `key`. Never fails."""
        record = KeyValue(key, value)
        with self._lock.write():
            replaced = key in self._data
            self._data[key] = record
        if replaced:
            log.debug("overwrote key %r", key)

    def get(self, key: Key) -> Lookup:
        """Look up `key`. A miss returns Lookup(error=NotFound(key))."""
        with self._lock.read():
            record = self._data.get(key)
        if record is None:
            log.debug("lookup miss for key %r", key)
            return Lookup.miss(key)
        return Lookup.hit(record)

    def get_all(self) -> list[KeyValue]:
        """All records in arbitrary order. Empty list when the store is empty."""
        with self._lock.read():
            return list(self._data.values())

    def get_snapshot(self) -> dict[Key, KeyValue]:
        """Independent copy of the key -> record map.

        Mutating the returned dict never reaches the store and later
        set() calls never reach the dict.
        """
        with self._lock.read():
            return dict(self._data)

    # Older name for get_snapshot().
    get_clone = get_snapshot

    def scan(self, predicate: Predicate) -> list[KeyValue]:
        """Every record for which `predicate(record)` is true.

        The read lock is held for the whole traversal, so `predicate`
        must not call back into this store's set().
        """
        with self._lock.read():
            matched = [kv for kv in self._data.values() if predicate(kv)]
        log.debug("scan %r matched %d record(s)", predicate, len(matched))
        return matched

    def get_with_prefix(self, prefix: str) -> list[KeyValue]:
        return self.scan(Prefix(prefix))

    def get_keys_containing(self, substr: str) -> list[KeyValue]:
        return self.scan(KeyContains(substr))

    def get_values_containing(self, substr: str) -> list[KeyValue]:
        return self.scan(ValueContains(substr))

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._data

    def __repr__(self) -> str:
        return f"Store(keys={len(self)})"


def new() -> Store:
    """Create an empty store."""
    return Store()
