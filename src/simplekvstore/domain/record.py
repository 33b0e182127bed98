"""KeyValue: the immutable record stored under every key.

The store never hands out anything it could later mutate. A frozen
dataclass gives us that for free: callers can keep a record as long as
they like, and the next set() replaces the entry in the map instead of
touching the old object.
"""
from __future__ import annotations

from dataclasses import dataclass

from simplekvstore.domain.types import Key, Value


@dataclass(frozen=True, slots=True)
class KeyValue:
    """Immutable (key, value) pair.

    The key field always equals the map key the record is stored under;
    Store.set() is the only place records are built for storage.
    """
    key: Key
    value: Value

    def as_tuple(self) -> tuple[Key, Value]:
        return (self.key, self.value)
