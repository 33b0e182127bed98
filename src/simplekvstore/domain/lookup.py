"""Lookup: tagged result of a point lookup.

Exactly one of `record` / `error` is set. Callers branch on `found`
(or truthiness) and only pay for an exception if they call unwrap()
on a miss.

    result = store.get("foo")
    if result:
        print(result.record.value)
    else:
        print(result.error)          # key does not exist: foo
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from simplekvstore.domain.errors import NotFound
from simplekvstore.domain.record import KeyValue
from simplekvstore.domain.types import Value


@dataclass(frozen=True, slots=True)
class Lookup:
    record: KeyValue | None = None
    error: NotFound | None = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            raise ValueError("Lookup needs exactly one of record or error")

    @classmethod
    def hit(cls, record: KeyValue) -> Lookup:
        return cls(record=record)

    @classmethod
    def miss(cls, key: str) -> Lookup:
        return cls(error=NotFound(key))

    @property
    def found(self) -> bool:
        return self.record is not None

    def __bool__(self) -> bool:
        return self.found

    def unwrap(self) -> KeyValue:
        """Return the record, or raise KeyNotFoundError on a miss."""
        if self.record is None:
            raise cast(NotFound, self.error).to_exception()
        return self.record

    def value_or(self, default: Value) -> Value:
        """The stored value, or `default` when the key is absent."""
        if self.record is None:
            return default
        return self.record.value
