"""Scan predicates for Store.scan().

Each query is a small frozen value with a .matches() method, so the
store can run every search through one locked traversal instead of
three copies of the same loop. Queries are also callable, which means
any plain function taking a KeyValue works as a predicate too.

Matching is codepoint-wise on str. An empty pattern matches every
record.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from simplekvstore.domain.record import KeyValue

Predicate = Callable[[KeyValue], bool]


@dataclass(frozen=True, slots=True)
class Prefix:
    """Key starts with `prefix`."""
    prefix: str

    def matches(self, record: KeyValue) -> bool:
        return record.key.startswith(self.prefix)

    def __call__(self, record: KeyValue) -> bool:
        return self.matches(record)


@dataclass(frozen=True, slots=True)
class KeyContains:
    """Key contains `substr` as a contiguous substring."""
    substr: str

    def matches(self, record: KeyValue) -> bool:
        return self.substr in record.key

    def __call__(self, record: KeyValue) -> bool:
        return self.matches(record)


@dataclass(frozen=True, slots=True)
class ValueContains:
    """Value contains `substr` as a contiguous substring."""
    substr: str

    def matches(self, record: KeyValue) -> bool:
        return self.substr in record.value

    def __call__(self, record: KeyValue) -> bool:
        return self.matches(record)
