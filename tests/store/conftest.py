"""Shared fixtures for store tests."""
from __future__ import annotations

import pytest

from simplekvstore.domain.record import KeyValue
from simplekvstore.store.kv_store import Store


def fill(store: Store, pairs: dict[str, str]) -> Store:
    for key, value in pairs.items():
        store.set(key, value)
    return store


def as_set(records: list[KeyValue]) -> set[tuple[str, str]]:
    """Order-independent view of a scan result."""
    return {kv.as_tuple() for kv in records}


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def prefixed_store() -> Store:
    return fill(Store(), {
        "pre-foo": "1",
        "pre-bar": "2",
        "foo-bar": "4",
        "bazbar": "5",
    })
