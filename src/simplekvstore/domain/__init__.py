"""Value types for simplekvstore.

Re-exports the record, lookup result and error types:
    from simplekvstore.domain import KeyValue, Lookup, NotFound
"""
from simplekvstore.domain.errors import KeyNotFoundError, NotFound
from simplekvstore.domain.lookup import Lookup
from simplekvstore.domain.record import KeyValue
from simplekvstore.domain.types import Key, Value

__all__ = [
    "KeyNotFoundError",
    "NotFound",
    "Lookup",
    "KeyValue",
    "Key",
    "Value",
]
