"""The key-value store and the scan predicates it runs.

Store keeps records in a dict behind a ReadWriteLock. The three
search methods are thin wrappers over Store.scan() with one of the
query objects from queries.py.
"""
from simplekvstore.store.kv_store import Store, new
from simplekvstore.store.queries import KeyContains, Predicate, Prefix, ValueContains

__all__ = [
    "Store",
    "new",
    "KeyContains",
    "Predicate",
    "Prefix",
    "ValueContains",
]
