"""simplekvstore: a thread-safe in-process key-value store.

    from simplekvstore import Store

    store = Store()
    store.set("foo", "bar")
    store.get("foo").unwrap()          # KeyValue(key='foo', value='bar')
    store.get_with_prefix("fo")        # [KeyValue(key='foo', value='bar')]
"""
from simplekvstore.config import Settings, configure_logging, settings
from simplekvstore.domain import KeyNotFoundError, KeyValue, Lookup, NotFound
from simplekvstore.store import KeyContains, Prefix, Store, ValueContains, new

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "configure_logging",
    "settings",
    "KeyNotFoundError",
    "KeyValue",
    "Lookup",
    "NotFound",
    "KeyContains",
    "Prefix",
    "Store",
    "ValueContains",
    "new",
]
