"""Missing-key reporting.

NotFound is the reason value a failed Lookup carries. It is a plain
frozen dataclass, not an exception, so existence probes stay on the
normal return path. KeyNotFoundError is the raised form, used only when
a caller asks a Lookup to unwrap().
"""
from __future__ import annotations

from dataclasses import dataclass

from simplekvstore.domain.types import Key

NOT_FOUND_MESSAGE = "key does not exist"


@dataclass(frozen=True, slots=True)
class NotFound:
    """No record is stored under `key`."""
    key: Key

    def __str__(self) -> str:
        return f"{NOT_FOUND_MESSAGE}: {self.key}"

    def to_exception(self) -> KeyNotFoundError:
        return KeyNotFoundError(self.key)


class KeyNotFoundError(LookupError):
    """Raised by Lookup.unwrap() when the key is absent."""

    def __init__(self, key: Key) -> None:
        super().__init__(f"{NOT_FOUND_MESSAGE}: {key}")
        self.key = key
