"""Read-write lock guarding the store's map.

Point lookups and scans only read the map, so any number of them may
run together. set() is the only writer and needs the map to itself:
no reader may be mid-traversal while an entry is replaced.

    lock = ReadWriteLock()

    with lock.read():
        rows = [kv for kv in data.values() if pred(kv)]

    with lock.write():
        data[key] = KeyValue(key, value)

Writer preference: a waiting writer stops new readers from entering.
A steady stream of scans therefore cannot starve set().
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared read / exclusive write lock on top of threading.Condition.

    Not reentrant. A thread holding read() must not call write(), and
    nested write() calls deadlock.
    """

    def __init__(self) -> None:
        self._readers: int = 0
        self._writers_waiting: int = 0
        self._writer_active: bool = False
        self._cond = threading.Condition(threading.Lock())

    @property
    def readers(self) -> int:
        """Number of threads currently inside read()."""
        with self._cond:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._cond:
            return self._writer_active

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            self._cond.wait_for(self._can_read)
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                self._cond.wait_for(self._can_write)
            except BaseException:
                # Readers parked behind this writer must re-check.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._cond:
                self._writer_active = False
                self._cond.notify_all()

    # Both predicates run with self._cond held.
    def _can_read(self) -> bool:
        return not self._writer_active and self._writers_waiting == 0

    def _can_write(self) -> bool:
        return not self._writer_active and self._readers == 0
