"""
Synchronized Entropy Source
===========================

Wrapper serializing access to another source with a lock.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

from pysatl_prng.errors import InvalidArgumentError

from .base import EntropySource


class SynchronizedSource(EntropySource):
    """
    Lock-guarded view of ``source``.

    Only the byte supply is serialized: a :class:`~pysatl_prng.Generator`
    over this source is still not safe to share between threads.
    """

    def __init__(self, source: EntropySource) -> None:
        if source is None:
            raise InvalidArgumentError("source must not be None.")
        self._source = source
        self._lock = threading.Lock()

    @property  # type: ignore[misc]
    def deterministic(self) -> bool:  # type: ignore[override]
        return self._source.deterministic

    @property
    def inner(self) -> EntropySource:
        """The wrapped source."""
        return self._source

    def next_byte(self) -> int:
        with self._lock:
            return self._source.next_byte()

    def next_bytes(self, count: int) -> bytes:
        with self._lock:
            return self._source.next_bytes(count)

    def clone(self) -> SynchronizedSource | None:
        with self._lock:
            twin = self._source.clone()
        return None if twin is None else SynchronizedSource(twin)


def synchronized(source: EntropySource) -> SynchronizedSource:
    """Wrap ``source`` in a :class:`SynchronizedSource`."""
    return SynchronizedSource(source)
