from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading

import pytest

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import (
    SynchronizedSource,
    SystemSource,
    XorShiftSource,
    synchronized,
)


class TestSynchronizedSource:
    def test_passes_bytes_through(self) -> None:
        wrapped = synchronized(XorShiftSource(8))
        assert isinstance(wrapped, SynchronizedSource)
        assert wrapped.next_bytes(33) == XorShiftSource(8).next_bytes(33)

    def test_mirrors_determinism(self) -> None:
        assert SynchronizedSource(XorShiftSource(1)).deterministic
        assert not SynchronizedSource(SystemSource()).deterministic

    def test_clone_wraps_inner_clone(self) -> None:
        wrapped = SynchronizedSource(XorShiftSource(3))
        wrapped.next_bytes(3)
        twin = wrapped.clone()
        assert isinstance(twin, SynchronizedSource)
        assert twin.inner is not wrapped.inner
        assert twin.next_bytes(20) == wrapped.next_bytes(20)

    def test_unclonable_inner(self) -> None:
        assert SynchronizedSource(SystemSource()).clone() is None

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            SynchronizedSource(None)  # type: ignore[arg-type]

    def test_concurrent_reads_do_not_tear(self) -> None:
        chunk, calls, workers = 8, 200, 4
        wrapped = SynchronizedSource(XorShiftSource(21))
        results: list[list[bytes]] = [[] for _ in range(workers)]

        def pull(index: int) -> None:
            for _ in range(calls):
                results[index].append(wrapped.next_bytes(chunk))

        threads = [threading.Thread(target=pull, args=(i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        reference = XorShiftSource(21)
        expected = [reference.next_bytes(chunk) for _ in range(calls * workers)]
        observed = [data for per_thread in results for data in per_thread]
        assert sorted(observed) == sorted(expected)
