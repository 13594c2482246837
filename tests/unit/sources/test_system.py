from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import SystemSource


class TestSystemSource:
    def test_reads_from_wrapped_generator(self) -> None:
        source = SystemSource(np.random.default_rng(5))
        assert source.next_bytes(16) == np.random.default_rng(5).bytes(16)

    def test_next_byte_range(self) -> None:
        source = SystemSource()
        assert all(0 <= source.next_byte() < 256 for _ in range(32))
        assert len(source.next_bytes(10)) == 10

    def test_is_neither_clonable_nor_deterministic(self) -> None:
        source = SystemSource()
        assert source.clone() is None
        assert not source.deterministic

    def test_rejects_foreign_rng(self) -> None:
        with pytest.raises(InvalidArgumentError):
            SystemSource(np.random.RandomState(0))  # type: ignore[arg-type]
