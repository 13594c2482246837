from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import XorShiftSource
from pysatl_prng.sources.xorshift import MASK64, splitmix64, xorshift1024star


class TestPrimitives:
    def test_splitmix64_reference_output(self) -> None:
        state, out = splitmix64(0)
        assert state == 0x9E3779B97F4A7C15
        assert out == 0xE220A8397B1DCDAF

    def test_xorshift_step_rotates_index(self) -> None:
        lanes = [i + 1 for i in range(16)]
        p, out = xorshift1024star(lanes, 15)
        assert p == 0
        assert 0 <= out <= MASK64
        assert lanes[0] != 1


class TestXorShiftSource:
    def test_same_seed_same_stream(self) -> None:
        assert XorShiftSource(42).next_bytes(256) == XorShiftSource(42).next_bytes(256)

    def test_different_seeds_differ(self) -> None:
        assert XorShiftSource(1).next_bytes(64) != XorShiftSource(2).next_bytes(64)

    def test_bytes_seed_is_little_endian_integer(self) -> None:
        assert XorShiftSource(b"\x01\x00").next_bytes(32) == XorShiftSource(1).next_bytes(32)

    def test_wide_seeds_use_every_word(self) -> None:
        low = XorShiftSource(5)
        wide = XorShiftSource(5 | (1 << 100))
        assert low.next_bytes(32) != wide.next_bytes(32)

    @pytest.mark.parametrize("negative", [-1, -2, -(2**64) - 1])
    def test_negative_seeds_differ_from_their_unsigned_pattern(self, negative: int) -> None:
        unsigned = negative & ((1 << 128) - 1)
        assert XorShiftSource(negative).next_bytes(32) != XorShiftSource(unsigned).next_bytes(32)
        assert XorShiftSource(negative).next_bytes(32) != XorShiftSource(negative & MASK64).next_bytes(32)

    def test_single_bytes_match_block_reads(self) -> None:
        a, b = XorShiftSource(9), XorShiftSource(9)
        assert a.next_bytes(19) == bytes(b.next_byte() for _ in range(19))
        assert a.next_bytes(13) == b.next_bytes(13)

    def test_clone_reproduces_remaining_stream(self) -> None:
        source = XorShiftSource(11)
        source.next_bytes(5)
        twin = source.clone()
        assert twin.next_bytes(100) == source.next_bytes(100)

    def test_is_deterministic(self) -> None:
        assert XorShiftSource(1).deterministic

    def test_unseeded_sources_differ(self) -> None:
        assert XorShiftSource().next_bytes(32) != XorShiftSource().next_bytes(32)

    @pytest.mark.parametrize("seed", [1.5, "seed", True])
    def test_rejects_unsupported_seed(self, seed: object) -> None:
        with pytest.raises(InvalidArgumentError):
            XorShiftSource(seed)  # type: ignore[arg-type]
