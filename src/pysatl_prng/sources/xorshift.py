"""
Xorshift Entropy Source
=======================

Deterministic, seedable and clonable source built on xorshift1024*
(Sebastiano Vigna, public domain reference at http://xorshift.di.unimi.it/).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os

from pysatl_prng.errors import InvalidArgumentError

from .base import EntropySource

MASK64 = (1 << 64) - 1
XORSHIFT_MULTIPLIER = 1181783497276652981
LANES = 16

_NEGATIVE_SEED = 0xD1B54A32D192ED03


def splitmix64(value: int) -> tuple[int, int]:
    """Advance a splitmix64 state; return ``(next_state, output)``."""
    value = (value + 0x9E3779B97F4A7C15) & MASK64
    z = value
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return value, z ^ (z >> 31)


def xorshift1024star(lanes: list[int], p: int) -> tuple[int, int]:
    """
    Advance ``lanes`` in place by one xorshift1024* step.

    Parameters
    ----------
    lanes : list[int]
        Sixteen 64-bit lanes, mutated in place.
    p : int
        Current lane index.

    Returns
    -------
    tuple[int, int]
        New lane index and the 64-bit output.
    """
    s0 = lanes[p]
    p = (p + 1) & 15
    s1 = lanes[p]
    s1 ^= (s1 << 31) & MASK64
    lanes[p] = s1 ^ s0 ^ (s1 >> 11) ^ (s0 >> 30)
    return p, (lanes[p] * XORSHIFT_MULTIPLIER) & MASK64


class XorShiftSource(EntropySource):
    """
    Xorshift1024* byte source.

    Parameters
    ----------
    seed : int, bytes-like or None, default None
        Seed expanded into the 16 lanes with splitmix64. Bytes are read as a
        little-endian integer. ``None`` draws 8 bytes from ``os.urandom``.

    Raises
    ------
    InvalidArgumentError
        If ``seed`` has an unsupported type.
    """

    deterministic = True

    def __init__(self, seed: int | bytes | bytearray | memoryview | None = None) -> None:
        if seed is None:
            seed = os.urandom(8)
        if isinstance(seed, bytes | bytearray | memoryview):
            seed = int.from_bytes(bytes(seed), "little")
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise InvalidArgumentError(f"Unsupported seed type {type(seed).__name__}.")

        mix = seed & MASK64
        # Fold wide seeds so that every bit influences the lanes.
        rest = seed >> 64 if seed >= 0 else ~seed
        while rest:
            mix, out = splitmix64(mix ^ (rest & MASK64))
            mix ^= out
            rest >>= 64
        if seed < 0:
            mix, out = splitmix64(mix ^ _NEGATIVE_SEED)
            mix ^= out

        self._lanes: list[int] = []
        for _ in range(LANES):
            mix, out = splitmix64(mix)
            self._lanes.append(out)
        self._p = 0
        self._pending = b""

    def _next_word(self) -> int:
        self._p, out = xorshift1024star(self._lanes, self._p)
        return out

    def next_byte(self) -> int:
        return self.next_bytes(1)[0]

    def next_bytes(self, count: int) -> bytes:
        chunks = [self._pending]
        have = len(self._pending)
        while have < count:
            chunks.append(self._next_word().to_bytes(8, "little"))
            have += 8
        data = b"".join(chunks)
        self._pending = data[count:]
        return data[:count]

    def clone(self) -> XorShiftSource:
        twin = object.__new__(XorShiftSource)
        twin._lanes = list(self._lanes)
        twin._p = self._p
        twin._pending = self._pending
        return twin
