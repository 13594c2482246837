"""
Word Producer
=============

Advances generator state and emits raw unsigned words of 8, 16, 32 or 64
bits.

Each 64-bit output is one xorshift1024* step over the state lanes, whitened
with a 64-bit word read from the entropy source. Source bytes are pulled in
pools of ``pool_words`` words when the previous pool is used up.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence

import numpy as np

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import EntropySource
from pysatl_prng.sources.xorshift import MASK64, xorshift1024star

from .state import STATE_WORDS

WORD_WIDTHS: tuple[int, ...] = (8, 16, 32, 64)
"""Raw word widths in bits."""

_NONZERO_LANE = 0x9E3779B97F4A7C15


class WordProducer:
    """
    Raw word engine.

    Parameters
    ----------
    source : EntropySource
        Source of whitening bytes.
    lanes : Sequence[int]
        Initial state: ``STATE_WORDS`` unsigned 64-bit lanes.
    pool_words : int, default 16
        Words pulled from ``source`` per refill.

    Raises
    ------
    InvalidArgumentError
        If ``lanes`` does not hold exactly ``STATE_WORDS`` lanes.

    Notes
    -----
    An all-zero state would make xorshift emit zeros forever; it is replaced
    by a state with a single fixed non-zero lane.
    """

    __slots__ = ("_source", "_lanes", "_p", "_pool", "_pos", "_pool_bytes")

    def __init__(self, source: EntropySource, lanes: Sequence[int], pool_words: int = 16) -> None:
        if len(lanes) != STATE_WORDS:
            raise InvalidArgumentError(f"Expected {STATE_WORDS} state lanes, got {len(lanes)}.")
        self._source = source
        self._lanes = [int(lane) & MASK64 for lane in lanes]
        if not any(self._lanes):
            self._lanes[0] = _NONZERO_LANE
        self._p = 0
        self._pool_bytes = 8 * pool_words
        self._pool = b""
        self._pos = 0

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def state(self) -> bytes:
        """Snapshot of the state lanes as ``8 * STATE_WORDS`` little-endian bytes."""
        return np.asarray(self._lanes, dtype="<u8").tobytes()

    def _whitening(self) -> int:
        if self._pos == len(self._pool):
            self._pool = self._source.next_bytes(self._pool_bytes)
            self._pos = 0
        word = int.from_bytes(self._pool[self._pos : self._pos + 8], "little")
        self._pos += 8
        return word

    def next64(self) -> int:
        """Return the next unsigned 64-bit word."""
        self._p, out = xorshift1024star(self._lanes, self._p)
        return out ^ self._whitening()

    def next_word(self, width: int) -> int:
        """
        Return a uniformly distributed unsigned word.

        Parameters
        ----------
        width : int
            One of 8, 16, 32, 64.

        Returns
        -------
        int
            Top ``width`` bits of the next 64-bit output.
        """
        if width not in WORD_WIDTHS:
            raise InvalidArgumentError(
                f"Unsupported word width {width}; expected one of {WORD_WIDTHS}."
            )
        return self.next64() >> (64 - width)

    def next_wide(self, bits: int) -> int:
        """Return an unsigned word of ``bits`` bits (a multiple of 64) built from 64-bit draws."""
        if bits <= 0 or bits % 64:
            raise InvalidArgumentError(
                f"Wide word width must be a positive multiple of 64, got {bits}."
            )
        value = 0
        for _ in range(bits // 64):
            value = (value << 64) | self.next64()
        return value

    def clone(self, source: EntropySource) -> WordProducer:
        """Copy the state and pending pool onto ``source``."""
        twin = object.__new__(WordProducer)
        twin._source = source
        twin._lanes = list(self._lanes)
        twin._p = self._p
        twin._pool_bytes = self._pool_bytes
        twin._pool = self._pool
        twin._pos = self._pos
        return twin


__all__ = ["WORD_WIDTHS", "WordProducer"]
