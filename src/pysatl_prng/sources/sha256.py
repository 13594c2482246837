"""
SHA-256 Entropy Source
======================

Deterministic, clonable source producing a SHA-256 hash chain.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import hashlib

from pysatl_prng.errors import InvalidArgumentError

from .base import EntropySource


class SHA256Source(EntropySource):
    """
    Hash-chain byte source.

    Each 32-byte block is the SHA-256 digest of the previous block; the first
    block is the digest of the seed.

    Parameters
    ----------
    seed : bytes-like or str, default b""
        Chain origin. Text is encoded as UTF-8.
    """

    deterministic = True

    def __init__(self, seed: bytes | bytearray | memoryview | str = b"") -> None:
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        if not isinstance(seed, bytes | bytearray | memoryview):
            raise InvalidArgumentError(f"Unsupported seed type {type(seed).__name__}.")
        self._block = hashlib.sha256(bytes(seed)).digest()
        self._index = 0

    def next_byte(self) -> int:
        return self.next_bytes(1)[0]

    def next_bytes(self, count: int) -> bytes:
        out = bytearray()
        while len(out) < count:
            if self._index == len(self._block):
                self._block = hashlib.sha256(self._block).digest()
                self._index = 0
            take = min(count - len(out), len(self._block) - self._index)
            out += self._block[self._index : self._index + take]
            self._index += take
        return bytes(out)

    def clone(self) -> SHA256Source:
        twin = object.__new__(SHA256Source)
        twin._block = self._block
        twin._index = self._index
        return twin
