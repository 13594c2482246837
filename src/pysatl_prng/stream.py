"""
Random Byte Stream
==================

Read-only, non-seekable binary stream of generator output for code that
reads fixed-size chunks from a file object (``io.BufferedReader``,
``StreamSource``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import io
from typing import Any

import numpy as np

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.generator import Generator


class RandomStream(io.RawIOBase):
    """
    Infinite stream of ``uint8`` draws from ``generator``.

    Parameters
    ----------
    generator : Generator
        Generator advanced by every read.

    Notes
    -----
    - Reading ``k`` bytes consumes exactly what ``generator.create("uint8", k)``
      would, so reads interleave with any other use of the generator.
    - The stream has no end: :meth:`readall` and ``read()`` without a size
      raise :class:`io.UnsupportedOperation`.
    """

    def __init__(self, generator: Generator) -> None:
        super().__init__()
        if not isinstance(generator, Generator):
            raise InvalidArgumentError(
                f"generator must be a Generator, got {type(generator).__name__}."
            )
        self._generator = generator
        self._position = 0

    @property
    def generator(self) -> Generator:
        return self._generator

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return False

    def writable(self) -> bool:
        return False

    def readinto(self, buffer: Any) -> int:
        """Fill ``buffer`` with random bytes and return its length."""
        if self.closed:
            raise ValueError("I/O operation on closed stream.")
        view = memoryview(buffer).cast("B")
        if not view.nbytes:
            return 0
        self._generator.fill(np.frombuffer(view, dtype=np.uint8))
        self._position += view.nbytes
        return view.nbytes

    def readall(self) -> bytes:
        raise io.UnsupportedOperation("RandomStream is infinite; read with an explicit size.")

    def write(self, buffer: Any) -> int:
        raise io.UnsupportedOperation("RandomStream is read-only.")

    def tell(self) -> int:
        """Number of bytes read so far."""
        if self.closed:
            raise ValueError("I/O operation on closed stream.")
        return self._position

    def __repr__(self) -> str:
        return f"RandomStream(generator={self._generator!r}, position={self._position})"


__all__ = ["RandomStream"]
