"""
Stream Entropy Source
=====================

Entropy source reading raw bytes from a binary stream (a device file,
a socket file object, a pre-recorded dump).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import BinaryIO

from pysatl_prng.errors import InvalidArgumentError, SourceExhaustedError

from .base import EntropySource


class StreamSource(EntropySource):
    """
    Byte source reading from ``stream``.

    Parameters
    ----------
    stream : BinaryIO
        Readable binary stream.

    Raises
    ------
    SourceExhaustedError
        From :meth:`next_bytes` when the stream returns fewer bytes than asked.
    """

    def __init__(self, stream: BinaryIO) -> None:
        if stream is None:
            raise InvalidArgumentError("stream must not be None.")
        self._stream = stream

    def next_byte(self) -> int:
        return self.next_bytes(1)[0]

    def next_bytes(self, count: int) -> bytes:
        data = self._stream.read(count)
        if data is None or len(data) < count:
            raise SourceExhaustedError("Stream is not a suitable entropy source: short read.")
        return bytes(data)
