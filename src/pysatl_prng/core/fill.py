"""
Bulk Filler
===========

Applies scalar draws across whole buffers or ``(offset, count)`` spans.

Notes
-----
- Buffer, span and range arguments are all validated before the first
  draw, so a failing call consumes no randomness and writes nothing.
- ``count == 0`` returns before touching the buffer.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal
from typing import Any

import numpy as np

from pysatl_prng.errors import IndexOutOfRangeError, InvalidArgumentError
from pysatl_prng.types import KIND_INFO, Buffer, Draw, ElementKind, kind_of

from .ranges import as_integer
from .sampler import ValueSampler


def validate_span(
    buffer: Buffer, offset: Any = 0, count: Any = None
) -> tuple[ElementKind, int, int]:
    """
    Validate a target span.

    Parameters
    ----------
    buffer : numpy.ndarray
        One-dimensional, writeable buffer of a supported kind.
    offset : int, default 0
        First index to write, ``0 <= offset <= len(buffer)``.
    count : int, optional
        Number of elements, ``0 <= count <= len(buffer) - offset``;
        defaults to the rest of the buffer.

    Returns
    -------
    tuple[ElementKind, int, int]
        Buffer kind, offset and count.

    Raises
    ------
    InvalidArgumentError
        If ``buffer`` is ``None``, not one-dimensional or read-only.
    UnsupportedTypeError
        If the buffer dtype is not a supported kind.
    IndexOutOfRangeError
        If ``offset`` or ``count`` falls outside the buffer.
    """
    kind = kind_of(buffer)
    if buffer.ndim != 1:
        raise InvalidArgumentError(f"buffer must be one-dimensional, got {buffer.ndim} dimensions.")
    if not buffer.flags.writeable:
        raise InvalidArgumentError("buffer must be writeable.")

    length = int(buffer.shape[0])
    offset = as_integer(offset, "offset")
    if offset < 0 or offset > length:
        raise IndexOutOfRangeError(f"offset {offset} outside [0, {length}].")

    if count is None:
        return kind, offset, length - offset
    count = as_integer(count, "count")
    if count < 0 or count > length - offset:
        raise IndexOutOfRangeError(f"count {count} outside [0, {length - offset}].")
    return kind, offset, count


def _check_decimals(buffer: Buffer, offset: int, count: int) -> None:
    for index in range(offset, offset + count):
        value = buffer[index]
        if not isinstance(value, Decimal):
            raise InvalidArgumentError(
                f"buffer[{index}] must hold a Decimal to add to, got {type(value).__name__}."
            )


def allocate(kind: ElementKind, count: int) -> Buffer:
    """Allocate ``count`` elements of ``kind``: zeros, or ``None`` placeholders for decimals."""
    if kind is ElementKind.DECIMAL:
        return np.full(count, None, dtype=object)
    return np.zeros(count, dtype=KIND_INFO[kind].dtype)


class BulkFiller:
    """
    Array-level operations over a :class:`~pysatl_prng.core.sampler.ValueSampler`.

    Parameters
    ----------
    sampler : ValueSampler
        Source of validated draw callables.
    """

    __slots__ = ("_sampler",)

    def __init__(self, sampler: ValueSampler) -> None:
        self._sampler = sampler

    def fill(self, buffer: Buffer, offset: Any = 0, count: Any = None) -> None:
        """Fill a span with unbounded draws of the buffer's kind."""
        kind, offset, count = validate_span(buffer, offset, count)
        draw = self._sampler.unbounded(kind)
        self._store(kind, buffer, offset, count, draw, accumulate=False)

    def fill_bounded(
        self, n: Any, buffer: Buffer, offset: Any = 0, count: Any = None, minimum: Any = None
    ) -> None:
        """Fill a span with draws from ``[minimum, minimum + n)``."""
        kind, offset, count = validate_span(buffer, offset, count)
        draw = self._sampler.bounded(kind, n, minimum)
        self._store(kind, buffer, offset, count, draw, accumulate=False)

    def add_fill(
        self, n: Any, buffer: Buffer, offset: Any = 0, count: Any = None, minimum: Any = None
    ) -> None:
        """
        Add draws from ``[minimum, minimum + n)`` to the existing elements.

        Integer sums wrap around like numpy integer arithmetic.

        Raises
        ------
        InvalidArgumentError
            If a decimal span holds anything but :class:`~decimal.Decimal`.
        """
        kind, offset, count = validate_span(buffer, offset, count)
        draw = self._sampler.bounded(kind, n, minimum)
        if kind is ElementKind.DECIMAL:
            _check_decimals(buffer, offset, count)
        self._store(kind, buffer, offset, count, draw, accumulate=True)

    def create(self, kind: ElementKind, count: Any, n: Any = None, minimum: Any = None) -> Buffer:
        """
        Allocate and fill a new buffer of ``count`` elements.

        Unbounded when ``n`` is ``None``, otherwise drawn from
        ``[minimum, minimum + n)``.

        Raises
        ------
        IndexOutOfRangeError
            If ``count`` is negative.
        """
        count = as_integer(count, "count")
        if count < 0:
            raise IndexOutOfRangeError(f"count must be non-negative, got {count}.")
        if n is None:
            if minimum is not None:
                raise InvalidArgumentError("minimum requires a bound n.")
            draw = self._sampler.unbounded(kind)
        else:
            draw = self._sampler.bounded(kind, n, minimum)
        buffer = allocate(kind, count)
        self._store(kind, buffer, 0, count, draw, accumulate=False)
        return buffer

    @staticmethod
    def _store(
        kind: ElementKind, buffer: Buffer, offset: int, count: int, draw: Draw, accumulate: bool
    ) -> None:
        if count == 0:
            return

        values = [draw() for _ in range(count)]
        end = offset + count
        match kind:
            case ElementKind.VALUE_UNION:
                block = np.asarray(values, dtype=np.uint64)
                if accumulate:
                    target = buffer["uint64"][offset:end]
                    target += block
                else:
                    buffer["uint64"][offset:end] = block
            case ElementKind.DECIMAL:
                block = np.empty(count, dtype=object)
                block[:] = values
                if accumulate:
                    block += buffer[offset:end]
                buffer[offset:end] = block
            case _:
                block = np.asarray(values, dtype=KIND_INFO[kind].dtype)
                if accumulate:
                    target = buffer[offset:end]
                    target += block
                else:
                    buffer[offset:end] = block


__all__ = ["BulkFiller", "validate_span", "allocate"]
