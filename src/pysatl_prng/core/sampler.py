"""
Value Sampler
=============

Single dispatch point from :class:`~pysatl_prng.types.ElementKind` to the
word, range and float samplers.

Every method validates its arguments and returns a zero-argument
:data:`~pysatl_prng.types.Draw`; no randomness is consumed until the draw is
called. Scalar operations call the draw once, bulk fills call it once per
element and cursors once per pull.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal
from typing import Any

from pysatl_prng.errors import UnsupportedTypeError
from pysatl_prng.types import KIND_INFO, Draw, ElementKind, KindInfo
from pysatl_prng.union import ValueUnion

from .floats import FloatSampler
from .ranges import RangeSampler
from .words import WordProducer


def box_value(info: KindInfo, value: Any) -> Any:
    """
    Convert a raw draw to the scalar type of ``info.kind``.

    Integers and binary floats become numpy scalars, decimals stay
    :class:`~decimal.Decimal` and 64-bit patterns become
    :class:`~pysatl_prng.union.ValueUnion`.
    """
    match info.kind:
        case ElementKind.DECIMAL:
            return value if isinstance(value, Decimal) else Decimal(value)
        case ElementKind.VALUE_UNION:
            return ValueUnion(value)
        case _:
            return info.dtype.type(value)


def _signed(word: int, width: int) -> int:
    return word - (1 << width) if word >> (width - 1) else word


class ValueSampler:
    """
    Kind-dispatching facade over one word producer.

    Parameters
    ----------
    words : WordProducer
        Raw word supply shared by all samplers.
    decimal_places : int
        Fractional digits of generated decimals.
    """

    __slots__ = ("words", "ranges", "floats")

    def __init__(self, words: WordProducer, decimal_places: int) -> None:
        self.words = words
        self.ranges = RangeSampler(words)
        self.floats = FloatSampler(words, self.ranges, decimal_places)

    def unbounded(self, kind: ElementKind) -> Draw:
        """
        Draw over the full value set of ``kind``.

        Integers use every bit of a word of the kind's width (signed kinds
        reinterpret it as two's complement); floats and decimals lie in
        ``[0, 1)``; value unions are raw 64-bit patterns.
        """
        info = KIND_INFO[kind]
        next_word = self.words.next_word
        width = info.width
        match kind:
            case ElementKind.UINT8 | ElementKind.UINT16 | ElementKind.UINT32 | ElementKind.UINT64:
                return lambda: next_word(width)
            case ElementKind.INT8 | ElementKind.INT16 | ElementKind.INT32 | ElementKind.INT64:
                return lambda: _signed(next_word(width), width)
            case ElementKind.FLOAT32 | ElementKind.FLOAT64 | ElementKind.DECIMAL:
                return self.floats.unit(kind)
            case ElementKind.VALUE_UNION:
                return lambda: next_word(64)
            case _:
                raise UnsupportedTypeError(f"Unsupported element kind: {kind}.")

    def bounded(self, kind: ElementKind, n: Any, minimum: Any = None) -> Draw:
        """
        Draw from ``[minimum, minimum + n)`` (``[0, n)`` when ``minimum`` is ``None``).

        Raises
        ------
        InvalidRangeError
            If ``n <= 0`` or the range overflows ``kind``.
        UnsupportedTypeError
            For kinds outside the closed table.

        Notes
        -----
        Value unions are bounded over their unsigned 64-bit pattern.
        """
        info = KIND_INFO[kind]
        match kind:
            case (
                ElementKind.UINT8
                | ElementKind.INT8
                | ElementKind.UINT16
                | ElementKind.INT16
                | ElementKind.UINT32
                | ElementKind.INT32
                | ElementKind.UINT64
                | ElementKind.INT64
            ):
                return self.ranges.drawer(info, n, 0 if minimum is None else minimum)
            case ElementKind.FLOAT32 | ElementKind.FLOAT64 | ElementKind.DECIMAL:
                return self.floats.drawer(kind, n, 0 if minimum is None else minimum)
            case ElementKind.VALUE_UNION:
                return self.ranges.drawer(
                    KIND_INFO[ElementKind.UINT64], n, 0 if minimum is None else minimum
                )
            case _:
                raise UnsupportedTypeError(f"Bounded sampling is not defined for {kind}.")

    def non_negative(self, kind: ElementKind) -> Draw:
        """
        Draw a non-negative integer by clearing the sign bit.

        The word is masked rather than resampled over the reduced range.
        Unsigned kinds are returned unchanged.

        Raises
        ------
        UnsupportedTypeError
            For non-integer kinds.
        """
        info = KIND_INFO[kind]
        if not info.integral:
            raise UnsupportedTypeError(
                f"Non-negative sampling is defined for integer kinds, not {kind}."
            )
        next_word = self.words.next_word
        width = info.width
        if not info.signed:
            return lambda: next_word(width)
        mask = info.max_value
        return lambda: next_word(width) & mask


__all__ = ["ValueSampler", "box_value"]
