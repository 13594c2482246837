"""
Float Sampler
=============

Floating-point and decimal values built from raw words.

- ``float32``: top 24 bits of a 32-bit word, scaled by ``2**-24``.
- ``float64``: top 53 bits of a 64-bit word, scaled by ``2**-53``.
- ``decimal``: an unbiased integer below ``10**places`` (two 64-bit draws
  through the range sampler) scaled by ``10**-places``.

All unit values lie in ``[0, 1)`` and are exact in the target precision.
Bounded variants return ``minimum + n * u`` and step back below the open
upper bound whenever rounding lands on it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from decimal import Context, Decimal, InvalidOperation
from numbers import Real
from typing import Any

import numpy as np

from pysatl_prng.errors import InvalidArgumentError, InvalidRangeError, UnsupportedTypeError
from pysatl_prng.types import DECIMAL_MAX, DECIMAL_PLACES, Draw, ElementKind

from .ranges import RangeSampler
from .words import WordProducer

FLOAT32_BITS = 24
FLOAT64_BITS = 53

_FLOAT32_SCALE = 2.0**-FLOAT32_BITS
_FLOAT64_SCALE = 2.0**-FLOAT64_BITS


def _as_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real | Decimal | np.floating | np.integer):
        raise InvalidArgumentError(f"{name} must be a real number, got {type(value).__name__}.")
    try:
        return float(value)
    except ValueError:
        raise InvalidArgumentError(f"{name} is not a valid real number: {value!r}.") from None


def _as_decimal(value: Any, name: str) -> Decimal:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got bool.")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int | float | str | np.integer | np.floating):
        try:
            return Decimal(str(value)) if isinstance(value, np.generic) else Decimal(value)
        except InvalidOperation:
            raise InvalidArgumentError(f"{name} is not a valid decimal: {value!r}.") from None
    raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}.")


class FloatSampler:
    """
    Floating-point and decimal sampler.

    Parameters
    ----------
    words : WordProducer
        Raw word supply.
    ranges : RangeSampler
        Integer sampler used to build decimal mantissas.
    decimal_places : int, default 28
        Fractional digits of generated decimals.
    """

    __slots__ = ("_words", "_ranges", "_places", "_decimal_bound", "_context")

    def __init__(
        self, words: WordProducer, ranges: RangeSampler, decimal_places: int = DECIMAL_PLACES
    ) -> None:
        self._words = words
        self._ranges = ranges
        self._places = decimal_places
        self._decimal_bound = 10**decimal_places
        self._context = Context(prec=DECIMAL_PLACES + 1)

    def unit_float64(self) -> float:
        """Return a float64 in ``[0, 1)`` with 53 random mantissa bits."""
        return (self._words.next_word(64) >> (64 - FLOAT64_BITS)) * _FLOAT64_SCALE

    def unit_float32(self) -> float:
        """Return a float32 value (as Python float) in ``[0, 1)`` with 24 random bits."""
        return (self._words.next_word(32) >> (32 - FLOAT32_BITS)) * _FLOAT32_SCALE

    def unit_decimal(self) -> Decimal:
        """Return a decimal in ``[0, 1)`` with ``decimal_places`` random digits."""
        return Decimal(self._ranges.below(self._decimal_bound)).scaleb(-self._places)

    def unit(self, kind: ElementKind) -> Draw:
        """Return the unit-interval draw callable for a floating kind."""
        match kind:
            case ElementKind.FLOAT32:
                return self.unit_float32
            case ElementKind.FLOAT64:
                return self.unit_float64
            case ElementKind.DECIMAL:
                return self.unit_decimal
            case _:
                raise UnsupportedTypeError(f"{kind} is not a floating kind.")

    def drawer(self, kind: ElementKind, n: Any, minimum: Any = 0.0) -> Draw:
        """
        Validate a bounded request and return a callable drawing from it.

        Parameters
        ----------
        kind : ElementKind
            ``float32``, ``float64`` or ``decimal``.
        n : real or Decimal
            Width of the interval, finite and positive. Binary float kinds
            convert decimals with ``float()``.
        minimum : real or Decimal, default 0
            Lower (closed) end of the interval.

        Returns
        -------
        Draw
            Callable returning values in ``[minimum, minimum + n)``.

        Raises
        ------
        InvalidArgumentError
            If ``n`` or ``minimum`` is not a number.
        InvalidRangeError
            If ``n`` is not finite and positive, ``minimum`` is not finite,
            or ``minimum + n`` overflows the kind.
        """
        match kind:
            case ElementKind.FLOAT64:
                return self._float64_drawer(_as_real(n, "n"), _as_real(minimum, "minimum"))
            case ElementKind.FLOAT32:
                return self._float32_drawer(_as_real(n, "n"), _as_real(minimum, "minimum"))
            case ElementKind.DECIMAL:
                return self._decimal_drawer(_as_decimal(n, "n"), _as_decimal(minimum, "minimum"))
            case _:
                raise UnsupportedTypeError(f"{kind} is not a floating kind.")

    def _float64_drawer(self, n: float, minimum: float) -> Draw:
        if not (math.isfinite(n) and n > 0):
            raise InvalidRangeError(f"Bound must be finite and positive, got {n}.")
        if not math.isfinite(minimum):
            raise InvalidRangeError(f"Minimum must be finite, got {minimum}.")
        upper = minimum + n
        if not math.isfinite(upper):
            raise InvalidRangeError(f"Range [{minimum}, {minimum} + {n}) overflows float64.")
        if not upper > minimum:
            raise InvalidRangeError(f"Bound {n} is below the resolution of float64 at {minimum}.")
        below_upper = math.nextafter(upper, -math.inf)
        unit = self.unit_float64

        def draw() -> float:
            value = minimum + n * unit()
            return value if value < upper else below_upper

        return draw

    def _float32_drawer(self, n: float, minimum: float) -> Draw:
        with np.errstate(over="ignore"):
            n32 = np.float32(n)
            lower = np.float32(minimum)
            upper = lower + n32
        if not (np.isfinite(n32) and n32 > 0):
            raise InvalidRangeError(f"Bound must be finite and positive in float32, got {n}.")
        if not np.isfinite(lower):
            raise InvalidRangeError(f"Minimum must be finite in float32, got {minimum}.")
        if not np.isfinite(upper):
            raise InvalidRangeError(f"Range [{minimum}, {minimum} + {n}) overflows float32.")
        if not upper > lower:
            raise InvalidRangeError(f"Bound {n} is below the resolution of float32 at {minimum}.")
        below_upper = float(np.nextafter(upper, np.float32(-np.inf)))
        lo, width, hi = float(lower), float(n32), float(upper)
        unit = self.unit_float32

        def draw() -> float:
            value = float(np.float32(lo + width * unit()))
            return value if value < hi else below_upper

        return draw

    def _decimal_drawer(self, n: Decimal, minimum: Decimal) -> Draw:
        if not (n.is_finite() and n > 0):
            raise InvalidRangeError(f"Bound must be finite and positive, got {n}.")
        if not minimum.is_finite():
            raise InvalidRangeError(f"Minimum must be finite, got {minimum}.")
        context = self._context
        upper = context.add(minimum, n)
        if upper.copy_abs() > DECIMAL_MAX or minimum.copy_abs() > DECIMAL_MAX:
            raise InvalidRangeError(f"Range [{minimum}, {minimum} + {n}) overflows decimal.")
        if not upper > minimum:
            raise InvalidRangeError(f"Bound {n} is below the resolution of decimal at {minimum}.")
        below_upper = upper.next_minus(context)
        unit = self.unit_decimal

        def draw() -> Decimal:
            value = context.add(minimum, context.multiply(n, unit()))
            return value if value < upper else below_upper

        return draw


__all__ = ["FloatSampler", "FLOAT32_BITS", "FLOAT64_BITS"]
