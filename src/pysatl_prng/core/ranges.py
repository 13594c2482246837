"""
Range Sampler
=============

Unbiased bounded integers by rejection sampling.

For a bound ``n`` the sampler picks the narrowest raw word covering ``n``,
computes ``limit = (max_word // n) * n`` and redraws while the word is at or
above ``limit``. The accepted word is reduced modulo ``n``, so each of the
``n`` outcomes is backed by exactly ``limit // n`` words.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import operator
from typing import Any

from pysatl_prng.errors import InvalidArgumentError, InvalidRangeError
from pysatl_prng.types import Draw, KindInfo

from .words import WORD_WIDTHS, WordProducer


def word_width_for(n: int) -> int:
    """
    Return the narrowest raw word width whose maximum value covers ``n``.

    Widths above 64 bits are multiples of 64 and are composed from several
    64-bit draws.
    """
    for width in WORD_WIDTHS:
        if (1 << width) - 1 >= n:
            return width
    return 64 * -(-(n.bit_length() + 1) // 64)


def as_integer(value: Any, name: str) -> int:
    """Coerce an integral argument, rejecting floats and booleans."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got bool.")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}."
        ) from None


class RangeSampler:
    """
    Bounded integer sampler over a :class:`~pysatl_prng.core.words.WordProducer`.

    Parameters
    ----------
    words : WordProducer
        Raw word supply.
    """

    __slots__ = ("_words",)

    def __init__(self, words: WordProducer) -> None:
        self._words = words

    def below(self, n: int) -> int:
        """
        Return an integer uniformly distributed in ``[0, n)``.

        Raises
        ------
        InvalidRangeError
            If ``n <= 0``.
        """
        if n <= 0:
            raise InvalidRangeError(f"Bound must be positive, got {n}.")
        return self._below(n, word_width_for(n))

    def _below(self, n: int, width: int) -> int:
        limit = (((1 << width) - 1) // n) * n
        next_word = self._words.next_word if width <= 64 else self._words.next_wide
        while True:
            draw = next_word(width)
            if draw < limit:
                return draw % n

    def drawer(self, info: KindInfo, n: Any, minimum: Any = 0) -> Draw:
        """
        Validate a bounded request and return a callable drawing from it.

        Parameters
        ----------
        info : KindInfo
            Integer kind of the result.
        n : int
            Number of outcomes, ``0 < n <= info.max_value``.
        minimum : int, default 0
            Smallest outcome; the largest is ``minimum + n - 1``.

        Returns
        -------
        Draw
            Callable returning a Python ``int`` in ``[minimum, minimum + n)``.

        Raises
        ------
        InvalidArgumentError
            If ``n`` or ``minimum`` is not integral.
        InvalidRangeError
            If ``n <= 0`` or the range does not fit in the kind.
        """
        n = as_integer(n, "n")
        minimum = as_integer(minimum, "minimum")
        if n <= 0:
            raise InvalidRangeError(f"Bound must be positive, got {n}.")
        if n > info.max_value:
            raise InvalidRangeError(f"Bound {n} does not fit in {info.kind}.")
        if minimum < info.min_value or minimum + n - 1 > info.max_value:
            raise InvalidRangeError(
                f"Range [{minimum}, {minimum} + {n}) overflows {info.kind}."
            )

        width = word_width_for(n)
        below = self._below
        if minimum == 0:
            return lambda: below(n, width)
        return lambda: minimum + below(n, width)


__all__ = ["RangeSampler", "word_width_for", "as_integer"]
