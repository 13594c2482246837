from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from itertools import islice

import numpy as np
import pytest

from pysatl_prng import Generator, SequenceCursor, ValueUnion
from pysatl_prng.errors import InvalidRangeError, UnsupportedTypeError
from pysatl_prng.types import ElementKind


class TestSequenceCursor:
    def test_is_its_own_iterator(self, generator: Generator) -> None:
        cursor = generator.values("uint8")
        assert isinstance(cursor, SequenceCursor)
        assert iter(cursor) is cursor
        assert cursor.owner is generator
        assert cursor.kind is ElementKind.UINT8

    def test_pulls_match_scalar_draws(self, make_generator: Callable[..., Generator]) -> None:
        generator, twin = make_generator(), make_generator()
        cursor = generator.values_below("uint8", 10)
        assert [next(cursor) for _ in range(20)] == [twin.next_below("uint8", 10) for _ in range(20)]

    def test_pulls_interleave_with_owner(self, make_generator: Callable[..., Generator]) -> None:
        generator, twin = make_generator(), make_generator()
        cursor = generator.values("uint32")
        observed = [next(cursor), generator.next("uint32"), next(cursor)]
        assert observed == [twin.next("uint32") for _ in range(3)]

    def test_not_restartable(self, make_generator: Callable[..., Generator]) -> None:
        generator, twin = make_generator(), make_generator()
        cursor = generator.values_in_range("int16", -10, 20)
        first = list(islice(cursor, 3))
        second = list(islice(cursor, 3))
        expected = [twin.next_in_range("int16", -10, 20) for _ in range(6)]
        assert first + second == expected
        assert cursor.drawn == 6

    def test_take(self, generator: Generator) -> None:
        cursor = generator.values("float64")
        values = cursor.take(5)
        assert len(values) == 5
        assert all(isinstance(v, np.float64) and 0.0 <= v < 1.0 for v in values)
        assert cursor.take(0) == []

    def test_boxes_unions(self, generator: Generator) -> None:
        assert isinstance(next(generator.values("value_union")), ValueUnion)

    def test_bounds_are_validated_eagerly(self, make_generator: Callable[..., Generator]) -> None:
        generator, twin = make_generator(), make_generator()
        with pytest.raises(InvalidRangeError):
            generator.values_below("uint8", 0)
        with pytest.raises(InvalidRangeError):
            generator.values_in_range("uint8", 250, 10)
        with pytest.raises(InvalidRangeError):
            generator.values_below("value_union", 0)
        with pytest.raises(UnsupportedTypeError):
            generator.values_below("text", 3)
        assert generator.next("uint64") == twin.next("uint64")

    def test_repr(self, generator: Generator) -> None:
        cursor = generator.values("int8")
        next(cursor)
        assert repr(cursor) == "SequenceCursor(kind='int8', drawn=1)"
