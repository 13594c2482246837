from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_prng import ValueUnion
from pysatl_prng.errors import InvalidArgumentError, UnsupportedTypeError
from pysatl_prng.types import VALUE_UNION_DTYPE

ONE_F64 = 0x3FF0000000000000


class TestValueUnion:
    def test_float64_view(self) -> None:
        assert ValueUnion(ONE_F64).float64 == 1.0

    def test_all_ones_pattern(self) -> None:
        union = ValueUnion(2**64 - 1)
        assert union.uint64 == 2**64 - 1
        assert union.int64 == -1
        assert union.uint8 == 255
        assert union.int8 == -1
        assert union.int32 == -1

    def test_narrow_views_read_low_bytes(self) -> None:
        union = ValueUnion(0x1122334455667788)
        assert union.uint8 == 0x88
        assert union.uint16 == 0x7788
        assert union.uint32 == 0x55667788

    def test_from_value_zeroes_upper_bytes(self) -> None:
        assert ValueUnion.from_value(-1, "int8").bits == 0xFF
        assert ValueUnion.from_value(1.0, "float64").bits == ONE_F64
        assert ValueUnion.from_value(np.float32(1.0), "float32").float32 == np.float32(1.0)

    def test_to_bytes_is_little_endian(self) -> None:
        assert ValueUnion(1).to_bytes() == b"\x01" + b"\x00" * 7

    @pytest.mark.parametrize("bits", [-1, 2**64, 1.5, True])
    def test_rejects_invalid_bits(self, bits: object) -> None:
        with pytest.raises(InvalidArgumentError):
            ValueUnion(bits)  # type: ignore[arg-type]

    @pytest.mark.parametrize("kind", ["decimal", "value_union"])
    def test_non_numeric_views_are_unsupported(self, kind: str) -> None:
        with pytest.raises(UnsupportedTypeError):
            ValueUnion(0).as_kind(kind)

    def test_is_hashable_and_immutable(self) -> None:
        union = ValueUnion(7)
        assert {union, ValueUnion(7)} == {union}
        with pytest.raises(AttributeError):
            union.bits = 8  # type: ignore[misc]


def test_union_dtype_overlays_fields() -> None:
    buffer = np.zeros(2, dtype=VALUE_UNION_DTYPE)
    buffer["float64"][0] = 1.0
    assert VALUE_UNION_DTYPE.itemsize == 8
    assert buffer["uint64"][0] == ONE_F64
    assert buffer["uint64"][1] == 0
