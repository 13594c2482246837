"""
Value Union
===========

A 64-bit pattern that can be reinterpreted as any supported numeric kind
without drawing new randomness.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Any

import numpy as np

from pysatl_prng.errors import InvalidArgumentError, UnsupportedTypeError
from pysatl_prng.types import KIND_INFO, VALUE_UNION_DTYPE, KindLike, resolve_kind

_BITS_LIMIT = 1 << 64


@dataclass(frozen=True, slots=True)
class ValueUnion:
    """
    Immutable 64-bit pattern.

    Parameters
    ----------
    bits : int
        Unsigned 64-bit pattern.

    Raises
    ------
    InvalidArgumentError
        If ``bits`` is not an integer in ``[0, 2**64)``.

    Notes
    -----
    Narrower kinds read the low-order bytes, exactly like the fields of
    :data:`~pysatl_prng.types.VALUE_UNION_DTYPE`.
    """

    bits: int

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int | np.integer):
            raise InvalidArgumentError("bits must be an integer.")
        if not 0 <= int(self.bits) < _BITS_LIMIT:
            raise InvalidArgumentError("bits must lie in [0, 2**64).")
        object.__setattr__(self, "bits", int(self.bits))

    @classmethod
    def from_value(cls, value: Any, kind: KindLike) -> ValueUnion:
        """Pack ``value`` of the given numeric kind into a union (upper bytes zeroed)."""
        field = cls._field(kind)
        record = np.zeros((), dtype=VALUE_UNION_DTYPE)
        record[field] = value
        return cls(int(record["uint64"]))

    @staticmethod
    def _field(kind: KindLike) -> str:
        resolved = resolve_kind(kind)
        if not KIND_INFO[resolved].integral and resolved.value not in VALUE_UNION_DTYPE.names:
            raise UnsupportedTypeError(f"A value union cannot be viewed as {resolved}.")
        return resolved.value

    def as_kind(self, kind: KindLike) -> np.generic:
        """Reinterpret the pattern as a scalar of the given numeric kind."""
        field = self._field(kind)
        record = np.frombuffer(self.to_bytes(), dtype=VALUE_UNION_DTYPE)[0]
        return record[field]  # type: ignore[no-any-return]

    def to_bytes(self) -> bytes:
        """Return the 8 little-endian bytes of the pattern."""
        return self.bits.to_bytes(8, "little")

    @property
    def uint8(self) -> np.uint8:
        return self.as_kind("uint8")  # type: ignore[return-value]

    @property
    def int8(self) -> np.int8:
        return self.as_kind("int8")  # type: ignore[return-value]

    @property
    def uint16(self) -> np.uint16:
        return self.as_kind("uint16")  # type: ignore[return-value]

    @property
    def int16(self) -> np.int16:
        return self.as_kind("int16")  # type: ignore[return-value]

    @property
    def uint32(self) -> np.uint32:
        return self.as_kind("uint32")  # type: ignore[return-value]

    @property
    def int32(self) -> np.int32:
        return self.as_kind("int32")  # type: ignore[return-value]

    @property
    def uint64(self) -> np.uint64:
        return self.as_kind("uint64")  # type: ignore[return-value]

    @property
    def int64(self) -> np.int64:
        return self.as_kind("int64")  # type: ignore[return-value]

    @property
    def float32(self) -> np.float32:
        return self.as_kind("float32")  # type: ignore[return-value]

    @property
    def float64(self) -> np.float64:
        return self.as_kind("float64")  # type: ignore[return-value]


__all__ = ["ValueUnion"]
