"""
Core Type Definitions
=====================

Element kinds produced by the generator and the closed dispatch table that
maps numpy buffers onto them.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

from pysatl_prng.errors import InvalidArgumentError, UnsupportedTypeError


class ElementKind(StrEnum):
    """
    Closed set of element kinds the generator can produce.

    The string values double as numpy field names of
    :data:`VALUE_UNION_DTYPE`.
    """

    UINT8 = "uint8"
    INT8 = "int8"
    UINT16 = "uint16"
    INT16 = "int16"
    UINT32 = "uint32"
    INT32 = "int32"
    UINT64 = "uint64"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"
    VALUE_UNION = "value_union"


VALUE_UNION_DTYPE = np.dtype(
    {
        "names": [
            "uint64",
            "int64",
            "float64",
            "uint32",
            "int32",
            "float32",
            "uint16",
            "int16",
            "uint8",
            "int8",
        ],
        "formats": ["<u8", "<i8", "<f8", "<u4", "<i4", "<f4", "<u2", "<i2", "u1", "i1"],
        "offsets": [0] * 10,
        "itemsize": 8,
    }
)
"""8-byte union dtype: every numeric field overlays the same little-endian bits."""

DECIMAL_PLACES = 28
"""Default number of fractional digits of generated decimals."""

DECIMAL_MAX = Decimal(2**96 - 1)
"""Largest decimal magnitude (96-bit mantissa)."""


@dataclass(frozen=True, slots=True)
class KindInfo:
    """
    Static description of an element kind.

    Parameters
    ----------
    kind : ElementKind
        The described kind.
    dtype : numpy.dtype
        Dtype of buffers holding this kind.
    width : int
        Width in bits of the raw word drawn for one unbounded value.
    itemsize : int
        Number of backing bytes per element used by the state initializer.
    signed : bool
        Whether negative values are representable.
    integral : bool
        Whether the kind is a fixed-width integer.
    min_value, max_value : int, float or Decimal
        Representable bounds; ``None`` for the value union.
    """

    kind: ElementKind
    dtype: np.dtype[Any]
    width: int
    itemsize: int
    signed: bool
    integral: bool
    min_value: Any
    max_value: Any


def _integer(kind: ElementKind, dtype: type[np.integer[Any]]) -> KindInfo:
    limits = np.iinfo(dtype)
    return KindInfo(
        kind=kind,
        dtype=np.dtype(dtype),
        width=limits.bits,
        itemsize=limits.bits // 8,
        signed=limits.min < 0,
        integral=True,
        min_value=int(limits.min),
        max_value=int(limits.max),
    )


def _floating(kind: ElementKind, dtype: type[np.floating[Any]]) -> KindInfo:
    limits = np.finfo(dtype)
    return KindInfo(
        kind=kind,
        dtype=np.dtype(dtype),
        width=limits.bits,
        itemsize=limits.bits // 8,
        signed=True,
        integral=False,
        min_value=float(limits.min),
        max_value=float(limits.max),
    )


KIND_INFO: Mapping[ElementKind, KindInfo] = MappingProxyType(
    {
        ElementKind.UINT8: _integer(ElementKind.UINT8, np.uint8),
        ElementKind.INT8: _integer(ElementKind.INT8, np.int8),
        ElementKind.UINT16: _integer(ElementKind.UINT16, np.uint16),
        ElementKind.INT16: _integer(ElementKind.INT16, np.int16),
        ElementKind.UINT32: _integer(ElementKind.UINT32, np.uint32),
        ElementKind.INT32: _integer(ElementKind.INT32, np.int32),
        ElementKind.UINT64: _integer(ElementKind.UINT64, np.uint64),
        ElementKind.INT64: _integer(ElementKind.INT64, np.int64),
        ElementKind.FLOAT32: _floating(ElementKind.FLOAT32, np.float32),
        ElementKind.FLOAT64: _floating(ElementKind.FLOAT64, np.float64),
        ElementKind.DECIMAL: KindInfo(
            kind=ElementKind.DECIMAL,
            dtype=np.dtype(object),
            width=64,
            itemsize=12,
            signed=True,
            integral=False,
            min_value=-DECIMAL_MAX,
            max_value=DECIMAL_MAX,
        ),
        ElementKind.VALUE_UNION: KindInfo(
            kind=ElementKind.VALUE_UNION,
            dtype=VALUE_UNION_DTYPE,
            width=64,
            itemsize=8,
            signed=False,
            integral=False,
            min_value=None,
            max_value=None,
        ),
    }
)
"""Closed dispatch table of supported element kinds."""

INTEGER_KINDS: tuple[ElementKind, ...] = tuple(k for k, i in KIND_INFO.items() if i.integral)
"""The eight fixed-width integer kinds."""

FLOAT_KINDS: tuple[ElementKind, ...] = (ElementKind.FLOAT32, ElementKind.FLOAT64)
"""Binary floating-point kinds."""

KindLike: TypeAlias = ElementKind | str
"""Element kind or its string value (e.g. ``"uint8"``)."""

Buffer: TypeAlias = NDArray[Any]
"""One-dimensional numpy array of a supported element kind."""

Draw: TypeAlias = Callable[[], Any]
"""Zero-argument callable producing one raw value per call."""


def resolve_kind(kind: KindLike) -> ElementKind:
    """
    Normalize a kind given as :class:`ElementKind` or string.

    Raises
    ------
    InvalidArgumentError
        If ``kind`` is ``None``.
    UnsupportedTypeError
        If ``kind`` names no supported element kind.
    """
    if kind is None:
        raise InvalidArgumentError("kind must not be None.")
    if isinstance(kind, ElementKind):
        return kind
    try:
        return ElementKind(kind)
    except ValueError:
        raise UnsupportedTypeError(f"Unsupported element kind: {kind!r}.") from None


def kind_of(buffer: object) -> ElementKind:
    """
    Resolve the element kind of a buffer against the closed kind table.

    Parameters
    ----------
    buffer : numpy.ndarray
        Target buffer.

    Returns
    -------
    ElementKind
        Kind whose dtype matches ``buffer.dtype``.

    Raises
    ------
    InvalidArgumentError
        If ``buffer`` is ``None``.
    UnsupportedTypeError
        If ``buffer`` is not a numpy array or its dtype is outside the table.

    Notes
    -----
    Object arrays are treated as decimal buffers.
    """
    if buffer is None:
        raise InvalidArgumentError("buffer must not be None.")
    if not isinstance(buffer, np.ndarray):
        raise UnsupportedTypeError(
            f"Unsupported buffer type {type(buffer).__name__}; expected numpy.ndarray."
        )
    for kind, info in KIND_INFO.items():
        if buffer.dtype == info.dtype:
            return kind
    raise UnsupportedTypeError(f"Unsupported element dtype: {buffer.dtype}.")


__all__ = [
    "ElementKind",
    "KindInfo",
    "KIND_INFO",
    "INTEGER_KINDS",
    "FLOAT_KINDS",
    "VALUE_UNION_DTYPE",
    "DECIMAL_PLACES",
    "DECIMAL_MAX",
    "KindLike",
    "Buffer",
    "Draw",
    "resolve_kind",
    "kind_of",
]
