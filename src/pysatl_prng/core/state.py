"""
State Initializer
=================

Derivation of fixed-size state buffers from an entropy source and an
optional seed.

Notes
-----
- With a seed, a salt pulled from the source is mixed with the seed through
  SHA-256 in counter mode; without one, the buffer is filled straight from
  the source.
- The target's element kind is resolved against the closed kind table before
  any byte is read from the source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import hashlib
from decimal import Context, Decimal
from typing import Any, TypeAlias

import numpy as np

from pysatl_prng.errors import InvalidArgumentError, UnsupportedTypeError
from pysatl_prng.sources import EntropySource
from pysatl_prng.types import (
    DECIMAL_PLACES,
    KIND_INFO,
    Buffer,
    ElementKind,
    kind_of,
)

STATE_WORDS = 16
"""Number of 64-bit lanes of generator state."""

STATE_BYTES = STATE_WORDS * 8
"""Length in bytes of generator state."""

SALT_BYTES = 32
"""Bytes pulled from the source to salt a seeded derivation."""

_EXACT = Context(prec=DECIMAL_PLACES + 1)

Seed: TypeAlias = bytes | bytearray | memoryview | str | int | np.ndarray[Any, Any]
"""Accepted seed representations."""


def seed_to_bytes(seed: Seed | None, encoding: str = "utf-8") -> bytes | None:
    """
    Convert a seed to the bytes fed into the state derivation.

    Parameters
    ----------
    seed : bytes-like, str, int, numpy.ndarray or None
        Text is encoded with ``encoding``; integers are written in
        little-endian two's complement using at least 8 bytes; numeric numpy
        arrays contribute their little-endian element bytes.
    encoding : str, default "utf-8"
        Text encoding.

    Returns
    -------
    bytes or None
        ``None`` when ``seed`` is ``None``.

    Raises
    ------
    InvalidArgumentError
        If the seed type is not supported.
    """
    if seed is None:
        return None
    if isinstance(seed, str):
        return seed.encode(encoding)
    if isinstance(seed, bytes | bytearray | memoryview):
        return bytes(seed)
    if isinstance(seed, bool):
        raise InvalidArgumentError("Boolean seeds are not supported.")
    if isinstance(seed, int):
        length = max(8, (seed.bit_length() + 8) // 8)
        return seed.to_bytes(length, "little", signed=True)
    if isinstance(seed, np.ndarray):
        try:
            kind = kind_of(seed)
        except UnsupportedTypeError as exc:
            raise InvalidArgumentError(f"Unsupported seed array dtype {seed.dtype}.") from exc
        if kind is ElementKind.DECIMAL:
            raise InvalidArgumentError("Decimal arrays cannot be used as seeds.")
        dtype = KIND_INFO[kind].dtype
        if kind is not ElementKind.VALUE_UNION:
            dtype = dtype.newbyteorder("<")
        return np.ascontiguousarray(seed, dtype=dtype).tobytes()
    raise InvalidArgumentError(f"Unsupported seed type {type(seed).__name__}.")


def _derive(source: EntropySource, seed: bytes | None, length: int) -> bytes:
    if seed is None:
        return source.next_bytes(length)

    salt = source.next_bytes(SALT_BYTES)
    prefix = len(seed).to_bytes(8, "little") + seed + salt
    blocks: list[bytes] = []
    produced = 0
    counter = 0
    while produced < length:
        block = hashlib.sha256(prefix + counter.to_bytes(8, "little")).digest()
        blocks.append(block)
        produced += len(block)
        counter += 1
    return b"".join(blocks)[:length]


def _write(kind: ElementKind, data: bytes, target: Buffer) -> None:
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
            | ElementKind.FLOAT32
            | ElementKind.FLOAT64
        ):
            values = np.frombuffer(data, dtype=info.dtype.newbyteorder("<"))
            target[...] = values.reshape(target.shape)
        case ElementKind.VALUE_UNION:
            target[...] = np.frombuffer(data, dtype=info.dtype).reshape(target.shape)
        case ElementKind.DECIMAL:
            size = info.itemsize
            for i in range(target.size):
                mantissa = int.from_bytes(data[i * size : (i + 1) * size], "little")
                target.flat[i] = Decimal(mantissa).scaleb(-DECIMAL_PLACES, _EXACT)
        case _:
            raise UnsupportedTypeError(f"Unsupported state element kind: {kind}.")


def _checked_kind(source: object, target: object) -> ElementKind:
    if source is None:
        raise InvalidArgumentError("source must not be None.")
    if target is None:
        raise InvalidArgumentError("target must not be None.")
    kind = kind_of(target)
    if not isinstance(source, EntropySource):
        raise InvalidArgumentError("source must be an EntropySource.")
    if not target.flags.writeable:  # type: ignore[attr-defined]
        raise InvalidArgumentError("target must be writeable.")
    return kind


def create_state(source: EntropySource, seed: Seed, target: Buffer) -> None:
    """
    Populate ``target`` from ``source`` mixed with ``seed``.

    Parameters
    ----------
    source : EntropySource
        Source of the salt bytes.
    seed : bytes-like, str, int or numpy.ndarray
        Seed material (text is UTF-8 encoded).
    target : numpy.ndarray
        Buffer of a supported element kind; overwritten in place.

    Raises
    ------
    InvalidArgumentError
        If ``source``, ``seed`` or ``target`` is ``None``.
    UnsupportedTypeError
        If ``target`` is not a buffer of a supported element kind.
    """
    if seed is None:
        raise InvalidArgumentError("seed must not be None.")
    kind = _checked_kind(source, target)
    data = _derive(source, seed_to_bytes(seed), target.size * KIND_INFO[kind].itemsize)
    _write(kind, data, target)


def populate_state(
    source: EntropySource, target: Buffer, seed: Seed | None = None, encoding: str = "utf-8"
) -> None:
    """
    Populate ``target`` from ``source`` and an optional seed.

    Like :func:`create_state`, except that an absent seed is allowed and means
    that the whole buffer is drawn from ``source``.

    Raises
    ------
    InvalidArgumentError
        If ``source`` or ``target`` is ``None``.
    UnsupportedTypeError
        If ``target`` is not a buffer of a supported element kind.
    """
    kind = _checked_kind(source, target)
    data = _derive(source, seed_to_bytes(seed, encoding), target.size * KIND_INFO[kind].itemsize)
    _write(kind, data, target)


__all__ = [
    "STATE_WORDS",
    "STATE_BYTES",
    "SALT_BYTES",
    "Seed",
    "seed_to_bytes",
    "create_state",
    "populate_state",
]
