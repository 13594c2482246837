"""
Entropy Source Interface
========================

Abstract supplier of raw bytes consumed by :class:`~pysatl_prng.Generator`.

Notes
-----
- Only :meth:`EntropySource.next_byte` is mandatory.
- Cloning is an optional capability: the default :meth:`EntropySource.clone`
  returns ``None``, meaning "not clonable".
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC, abstractmethod
from typing import ClassVar


class EntropySource(ABC):
    """
    Supplier of raw bytes.

    Attributes
    ----------
    deterministic : bool
        ``True`` if the byte stream is fully determined by construction
        arguments, so that seeding a generator over it is reproducible.
    """

    deterministic: ClassVar[bool] = False

    @abstractmethod
    def next_byte(self) -> int:
        """Return the next byte as an integer in ``[0, 256)``."""

    def next_bytes(self, count: int) -> bytes:
        """
        Return the next ``count`` bytes.

        Subclasses producing bytes in blocks should override this; the
        default calls :meth:`next_byte` ``count`` times.
        """
        return bytes(self.next_byte() for _ in range(count))

    def clone(self) -> EntropySource | None:
        """Return an independent deep copy, or ``None`` if the source cannot be cloned."""
        return None
