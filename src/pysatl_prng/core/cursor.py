"""
Sequence Cursor
===============

Lazy, infinite, non-restartable stream of values bound to one generator.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

from pysatl_prng.types import KIND_INFO, Draw, ElementKind

from .ranges import as_integer
from .sampler import box_value

if TYPE_CHECKING:
    from pysatl_prng.generator import Generator


class SequenceCursor:
    """
    Iterator pulling one value per step from its owning generator.

    Parameters
    ----------
    owner : Generator
        Generator whose state every pull advances.
    kind : ElementKind
        Kind of the produced values.
    draw : Draw
        Validated draw callable created by the owner.

    Notes
    -----
    - Pulling is equivalent to calling the matching scalar operation on the
      owner, so pulls interleave with any other use of that generator.
    - ``iter(cursor)`` returns the cursor itself; the stream cannot be
      restarted and never ends.
    - A cursor has a single consumer. Two cursors over one generator used
      from different threads interleave unpredictably.
    """

    __slots__ = ("_owner", "_kind", "_draw", "_box", "_drawn")

    def __init__(self, owner: Generator, kind: ElementKind, draw: Draw) -> None:
        self._owner = owner
        self._kind = kind
        self._draw = draw
        info = KIND_INFO[kind]
        self._box = lambda value: box_value(info, value)
        self._drawn = 0

    @property
    def owner(self) -> Generator:
        return self._owner

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def drawn(self) -> int:
        """Number of values pulled so far."""
        return self._drawn

    def __iter__(self) -> SequenceCursor:
        return self

    def __next__(self) -> Any:
        value = self._box(self._draw())
        self._drawn += 1
        return value

    def take(self, count: int) -> list[Any]:
        """Pull the next ``count`` values."""
        count = as_integer(count, "count")
        return [next(self) for _ in range(max(count, 0))]

    def __repr__(self) -> str:
        return f"SequenceCursor(kind={self._kind.value!r}, drawn={self._drawn})"


__all__ = ["SequenceCursor"]
