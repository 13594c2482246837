"""
Platform Entropy Source
=======================

Adapter exposing a :class:`numpy.random.Generator` as an entropy source.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_prng.errors import InvalidArgumentError

from .base import EntropySource


class SystemSource(EntropySource):
    """
    Byte source backed by a numpy bit generator.

    Parameters
    ----------
    rng : numpy.random.Generator, optional
        Platform generator to draw from. Defaults to
        ``numpy.random.default_rng()`` seeded from OS entropy.

    Notes
    -----
    The wrapped generator is shared with the caller, so this source is never
    clonable and never considered deterministic.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        if rng is None:
            rng = np.random.default_rng()
        if not isinstance(rng, np.random.Generator):
            raise InvalidArgumentError("rng must be a numpy.random.Generator.")
        self._rng = rng

    def next_byte(self) -> int:
        return self._rng.bytes(1)[0]

    def next_bytes(self, count: int) -> bytes:
        return self._rng.bytes(count)
