"""
Generator Configuration
=======================

Process-wide defaults captured by every :class:`~pysatl_prng.Generator` at
construction time.

Notes
-----
- The active configuration is cached; :func:`configure_generator` replaces it
  and :func:`reset_generator_config` restores the defaults.
- Generators keep the configuration they were built with, so changing the
  active configuration never affects existing instances or their clones.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import codecs
from collections.abc import Callable
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any

from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import EntropySource, XorShiftSource
from pysatl_prng.types import DECIMAL_PLACES


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """
    Generator defaults.

    Parameters
    ----------
    text_encoding : str, default "utf-8"
        Encoding turning text seeds into seed bytes.
    decimal_places : int, default 28
        Fractional digits of generated decimals.
    pool_words : int, default 16
        Number of 64-bit words pulled from the entropy source per refill.
    default_source_factory : Callable[[], EntropySource], default XorShiftSource
        Factory used when a generator is created without a source.
    warn_on_unreproducible_seed : bool, default True
        Emit a :class:`UserWarning` when a seed is combined with a
        non-deterministic source.

    Raises
    ------
    InvalidArgumentError
        If a field is out of range or the encoding is unknown.
    """

    text_encoding: str = "utf-8"
    decimal_places: int = DECIMAL_PLACES
    pool_words: int = 16
    default_source_factory: Callable[[], EntropySource] = XorShiftSource
    warn_on_unreproducible_seed: bool = True

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.text_encoding)
        except LookupError:
            raise InvalidArgumentError(f"Unknown text encoding {self.text_encoding!r}.") from None
        if not 1 <= self.decimal_places <= DECIMAL_PLACES:
            raise InvalidArgumentError(f"decimal_places must lie in [1, {DECIMAL_PLACES}].")
        if self.pool_words < 1:
            raise InvalidArgumentError("pool_words must be positive.")
        if not callable(self.default_source_factory):
            raise InvalidArgumentError("default_source_factory must be callable.")


_active: GeneratorConfig | None = None


@lru_cache(maxsize=1)
def generator_config() -> GeneratorConfig:
    """
    Return the active configuration.

    Returns
    -------
    GeneratorConfig
        The configuration installed by :func:`configure_generator`, or the
        defaults.
    """
    return _active if _active is not None else GeneratorConfig()


def configure_generator(**changes: Any) -> GeneratorConfig:
    """
    Replace fields of the active configuration.

    Parameters
    ----------
    **changes
        Field values passed to :func:`dataclasses.replace`.

    Returns
    -------
    GeneratorConfig
        The new active configuration.
    """
    global _active
    try:
        updated = replace(generator_config(), **changes)
    except TypeError as exc:
        raise InvalidArgumentError(str(exc)) from exc
    _active = updated
    generator_config.cache_clear()
    return updated


def reset_generator_config() -> None:
    """
    Restore the default configuration.
    """
    global _active
    _active = None
    generator_config.cache_clear()


__all__ = [
    "GeneratorConfig",
    "generator_config",
    "configure_generator",
    "reset_generator_config",
]
