"""
Pseudorandom Generator
======================

:class:`Generator` owns an entropy source and a fixed-size state and
produces uniformly distributed values of every supported element kind:

- scalars, unbounded or bounded without modulo bias;
- whole buffers or ``(offset, count)`` spans;
- lazy, infinite sequences (:class:`~pysatl_prng.core.cursor.SequenceCursor`).

Notes
-----
- A generator is mutable, unsynchronized state. Confine each instance to one
  sequential consumer, or clone it and hand the clone to another thread.
- Unpredictability, if any, comes from the entropy source; the generator
  itself only guarantees uniformity and reproducibility for deterministic
  sources.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from typing import Any

import numpy as np

from pysatl_prng.config import GeneratorConfig, generator_config
from pysatl_prng.core.cursor import SequenceCursor
from pysatl_prng.core.fill import BulkFiller
from pysatl_prng.core.sampler import ValueSampler, box_value
from pysatl_prng.core.state import STATE_WORDS, Seed, populate_state, seed_to_bytes
from pysatl_prng.core.words import WordProducer
from pysatl_prng.errors import InvalidArgumentError, UnclonableError
from pysatl_prng.sources import EntropySource
from pysatl_prng.types import KIND_INFO, Buffer, KindLike, resolve_kind
from pysatl_prng.union import ValueUnion


class Generator:
    """
    Deterministic pseudorandom number generator.

    Parameters
    ----------
    source : EntropySource, optional
        Byte supplier. Defaults to ``config.default_source_factory()``.
    seed : bytes-like, str, int or numpy.ndarray, optional
        Seed mixed with the source into the initial state. Text is encoded
        with ``config.text_encoding``. Without a seed the state is drawn
        entirely from the source.
    config : GeneratorConfig, optional
        Defaults to the active :func:`~pysatl_prng.config.generator_config`.

    Raises
    ------
    InvalidArgumentError
        If ``source`` is not an :class:`EntropySource` or ``seed`` has an
        unsupported type.

    Warns
    -----
    UserWarning
        When a seed is combined with a non-deterministic source.

    Examples
    --------
    >>> from pysatl_prng import Generator, XorShiftSource
    >>> g = Generator(XorShiftSource(7), seed="experiment-1")
    >>> 0 <= int(g.next_below("uint8", 6)) < 6
    True
    """

    __slots__ = ("_source", "_config", "_words", "_sampler", "_filler")

    def __init__(
        self,
        source: EntropySource | None = None,
        seed: Seed | None = None,
        *,
        config: GeneratorConfig | None = None,
    ) -> None:
        config = generator_config() if config is None else config
        if source is None:
            source = config.default_source_factory()
        if not isinstance(source, EntropySource):
            raise InvalidArgumentError(
                f"source must be an EntropySource, got {type(source).__name__}."
            )

        seed_bytes = seed_to_bytes(seed, config.text_encoding)
        if seed_bytes is not None and not source.deterministic:
            if config.warn_on_unreproducible_seed:
                warnings.warn(
                    f"{type(source).__name__} is not deterministic; "
                    "the seed will not make the output reproducible.",
                    UserWarning,
                    stacklevel=2,
                )

        lanes = np.zeros(STATE_WORDS, dtype=np.uint64)
        populate_state(source, lanes, seed_bytes)
        self._bind(source, config, WordProducer(source, lanes.tolist(), config.pool_words))

    def _bind(self, source: EntropySource, config: GeneratorConfig, words: WordProducer) -> None:
        self._source = source
        self._config = config
        self._words = words
        self._sampler = ValueSampler(words, config.decimal_places)
        self._filler = BulkFiller(self._sampler)

    @classmethod
    def _restore(
        cls, source: EntropySource, config: GeneratorConfig, words: WordProducer
    ) -> Generator:
        generator = object.__new__(cls)
        generator._bind(source, config, words)
        return generator

    # --------------------------------------------------------------------- #
    # Properties
    # --------------------------------------------------------------------- #

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def state(self) -> bytes:
        """Snapshot of the state buffer (always ``STATE_BYTES`` long)."""
        return self._words.state

    # --------------------------------------------------------------------- #
    # Scalars
    # --------------------------------------------------------------------- #

    def next(self, kind: KindLike) -> Any:
        """
        Return the next unbounded value of ``kind``.

        Integer kinds cover their full range (signed kinds include negative
        values), floats and decimals lie in ``[0, 1)``, value unions are raw
        64-bit patterns.
        """
        kind = resolve_kind(kind)
        return box_value(KIND_INFO[kind], self._sampler.unbounded(kind)())

    def next_below(self, kind: KindLike, n: Any) -> Any:
        """
        Return a value of ``kind`` in ``[0, n)``.

        Raises
        ------
        InvalidRangeError
            If ``n <= 0`` or ``n`` does not fit in ``kind``.
        """
        kind = resolve_kind(kind)
        return box_value(KIND_INFO[kind], self._sampler.bounded(kind, n)())

    def next_in_range(self, kind: KindLike, minimum: Any, n: Any) -> Any:
        """
        Return a value of ``kind`` in ``[minimum, minimum + n)``.

        Raises
        ------
        InvalidRangeError
            If ``n <= 0`` or the range overflows ``kind``.
        """
        kind = resolve_kind(kind)
        return box_value(KIND_INFO[kind], self._sampler.bounded(kind, n, minimum)())

    def next_non_negative(self, kind: KindLike) -> Any:
        """Return an integer of ``kind`` with its sign bit cleared (masked, not resampled)."""
        kind = resolve_kind(kind)
        return box_value(KIND_INFO[kind], self._sampler.non_negative(kind)())

    def next_word(self, width: int = 64) -> int:
        """Return a raw unsigned word of 8, 16, 32 or 64 bits."""
        return self._words.next_word(width)

    def next_union(self) -> ValueUnion:
        """Return a raw 64-bit pattern reinterpretable as any numeric kind."""
        return ValueUnion(self._words.next_word(64))

    # --------------------------------------------------------------------- #
    # Buffers
    # --------------------------------------------------------------------- #

    def fill(self, buffer: Buffer, offset: int = 0, count: int | None = None) -> None:
        """
        Fill ``buffer[offset:offset + count]`` with unbounded values.

        Raises
        ------
        InvalidArgumentError
            If ``buffer`` is ``None``.
        IndexOutOfRangeError
            If the span falls outside the buffer.
        """
        self._filler.fill(buffer, offset, count)

    def fill_below(self, n: Any, buffer: Buffer, offset: int = 0, count: int | None = None) -> None:
        """Fill a span of ``buffer`` with values in ``[0, n)``."""
        self._filler.fill_bounded(n, buffer, offset, count)

    def fill_in_range(
        self, minimum: Any, n: Any, buffer: Buffer, offset: int = 0, count: int | None = None
    ) -> None:
        """Fill a span of ``buffer`` with values in ``[minimum, minimum + n)``."""
        self._filler.fill_bounded(n, buffer, offset, count, minimum)

    def add_fill_below(
        self, n: Any, buffer: Buffer, offset: int = 0, count: int | None = None
    ) -> None:
        """Add values in ``[0, n)`` to a span of ``buffer``."""
        self._filler.add_fill(n, buffer, offset, count)

    def add_fill_in_range(
        self, minimum: Any, n: Any, buffer: Buffer, offset: int = 0, count: int | None = None
    ) -> None:
        """Add values in ``[minimum, minimum + n)`` to a span of ``buffer``."""
        self._filler.add_fill(n, buffer, offset, count, minimum)

    def create(self, kind: KindLike, count: int) -> Buffer:
        """Return a new buffer of ``count`` unbounded values."""
        return self._filler.create(resolve_kind(kind), count)

    def create_below(self, kind: KindLike, count: int, n: Any) -> Buffer:
        """Return a new buffer of ``count`` values in ``[0, n)``."""
        return self._filler.create(resolve_kind(kind), count, n)

    def create_in_range(self, kind: KindLike, count: int, minimum: Any, n: Any) -> Buffer:
        """Return a new buffer of ``count`` values in ``[minimum, minimum + n)``."""
        return self._filler.create(resolve_kind(kind), count, n, minimum)

    # --------------------------------------------------------------------- #
    # Sequences
    # --------------------------------------------------------------------- #

    def values(self, kind: KindLike) -> SequenceCursor:
        """Return an infinite cursor of unbounded values."""
        kind = resolve_kind(kind)
        return SequenceCursor(self, kind, self._sampler.unbounded(kind))

    def values_below(self, kind: KindLike, n: Any) -> SequenceCursor:
        """Return an infinite cursor of values in ``[0, n)``; ``n`` is validated eagerly."""
        kind = resolve_kind(kind)
        return SequenceCursor(self, kind, self._sampler.bounded(kind, n))

    def values_in_range(self, kind: KindLike, minimum: Any, n: Any) -> SequenceCursor:
        """Return an infinite cursor of values in ``[minimum, minimum + n)``."""
        kind = resolve_kind(kind)
        return SequenceCursor(self, kind, self._sampler.bounded(kind, n, minimum))

    # --------------------------------------------------------------------- #
    # Cloning
    # --------------------------------------------------------------------- #

    def try_clone(self) -> Generator | None:
        """
        Return an independent copy, or ``None`` if the source cannot be cloned.

        The copy owns a deep copy of the state and a clone of the source, so
        it reproduces every subsequent draw of this generator.
        """
        source = self._source.clone()
        if source is None:
            return None
        return type(self)._restore(source, self._config, self._words.clone(source))

    @classmethod
    def copy_from(cls, other: Generator) -> Generator:
        """
        Copy-construct a generator from ``other``.

        Raises
        ------
        InvalidArgumentError
            If ``other`` is ``None``.
        UnclonableError
            If the source of ``other`` cannot be cloned.
        """
        if other is None:
            raise InvalidArgumentError("other must not be None.")
        twin = other.try_clone()
        if twin is None:
            raise UnclonableError(
                f"{type(other.source).__name__} cannot be cloned; the generator cannot be copied."
            )
        return twin

    def __deepcopy__(self, memo: dict[int, Any]) -> Generator:
        return type(self).copy_from(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={type(self._source).__name__})"


__all__ = ["Generator"]
