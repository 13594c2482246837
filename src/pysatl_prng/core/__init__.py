"""
Core subpackage

Building blocks of :class:`~pysatl_prng.Generator`, leaves first:

- state initializer (:mod:`.state`);
- raw word producer (:mod:`.words`);
- unbiased bounded integers (:mod:`.ranges`);
- floating-point and decimal values (:mod:`.floats`);
- kind dispatch (:mod:`.sampler`);
- bulk buffer operations (:mod:`.fill`);
- lazy sequences (:mod:`.cursor`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .cursor import SequenceCursor
from .fill import BulkFiller, validate_span
from .floats import FloatSampler
from .ranges import RangeSampler, word_width_for
from .sampler import ValueSampler, box_value
from .state import STATE_BYTES, STATE_WORDS, create_state, populate_state, seed_to_bytes
from .words import WORD_WIDTHS, WordProducer

__all__ = [
    # state
    "STATE_WORDS",
    "STATE_BYTES",
    "create_state",
    "populate_state",
    "seed_to_bytes",
    # words
    "WORD_WIDTHS",
    "WordProducer",
    # samplers
    "RangeSampler",
    "word_width_for",
    "FloatSampler",
    "ValueSampler",
    "box_value",
    # bulk and streaming
    "BulkFiller",
    "validate_span",
    "SequenceCursor",
]
