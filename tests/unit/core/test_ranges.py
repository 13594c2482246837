from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import Counter

import pytest
from scipy.stats import chisquare

from pysatl_prng.core.ranges import RangeSampler, as_integer, word_width_for
from pysatl_prng.core.words import WordProducer
from pysatl_prng.errors import InvalidArgumentError, InvalidRangeError
from pysatl_prng.sources import XorShiftSource
from pysatl_prng.types import KIND_INFO, ElementKind
from tests.utils.mocks import ScriptedWords


def _sampler(seed: int = 3) -> RangeSampler:
    return RangeSampler(WordProducer(XorShiftSource(seed), list(range(1, 17))))


@pytest.mark.parametrize(
    "n, width",
    [
        (1, 8),
        (255, 8),
        (256, 16),
        (65535, 16),
        (65536, 32),
        (2**32 - 1, 32),
        (2**32, 64),
        (2**64 - 1, 64),
        (2**64, 128),
        (10**28, 128),
        (2**128, 192),
    ],
)
def test_word_width_for(n: int, width: int) -> None:
    assert word_width_for(n) == width


def test_as_integer() -> None:
    assert as_integer(7, "n") == 7
    for bad in (True, 1.0, "1", None):
        with pytest.raises(InvalidArgumentError):
            as_integer(bad, "n")


class TestRejection:
    def test_words_at_or_above_limit_are_redrawn(self) -> None:
        # n = 100 over 8-bit words: limit = 200
        words = ScriptedWords([250, 200, 199])
        assert RangeSampler(words).below(100) == 99
        assert words.widths == [8, 8, 8]

    def test_accepted_word_is_reduced(self) -> None:
        assert RangeSampler(ScriptedWords([137])).below(100) == 37

    def test_wide_bounds_compose_words(self) -> None:
        words = ScriptedWords([10**28 + 5])
        assert RangeSampler(words).below(10**28) == 5
        assert words.widths == [128]

    def test_below_rejects_non_positive(self) -> None:
        with pytest.raises(InvalidRangeError):
            _sampler().below(0)

    def test_small_bound_is_uniform(self) -> None:
        sampler = _sampler()
        counts = Counter(sampler.below(6) for _ in range(6000))
        assert sorted(counts) == list(range(6))
        assert chisquare([counts[i] for i in range(6)]).pvalue > 1e-6

    def test_bound_just_above_half_range_is_uniform(self) -> None:
        # 129 over 8-bit words rejects almost half of the draws
        sampler = _sampler(8)
        counts = Counter(sampler.below(129) for _ in range(12900))
        assert len(counts) == 129
        assert chisquare([counts[i] for i in range(129)]).pvalue > 1e-6


class TestDrawer:
    @pytest.mark.parametrize(
        "kind, n, minimum",
        [
            (ElementKind.UINT8, 0, 0),
            (ElementKind.UINT8, -1, 0),
            (ElementKind.UINT8, 256, 0),
            (ElementKind.INT8, 128, 0),
            (ElementKind.UINT8, 10, 250),
            (ElementKind.UINT8, 10, -1),
            (ElementKind.INT8, 1, -129),
            (ElementKind.INT64, 20, 2**63 - 10),
            (ElementKind.UINT64, 2, 2**64 - 1),
        ],
    )
    def test_invalid_ranges(self, kind: ElementKind, n: int, minimum: int) -> None:
        with pytest.raises(InvalidRangeError):
            _sampler().drawer(KIND_INFO[kind], n, minimum)

    @pytest.mark.parametrize(
        "kind, n, minimum",
        [
            (ElementKind.UINT8, 10, 246),
            (ElementKind.INT8, 127, -128),
            (ElementKind.INT64, 10, 2**63 - 10),
            (ElementKind.UINT64, 2**64 - 1, 0),
        ],
    )
    def test_ranges_touching_the_maximum(self, kind: ElementKind, n: int, minimum: int) -> None:
        draw = _sampler().drawer(KIND_INFO[kind], n, minimum)
        assert all(minimum <= draw() < minimum + n for _ in range(200))

    def test_non_integral_arguments(self) -> None:
        info = KIND_INFO[ElementKind.INT32]
        with pytest.raises(InvalidArgumentError):
            _sampler().drawer(info, 2.5)
        with pytest.raises(InvalidArgumentError):
            _sampler().drawer(info, 10, True)

    def test_validation_consumes_nothing(self) -> None:
        words = ScriptedWords()
        with pytest.raises(InvalidRangeError):
            RangeSampler(words).drawer(KIND_INFO[ElementKind.UINT8], 0)
        assert words.widths == []

    def test_offset_draws(self) -> None:
        draw = _sampler().drawer(KIND_INFO[ElementKind.INT16], 50, -25)
        values = {draw() for _ in range(2000)}
        assert values == set(range(-25, 25))
