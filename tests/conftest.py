from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Generator
from typing import Any

import pytest

import pysatl_prng
from pysatl_prng.config import reset_generator_config
from pysatl_prng.sources import XorShiftSource

pytest.importorskip("scipy")

SEED = b"pysatl"


@pytest.fixture(autouse=True)
def _fresh_config() -> Generator[None, Any, None]:
    reset_generator_config()
    yield
    reset_generator_config()


@pytest.fixture
def make_generator() -> Callable[..., pysatl_prng.Generator]:
    def factory(source_seed: int = 2025, seed: Any = SEED) -> pysatl_prng.Generator:
        return pysatl_prng.Generator(XorShiftSource(source_seed), seed=seed)

    return factory


@pytest.fixture
def generator(make_generator: Callable[..., pysatl_prng.Generator]) -> pysatl_prng.Generator:
    return make_generator()
