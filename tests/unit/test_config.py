from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from decimal import Decimal

import pytest

from pysatl_prng import Generator
from pysatl_prng.config import (
    GeneratorConfig,
    configure_generator,
    generator_config,
    reset_generator_config,
)
from pysatl_prng.errors import InvalidArgumentError
from pysatl_prng.sources import SHA256Source, XorShiftSource


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = generator_config()
        assert config == GeneratorConfig()
        assert config.text_encoding == "utf-8"
        assert config.decimal_places == 28
        assert config.pool_words == 16
        assert config.default_source_factory is XorShiftSource
        assert config.warn_on_unreproducible_seed

    def test_active_config_is_cached(self) -> None:
        assert generator_config() is generator_config()

    def test_configure_and_reset(self) -> None:
        updated = configure_generator(text_encoding="utf-16-le", pool_words=4)
        assert generator_config() is updated
        assert updated.pool_words == 4

        reset_generator_config()
        assert generator_config() == GeneratorConfig()

    @pytest.mark.parametrize(
        "changes",
        [
            {"text_encoding": "no-such-codec"},
            {"decimal_places": 0},
            {"decimal_places": 29},
            {"pool_words": 0},
            {"default_source_factory": 42},
            {"unknown_field": 1},
        ],
    )
    def test_invalid_changes_are_rejected(self, changes: dict[str, object]) -> None:
        with pytest.raises(InvalidArgumentError):
            configure_generator(**changes)
        assert generator_config() == GeneratorConfig()


class TestConfigCapture:
    def test_text_seed_uses_configured_encoding(self) -> None:
        configure_generator(text_encoding="utf-16-le")
        from_text = Generator(XorShiftSource(3), seed="séance")
        from_bytes = Generator(XorShiftSource(3), seed="séance".encode("utf-16-le"))
        assert from_text.create("uint64", 32).tolist() == from_bytes.create("uint64", 32).tolist()

    def test_default_source_factory(self) -> None:
        configure_generator(default_source_factory=lambda: SHA256Source(b"factory"))
        assert isinstance(Generator().source, SHA256Source)

    def test_generator_keeps_its_config(self) -> None:
        generator = Generator(XorShiftSource(1))
        configure_generator(decimal_places=2)
        assert generator.config.decimal_places == 28
        assert Generator(XorShiftSource(1)).config.decimal_places == 2

    def test_decimal_places(self) -> None:
        configure_generator(decimal_places=3)
        generator = Generator(XorShiftSource(9), seed=b"places")
        for _ in range(50):
            value = generator.next("decimal")
            assert isinstance(value, Decimal)
            assert value.as_tuple().exponent >= -3
            assert 0 <= value < 1

    def test_pool_words_does_not_change_outputs(self) -> None:
        wide = Generator(XorShiftSource(4), seed=b"pool")
        configure_generator(pool_words=1)
        narrow = Generator(XorShiftSource(4), seed=b"pool")
        assert wide.create("uint64", 40).tolist() == narrow.create("uint64", 40).tolist()
