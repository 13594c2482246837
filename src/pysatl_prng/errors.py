"""
Generator Errors
================

Exception taxonomy raised by the generator, its samplers and the entropy
sources.

Every error derives from :class:`GeneratorError` and from the builtin
exception that matches its meaning, so callers may catch either.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class GeneratorError(Exception):
    """Base class for all errors raised by :mod:`pysatl_prng`."""


class InvalidArgumentError(GeneratorError, ValueError):
    """A required argument is missing or has the wrong type."""


class InvalidRangeError(GeneratorError, ValueError):
    """A bound is non-positive or a ``(minimum, n)`` pair overflows the target type."""


class IndexOutOfRangeError(GeneratorError, IndexError):
    """An ``offset``/``count`` pair falls outside the target buffer."""


class UnsupportedTypeError(GeneratorError, TypeError):
    """An element kind outside the closed set of supported kinds was requested."""


class UnclonableError(GeneratorError, RuntimeError):
    """A copy was requested for a generator whose entropy source cannot be cloned."""


class SourceExhaustedError(GeneratorError, EOFError):
    """A finite entropy source could not supply the requested bytes."""


__all__ = [
    "GeneratorError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "IndexOutOfRangeError",
    "UnsupportedTypeError",
    "UnclonableError",
    "SourceExhaustedError",
]
