"""
PySATL PRNG
===========

Deterministic pseudorandom number generation over pluggable entropy
sources: every fixed-width integer kind, float32/float64, decimals and raw
64-bit value unions; unbiased bounded sampling; bulk buffer filling; lazy
sequences and reproducible cloning.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .core import SequenceCursor, create_state, populate_state
from .errors import *
from .errors import __all__ as _errors_all
from .generator import Generator
from .sources import *
from .sources import __all__ as _sources_all
from .stream import RandomStream
from .types import *
from .types import __all__ as _types_all
from .union import ValueUnion

__version__ = version("pysatl-prng")
__all__ = [
    "__version__",
    "Generator",
    "SequenceCursor",
    "RandomStream",
    "ValueUnion",
    "create_state",
    "populate_state",
    *_config_all,
    *_errors_all,
    *_sources_all,
    *_types_all,
]

del _config_all
del _errors_all
del _sources_all
del _types_all
