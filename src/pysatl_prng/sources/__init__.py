"""
Entropy sources subpackage

Byte suppliers consumed by :class:`~pysatl_prng.Generator`:

- abstract interface (:mod:`.base`);
- deterministic xorshift1024* source (:mod:`.xorshift`);
- SHA-256 hash-chain source (:mod:`.sha256`);
- numpy platform RNG adapter (:mod:`.system`);
- binary stream reader (:mod:`.stream`);
- lock-guarded wrapper (:mod:`.synchronized`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .base import EntropySource
from .sha256 import SHA256Source
from .stream import StreamSource
from .synchronized import SynchronizedSource, synchronized
from .system import SystemSource
from .xorshift import XorShiftSource

__all__ = [
    "EntropySource",
    "XorShiftSource",
    "SHA256Source",
    "SystemSource",
    "StreamSource",
    "SynchronizedSource",
    "synchronized",
]
