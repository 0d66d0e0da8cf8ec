"""
Foldstream: async fold engine with short-circuiting combinators.

Provides a Stream over sequences and mappings whose map, filter, every
and any combinators take sync or async functions, evaluate lazily, and
stop visiting items as soon as the result is known.

Usage:
    from foldstream import Stream, sequence, mapping, stream

    # Lazy pipeline, driven by a terminal consumer
    evens = await Stream(sequence(items)).filter(is_even).as_array()

    # Short-circuiting reduction
    ok = await stream(items).every(validate).value(True)

    # Raw fold over (key, value) pairs
    keys = await mapping(config).fold([], collect_keys)
"""

from .sentinel import Continue, Halt, FinalValue, wrap, is_final
from .factories import Foldable, make_foldable, make_folder, identity
from .folders import sequence, mapping
from .stream import Stream, stream
from .continuation import resumable, ResumeError

__version__ = "0.1.0"
__all__ = [
    # Engine
    "Stream",
    "stream",
    # Sources
    "sequence",
    "mapping",
    # Sentinel
    "Continue",
    "Halt",
    "FinalValue",
    "wrap",
    "is_final",
    # Derivation
    "Foldable",
    "make_foldable",
    "make_folder",
    "identity",
    # Callback adapter
    "resumable",
    "ResumeError",
]
