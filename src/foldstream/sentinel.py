"""
Tagged accumulators for early termination.

Every accumulator flowing through a fold is either a plain value, an
explicit Continue, or a Halt. A Halt tells the engine to stop visiting
items and report the wrapped value.
"""

from __future__ import annotations
from typing import TypeVar, Generic, Any
from dataclasses import dataclass

T = TypeVar("T")


@dataclass(frozen=True)
class Continue(Generic[T]):
    """Explicit marker for an accumulator that keeps the fold going."""
    value: T


@dataclass(frozen=True)
class Halt(Generic[T]):
    """
    Terminal accumulator.

    Recognized by type only: a record that happens to carry a `value`
    attribute is never mistaken for a Halt.
    """
    value: T


FinalValue = Halt


def wrap(value: T) -> Halt[T]:
    """Mark `value` as the final result of a fold."""
    return Halt(value)


def is_final(x: Any) -> bool:
    return isinstance(x, Halt)


def proceed(x: Any) -> Any:
    """Strip an explicit Continue; anything else is returned as is."""
    if isinstance(x, Continue):
        return x.value
    return x
