"""
Stream: a fold engine with lazily derived combinators.

A Stream wraps a Foldable. Calling map/filter/every/any does no work;
each returns a new Stream whose Foldable routes items through the
transform. Items are only visited when a terminal consumer (fold,
as_array, value) is awaited.

Steps, predicates and mappers may be plain functions or coroutine
functions. Item i+1 is never handed to a step before the step for item i
has returned. A step that never returns stalls the fold; there is no
timeout.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable
import logging

from .factories import Foldable, Step, Done, make_folder, call, identity
from .folders import sequence, mapping
from .sentinel import Halt, wrap, is_final, proceed

logger = logging.getLogger(__name__)


async def _map(stream: Stream, f: Callable, result: Any, item: Any, step: Step) -> Any:
    """Derive a Stream whose items are `f(item)` for each parent item."""
    mapped = await call(f, item)
    return await call(step, result, mapped)


async def _filter(stream: Stream, f: Callable, result: Any, item: Any, step: Step) -> Any:
    """Derive a Stream keeping only the items for which `f(item)` is true."""
    if await call(f, item):
        return await call(step, result, item)
    return result


async def _every(stream: Stream, f: Callable, result: Any, item: Any, step: Step) -> Any:
    """
    Derive a Stream converging to True when `f` holds for every item.

    The first failing item yields a Halt(False), so no later item reaches
    the predicate or the consumer. Drain it with `value(True)`.
    """
    if await call(f, item):
        return await call(step, True, item)
    return await call(step, stream.end(False), item)


async def _any(stream: Stream, f: Callable, result: Any, item: Any, step: Step) -> Any:
    """
    Derive a Stream converging to True when `f` holds for some item.

    The first passing item yields a Halt(True). Drain it with
    `value(False)`.
    """
    if await call(f, item):
        return await call(step, stream.end(True), item)
    return await call(step, False, item)


class Stream:
    """
    Fold engine over a backing Foldable.

    Example:
        async def is_small(x: int) -> bool:
            return x < 3

        s = Stream(sequence([1, 2, 3, 4]))
        await s.map(double).as_array()      # [2, 4, 6, 8]
        await s.every(is_small).value(True) # False, after 3 predicate calls
    """

    def __init__(self, items: Foldable):
        self.items = items

    @classmethod
    def make(cls, items: Foldable) -> Stream:
        return cls(items)

    @staticmethod
    def end(value: Any) -> Halt:
        """Wrap `value` as the final result of the current fold."""
        return wrap(value)

    async def fold(self, initial: Any, step: Step, done: Done | None = None) -> Any:
        """
        Fold the backing items into a single result.

        Every accumulator is checked before it is forwarded: once it is a
        Halt, `step` is not called again and `done` receives the wrapped
        value. `done` fires exactly once and the awaited result is
        whatever it returns.
        """
        done = done or identity
        stepped = 0

        async def intercept(result: Any, item: Any) -> Any:
            nonlocal stepped
            if is_final(result):
                return result
            stepped += 1
            return proceed(await call(step, result, item))

        outcome = await self.items.fold(initial, intercept, identity)
        if is_final(outcome):
            logger.debug("Fold halted after %d step(s)", stepped)
            outcome = outcome.value
        return await call(done, outcome)

    async def as_array(self, done: Done | None = None) -> Any:
        """Collect the items, in visiting order, into a new list."""
        def push(result: list, item: Any) -> list:
            result.append(item)
            return result
        return await self.fold([], push, done)

    async def value(self, initial: Any, done: Done | None = None) -> Any:
        """Drain the Stream, keeping whatever accumulator the items carry."""
        return await self.fold(initial, lambda result, item: result, done)

    map = make_folder(_map)
    filter = make_folder(_filter)
    every = make_folder(_every)
    any = make_folder(_any)
    some = any


def stream(source: Any) -> Stream:
    """Wrap a collection in a Stream, folding mappings by key."""
    if isinstance(source, Mapping):
        return Stream(mapping(source))
    return Stream(sequence(source))
