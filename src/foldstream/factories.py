"""
Factories that turn iteration algorithms and per-item transforms into
Foldables.

make_foldable wraps a raw pass over a backing collection; make_folder
wraps a per-item transform as a Stream method producing a derived Stream.
"""

from __future__ import annotations
from typing import TypeVar, Any, Callable, Awaitable, Protocol, runtime_checkable
import inspect

T = TypeVar("T")

Step = Callable[[Any, Any], Any]
Done = Callable[[Any], Any]
FoldFunc = Callable[..., Awaitable[Any]]
Algorithm = Callable[[Any, Any, Step, Done], Awaitable[Any]]
Combinator = Callable[[Any, Callable, Any, Any, Step], Awaitable[Any]]


@runtime_checkable
class Foldable(Protocol):
    """Anything that can drive one ordered pass over its items."""

    async def fold(self, initial: Any, step: Step, done: Done | None = None) -> Any:
        ...


def identity(x: T) -> T:
    return x


async def call(fn: Callable[..., Any], *args: Any) -> Any:
    """Invoke `fn`, awaiting the result when it is awaitable."""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class FoldFunction:
    """Foldable backed by a plain fold function."""

    __slots__ = ("_fold",)

    def __init__(self, fold: FoldFunc):
        self._fold = fold

    async def fold(self, initial: Any, step: Step, done: Done | None = None) -> Any:
        return await self._fold(initial, step, done)


def make_foldable(algorithm: Algorithm) -> Callable[[Any], Foldable]:
    """
    Build a Foldable factory from an iteration algorithm.

    Args:
        algorithm: Async function `(source, initial, step, done)` that
                   performs one complete pass over `source`.

    Returns:
        A function taking a backing collection and returning a Foldable
        over it. Each `fold` call runs the algorithm afresh; nothing is
        cached between calls.

    Example:
        async def _reversed(xs, initial, step, done):
            result = initial
            for x in reversed(xs):
                result = await call(step, result, x)
            return await call(done, result)

        backwards = make_foldable(_reversed)
        await backwards([1, 2, 3]).fold([], push)
    """
    def factory(source: Any) -> Foldable:
        async def fold(initial: Any, step: Step, done: Done | None = None) -> Any:
            return await algorithm(source, initial, step, done or identity)
        return FoldFunction(fold)

    factory.__name__ = algorithm.__name__.lstrip("_")
    factory.__doc__ = algorithm.__doc__
    return factory


def make_folder(combinator: Combinator) -> Callable[[Any, Callable], Any]:
    """
    Build a Stream method that derives a new Stream through `combinator`.

    Args:
        combinator: Async function `(stream, f, result, item, step)` where
                    `stream` is the derived Stream and `f` the transform
                    given to the method. It returns either
                    `await call(step, result, item)` to forward the item,
                    or `result` to skip it without touching `step`.

    The derived Stream has the parent's type and closes over the parent
    itself, so folding it again re-runs the parent's whole fold. The
    parent is never modified.
    """
    def method(self: Any, f: Callable) -> Any:
        parent = self

        async def fold(initial: Any, step: Step, done: Done | None = None) -> Any:
            async def process(result: Any, item: Any) -> Any:
                return await combinator(derived, f, result, item, step)
            return await parent.fold(initial, process, done)

        derived = type(parent)(FoldFunction(fold))
        return derived

    method.__name__ = combinator.__name__.lstrip("_")
    method.__doc__ = combinator.__doc__
    return method
