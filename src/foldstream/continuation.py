"""
Adapter for callback-style steps, predicates and mappers.

Some callers already have functions that report their result through a
trailing `resume` callback instead of returning it:

    def is_even(x, resume):
        resume(x % 2 == 0)

    def add(acc, x, resume):
        loop.call_later(0.1, resume, acc + x)

`resumable` turns such a function into a coroutine function usable
anywhere the Stream engine expects a step, predicate or mapper.
"""

from __future__ import annotations
from typing import Any, Callable, Awaitable
import asyncio
import functools
import inspect


class ResumeError(RuntimeError):
    """Raised when a resume callback is invoked more than once."""


def resumable(fn: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
    """
    Adapt `fn(*args, resume)` into `async fn(*args) -> value`.

    `resume` may be called synchronously, before `fn` returns, or later
    from the running event loop. It must be called exactly once: a second
    call raises ResumeError, and a resume that never fires leaves the
    awaiting fold suspended forever. Detecting the latter is up to the
    caller. Exceptions raised by `fn` itself propagate to the awaiter.
    """
    @functools.wraps(fn)
    async def wrapper(*args: Any) -> Any:
        future = asyncio.get_running_loop().create_future()

        def resume(value: Any = None) -> None:
            if future.done():
                raise ResumeError(f"{getattr(fn, '__name__', fn)!r} resumed more than once")
            future.set_result(value)

        started = fn(*args, resume)
        if inspect.isawaitable(started):
            await started
        return await future

    return wrapper
