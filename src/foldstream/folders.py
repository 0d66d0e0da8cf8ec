"""
Foldables over common Python collections.

Both folders re-read their backing collection on every fold call, so the
same Foldable can be folded any number of times. A step returning a Halt
stops the pass at once and the Halt itself is handed to `done`; unwrapping
it is the Stream engine's job.
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any

from .factories import make_foldable, call, Step, Done
from .sentinel import is_final, proceed


@make_foldable
async def sequence(xs: Sequence[Any], initial: Any, step: Step, done: Done) -> Any:
    """
    Foldable over a sequence, visiting `xs[0]` through `xs[len(xs) - 1]`.

    Example:
        total = await sequence([1, 2, 3]).fold(0, lambda acc, x: acc + x)
    """
    result = initial
    index = 0
    while index < len(xs):
        result = proceed(await call(step, result, xs[index]))
        if is_final(result):
            break
        index += 1
    return await call(done, result)


@make_foldable
async def mapping(obj: Any, initial: Any, step: Step, done: Done) -> Any:
    """
    Foldable over `(key, value)` pairs.

    Keys follow the mapping's own iteration order, which for `dict` is
    insertion order. A plain sequence is treated as a mapping from its
    indices to its items.
    """
    if isinstance(obj, Mapping):
        keys = list(obj.keys())
    else:
        keys = list(range(len(obj)))

    result = initial
    for key in keys:
        result = proceed(await call(step, result, (key, obj[key])))
        if is_final(result):
            break
    return await call(done, result)

