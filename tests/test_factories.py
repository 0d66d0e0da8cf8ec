"""Tests for make_foldable and make_folder."""

import pytest
from foldstream import Stream, sequence, make_foldable, make_folder, identity
from foldstream.factories import call


@make_foldable
async def backwards(xs, initial, step, done):
    result = initial
    for x in reversed(xs):
        result = await call(step, result, x)
    return await call(done, result)


async def _take_while(stream, f, result, item, step):
    if await call(f, item):
        return await call(step, result, item)
    return stream.end(result)


class TakeWhileStream(Stream):
    take_while = make_folder(_take_while)


def push(acc: list, x) -> list:
    acc.append(x)
    return acc


class TestMakeFoldable:
    @pytest.mark.asyncio
    async def test_delegates_to_algorithm(self):
        assert await backwards([1, 2, 3]).fold([], push) == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_done_defaults_to_identity(self):
        acc = []
        assert await backwards([1]).fold(acc, push) is acc

    @pytest.mark.asyncio
    async def test_each_fold_is_independent(self):
        calls = 0

        @make_foldable
        async def counting(xs, initial, step, done):
            nonlocal calls
            calls += 1
            return await backwards(xs).fold(initial, step, done)

        foldable = counting([1, 2])
        assert await foldable.fold([], push) == [2, 1]
        assert await foldable.fold([], push) == [2, 1]
        assert calls == 2

    def test_factory_takes_algorithm_name(self):
        assert backwards.__name__ == "backwards"

    def test_identity(self):
        marker = object()
        assert identity(marker) is marker


class TestMakeFolder:
    def test_derives_new_stream_of_same_type(self):
        s = TakeWhileStream(sequence([1, 2, 3]))
        derived = s.take_while(lambda x: True)
        assert derived is not s
        assert isinstance(derived, TakeWhileStream)
        assert isinstance(derived.map(identity), TakeWhileStream)

    @pytest.mark.asyncio
    async def test_combinator_can_halt(self):
        s = TakeWhileStream(sequence([1, 2, 3, 4, 1]))
        assert await s.take_while(lambda x: x < 3).as_array() == [1, 2]

    @pytest.mark.asyncio
    async def test_combinator_bound_to_derived_stream(self):
        bound = []

        async def _record(stream, f, result, item, step):
            bound.append(stream)
            return await call(step, result, item)

        class RecordingStream(Stream):
            record = make_folder(_record)

        s = RecordingStream(sequence([1, 2]))
        derived = s.record(None)
        await derived.as_array()
        assert bound == [derived, derived]

    @pytest.mark.asyncio
    async def test_refold_reruns_parent(self):
        calls = 0

        def counting(x):
            nonlocal calls
            calls += 1
            return True

        derived = TakeWhileStream(sequence([1, 2, 3])).take_while(counting)
        assert await derived.as_array() == [1, 2, 3]
        assert await derived.as_array() == [1, 2, 3]
        assert calls == 6

    def test_method_takes_combinator_name(self):
        assert TakeWhileStream.take_while.__name__ == "take_while"
