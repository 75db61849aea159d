"""Tests for the fluent wrappers: Chain and AsyncChain."""

import asyncio
import gc
import warnings

import pytest
from hypothesis import given
from strategies import SampleErrors, results

from tagged_result import (
    AsyncChain,
    Chain,
    Failure,
    FailureError,
    NonExhaustiveMatchError,
    Ok,
    Result,
    async_chain,
    chain,
    failure,
    success,
)
from tagged_result import combinators as R
from tagged_result._internal.once import SharedAwaitable


class TestChain:
    """Tests for the synchronous Chain."""

    def test_map_unwrap(self):
        """Transformations chain and extraction ends the chain."""
        assert Chain(success(21)).map(lambda n: n * 2).unwrap() == 42

    def test_err_falls_back(self):
        """An Err short-circuits to the default."""
        assert Chain(failure('invalid_number', 'abc')).map(lambda n: n * 2).unwrap_or(0) == 0

    def test_result_accessor(self):
        """result exposes the wrapped Result for interop."""
        assert chain(Ok(1)).and_then(lambda n: Ok(n + 1)).result == Ok(2)

    def test_chain_is_immutable(self):
        """Transformations return a new Chain."""
        first = Chain(Ok(1))
        second = first.map(lambda n: n + 1)
        assert first.result == Ok(1)
        assert second.result == Ok(2)
        with pytest.raises(AttributeError):
            first.result = Ok(3)  # type: ignore[misc]

    def test_recovery(self):
        """or_else and map_err act on the failure branch."""
        recovered = Chain(failure('negative', -3)).map_err(lambda f: Failure('wrapped', f.detail)).or_else(
            lambda f: Ok(abs(f.detail))
        )
        assert recovered.result == Ok(3)

    def test_flatten(self):
        """flatten collapses nested Results."""
        assert Chain(Ok(Ok(1))).flatten().result == Ok(1)

    def test_queries(self):
        """Query methods mirror the combinators."""
        c = Chain(failure('negative', -3))
        assert c.is_err()
        assert not c.is_ok()
        assert c.is_err_and(lambda f: f.detail < 0)
        assert not c.is_ok_and(lambda v: True)
        assert c.ok() is None
        assert c.err() == Failure('negative', -3)

    def test_unwrap_raises(self):
        """unwrap on an Err chain raises FailureError."""
        with pytest.raises(FailureError):
            Chain(failure('a')).unwrap()

    def test_match_nested_with_variants(self):
        """match_nested enforces exhaustive handlers."""
        c = Chain(failure('negative', -3))
        handlers = {'invalid_number': len, 'negative': abs, 'empty': lambda: 0}
        assert c.match_nested(str, handlers, SampleErrors) == 3
        with pytest.raises(NonExhaustiveMatchError):
            c.match_nested(str, {'negative': abs}, SampleErrors)

    def test_inspect_keeps_result(self):
        """inspect and inspect_err observe without changing the Result."""
        seen = []
        c = Chain(Ok(1)).inspect(seen.append).inspect_err(seen.append)
        assert c.result == Ok(1)
        assert seen == [1]

    @given(results)
    def test_chain_equals_functions(self, result):
        """Every chained call equals the function it delegates to."""

        def f(n):
            return n * 2

        def recover(fail):
            return Ok(0)

        assert Chain(result).map(f).result == R.map(result, f)
        assert Chain(result).or_else(recover).result == R.or_else(result, recover)
        assert Chain(result).unwrap_or(-1) == R.unwrap_or(result, -1)
        assert Chain(result).map_or(None, f) == R.map_or(result, None, f)


async def resolved(result: Result[int, object]) -> Result[int, object]:
    await asyncio.sleep(0)
    return result


class TestAsyncChain:
    """Tests for AsyncChain."""

    @pytest.mark.asyncio
    async def test_await_returns_result(self):
        """Awaiting an AsyncChain yields its Result."""
        assert await AsyncChain(resolved(Ok(42))) == Ok(42)

    @pytest.mark.asyncio
    async def test_from_constructors(self):
        """from_ok, from_err and from_result build resolved chains."""
        assert await AsyncChain.from_ok(1) == Ok(1)
        assert await AsyncChain.from_err('negative', -3) == failure('negative', -3)
        assert await AsyncChain.from_err('empty') == failure('empty')
        assert await AsyncChain.from_result(Ok(2)) == Ok(2)

    @pytest.mark.asyncio
    async def test_fluent_pipeline(self):
        """Sync and async callbacks mix freely in one chain."""

        async def validate(n: int) -> Result[int, object]:
            return failure('negative', n) if n < 0 else Ok(n)

        name = await AsyncChain(resolved(Ok(21))).and_then(validate).map(lambda n: n * 2).unwrap_or(0)
        assert name == 42

        fallback = await AsyncChain(resolved(Ok(-1))).and_then(validate).map(lambda n: n * 2).unwrap_or(0)
        assert fallback == 0

    @pytest.mark.asyncio
    async def test_nothing_runs_until_awaited(self):
        """Transformations are deferred."""
        calls = []

        async def source() -> Result[int, object]:
            calls.append('source')
            return Ok(1)

        pending = AsyncChain(source()).map(lambda n: calls.append('map') or n)
        assert calls == []
        assert await pending == Ok(1)
        assert calls == ['source', 'map']

    @pytest.mark.asyncio
    async def test_reawait_runs_source_once(self):
        """The same chain can be awaited repeatedly; its source runs once."""
        calls = []

        async def source() -> Result[int, object]:
            calls.append(1)
            return Ok(1)

        c = AsyncChain(source())
        assert not c.result.done()
        assert await c == Ok(1)
        assert c.result.done()
        assert await c == Ok(1)
        assert await c.result == Ok(1)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_branching_shares_source(self):
        """Two branches of one chain share a single source evaluation."""
        calls = []

        async def source() -> Result[int, object]:
            calls.append(1)
            await asyncio.sleep(0)
            return Ok(10)

        base = AsyncChain(source())
        left = base.map(lambda n: n + 1)
        right = base.map(lambda n: n - 1)
        assert await asyncio.gather(left, right) == [Ok(11), Ok(9)]
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_concurrent_awaits_resolve_once(self):
        """Concurrent awaiters of one chain see one evaluation."""
        calls = []

        async def source() -> Result[int, object]:
            calls.append(1)
            await asyncio.sleep(0.01)
            return Ok(5)

        c = AsyncChain(source())
        assert await asyncio.gather(*(_drain(c) for _ in range(3))) == [Ok(5), Ok(5), Ok(5)]
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_cancelled_branch_leaves_others_intact(self):
        """Cancelling one branch while the source is pending does not affect the other."""
        started = asyncio.Event()
        release = asyncio.Event()
        calls = []

        async def source() -> Result[int, object]:
            calls.append(1)
            started.set()
            await release.wait()
            return Ok(1)

        base = AsyncChain(source())
        left = asyncio.create_task(_drain(base.map(lambda n: n + 1)))
        right = asyncio.create_task(_drain(base.map(lambda n: n + 2)))
        await started.wait()

        left.cancel()
        with pytest.raises(asyncio.CancelledError):
            await left
        release.set()

        assert await right == Ok(3)
        assert await base == Ok(1)
        assert await base.map(lambda n: n * 10) == Ok(10)
        assert calls == [1]

    @pytest.mark.asyncio
    async def test_cancelled_awaiter_leaves_source_running(self):
        """A shared source survives the cancellation of its only awaiter."""
        release = asyncio.Event()

        async def source() -> Result[int, object]:
            await release.wait()
            return Ok(7)

        shared = SharedAwaitable(source())
        first = asyncio.create_task(_drain(shared))
        await asyncio.sleep(0)
        first.cancel()
        with pytest.raises(asyncio.CancelledError):
            await first

        release.set()
        assert await shared == Ok(7)
        assert shared.done()

    def test_unawaited_resolved_chain_is_silent(self):
        """Dropping an unawaited from_ok/from_err chain emits no warning."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            AsyncChain.from_ok(1)
            AsyncChain.from_err('empty')
            AsyncChain.from_result(Ok(2))
            gc.collect()
        assert [w for w in caught if issubclass(w.category, RuntimeWarning)] == []

    @pytest.mark.asyncio
    async def test_exception_is_shared(self):
        """A raising source re-raises to every awaiter and is never an Err."""

        async def boom() -> Result[int, object]:
            raise ValueError('boom')

        c = AsyncChain(boom())
        with pytest.raises(ValueError, match='boom'):
            await c
        with pytest.raises(ValueError, match='boom'):
            await c.map(lambda n: n)

    @pytest.mark.asyncio
    async def test_extraction_returns_coroutines(self):
        """Extraction and query methods resolve when awaited."""
        c = AsyncChain.from_err('negative', -3)
        assert await c.is_err()
        assert not await c.is_ok()
        assert await c.err() == Failure('negative', -3)
        assert await c.ok() is None
        assert await c.unwrap_or_else(lambda f: f.detail) == -3
        with pytest.raises(FailureError):
            await c.unwrap()

    @pytest.mark.asyncio
    async def test_match_nested(self):
        """match_nested dispatches by tag after awaiting."""
        c = AsyncChain.from_err('empty')
        handlers = {'invalid_number': len, 'negative': abs, 'empty': lambda: 'none'}
        assert await c.match_nested(str, handlers, SampleErrors) == 'none'

    @pytest.mark.asyncio
    async def test_and_accepts_chain_operand(self):
        """and_ accepts another AsyncChain as its operand."""
        other = AsyncChain.from_ok('two')
        assert await AsyncChain.from_ok(1).and_(other) == Ok('two')

    def test_wraps_shared_awaitable_once(self):
        """An AsyncChain over a SharedAwaitable reuses it."""

        async def source() -> Result[int, object]:
            return Ok(1)

        shared = SharedAwaitable(source())
        c = async_chain(shared)
        assert c.result is shared
        assert AsyncChain(c.result).result is shared
        asyncio.run(_drain(c))

    @given(results)
    def test_async_chain_equals_sync_chain(self, result):
        """AsyncChain over a resolved Result agrees with Chain."""

        async def run():
            return await AsyncChain.from_result(result).map(lambda n: n + 1).or_else(lambda f: Ok(0))

        assert asyncio.run(run()) == Chain(result).map(lambda n: n + 1).or_else(lambda f: Ok(0)).result


async def _drain(awaitable):
    return await awaitable
