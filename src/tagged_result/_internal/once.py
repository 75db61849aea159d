"""Re-awaitable wrapper around a single-shot awaitable.

Coroutine objects can only be awaited once. ``SharedAwaitable`` starts its
source as a task on the first await and lets every awaiter wait on that task,
so an AsyncChain can be awaited or branched from repeatedly.

Starting the task is guarded by an aiologic.Lock.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Generator
from typing import Any

import aiologic

__all__ = ['Ready', 'SharedAwaitable']


class Ready[T]:
    """An awaitable that is already resolved.

    Unlike a coroutine, it holds no frame, so dropping it unawaited is silent.
    """

    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __await__(self) -> Generator[Any, Any, T]:
        return self._value
        yield  # makes __await__ a generator

    def __repr__(self) -> str:
        return f'Ready({self._value!r})'


class SharedAwaitable[T]:
    """An awaitable that resolves its source once and caches the outcome.

    The source runs in its own asyncio task, shielded from its awaiters.
    Cancelling one awaiter cancels only that awaiter; the others still
    receive the source's value or exception.

    Examples:
        >>> async def compute() -> int:
        ...     return 42
        >>> shared = SharedAwaitable(compute())
        >>> # await shared  -> 42
        >>> # await shared  -> 42 again, compute() ran once
    """

    __slots__ = ('_lock', '_source', '_task')

    def __init__(self, source: Awaitable[T]) -> None:
        self._lock = aiologic.Lock()
        self._source: Awaitable[T] | None = source
        self._task: asyncio.Future[T] | None = None

    def __await__(self) -> Generator[Any, Any, T]:
        return self._resolve().__await__()

    async def _resolve(self) -> T:
        if self._task is None:
            async with self._lock:
                if self._task is None:
                    self._start()
        assert self._task is not None
        return await asyncio.shield(self._task)

    def _start(self) -> None:
        source, self._source = self._source, None
        assert source is not None
        self._task = asyncio.ensure_future(source)

    def done(self) -> bool:
        """Check if the source has been resolved."""
        return self._task is not None and self._task.done()

    def __repr__(self) -> str:
        if self._task is None:
            return f'SharedAwaitable(pending={self._source!r})'
        return f'SharedAwaitable(task={self._task!r})'
