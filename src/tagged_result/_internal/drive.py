"""Drivers that run one combinator template in an immediate or awaited context.

A template is a generator function. Every ``yield`` marks a point where the
async algebra may suspend: the yielded object is sent straight back when run
synchronously, and awaited first (if it is awaitable) when run asynchronously.
The generator's return value is the combinator's result.

This keeps a single definition of each law for both algebras.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Coroutine, Generator
from typing import Any

import wrapt

__all__ = ['Step', 'async_combinator', 'discard', 'run_async', 'run_sync', 'sync_combinator']

type Step[R] = Generator[Any, Any, R]


def run_sync[R](step: Step[R]) -> R:
    """Run a template to completion, resuming every yield with its own value."""
    try:
        pending = next(step)
        while True:
            pending = step.send(pending)
    except StopIteration as stop:
        return stop.value


async def run_async[R](step: Step[R]) -> R:
    """Run a template to completion, awaiting every awaitable it yields."""
    try:
        pending = next(step)
        while True:
            resolved = await pending if inspect.isawaitable(pending) else pending
            pending = step.send(resolved)
    except StopIteration as stop:
        return stop.value


def discard(other: Any) -> None:
    """Drop a short-circuited sibling operand.

    An un-started coroutine is closed so it never runs and never warns.
    Tasks, futures and plain Results are left alone.
    """
    if inspect.iscoroutine(other):
        other.close()


@wrapt.decorator
def _immediate(
    wrapped: Callable[..., Step[Any]],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    return run_sync(wrapped(*args, **kwargs))


def sync_combinator[**P, R](template: Callable[P, Step[R]]) -> Callable[P, R]:
    """Expose a template as an immediate function."""
    return _immediate(template)


def async_combinator[**P, R](template: Callable[P, Step[R]]) -> Callable[P, Coroutine[Any, Any, R]]:
    """Expose a template as a coroutine function.

    A real ``async def`` is returned, so ``inspect.iscoroutinefunction`` and
    frameworks that dispatch on it see a coroutine function.
    """

    async def combinator(*args: P.args, **kwargs: P.kwargs) -> R:
        return await run_async(template(*args, **kwargs))

    return functools.update_wrapper(combinator, template)
