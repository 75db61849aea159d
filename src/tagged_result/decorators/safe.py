"""Exception boundary: turn raised exceptions into typed failures.

``from_throwing``, ``from_throwing_async`` and ``from_awaitable`` run one
computation and convert a normal return into Ok and a raised exception into
the Err built by the caller's ``on_error``. ``safe`` and ``safe_async`` are
the decorator forms. These are the only sanctioned bridge from raised
exceptions into the Result algebra.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import anyio
import wrapt

from tagged_result._logging import get_logger
from tagged_result.result import Err, Ok

__all__ = ['from_awaitable', 'from_throwing', 'from_throwing_async', 'safe', 'safe_async']

type OnError[D] = Callable[[Exception], Err[D]]


def _captured(exc: BaseException, source: Any) -> None:
    get_logger(__name__).debug(
        'exception_captured',
        exc_type=type(exc).__name__,
        source=getattr(source, '__qualname__', repr(source)),
    )


def from_throwing[T, D](
    f: Callable[[], T],
    on_error: OnError[D],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Ok[T] | Err[D]:
    """Run ``f`` and capture a raised exception as a Failure.

    Args:
        f: Zero-argument computation that may raise.
        on_error: Converts the caught exception into an Err.
        exceptions: Exception types to capture. Anything else propagates.

    Returns:
        Ok(f()) on success, otherwise on_error(exception).

    Example:
        ```python
        from_throwing(lambda: json.loads('bad'), lambda e: failure('parse_error', str(e)))
        # Err(error=Failure('parse_error', 'Expecting value: line 1 column 1 (char 0)'))
        ```
    """
    try:
        value = f()
    except exceptions as exc:
        _captured(exc, f)
        return on_error(exc)
    return Ok(value)


async def from_throwing_async[T, D](
    f: Callable[[], Awaitable[T]],
    on_error: OnError[D],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Ok[T] | Err[D]:
    """Await ``f()`` and capture a raised exception as a Failure.

    Cancellation is never captured, whatever ``exceptions`` contains.

    Args:
        f: Zero-argument async computation that may raise.
        on_error: Converts the caught exception into an Err.
        exceptions: Exception types to capture. Anything else propagates.
    """
    return await from_awaitable(f(), on_error, exceptions=exceptions, source=f)


async def from_awaitable[T, D](
    awaitable: Awaitable[T],
    on_error: OnError[D],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    source: Any = None,
) -> Ok[T] | Err[D]:
    """Await an already-started computation and capture its exception as a Failure.

    Args:
        awaitable: Awaitable that may raise.
        on_error: Converts the caught exception into an Err.
        exceptions: Exception types to capture. Anything else propagates.
        source: Label used in the debug log entry; defaults to the awaitable.
    """
    cancelled_exc = anyio.get_cancelled_exc_class()
    try:
        value = await awaitable
    except cancelled_exc:
        raise
    except exceptions as exc:
        _captured(exc, source if source is not None else awaitable)
        return on_error(exc)
    return Ok(value)


def safe[D](
    on_error: OnError[D],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable[[Callable[..., Any]], Callable[..., Ok[Any] | Err[D]]]:
    """Decorator that makes a raising function return a Result.

    Args:
        on_error: Converts a caught exception into an Err.
        exceptions: Exception types to capture. Defaults to (Exception,).

    Example:
        ```python
        @safe(lambda e: failure('parse_error', str(e)))
        def load(text: str) -> dict:
            return json.loads(text)

        load('{}')   # Ok(value={})
        load('bad')  # Err(error=Failure('parse_error', ...))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[D]:
        try:
            value = wrapped(*args, **kwargs)
        except exceptions as exc:
            _captured(exc, wrapped)
            return on_error(exc)
        return Ok(value)

    return wrapper


def safe_async[D](
    on_error: OnError[D],
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Ok[Any] | Err[D]]]]:
    """Async decorator that makes a raising coroutine function return a Result.

    Cancellation is never captured.

    Example:
        ```python
        @safe_async(lambda e: failure('unreachable', str(e)))
        async def fetch(url: str) -> bytes:
            return await http_get(url)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[D]:
        return await from_awaitable(wrapped(*args, **kwargs), on_error, exceptions=exceptions, source=wrapped)

    return wrapper
