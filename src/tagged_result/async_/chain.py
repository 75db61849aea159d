"""AsyncChain: fluent wrapper over the asynchronous combinators.

AsyncChain wraps an Awaitable[Result[T, D]] and re-exposes
``tagged_result.async_.combinators`` as chained method calls. Transformation
methods return a new AsyncChain whose deferred value continues the prior
chain; nothing runs until the chain is awaited. Extraction methods return
coroutines.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Any]:
        ...

    name = await (
        AsyncChain(fetch_user(1))
        .and_then(validate_user)
        .map(lambda user: user.name)
        .unwrap_or('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator, Mapping
from typing import TYPE_CHECKING, Any

from tagged_result._internal.once import Ready, SharedAwaitable
from tagged_result.async_ import combinators
from tagged_result.result import UNSET, Err, Failure, Ok

if TYPE_CHECKING:
    from tagged_result.result import Result
    from tagged_result.variants import Variants

__all__ = ['AsyncChain', 'async_chain']

type MaybeAwaitable[R] = R | Awaitable[R]


class AsyncChain[T, D]:
    """Fluent view of one deferred Result.

    The wrapped awaitable is resolved at most once and shared, so the same
    AsyncChain may be awaited, or branched from, any number of times. An
    exception raised by the underlying awaitable is re-raised to every awaiter
    and is never turned into an Err.

    Attributes:
        _source: Shared awaitable producing the current Result.
    """

    __slots__ = ('_source',)

    def __init__(self, awaitable: Awaitable[Result[T, D]]) -> None:
        """Create an AsyncChain from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T, D].
        """
        if isinstance(awaitable, SharedAwaitable):
            self._source = awaitable
        else:
            self._source = SharedAwaitable(awaitable)

    def __await__(self) -> Generator[Any, Any, Result[T, D]]:
        """Support ``await chain`` to get the current Result."""
        return self._source.__await__()

    @property
    def result(self) -> Awaitable[Result[T, D]]:
        """The current deferred Result; the terminal accessor for interop."""
        return self._source

    @classmethod
    def from_result(cls, result: Result[T, D]) -> AsyncChain[T, D]:
        """Create an AsyncChain from an already-resolved Result."""
        return cls(Ready(result))

    @classmethod
    def from_ok(cls, value: T) -> AsyncChain[T, D]:
        """Create an AsyncChain holding Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def from_err(cls, tag: str, detail: Any = UNSET) -> AsyncChain[T, D]:
        """Create an AsyncChain holding Err(Failure(tag, detail))."""
        return cls.from_result(Err(Failure(tag, detail)))

    # --- Chaining ---

    def and_[U](self, other: Awaitable[Result[U, D]]) -> AsyncChain[U, D]:
        """Continue with ``other`` if Ok; ``other`` is discarded on Err."""
        return AsyncChain(combinators.and_(self._source, other))

    def and_then[U](self, f: Callable[[T], MaybeAwaitable[Result[U, D]]]) -> AsyncChain[U, D]:
        """Chain a sync or async function returning a Result."""
        return AsyncChain(combinators.and_then(self._source, f))

    def or_[F](self, other: Awaitable[Result[T, F]]) -> AsyncChain[T, F]:
        """Fall back to ``other`` if Err; ``other`` is discarded on Ok."""
        return AsyncChain(combinators.or_(self._source, other))

    def or_else[F](self, f: Callable[[Failure[D]], MaybeAwaitable[Result[T, F]]]) -> AsyncChain[T, F]:
        """Recover from an Err with a sync or async function."""
        return AsyncChain(combinators.or_else(self._source, f))

    def flatten(self) -> AsyncChain[Any, D]:
        """Collapse a nested Result by one level."""
        return AsyncChain(combinators.flatten(self._source))

    # --- Transformation ---

    def map[U](self, f: Callable[[T], MaybeAwaitable[U]]) -> AsyncChain[U, D]:
        """Apply a sync or async function to the Ok value."""
        return AsyncChain(combinators.map(self._source, f))

    def map_err[F](self, f: Callable[[Failure[D]], MaybeAwaitable[Failure[F] | Err[F]]]) -> AsyncChain[T, F]:
        """Replace the Failure with a sync or async function's result."""
        return AsyncChain(combinators.map_err(self._source, f))

    def inspect(self, f: Callable[[T], Any]) -> AsyncChain[T, D]:
        return AsyncChain(combinators.inspect(self._source, f))

    def inspect_err(self, f: Callable[[Failure[D]], Any]) -> AsyncChain[T, D]:
        return AsyncChain(combinators.inspect_err(self._source, f))

    def map_or[U](self, default: U, f: Callable[[T], MaybeAwaitable[U]]) -> Coroutine[Any, Any, U]:
        return combinators.map_or(self._source, default, f)

    def map_or_else[U](
        self,
        default: Callable[[Failure[D]], MaybeAwaitable[U]],
        f: Callable[[T], MaybeAwaitable[U]],
    ) -> Coroutine[Any, Any, U]:
        return combinators.map_or_else(self._source, default, f)

    # --- Querying ---

    def is_ok(self) -> Coroutine[Any, Any, bool]:
        return combinators.is_ok(self._source)

    def is_err(self) -> Coroutine[Any, Any, bool]:
        return combinators.is_err(self._source)

    def is_ok_and(self, pred: Callable[[T], MaybeAwaitable[bool]]) -> Coroutine[Any, Any, bool]:
        return combinators.is_ok_and(self._source, pred)

    def is_err_and(self, pred: Callable[[Failure[D]], MaybeAwaitable[bool]]) -> Coroutine[Any, Any, bool]:
        return combinators.is_err_and(self._source, pred)

    # --- Extraction ---

    def ok(self) -> Coroutine[Any, Any, T | None]:
        return combinators.ok(self._source)

    def err(self) -> Coroutine[Any, Any, Failure[D] | None]:
        return combinators.err(self._source)

    def unwrap(self) -> Coroutine[Any, Any, T]:
        """Resolve to the Ok value.

        Raises:
            FailureError: When awaited, if the Result is Err.
        """
        return combinators.unwrap(self._source)

    def unwrap_err(self) -> Coroutine[Any, Any, Failure[D]]:
        """Resolve to the Failure.

        Raises:
            UnwrapError: When awaited, if the Result is Ok.
        """
        return combinators.unwrap_err(self._source)

    def expect(self, msg: str) -> Coroutine[Any, Any, T]:
        return combinators.expect(self._source, msg)

    def expect_err(self, msg: str) -> Coroutine[Any, Any, Failure[D]]:
        return combinators.expect_err(self._source, msg)

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        return combinators.unwrap_or(self._source, default)

    def unwrap_or_else(self, f: Callable[[Failure[D]], MaybeAwaitable[T]]) -> Coroutine[Any, Any, T]:
        return combinators.unwrap_or_else(self._source, f)

    # --- Dispatch ---

    def match[R](
        self,
        on_ok: Callable[[T], MaybeAwaitable[R]],
        on_err: Callable[[Failure[D]], MaybeAwaitable[R]],
    ) -> Coroutine[Any, Any, R]:
        return combinators.match(self._source, on_ok, on_err)

    def match_nested[R](
        self,
        on_ok: Callable[[T], MaybeAwaitable[R]],
        on_err: Mapping[str, Callable[..., MaybeAwaitable[R]]],
        variants: type[Variants] | None = None,
    ) -> Coroutine[Any, Any, R]:
        return combinators.match_nested(self._source, on_ok, on_err, variants)

    def __repr__(self) -> str:
        return f'AsyncChain({self._source!r})'


def async_chain[T, D](awaitable: Awaitable[Result[T, D]]) -> AsyncChain[T, D]:
    """Start an AsyncChain from an awaitable Result."""
    return AsyncChain(awaitable)
