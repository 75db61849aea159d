"""Chain: fluent wrapper over the synchronous combinators.

Every method delegates to the function of the same name in
``tagged_result.combinators``. Transformations return a new Chain; extraction
methods return plain values. The wrapper holds nothing but the current Result.

Example:
    ```python
    doubled = Chain(success(21)).map(lambda n: n * 2).unwrap()  # 42
    fallback = Chain(failure('invalid_number', 'abc')).map(lambda n: n * 2).unwrap_or(0)  # 0
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tagged_result import combinators
from tagged_result.result import Err, Failure, Ok

if TYPE_CHECKING:
    from tagged_result.variants import Variants

__all__ = ['Chain', 'chain']


@dataclass(slots=True, frozen=True)
class Chain[T, D]:
    """Fluent view of one Result.

    Attributes:
        result: The current Result; the terminal accessor for interop.
    """

    result: Ok[T] | Err[D]

    def and_[U](self, other: Ok[U] | Err[D]) -> Chain[U, D]:
        return Chain(combinators.and_(self.result, other))

    def and_then[U](self, f: Callable[[T], Ok[U] | Err[D]]) -> Chain[U, D]:
        return Chain(combinators.and_then(self.result, f))

    def or_[F](self, other: Ok[T] | Err[F]) -> Chain[T, F]:
        return Chain(combinators.or_(self.result, other))

    def or_else[F](self, f: Callable[[Failure[D]], Ok[T] | Err[F]]) -> Chain[T, F]:
        return Chain(combinators.or_else(self.result, f))

    def flatten(self) -> Chain[Any, D]:
        """Collapse a Chain over a nested Result by one level."""
        return Chain(combinators.flatten(self.result))

    def map[U](self, f: Callable[[T], U]) -> Chain[U, D]:
        return Chain(combinators.map(self.result, f))

    def map_err[F](self, f: Callable[[Failure[D]], Failure[F] | Err[F]]) -> Chain[T, F]:
        return Chain(combinators.map_err(self.result, f))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        return combinators.map_or(self.result, default, f)

    def map_or_else[U](self, default: Callable[[Failure[D]], U], f: Callable[[T], U]) -> U:
        return combinators.map_or_else(self.result, default, f)

    def inspect(self, f: Callable[[T], Any]) -> Chain[T, D]:
        return Chain(combinators.inspect(self.result, f))

    def inspect_err(self, f: Callable[[Failure[D]], Any]) -> Chain[T, D]:
        return Chain(combinators.inspect_err(self.result, f))

    def is_ok(self) -> bool:
        return combinators.is_ok(self.result)

    def is_err(self) -> bool:
        return combinators.is_err(self.result)

    def is_ok_and(self, pred: Callable[[T], bool]) -> bool:
        return combinators.is_ok_and(self.result, pred)

    def is_err_and(self, pred: Callable[[Failure[D]], bool]) -> bool:
        return combinators.is_err_and(self.result, pred)

    def ok(self) -> T | None:
        return combinators.ok(self.result)

    def err(self) -> Failure[D] | None:
        return combinators.err(self.result)

    def unwrap(self) -> T:
        """Return the Ok value.

        Raises:
            FailureError: If the Result is Err.
        """
        return combinators.unwrap(self.result)

    def unwrap_err(self) -> Failure[D]:
        """Return the Failure.

        Raises:
            UnwrapError: If the Result is Ok.
        """
        return combinators.unwrap_err(self.result)

    def expect(self, msg: str) -> T:
        return combinators.expect(self.result, msg)

    def expect_err(self, msg: str) -> Failure[D]:
        return combinators.expect_err(self.result, msg)

    def unwrap_or(self, default: T) -> T:
        return combinators.unwrap_or(self.result, default)

    def unwrap_or_else(self, f: Callable[[Failure[D]], T]) -> T:
        return combinators.unwrap_or_else(self.result, f)

    def match[R](self, on_ok: Callable[[T], R], on_err: Callable[[Failure[D]], R]) -> R:
        return combinators.match(self.result, on_ok, on_err)

    def match_nested[R](
        self,
        on_ok: Callable[[T], R],
        on_err: Mapping[str, Callable[..., R]],
        variants: type[Variants] | None = None,
    ) -> R:
        return combinators.match_nested(self.result, on_ok, on_err, variants)


def chain[T, D](result: Ok[T] | Err[D]) -> Chain[T, D]:
    """Start a Chain from a Result."""
    return Chain(result)
