"""Synchronous Result combinators.

Pure functions over immediate Results. Every function returns a new value and
never mutates its input. Only ``unwrap``, ``unwrap_err``, ``expect`` and
``expect_err`` raise; everything else is total (exceptions raised by your own
callbacks propagate unchanged).

Example:
    ```python
    from tagged_result import combinators as R
    from tagged_result import failure, success

    R.unwrap_or(R.map(failure('invalid_number', 'abc'), lambda n: n * 2), 0)  # 0
    R.unwrap(R.map(success(21), lambda n: n * 2))  # 42
    ```
"""

from __future__ import annotations

from typing import Any, TypeIs

from tagged_result._internal import algebra
from tagged_result._internal.drive import sync_combinator
from tagged_result.result import Err, Ok

__all__ = [
    'and_',
    'and_then',
    'err',
    'expect',
    'expect_err',
    'flatten',
    'inspect',
    'inspect_err',
    'is_err',
    'is_err_and',
    'is_ok',
    'is_ok_and',
    'map',
    'map_err',
    'map_or',
    'map_or_else',
    'match',
    'match_nested',
    'ok',
    'or_',
    'or_else',
    'unwrap',
    'unwrap_err',
    'unwrap_or',
    'unwrap_or_else',
]


def is_ok[T](result: Ok[T] | Err[Any]) -> TypeIs[Ok[T]]:
    """Return True if the result is Ok, narrowing it for type checkers."""
    return isinstance(result, Ok)


def is_err[D](result: Ok[Any] | Err[D]) -> TypeIs[Err[D]]:
    """Return True if the result is Err, narrowing it for type checkers."""
    return isinstance(result, Err)


and_ = sync_combinator(algebra.and_)
and_then = sync_combinator(algebra.and_then)
or_ = sync_combinator(algebra.or_)
or_else = sync_combinator(algebra.or_else)
flatten = sync_combinator(algebra.flatten)

map = sync_combinator(algebra.map)  # noqa: A001
map_err = sync_combinator(algebra.map_err)
map_or = sync_combinator(algebra.map_or)
map_or_else = sync_combinator(algebra.map_or_else)
inspect = sync_combinator(algebra.inspect)
inspect_err = sync_combinator(algebra.inspect_err)

is_ok_and = sync_combinator(algebra.is_ok_and)
is_err_and = sync_combinator(algebra.is_err_and)

ok = sync_combinator(algebra.ok)
err = sync_combinator(algebra.err)
unwrap = sync_combinator(algebra.unwrap)
unwrap_err = sync_combinator(algebra.unwrap_err)
expect = sync_combinator(algebra.expect)
expect_err = sync_combinator(algebra.expect_err)
unwrap_or = sync_combinator(algebra.unwrap_or)
unwrap_or_else = sync_combinator(algebra.unwrap_or_else)

match = sync_combinator(algebra.match)
match_nested = sync_combinator(algebra.match_nested)
