"""Asynchronous Result combinators.

Coroutine-function mirrors of ``tagged_result.combinators`` with the same
names and laws. Each takes an awaitable Result (an already-resolved Result is
accepted too), awaits it once, then, only on the matching branch, awaits the
callback's result if the callback returned an awaitable. Awaits are strictly
sequential; nothing runs concurrently.

An exception raised while awaiting the input is not converted into an Err;
use ``tagged_result.decorators.from_awaitable`` at the boundary for that.

Example:
    ```python
    from tagged_result.async_ import combinators as AR

    async def fetch_user(id: int) -> Result[User, Any]: ...

    async def main():
        name = await AR.unwrap_or(AR.map(fetch_user(1), lambda u: u.name), 'anonymous')
    ```
"""

from __future__ import annotations

from tagged_result._internal import algebra
from tagged_result._internal.drive import async_combinator

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

and_ = async_combinator(algebra.and_)
and_then = async_combinator(algebra.and_then)
or_ = async_combinator(algebra.or_)
or_else = async_combinator(algebra.or_else)
flatten = async_combinator(algebra.flatten)

map = async_combinator(algebra.map)  # noqa: A001
map_err = async_combinator(algebra.map_err)
map_or = async_combinator(algebra.map_or)
map_or_else = async_combinator(algebra.map_or_else)
inspect = async_combinator(algebra.inspect)
inspect_err = async_combinator(algebra.inspect_err)

is_ok = async_combinator(algebra.is_ok)
is_err = async_combinator(algebra.is_err)
is_ok_and = async_combinator(algebra.is_ok_and)
is_err_and = async_combinator(algebra.is_err_and)

ok = async_combinator(algebra.ok)
err = async_combinator(algebra.err)
unwrap = async_combinator(algebra.unwrap)
unwrap_err = async_combinator(algebra.unwrap_err)
expect = async_combinator(algebra.expect)
expect_err = async_combinator(algebra.expect_err)
unwrap_or = async_combinator(algebra.unwrap_or)
unwrap_or_else = async_combinator(algebra.unwrap_or_else)

match = async_combinator(algebra.match)
match_nested = async_combinator(algebra.match_nested)
