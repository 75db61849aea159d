"""Async utilities: AsyncChain and the awaitable combinator algebra.

This module provides async-aware Result operations:
- AsyncChain: Fluent wrapper for composing deferred Result operations
- combinators: Coroutine-function mirrors of ``tagged_result.combinators``

Examples:
    >>> from tagged_result.async_ import AsyncChain
    >>> from tagged_result.async_ import combinators as AR
    >>>
    >>> async def parse(text: str) -> Result[int, Any]:
    ...     return success(int(text))
    >>>
    >>> async def main():
    ...     doubled = await AsyncChain(parse('21')).map(lambda n: n * 2).unwrap()
    ...     same = await AR.unwrap(AR.map(parse('21'), lambda n: n * 2))
"""

from tagged_result.async_ import combinators
from tagged_result.async_.chain import AsyncChain, async_chain

__all__ = [
    'AsyncChain',
    'async_chain',
    'combinators',
]
