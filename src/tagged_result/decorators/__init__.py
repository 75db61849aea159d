"""Exception boundary helpers: from_throwing and friends, @safe and @safe_async."""

from tagged_result.decorators.safe import (
    from_awaitable,
    from_throwing,
    from_throwing_async,
    safe,
    safe_async,
)

__all__ = [
    'from_awaitable',
    'from_throwing',
    'from_throwing_async',
    'safe',
    'safe_async',
]
