"""Defect error types: raised on misuse, never returned inside a Result.

Modeled failures travel as ``Err(Failure(...))`` values. The exceptions here
signal programmer error (unwrapping the wrong branch, an incomplete handler
set, a tag outside the declared variants) or malformed external data, and are
expected to reach a top-level handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tagged_result.result import Failure

__all__ = [
    'FailureError',
    'NonExhaustiveMatchError',
    'TaggedResultError',
    'UnwrapError',
    'VariantError',
    'WireFormatError',
]


class TaggedResultError(Exception):
    """Base class for every exception raised by tagged_result."""


class FailureError(TaggedResultError, RuntimeError):
    """A Failure escaped through ``unwrap`` or ``expect`` - exception variant."""

    def __init__(self, failure: Failure[Any], message: str | None = None) -> None:
        self.failure = failure
        super().__init__(message or f'called unwrap on Err: {failure!r}')

    @property
    def tag(self) -> str:
        """Tag of the carried failure."""
        return self.failure.tag

    @property
    def detail(self) -> Any:
        """Detail of the carried failure (``msgspec.UNSET`` for unit variants)."""
        return self.failure.detail

    def to_struct(self) -> Failure[Any]:
        """Convert back to the Failure payload for Result-based code."""
        return self.failure


class UnwrapError(TaggedResultError, RuntimeError):
    """An error was expected but the Result is Ok."""

    def __init__(self, message: str | None = None, value: Any = None) -> None:
        self.value = value
        super().__init__(message or f'called unwrap_err on Ok({value!r})')


class VariantError(TaggedResultError, TypeError):
    """A failure was built against its declared variant set incorrectly."""

    def __init__(self, tag: str, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f'variant {tag!r}: {reason}')


class NonExhaustiveMatchError(TaggedResultError, TypeError):
    """Per-tag handlers do not cover exactly the declared tag set."""

    def __init__(self, missing: Iterable[str] = (), unexpected: Iterable[str] = ()) -> None:
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))
        parts = []
        if self.missing:
            parts.append(f'missing handlers for {", ".join(self.missing)}')
        if self.unexpected:
            parts.append(f'handlers for undeclared tags {", ".join(self.unexpected)}')
        super().__init__('non-exhaustive match: ' + '; '.join(parts))


class WireFormatError(TaggedResultError, ValueError):
    """Serialized data does not follow the Result wire shape."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'invalid Result wire data: {reason}')
