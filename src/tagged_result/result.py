"""Result type: Ok[T] | Err[D] where an Err carries a tagged Failure.

The two variants are plain immutable data. Behaviour lives in the combinator
modules (``tagged_result.combinators`` and ``tagged_result.async_``) and in the
fluent wrappers built on top of them.

Examples:
    >>> success(21)
    Ok(value=21)
    >>> failure('negative', -3)
    Err(error=Failure('negative', -3))
    >>> match failure('negative', -3):
    ...     case Err(Failure('negative', n)):
    ...         print(n)
    -3
"""

from __future__ import annotations

from typing import Any

import msgspec

from tagged_result.errors import FailureError

__all__ = ['UNSET', 'Err', 'Failure', 'Ok', 'Result', 'failure', 'success']

UNSET = msgspec.UNSET


class Failure[D](msgspec.Struct, frozen=True, gc=False):
    """Failure payload: the variant tag plus its detail.

    ``detail`` is ``UNSET`` for unit variants, which declare no detail.

    Attributes:
        tag: Name of the failure variant.
        detail: Variant-specific payload.
    """

    tag: str
    detail: D | msgspec.UnsetType = UNSET

    @property
    def has_detail(self) -> bool:
        """True unless this is a unit variant."""
        return self.detail is not UNSET

    def to_exception(self) -> FailureError:
        """Convert to exception for raise-based code."""
        return FailureError(self)

    def __repr__(self) -> str:
        if self.detail is UNSET:
            return f'Failure({self.tag!r})'
        return f'Failure({self.tag!r}, {self.detail!r})'


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).value
        42
    """

    value: T


class Err[D](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result containing a tagged Failure.

    Examples:
        >>> err = Err(Failure('invalid_number', 'abc'))
        >>> err.tag, err.detail
        ('invalid_number', 'abc')
    """

    error: Failure[D]

    @property
    def tag(self) -> str:
        """Tag of the contained failure."""
        return self.error.tag

    @property
    def detail(self) -> D | msgspec.UnsetType:
        """Detail of the contained failure."""
        return self.error.detail


type Result[T, D = Any] = Ok[T] | Err[D]


def success[T](value: T) -> Ok[T]:
    """Wrap a value as a successful Result."""
    return Ok(value)


def failure[D](tag: str, detail: D | msgspec.UnsetType = UNSET) -> Err[D]:
    """Build a failed Result from a variant tag and optional detail.

    Omit ``detail`` for unit variants. No check is made against a variant
    set here; use ``tagged_result.factory.result_type`` for that.
    """
    return Err(Failure(tag, detail))
