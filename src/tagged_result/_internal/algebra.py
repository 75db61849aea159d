"""Combinator templates shared by the sync and async Result algebras.

Each template receives a Result (or, in the async algebra, an awaitable of
one) and yields it to obtain the resolved outcome. Callback results and
sibling operands are yielded too, so the async driver can await them while
the sync driver hands them back untouched. See ``tagged_result._internal.drive``.

Callbacks on the failure side receive the ``Failure`` payload.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from tagged_result._internal.drive import Step, discard
from tagged_result.errors import FailureError, NonExhaustiveMatchError, UnwrapError
from tagged_result.result import Err, Failure, Ok

if TYPE_CHECKING:
    from tagged_result.result import Result
    from tagged_result.variants import Variants

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


# --- Chaining ---


def and_[T, U, D](result: Result[T, D], other: Result[U, D]) -> Step[Result[U, D]]:
    """Return ``other`` if the result is Ok, else the result itself.

    ``other`` is evaluated by the caller regardless of the branch taken; use
    ``and_then`` for a lazily computed continuation.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield other)
    discard(other)
    return outcome


def and_then[T, U, D](result: Result[T, D], f: Callable[[T], Result[U, D]]) -> Step[Result[U, D]]:
    """Apply a Result-returning function to the Ok value.

    Also known as flatmap or bind. An Err is returned unchanged and ``f`` is
    not called.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield f(outcome.value))
    return outcome


def or_[T, D, F](result: Result[T, D], other: Result[T, F]) -> Step[Result[T, F]]:
    """Return the result if it is Ok, else ``other``.

    ``other`` is evaluated by the caller regardless of the branch taken; use
    ``or_else`` for a lazily computed fallback.
    """
    outcome = yield result
    if isinstance(outcome, Err):
        return (yield other)
    discard(other)
    return outcome


def or_else[T, D, F](result: Result[T, D], f: Callable[[Failure[D]], Result[T, F]]) -> Step[Result[T, F]]:
    """Recover from an Err by calling ``f`` with its Failure.

    An Ok is returned unchanged and ``f`` is not called.
    """
    outcome = yield result
    if isinstance(outcome, Err):
        return (yield f(outcome.error))
    return outcome


def flatten[T, D](result: Result[Result[T, D], D]) -> Step[Result[T, D]]:
    """Collapse one level of nesting: Ok(Ok(v)) -> Ok(v), Ok(Err(f)) -> Err(f).

    An outer Err is returned unchanged.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield outcome.value)
    return outcome


# --- Transformation ---


def map[T, U, D](result: Result[T, D], f: Callable[[T], U]) -> Step[Result[U, D]]:  # noqa: A001
    """Apply a function to the Ok value, wrapping its return in Ok.

    An Err is returned unchanged and ``f`` is not called.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        return Ok((yield f(outcome.value)))
    return outcome


def map_err[T, D, F](
    result: Result[T, D],
    f: Callable[[Failure[D]], Failure[F] | Err[F]],
) -> Step[Result[T, F]]:
    """Replace the Failure of an Err with the one produced by ``f``.

    ``f`` may return a Failure or a complete Err. An Ok is returned unchanged.
    """
    outcome = yield result
    if isinstance(outcome, Err):
        mapped = yield f(outcome.error)
        return mapped if isinstance(mapped, Err) else Err(mapped)
    return outcome


def map_or[T, U, D](result: Result[T, D], default: U, f: Callable[[T], U]) -> Step[U]:
    """Return ``f(value)`` for Ok, else ``default``."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield f(outcome.value))
    return default


def map_or_else[T, U, D](
    result: Result[T, D],
    default: Callable[[Failure[D]], U],
    f: Callable[[T], U],
) -> Step[U]:
    """Return ``f(value)`` for Ok, else ``default(failure)``."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield f(outcome.value))
    return (yield default(outcome.error))


def inspect[T, D](result: Result[T, D], f: Callable[[T], Any]) -> Step[Result[T, D]]:
    """Call ``f`` with the Ok value for its side effect and return the result unchanged."""
    outcome = yield result
    if isinstance(outcome, Ok):
        yield f(outcome.value)
    return outcome


def inspect_err[T, D](result: Result[T, D], f: Callable[[Failure[D]], Any]) -> Step[Result[T, D]]:
    """Call ``f`` with the Failure for its side effect and return the result unchanged."""
    outcome = yield result
    if isinstance(outcome, Err):
        yield f(outcome.error)
    return outcome


# --- Querying ---


def is_ok(result: Result[Any, Any]) -> Step[bool]:
    """Return True if the result is Ok."""
    outcome = yield result
    return isinstance(outcome, Ok)


def is_err(result: Result[Any, Any]) -> Step[bool]:
    """Return True if the result is Err."""
    outcome = yield result
    return isinstance(outcome, Err)


def is_ok_and[T](result: Result[T, Any], pred: Callable[[T], bool]) -> Step[bool]:
    """Return True if the result is Ok and its value satisfies ``pred``."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return bool((yield pred(outcome.value)))
    return False


def is_err_and[D](result: Result[Any, D], pred: Callable[[Failure[D]], bool]) -> Step[bool]:
    """Return True if the result is Err and its Failure satisfies ``pred``."""
    outcome = yield result
    if isinstance(outcome, Err):
        return bool((yield pred(outcome.error)))
    return False


# --- Extraction ---


def ok[T](result: Result[T, Any]) -> Step[T | None]:
    """Return the Ok value, or None for Err."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return outcome.value
    return None


def err[D](result: Result[Any, D]) -> Step[Failure[D] | None]:
    """Return the Failure of an Err, or None for Ok."""
    outcome = yield result
    if isinstance(outcome, Err):
        return outcome.error
    return None


def unwrap[T](result: Result[T, Any]) -> Step[T]:
    """Return the Ok value.

    Raises:
        FailureError: If the result is Err; carries the Failure.
    """
    outcome = yield result
    if isinstance(outcome, Err):
        raise outcome.error.to_exception()
    return outcome.value


def unwrap_err[D](result: Result[Any, D]) -> Step[Failure[D]]:
    """Return the Failure of an Err.

    Raises:
        UnwrapError: If the result is Ok.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        raise UnwrapError(value=outcome.value)
    return outcome.error


def expect[T](result: Result[T, Any], msg: str) -> Step[T]:
    """Return the Ok value.

    Raises:
        FailureError: If the result is Err, with ``msg`` as its message.
    """
    outcome = yield result
    if isinstance(outcome, Err):
        raise FailureError(outcome.error, msg)
    return outcome.value


def expect_err[D](result: Result[Any, D], msg: str) -> Step[Failure[D]]:
    """Return the Failure of an Err.

    Raises:
        UnwrapError: If the result is Ok, with ``msg`` as its message.
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        raise UnwrapError(msg, outcome.value)
    return outcome.error


def unwrap_or[T](result: Result[T, Any], default: T) -> Step[T]:
    """Return the Ok value, or ``default`` for Err."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return outcome.value
    return default


def unwrap_or_else[T, D](result: Result[T, D], f: Callable[[Failure[D]], T]) -> Step[T]:
    """Return the Ok value, or ``f(failure)`` for Err."""
    outcome = yield result
    if isinstance(outcome, Ok):
        return outcome.value
    return (yield f(outcome.error))


# --- Dispatch ---


def match[T, D, R](
    result: Result[T, D],
    on_ok: Callable[[T], R],
    on_err: Callable[[Failure[D]], R],
) -> Step[R]:
    """Call exactly one handler, chosen by the variant, and return its result.

    ``on_err`` receives the full Failure (tag and detail).
    """
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield on_ok(outcome.value))
    return (yield on_err(outcome.error))


def match_nested[T, R](
    result: Result[T, Any],
    on_ok: Callable[[T], R],
    on_err: Mapping[str, Callable[..., R]],
    variants: type[Variants] | None = None,
) -> Step[R]:
    """Dispatch an Err to the handler registered for its tag.

    Each handler receives the failure's detail, or no argument for a unit
    variant. With ``variants``, the handler keys must equal the declared tag
    set; this is checked before anything else, whichever branch is taken.

    Raises:
        NonExhaustiveMatchError: If the handlers do not cover ``variants``,
            or (without ``variants``) the failure's tag has no handler.
    """
    if variants is not None:
        variants.require_exhaustive(on_err)
    outcome = yield result
    if isinstance(outcome, Ok):
        return (yield on_ok(outcome.value))
    handler = on_err.get(outcome.error.tag)
    if handler is None:
        raise NonExhaustiveMatchError(missing=[outcome.error.tag])
    if outcome.error.has_detail:
        return (yield handler(outcome.error.detail))
    return (yield handler())
