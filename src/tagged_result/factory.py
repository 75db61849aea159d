"""Typed constructor factory bound to one value type and one variant set.

Example:
    ```python
    class ParseErrors(Variants):
        invalid_number: str
        negative: int

    parse_result = result_type(int, ParseErrors)

    def parse_int_strict(s: str) -> Result[int, Any]:
        if not s.lstrip('-').isdigit():
            return parse_result.err('invalid_number', s)
        n = int(s)
        if n < 0:
            return parse_result.err('negative', n)
        return parse_result.ok(n)

    parse_result.match_nested(
        parse_int_strict('-3'),
        on_ok=str,
        on_err={
            'invalid_number': lambda s: f'bad:{s}',
            'negative': lambda n: f'neg:{n}',
        },
    )  # 'neg:-3'
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal

import msgspec

from tagged_result import combinators, serde
from tagged_result._config import get_config
from tagged_result.chain import Chain
from tagged_result.errors import VariantError
from tagged_result.result import UNSET, Err, Failure, Ok, Result
from tagged_result.variants import Variants

__all__ = ['ResultType', 'result_type']


class ResultType[T, V: Variants]:
    """Constructors and dispatch bound to a value type and a variant set.

    ``err`` accepts only declared tags and enforces the declared detail
    arity: a detail is required unless the variant is a unit variant, in
    which case none may be given. With ``validate`` enabled the detail is
    also checked against its declared type.

    Attributes:
        value_type: Type of the Ok value, used when decoding.
        variants: The closed variant set.
        validate: Whether details are type-checked at construction.
    """

    __slots__ = ('validate', 'value_type', 'variants')

    def __init__(self, value_type: type[T] | Any, variants: type[V], *, validate: bool | None = None) -> None:
        self.value_type = value_type
        self.variants = variants
        self.validate = get_config().validate_details if validate is None else validate

    def ok(self, value: T) -> Ok[T]:
        """Build Ok(value)."""
        return Ok(value)

    def err(self, tag: str, detail: Any = UNSET) -> Err[Any]:
        """Build Err(Failure(tag, detail)) after checking it against the variant set.

        Raises:
            VariantError: On an undeclared tag, a missing or unexpected detail,
                or (when validating) a detail of the wrong type.
        """
        if not self.variants.declares(tag):
            raise VariantError(tag, f'not declared by {self.variants.__name__}')
        detail_type = self.variants.detail_type(tag)
        if detail_type is None:
            if detail is not UNSET:
                raise VariantError(tag, 'unit variant takes no detail')
            return Err(Failure(tag))
        if detail is UNSET:
            raise VariantError(tag, 'detail is required')
        if self.validate:
            self._check_detail(tag, detail_type, detail)
        return Err(Failure(tag, detail))

    def ok_chain(self, value: T) -> Chain[T, Any]:
        """Build Ok(value) wrapped in a Chain."""
        return Chain(self.ok(value))

    def err_chain(self, tag: str, detail: Any = UNSET) -> Chain[T, Any]:
        """Build a checked Err wrapped in a Chain."""
        return Chain(self.err(tag, detail))

    def match[R](
        self,
        result: Result[T, Any],
        on_ok: Callable[[T], R],
        on_err: Callable[[Failure[Any]], R],
    ) -> R:
        """Dispatch on the variant; see ``combinators.match``."""
        return combinators.match(result, on_ok, on_err)

    def match_nested[R](
        self,
        result: Result[T, Any],
        on_ok: Callable[[T], R],
        on_err: Mapping[str, Callable[..., R]],
    ) -> R:
        """Dispatch an Err by tag, requiring a handler for every declared tag.

        Raises:
            NonExhaustiveMatchError: If ``on_err`` does not name exactly the
                declared tags, whichever branch the result is on.
        """
        return combinators.match_nested(result, on_ok, on_err, self.variants)

    def encode(self, result: Result[T, Any], *, format: Literal['json', 'msgpack'] = 'json') -> bytes:  # noqa: A002
        """Serialize a Result to the wire shape."""
        return serde.encode(result, format=format)

    def decode(self, data: bytes | str, *, format: Literal['json', 'msgpack'] = 'json') -> Result[T, Any]:  # noqa: A002
        """Deserialize a Result, typing the value and each detail."""
        return serde.decode(data, value_type=self.value_type, variants=self.variants, format=format)

    def _check_detail(self, tag: str, detail_type: Any, detail: Any) -> None:
        try:
            msgspec.convert(detail, type=detail_type, strict=True)
        except msgspec.ValidationError as exc:
            raise VariantError(tag, f'detail {detail!r} does not match declared type: {exc}') from exc

    def __repr__(self) -> str:
        value_name = getattr(self.value_type, '__name__', repr(self.value_type))
        return f'ResultType({value_name}, {self.variants.__name__})'


def result_type[T, V: Variants](
    value_type: type[T] | Any,
    variants: type[V],
    *,
    validate: bool | None = None,
) -> ResultType[T, V]:
    """Bind constructors and dispatch to a value type and variant set.

    Args:
        value_type: Type of the success value (used for decoding).
        variants: ``Variants`` subclass declaring the failure tags.
        validate: Type-check details at construction. Defaults to
            ``get_config().validate_details``.

    Returns:
        A ResultType exposing ``ok``, ``err``, ``ok_chain``, ``err_chain``,
        ``match``, ``match_nested``, ``encode`` and ``decode``.
    """
    return ResultType(value_type, variants, validate=validate)
