"""Wire format for Results, encoded with msgspec (JSON or MessagePack).

The external shape is fixed:

    Ok:   {"ok": true,  "value": V}
    Err:  {"ok": false, "error": {"tag": T, "detail": D}}

``"detail"`` is omitted for unit variants. The flat
``{"ok": false, "error": T, "detail": D}`` shape used by early revisions of
the format is not accepted; switching shapes breaks every consumer.

Usage:
    >>> data = encode(failure('negative', -3))
    >>> data
    b'{"ok":false,"error":{"tag":"negative","detail":-3}}'
    >>> decode(data)
    Err(error=Failure('negative', -3))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, get_args, get_origin

import msgspec

from tagged_result._logging import get_logger
from tagged_result.errors import WireFormatError
from tagged_result.result import UNSET, Err, Failure, Ok, Result
from tagged_result.variants import Variants

__all__ = ['decode', 'encode', 'from_builtins', 'to_builtins']

type Format = Literal['json', 'msgpack']

_encoders = {'json': msgspec.json.Encoder(), 'msgpack': msgspec.msgpack.Encoder()}
_decoders = {'json': msgspec.json.Decoder(), 'msgpack': msgspec.msgpack.Decoder()}


def _codec[C](table: dict[str, C], format: str) -> C:  # noqa: A002
    try:
        return table[format]
    except KeyError:
        raise ValueError(f'unknown wire format {format!r}, expected "json" or "msgpack"') from None


def _value_to_builtins(value: Any) -> Any:
    if isinstance(value, Ok | Err):
        return to_builtins(value)
    return msgspec.to_builtins(value)


def to_builtins(result: Result[Any, Any]) -> dict[str, Any]:
    """Convert a Result to plain dicts, lists and scalars in the wire shape.

    A Result nested as an Ok value or a detail is converted recursively.
    """
    if isinstance(result, Ok):
        return {'ok': True, 'value': _value_to_builtins(result.value)}
    error: dict[str, Any] = {'tag': result.error.tag}
    if result.error.has_detail:
        error['detail'] = _value_to_builtins(result.error.detail)
    return {'ok': False, 'error': error}


def _is_wire_result(obj: Any) -> bool:
    if not isinstance(obj, Mapping):
        return False
    flag = obj.get('ok')
    if flag is True:
        return obj.keys() == {'ok', 'value'}
    if flag is False:
        return obj.keys() == {'ok', 'error'}
    return False


def _result_params(type_: Any) -> tuple[Any, type[Variants] | None]:
    args = get_args(type_)
    value_type = args[0] if args else Any
    detail = args[1] if len(args) > 1 else Any
    if isinstance(detail, type) and issubclass(detail, Variants):
        return value_type, detail
    return value_type, None


def _convert(obj: Any, type_: Any, where: str) -> Any:
    if type_ is Any:
        # untyped: anything in the wire shape is a nested Result
        return from_builtins(obj) if _is_wire_result(obj) else obj
    if type_ is Result or get_origin(type_) is Result:
        value_type, variants = _result_params(type_)
        return from_builtins(obj, value_type=value_type, variants=variants)
    try:
        return msgspec.convert(obj, type=type_)
    except msgspec.ValidationError as exc:
        raise WireFormatError(f'{where}: {exc}') from exc
    except TypeError as exc:
        raise WireFormatError(f'{where}: cannot convert to {type_!r} ({exc})') from exc


def _decode_failure(error: Any, variants: type[Variants] | None) -> Failure[Any]:
    if not isinstance(error, Mapping):
        raise WireFormatError('"error" must be an object with a "tag"')
    tag = error.get('tag')
    if not isinstance(tag, str):
        raise WireFormatError('"error.tag" must be a string')
    unknown = set(error) - {'tag', 'detail'}
    if unknown:
        raise WireFormatError(f'unexpected keys in "error": {", ".join(sorted(unknown))}')
    if variants is None:
        if 'detail' not in error:
            return Failure(tag)
        return Failure(tag, _convert(error['detail'], Any, f'detail of {tag!r}'))
    if not variants.declares(tag):
        raise WireFormatError(f'tag {tag!r} is not declared by {variants.__name__}')
    detail_type = variants.detail_type(tag)
    if detail_type is None:
        if 'detail' in error:
            raise WireFormatError(f'unit variant {tag!r} carries a detail')
        return Failure(tag)
    if 'detail' not in error:
        raise WireFormatError(f'variant {tag!r} requires a detail')
    return Failure(tag, _convert(error['detail'], detail_type, f'detail of {tag!r}'))


def from_builtins(
    data: Any,
    *,
    value_type: Any = Any,
    variants: type[Variants] | None = None,
) -> Result[Any, Any]:
    """Build a Result from its wire shape.

    With ``value_type=Any`` (and, for details, no ``variants``), a nested
    mapping in the wire shape is decoded back into a Result. A typed nested
    Result is requested with ``value_type=Result[T, V]``, where ``V`` may be
    a Variants subclass.

    Args:
        data: A mapping in the wire shape.
        value_type: Type to convert the Ok value to (via msgspec.convert).
        variants: Variant set used to reject unknown tags and type details.

    Raises:
        WireFormatError: If ``data`` does not follow the wire shape.
    """
    if not isinstance(data, Mapping):
        raise WireFormatError(f'expected an object, got {type(data).__name__}')
    flag = data.get('ok')
    if flag is True:
        if set(data) != {'ok', 'value'}:
            raise WireFormatError('an Ok must have exactly the keys "ok" and "value"')
        return Ok(_convert(data['value'], value_type, 'value'))
    if flag is False:
        if set(data) != {'ok', 'error'}:
            raise WireFormatError('an Err must have exactly the keys "ok" and "error"')
        return Err(_decode_failure(data['error'], variants))
    raise WireFormatError('"ok" must be true or false')


def encode(result: Result[Any, Any], *, format: Format = 'json') -> bytes:  # noqa: A002
    """Serialize a Result to JSON or MessagePack bytes.

    Raises:
        ValueError: If ``format`` is neither "json" nor "msgpack".
    """
    return _codec(_encoders, format).encode(to_builtins(result))


def decode(
    data: bytes | str,
    *,
    value_type: Any = Any,
    variants: type[Variants] | None = None,
    format: Format = 'json',  # noqa: A002
) -> Result[Any, Any]:
    """Deserialize a Result from JSON or MessagePack.

    JSON accepts ``str`` or bytes; MessagePack accepts bytes only.

    Raises:
        ValueError: If ``format`` is neither "json" nor "msgpack".
        WireFormatError: If the data is not valid for ``format`` or does not
            follow the wire shape.
    """
    decoder = _codec(_decoders, format)
    try:
        raw = decoder.decode(data)
    except (msgspec.DecodeError, TypeError) as exc:
        get_logger(__name__).warning('wire_decode_failed', format=format, reason=str(exc))
        raise WireFormatError(str(exc)) from exc
    return from_builtins(raw, value_type=value_type, variants=variants)
