"""Tests for the typed constructor factory."""

from typing import Any

import pytest

from tagged_result import (
    Chain,
    Failure,
    NonExhaustiveMatchError,
    Ok,
    Result,
    ResultType,
    VariantError,
    Variants,
    WireFormatError,
    failure,
    result_type,
)


class ParseErrors(Variants, undetailed=('empty',)):
    invalid_number: str
    negative: int


parse_result = result_type(int, ParseErrors)


def parse_int_strict(s: str) -> Result[int, Any]:
    if not s:
        return parse_result.err('empty')
    if not s.lstrip('-').isdigit():
        return parse_result.err('invalid_number', s)
    n = int(s)
    if n < 0:
        return parse_result.err('negative', n)
    return parse_result.ok(n)


HANDLERS = {
    'invalid_number': lambda s: f'bad:{s}',
    'negative': lambda n: f'neg:{n}',
    'empty': lambda: 'empty',
}


class TestConstructors:
    """Tests for ok and err."""

    def test_ok(self):
        """ok builds an Ok."""
        assert parse_result.ok(1) == Ok(1)

    def test_err_detailed(self):
        """err builds an Err with the detail."""
        assert parse_result.err('negative', -3) == failure('negative', -3)

    def test_err_unit(self):
        """A unit variant takes no detail."""
        assert parse_result.err('empty') == failure('empty')

    def test_undeclared_tag_raises(self):
        """Tags outside the variant set are rejected."""
        with pytest.raises(VariantError, match='not declared by ParseErrors') as exc_info:
            parse_result.err('too_large', 10**9)
        assert exc_info.value.tag == 'too_large'

    def test_missing_detail_raises(self):
        """A detailed variant requires its detail."""
        with pytest.raises(VariantError, match='detail is required'):
            parse_result.err('negative')

    def test_unexpected_detail_raises(self):
        """A unit variant rejects a detail."""
        with pytest.raises(VariantError, match='unit variant takes no detail'):
            parse_result.err('empty', 'x')

    def test_variant_error_is_type_error(self):
        """VariantError is a TypeError."""
        with pytest.raises(TypeError):
            parse_result.err('nope')

    def test_no_validation_by_default(self):
        """Detail types are not checked unless validation is on."""
        assert parse_result.err('negative', 'not-an-int') == failure('negative', 'not-an-int')

    def test_validation_rejects_wrong_type(self):
        """With validate=True, details must match the declared type."""
        strict = result_type(int, ParseErrors, validate=True)
        assert strict.err('negative', -3) == failure('negative', -3)
        with pytest.raises(VariantError, match='does not match declared type'):
            strict.err('negative', 'not-an-int')

    def test_validation_default_from_config(self, monkeypatch: pytest.MonkeyPatch):
        """validate defaults to TAGGED_RESULT_VALIDATE."""
        monkeypatch.setenv('TAGGED_RESULT_VALIDATE', 'true')
        strict = result_type(int, ParseErrors)
        assert strict.validate is True
        with pytest.raises(VariantError):
            strict.err('invalid_number', 5)

    def test_chain_constructors(self):
        """ok_chain and err_chain start a Chain."""
        assert parse_result.ok_chain(2).map(lambda n: n * 2).result == Ok(4)
        c = parse_result.err_chain('negative', -1)
        assert isinstance(c, Chain)
        assert c.unwrap_or(0) == 0

    def test_repr(self):
        """Repr names the value type and the variant set."""
        assert repr(parse_result) == 'ResultType(int, ParseErrors)'
        assert isinstance(parse_result, ResultType)


class TestDispatch:
    """Tests for match and match_nested on the factory."""

    def test_parse_scenario(self):
        """The strict parser dispatches by tag."""
        assert parse_result.match_nested(parse_int_strict('-3'), str, HANDLERS) == 'neg:-3'
        assert parse_result.match_nested(parse_int_strict('abc'), str, HANDLERS) == 'bad:abc'
        assert parse_result.match_nested(parse_int_strict(''), str, HANDLERS) == 'empty'
        assert parse_result.match_nested(parse_int_strict('42'), str, HANDLERS) == '42'

    def test_match(self):
        """match hands the full Failure to on_err."""
        assert parse_result.match(parse_int_strict('-3'), str, lambda f: f.tag) == 'negative'

    @pytest.mark.parametrize('text', ['7', '-7', 'x'])
    def test_missing_handler_raises_on_either_branch(self, text: str):
        """Exhaustiveness is checked whatever the outcome."""
        partial = {'invalid_number': str, 'negative': str}
        with pytest.raises(NonExhaustiveMatchError) as exc_info:
            parse_result.match_nested(parse_int_strict(text), str, partial)
        assert exc_info.value.missing == ('empty',)

    def test_extra_handler_raises(self):
        """A handler for an undeclared tag is rejected."""
        with pytest.raises(NonExhaustiveMatchError) as exc_info:
            parse_result.match_nested(Ok(1), str, {**HANDLERS, 'too_large': str})
        assert exc_info.value.unexpected == ('too_large',)


class TestWire:
    """Tests for the factory's encode and decode."""

    def test_encode(self):
        """encode uses the wire shape."""
        assert parse_result.encode(parse_int_strict('-3')) == b'{"ok":false,"error":{"tag":"negative","detail":-3}}'

    def test_decode_types_details(self):
        """decode converts the detail to its declared type."""
        decoded = parse_result.decode(b'{"ok":false,"error":{"tag":"invalid_number","detail":"abc"}}')
        assert decoded == failure('invalid_number', 'abc')

    def test_round_trip(self):
        """encode then decode restores each outcome."""
        for text in ('5', '-5', 'x', ''):
            result = parse_int_strict(text)
            assert parse_result.decode(parse_result.encode(result)) == result
            assert parse_result.decode(parse_result.encode(result, format='msgpack'), format='msgpack') == result

    def test_decode_rejects_undeclared_tag(self):
        """Unknown tags do not decode."""
        with pytest.raises(WireFormatError, match='not declared'):
            parse_result.decode(b'{"ok":false,"error":{"tag":"too_large","detail":1}}')

    def test_decode_rejects_wrong_value_type(self):
        """The Ok value is converted to the value type."""
        with pytest.raises(WireFormatError):
            parse_result.decode(b'{"ok":true,"value":"seven"}')

    def test_failure_of_decoded_unit_variant(self):
        """A unit variant decodes without a detail."""
        decoded = parse_result.decode(b'{"ok":false,"error":{"tag":"empty"}}')
        assert decoded.error == Failure('empty')
