"""Tests for verifying import styles work correctly."""


class TestFlatImports:
    """Verify flat imports from tagged_result work."""

    def test_value_model(self) -> None:
        """Test importing the value model from root."""
        from tagged_result import UNSET, Err, Failure, Ok, Result, failure, success

        result: Result[int, str] = success(1)
        assert isinstance(result, Ok)
        assert isinstance(failure('a'), Err)
        assert Failure('a').detail is UNSET

    def test_variants_and_factory(self) -> None:
        """Test importing variant declarations and the factory from root."""
        from tagged_result import ResultType, Variants, result_type, undetailed

        lookup = undetailed('not_found')
        assert issubclass(lookup, Variants)
        assert isinstance(result_type(str, lookup), ResultType)

    def test_wrappers(self) -> None:
        """Test importing Chain and AsyncChain from root."""
        from tagged_result import AsyncChain, Chain, async_chain, chain

        assert callable(chain)
        assert callable(async_chain)
        assert Chain is not None
        assert AsyncChain is not None

    def test_boundary(self) -> None:
        """Test importing the exception boundary from root."""
        from tagged_result import from_awaitable, from_throwing, from_throwing_async, safe, safe_async

        assert callable(from_throwing)
        assert callable(from_throwing_async)
        assert callable(from_awaitable)
        assert callable(safe)
        assert callable(safe_async)

    def test_errors(self) -> None:
        """Test importing error types from root."""
        from tagged_result import (
            FailureError,
            NonExhaustiveMatchError,
            TaggedResultError,
            UnwrapError,
            VariantError,
            WireFormatError,
        )

        for error in (FailureError, NonExhaustiveMatchError, UnwrapError, VariantError, WireFormatError):
            assert issubclass(error, TaggedResultError)

    def test_config_and_logging(self) -> None:
        """Test importing config and logging from root."""
        from tagged_result import Config, configure_logging, get_config, get_logger, init

        assert Config is not None
        assert callable(configure_logging)
        assert callable(get_config)
        assert callable(get_logger)
        assert callable(init)


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_combinator_modules(self) -> None:
        """Sync and async combinators expose the same names."""
        from tagged_result import combinators
        from tagged_result.async_ import combinators as async_combinators

        assert set(combinators.__all__) == set(async_combinators.__all__)
        for name in combinators.__all__:
            assert callable(getattr(combinators, name))
            assert callable(getattr(async_combinators, name))

    def test_serde(self) -> None:
        """Test importing the wire format functions."""
        from tagged_result.serde import decode, encode, from_builtins, to_builtins

        assert callable(encode)
        assert callable(decode)
        assert callable(from_builtins)
        assert callable(to_builtins)

    def test_all_is_complete(self) -> None:
        """Every name in __all__ is importable from root."""
        import tagged_result

        for name in tagged_result.__all__:
            assert hasattr(tagged_result, name), name
