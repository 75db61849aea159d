"""tagged-result: Results with closed, tagged failure variants for Python 3.13+.

Flat imports (preferred):
    from tagged_result import Ok, Err, Failure, Result, success, failure
    from tagged_result import Variants, result_type, Chain, AsyncChain

Submodule imports (for organization):
    from tagged_result import combinators as R            # sync algebra
    from tagged_result.async_ import combinators as AR    # async algebra
    from tagged_result.serde import encode, decode
"""

# Config and logging
from tagged_result._config import Config, get_config, init
from tagged_result._logging import configure_logging, get_logger

# Algebra modules
from tagged_result import combinators, serde

# Async
from tagged_result.async_ import AsyncChain, async_chain

# Fluent wrapper
from tagged_result.chain import Chain, chain

# Exception boundary
from tagged_result.decorators import (
    from_awaitable,
    from_throwing,
    from_throwing_async,
    safe,
    safe_async,
)

# Errors
from tagged_result.errors import (
    FailureError,
    NonExhaustiveMatchError,
    TaggedResultError,
    UnwrapError,
    VariantError,
    WireFormatError,
)

# Factory
from tagged_result.factory import ResultType, result_type

# Value model
from tagged_result.result import UNSET, Err, Failure, Ok, Result, failure, success

# Variants
from tagged_result.variants import Variants, undetailed

__all__ = [
    'UNSET',
    # Async
    'AsyncChain',
    # Fluent wrapper
    'Chain',
    # Config
    'Config',
    # Value model
    'Err',
    'Failure',
    # Errors
    'FailureError',
    'NonExhaustiveMatchError',
    'Ok',
    'Result',
    # Factory
    'ResultType',
    'TaggedResultError',
    'UnwrapError',
    'VariantError',
    # Variants
    'Variants',
    'WireFormatError',
    'async_chain',
    'chain',
    # Algebra modules
    'combinators',
    'configure_logging',
    'failure',
    # Exception boundary
    'from_awaitable',
    'from_throwing',
    'from_throwing_async',
    'get_config',
    'get_logger',
    'init',
    'result_type',
    'safe',
    'safe_async',
    'serde',
    'success',
    'undetailed',
]
