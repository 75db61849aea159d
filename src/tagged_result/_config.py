"""Package configuration: Config dataclass, environment detection and init()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from tagged_result._logging import configure_logging, get_logger

__all__ = [
    'Config',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off', ''})
_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class Config:
    """Configuration for tagged_result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or colored console output (False).
        validate_details: Default for ``result_type(..., validate=...)``: check
            failure details against their declared type at construction.
    """

    log_level: str | None = None
    json_logs: bool = True
    validate_details: bool = False


# Global configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read TAGGED_RESULT_LOG_LEVEL, ignoring unknown level names."""
    level = os.environ.get('TAGGED_RESULT_LOG_LEVEL', '').strip().upper()
    if not level:
        return None
    if level not in _LEVELS:
        get_logger(__name__).warning('unknown_log_level', variable='TAGGED_RESULT_LOG_LEVEL', value=level)
        return None
    return level


def _detect_json_logs() -> bool:
    """Read TAGGED_RESULT_LOG_FORMAT ("json" or "console"), defaulting to JSON."""
    fmt = os.environ.get('TAGGED_RESULT_LOG_FORMAT', 'json').strip().lower()
    if fmt == 'console':
        return False
    if fmt not in ('json', ''):
        get_logger(__name__).warning('unknown_log_format', variable='TAGGED_RESULT_LOG_FORMAT', value=fmt)
    return True


def _detect_validate_details() -> bool:
    """Read TAGGED_RESULT_VALIDATE as a boolean flag."""
    flag = os.environ.get('TAGGED_RESULT_VALIDATE', '').strip().lower()
    if flag in _TRUTHY:
        return True
    if flag not in _FALSY:
        get_logger(__name__).warning('unknown_flag_value', variable='TAGGED_RESULT_VALIDATE', value=flag)
    return False


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    validate_details: bool | None = None,
) -> Config:
    """Initialize tagged_result with the specified configuration.

    Arguments left as None are read from the environment
    (``TAGGED_RESULT_LOG_LEVEL``, ``TAGGED_RESULT_LOG_FORMAT``,
    ``TAGGED_RESULT_VALIDATE``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs instead of console output.
        validate_details: Default detail validation for result_type factories.

    Returns:
        The Config that was set.

    Example:
        ```python
        from tagged_result import init

        init()  # everything from the environment
        init(log_level='DEBUG', json_logs=False, validate_details=True)
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
        validate_details=validate_details if validate_details is not None else _detect_validate_details(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> Config:
    """Get the current configuration, initializing from the environment on first use.

    Returns:
        The current Config.
    """
    if _config is None:
        return init()
    return _config
