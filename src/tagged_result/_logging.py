"""Structured logging for tagged_result.

The package emits two events: ``exception_captured`` (debug) when the
exception boundary turns an exception into an Err, and ``wire_decode_failed``
(warning) when serde rejects undecodable bytes.

``get_logger`` hands out structlog loggers backed by stdlib ``logging``.
Before ``configure_logging`` runs they render into plain stdlib records and
obey whatever levels the application set, so the package is silent by
default. ``configure_logging`` gives the ``tagged_result`` logger its own
stderr handler with a structlog ProcessorFormatter; the root logger and
every other logger are left untouched.

Hooks registered with ``add_log_hook`` receive a copy of each package event
that passes the level filter, whether or not logging was configured.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'PACKAGE_LOGGER',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

PACKAGE_LOGGER = 'tagged_result'

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event dict logged by the package."""
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister ``hook``; unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in tuple(_hooks):
        try:
            hook(dict(event_dict))
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict


def _event_processors(*, configured: bool) -> list[Any]:
    processors: list[Any] = [structlog.stdlib.filter_by_level, structlog.stdlib.add_log_level]
    if configured:
        processors += [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
        ]
    processors.append(_run_hooks)
    if configured:
        processors.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)
    else:
        processors.append(structlog.stdlib.render_to_log_kwargs)
    return processors


def _formatter(json_output: bool) -> logging.Formatter:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    return structlog.stdlib.ProcessorFormatter(
        # records logged through plain ``logging.getLogger('tagged_result...')``
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route package events to stderr as structured output.

    Calling it again replaces the previous handler and level.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Unknown names fall back to INFO.
        json_output: If True, emit JSON lines. If False, use console output,
            colored when stderr is a terminal.
    """
    structlog.configure(
        processors=_event_processors(configured=True),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_output))

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers[:] = [handler]
    package.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    package.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger for ``name`` (usually ``__name__``)."""
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors(configured=False),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
