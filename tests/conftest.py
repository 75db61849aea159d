"""Pytest configuration and shared fixtures for tagged_result tests."""

import logging

import pytest
import structlog
from tagged_result import _config
from tagged_result._logging import PACKAGE_LOGGER, clear_log_hooks


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch: pytest.MonkeyPatch):
    """Isolate configuration, structlog state, stdlib loggers and log hooks between tests."""
    monkeypatch.setattr(_config, '_config', None)
    for name in ('TAGGED_RESULT_LOG_LEVEL', 'TAGGED_RESULT_LOG_FORMAT', 'TAGGED_RESULT_VALIDATE'):
        monkeypatch.delenv(name, raising=False)
    saved = {}
    for logger in (logging.getLogger(), logging.getLogger(PACKAGE_LOGGER)):
        saved[logger] = (list(logger.handlers), logger.level, logger.propagate)
    clear_log_hooks()
    yield
    clear_log_hooks()
    structlog.reset_defaults()
    for logger, (handlers, level, propagate) in saved.items():
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
