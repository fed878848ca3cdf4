"""Shared fixtures for the test suite."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test installed."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_snowflaker_handler", False):
            root_logger.removeHandler(handler)
            handler.close()
