"""Root pytest configuration for all tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attaches to the package logger between tests."""
    yield
    app_logger = logging.getLogger("adf2obsidian")
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
