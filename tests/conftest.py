"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from base122.codec.alphabet import DANGEROUS


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello\nWorld\0Test\"Data&More\\Path"


@pytest.fixture
def dangerous_bytes() -> bytes:
    """The six dangerous values as consecutive bytes."""
    return bytes(DANGEROUS)


@pytest.fixture
def all_byte_values() -> bytes:
    """Every byte value 0-255 in order."""
    return bytes(range(256))


@pytest.fixture
def clean_package_logger():
    """Remove handlers installed on the package logger during a test."""
    logger = logging.getLogger("base122")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
