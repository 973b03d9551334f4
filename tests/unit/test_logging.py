"""Unit tests for logging setup."""

from __future__ import annotations

import io
import logging

from base122 import decode, encode
from base122.utils.logging import configure_logging, get_logger


def test_get_logger_namespace() -> None:
    """Test loggers live under the base122 namespace."""
    assert get_logger().name == "base122"
    assert get_logger("cli").name == "base122.cli"


def test_configure_logging_idempotent(clean_package_logger: logging.Logger) -> None:
    """Test repeated configuration adds a single handler."""
    before = len(clean_package_logger.handlers)
    configure_logging()
    configure_logging(verbose=True)

    assert len(clean_package_logger.handlers) == max(before, 1)
    assert clean_package_logger.level == logging.DEBUG


def test_verbose_emits_debug(clean_package_logger: logging.Logger) -> None:
    """Test codec calls log at DEBUG when verbose."""
    for handler in list(clean_package_logger.handlers):
        clean_package_logger.removeHandler(handler)
    stream = io.StringIO()
    configure_logging(verbose=True, stream=stream)

    decode(encode(b"Hello"))

    output = stream.getvalue()
    assert "Encoded 5 bytes (6 symbols)" in output
    assert "Decoded 5 bytes from 6 symbols" in output
    assert "2 padding bits dropped" in output
    assert "| DEBUG    |" in output


def test_quiet_by_default(clean_package_logger: logging.Logger) -> None:
    """Test nothing is written at the default level."""
    for handler in list(clean_package_logger.handlers):
        clean_package_logger.removeHandler(handler)
    stream = io.StringIO()
    configure_logging(stream=stream)

    decode(encode(b"Hello"))

    assert stream.getvalue() == ""
