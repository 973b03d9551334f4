"""Utility functions for base122.

This module provides size calculation, encoding reports, and logging setup.
"""

from __future__ import annotations

from .logging import configure_logging, get_logger
from .sizing import (
    EncodingReport,
    analyze,
    base64_size,
    encoded_size,
    final_symbol_bits,
    max_encoded_size,
    symbol_count,
)

__all__ = [
    # Sizing functions
    "symbol_count",
    "final_symbol_bits",
    "max_encoded_size",
    "encoded_size",
    "base64_size",
    # Reports
    "EncodingReport",
    "analyze",
    # Logging
    "get_logger",
    "configure_logging",
]
