"""Base122 encoder.

This module provides the encode() function that packs arbitrary bytes into
UTF-8 text made of 7-bit symbols.
"""

from __future__ import annotations

import logging
from typing import Union

from ..exceptions import EncodeError
from .alphabet import ALPHABET, SHORTENED
from .bitpack import BitExtractor

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def encode_to_bytes(data: BytesLike) -> bytes:
    """Encode binary data to Base122, returned as UTF-8 bytes.

    Safe symbols become a single byte. A dangerous symbol becomes a two-byte
    UTF-8 sequence that also carries the following symbol, so the escape does
    not cost an extra byte. A dangerous final symbol is written as a
    shortened escape carrying the symbol itself.

    Args:
        data: Binary data to encode

    Returns:
        Encoded data; always valid UTF-8

    Raises:
        EncodeError: If data is not bytes-like

    Example:
        >>> encode_to_bytes(b"A")
        b' @'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise EncodeError(f"Expected bytes-like data, got {type(data).__name__}")

    data = bytes(data)
    extractor = BitExtractor(data)
    total_symbols = extractor.symbols_remaining()
    symbols = iter(extractor)
    result = bytearray()
    escapes = 0

    for symbol in symbols:
        if not ALPHABET.is_dangerous(symbol):
            result.append(ALPHABET.literal(symbol))
            continue

        escapes += 1
        following = next(symbols, None)
        if following is None:
            result.extend(ALPHABET.escape(SHORTENED, symbol))
        else:
            result.extend(ALPHABET.escape(ALPHABET.escape_index(symbol), following))

    logger.debug(
        "Encoded %d bytes (%d symbols) into %d bytes (%d escapes, final symbol bits=%s)",
        len(data),
        total_symbols,
        len(result),
        escapes,
        extractor.final_bits,
    )
    return bytes(result)


def encode(data: BytesLike) -> str:
    """Encode binary data to Base122 text.

    Args:
        data: Binary data to encode

    Returns:
        Encoded text (empty for empty input)

    Raises:
        EncodeError: If data is not bytes-like

    Examples:
        ```python
        from base122 import decode, encode

        text = encode(b"Hello, World!")
        assert decode(text) == b"Hello, World!"

        # Dangerous values are escaped, never emitted literally
        text = encode(bytes([0, 10, 13, 34, 38, 92]))
        assert "\\n" not in text
        ```
    """
    return encode_to_bytes(data).decode("utf-8")
