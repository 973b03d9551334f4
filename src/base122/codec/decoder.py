"""Base122 decoder.

This module provides the decode() function that turns Base122 text back into
the original bytes.
"""

from __future__ import annotations

import logging
from typing import Union

from ..exceptions import (
    DecodeError,
    InvalidLeadByteError,
    MalformedContinuationError,
    TruncatedEscapeError,
    UnexpectedTrailingDataError,
)
from .alphabet import ALPHABET, SHORTENED
from .bitpack import BitAccumulator

logger = logging.getLogger(__name__)


def decode(text: Union[str, bytes, bytearray, memoryview], *, strict: bool = True) -> bytes:
    """Decode Base122 text to the original binary data.

    Bytes below 0x80 are single symbols. An escape lead byte (110iii1h) must be
    followed by a continuation byte (10llllll): the escape index ``iii`` names
    the dangerous symbol, and ``hllllll`` is the symbol absorbed after it. A
    shortened escape (index 7) carries only the final dangerous symbol and
    must end the input.

    Args:
        text: Encoded text, or its UTF-8 bytes
        strict: If True, reject literal dangerous bytes, non-zero padding bits,
            and shortened escapes that carry a safe symbol. Structural errors
            are always raised.

    Returns:
        Decoded bytes

    Raises:
        TruncatedEscapeError: Escape lead byte at the end of the input
        MalformedContinuationError: Byte after an escape lead is not 10xxxxxx
        InvalidLeadByteError: Byte is neither a symbol nor an escape lead, or
            (strict) is a dangerous value written literally
        UnexpectedTrailingDataError: Data follows a shortened escape
        InconsistentPaddingError: Leftover bits do not form valid padding
        DecodeError: If text is neither str nor bytes-like, or is a str that
            cannot be encoded as UTF-8 (e.g. lone surrogates)

    Examples:
        ```python
        from base122 import decode, encode
        from base122.exceptions import TruncatedEscapeError

        assert decode(encode(b"\\x00\\n")) == b"\\x00\\n"

        try:
            decode(b"\\xc2")
        except TruncatedEscapeError as e:
            print(f"Truncated at byte {e.position}")
        ```
    """
    if isinstance(text, str):
        try:
            raw = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise DecodeError(f"Text is not encodable as UTF-8: {e.reason}", e.start) from None
    elif isinstance(text, (bytes, bytearray, memoryview)):
        raw = bytes(text)
    else:
        raise DecodeError(f"Expected str or bytes-like text, got {type(text).__name__}")

    accumulator = BitAccumulator()
    position = 0
    length = len(raw)

    try:
        while position < length:
            lead = raw[position]

            if lead < 0x80:
                if strict and ALPHABET.is_dangerous(lead):
                    raise InvalidLeadByteError(
                        f"Dangerous byte 0x{lead:02x} at offset {position} must be escaped",
                        position,
                    )
                accumulator.push(lead)
                position += 1
                continue

            if not ALPHABET.is_escape_lead(lead):
                raise InvalidLeadByteError(
                    f"Byte 0x{lead:02x} at offset {position} is not a symbol or escape lead",
                    position,
                )

            if position + 1 >= length:
                raise TruncatedEscapeError(
                    f"Escape lead 0x{lead:02x} at offset {position} has no continuation byte",
                    position,
                )

            continuation = raw[position + 1]
            if not ALPHABET.is_continuation(continuation):
                raise MalformedContinuationError(
                    f"Byte 0x{continuation:02x} at offset {position + 1} "
                    f"is not a continuation byte",
                    position + 1,
                )

            index, payload = ALPHABET.split_escape(lead, continuation)

            if index == SHORTENED:
                if strict and not ALPHABET.is_dangerous(payload):
                    raise MalformedContinuationError(
                        f"Shortened escape at offset {position} carries safe symbol {payload}",
                        position + 1,
                    )
                accumulator.push(payload)
                position += 2
                if position < length:
                    raise UnexpectedTrailingDataError(
                        f"{length - position} bytes follow the final shortened escape",
                        position,
                    )
                break

            try:
                accumulator.push(ALPHABET.dangerous_symbol(index))
            except IndexError:
                raise InvalidLeadByteError(
                    f"Escape lead 0x{lead:02x} at offset {position} uses "
                    f"unassigned escape index {index}",
                    position,
                ) from None
            accumulator.push(payload)
            position += 2

        padding = accumulator.pending_bits()
        result = accumulator.finish(strict=strict)
    except DecodeError as e:
        logger.debug("Decode failed: %s", e)
        raise

    logger.debug(
        "Decoded %d bytes from %d symbols (%d encoded bytes, %d padding bits dropped)",
        len(result),
        accumulator.symbol_count,
        length,
        padding,
    )
    return result
