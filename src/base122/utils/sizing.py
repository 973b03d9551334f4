"""Encoded size calculation utilities.

This module provides functions to calculate Base122 symbol counts and output
sizes, and to summarize how a particular input encodes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..codec.alphabet import ALPHABET, SYMBOL_BITS
from ..codec.bitpack import BitExtractor
from ..codec.encoder import BytesLike, encode_to_bytes


def symbol_count(num_bytes: int) -> int:
    """Calculate the number of 7-bit symbols needed for ``num_bytes`` bytes.

    Args:
        num_bytes: Input length in bytes

    Returns:
        ceil(num_bytes * 8 / 7)

    Raises:
        ValueError: If num_bytes is negative

    Example:
        >>> symbol_count(1)
        2
        >>> symbol_count(7)
        8
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
    return -(-num_bytes * 8 // SYMBOL_BITS)


def final_symbol_bits(num_bytes: int) -> int:
    """Calculate how many bits of the last symbol carry data.

    Args:
        num_bytes: Input length in bytes

    Returns:
        Valid bits in the final symbol (1-7), or 0 for empty input

    Example:
        >>> final_symbol_bits(1)
        1
        >>> final_symbol_bits(7)
        7
    """
    count = symbol_count(num_bytes)
    if count == 0:
        return 0
    return num_bytes * 8 - SYMBOL_BITS * (count - 1)


def max_encoded_size(num_bytes: int) -> int:
    """Calculate the worst-case encoded size in bytes.

    Every escape carries two symbols in two bytes, except a shortened escape
    at the very end, which carries one. The worst case is therefore one byte
    more than the symbol count.

    Args:
        num_bytes: Input length in bytes

    Returns:
        Upper bound on len(encode_to_bytes(data)) for any data of that length
    """
    count = symbol_count(num_bytes)
    return count + 1 if count else 0


def encoded_size(data: BytesLike) -> int:
    """Calculate the exact encoded size of ``data`` in bytes, without encoding it.

    Args:
        data: Binary data

    Returns:
        Size of the UTF-8 encoded output in bytes
    """
    symbols = iter(BitExtractor(bytes(data)))
    size = 0
    for symbol in symbols:
        if ALPHABET.is_dangerous(symbol):
            next(symbols, None)
            size += 2
        else:
            size += 1
    return size


def base64_size(num_bytes: int) -> int:
    """Size of the padded base64 encoding of ``num_bytes`` bytes."""
    return (num_bytes + 2) // 3 * 4


class EncodingReport(BaseModel):
    """Summary of how a payload encodes.

    Example:
        >>> report = analyze(b"Hello")
        >>> report.encoded_bytes
        6
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    input_bytes: int = Field(ge=0, description="Length of the raw input")
    encoded_bytes: int = Field(ge=0, description="Length of the UTF-8 output in bytes")
    encoded_chars: int = Field(ge=0, description="Length of the output in characters")
    symbols: int = Field(ge=0, description="Number of 7-bit symbols")
    escapes: int = Field(ge=0, description="Number of two-byte escapes")
    final_bits: int = Field(ge=0, le=7, description="Valid bits in the final symbol")
    base64_bytes: int = Field(ge=0, description="Length of the padded base64 encoding")

    @property
    def efficiency(self) -> float:
        """Input bits per output bit (0.875 is the ceiling)."""
        if self.encoded_bytes == 0:
            return 0.0
        return self.input_bytes / self.encoded_bytes

    @property
    def savings_vs_base64(self) -> float:
        """Fraction of the base64 size saved (0.0 when both are empty)."""
        if self.base64_bytes == 0:
            return 0.0
        return (self.base64_bytes - self.encoded_bytes) / self.base64_bytes


def analyze(data: BytesLike) -> EncodingReport:
    """Encode ``data`` and report its sizes.

    Args:
        data: Binary data

    Returns:
        EncodingReport for the payload
    """
    raw = bytes(data)
    encoded = encode_to_bytes(raw)
    chars = len(encoded.decode("utf-8"))
    return EncodingReport(
        input_bytes=len(raw),
        encoded_bytes=len(encoded),
        encoded_chars=chars,
        symbols=symbol_count(len(raw)),
        escapes=len(encoded) - chars,
        final_bits=final_symbol_bits(len(raw)),
        base64_bytes=base64_size(len(raw)),
    )
