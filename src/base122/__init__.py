"""base122: Binary-to-text encoding with 7-bit symbols

A Python implementation of the Base122 encoding. Base122 packs arbitrary bytes
into UTF-8 text made of 7-bit symbols, about 14% smaller than base64.

Key Features:
- ~87% efficiency (7 input bits per 8 output bits)
- Output is always valid UTF-8
- Six dangerous values (NUL, LF, CR, ", &, \\) never appear literally;
  they are folded into two-byte UTF-8 escapes
- Typed decode errors; malformed input never decodes to wrong bytes

Quick Start:
    >>> from base122 import decode, encode
    >>> text = encode(b"Hello, World!")
    >>> decode(text)
    b'Hello, World!'

Based on the Base122 algorithm: https://github.com/kevinAlbs/Base122
"""

from __future__ import annotations

from .codec import (
    ALPHABET,
    DANGEROUS,
    BitAccumulator,
    BitExtractor,
    decode,
    encode,
    encode_to_bytes,
)
from .exceptions import (
    Base122Error,
    DecodeError,
    EncodeError,
    InconsistentPaddingError,
    InvalidLeadByteError,
    MalformedContinuationError,
    TruncatedEscapeError,
    UnexpectedTrailingDataError,
)
from .utils import (
    EncodingReport,
    analyze,
    encoded_size,
    final_symbol_bits,
    max_encoded_size,
    symbol_count,
)

__version__ = "0.1.3"

__all__ = [
    # Core API
    "encode",
    "encode_to_bytes",
    "decode",
    # Alphabet and bit helpers
    "ALPHABET",
    "DANGEROUS",
    "BitExtractor",
    "BitAccumulator",
    # Exceptions
    "Base122Error",
    "EncodeError",
    "DecodeError",
    "TruncatedEscapeError",
    "MalformedContinuationError",
    "InconsistentPaddingError",
    "UnexpectedTrailingDataError",
    "InvalidLeadByteError",
    # Sizing
    "symbol_count",
    "final_symbol_bits",
    "max_encoded_size",
    "encoded_size",
    "EncodingReport",
    "analyze",
    # Version
    "__version__",
]
