"""Base122 codec.

This module provides encoding and decoding between binary data and Base122
text, along with the shared alphabet and bit-level helpers.
"""

from __future__ import annotations

from .alphabet import ALPHABET, DANGEROUS, SHORTENED, Alphabet
from .bitpack import BitAccumulator, BitExtractor
from .decoder import decode
from .encoder import encode, encode_to_bytes

__all__ = [
    "encode",
    "encode_to_bytes",
    "decode",
    "Alphabet",
    "ALPHABET",
    "DANGEROUS",
    "SHORTENED",
    "BitExtractor",
    "BitAccumulator",
]
