"""Shared symbol alphabet for Base122.

Both the encoder and the decoder read from the single ``ALPHABET`` instance
defined here, so the two directions cannot drift apart.

Escape layout (two-byte UTF-8 sequence)::

    110iii1h 10llllll

- ``iii``: escape index of the dangerous symbol (0-5), or ``SHORTENED`` (7)
- ``1``: always set, keeps the lead byte >= 0xC2 (no overlong encodings)
- ``hllllll``: the 7-bit symbol carried by the escape
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# NUL, LF, CR, double quote, ampersand, backslash
DANGEROUS: tuple[int, ...] = (0, 10, 13, 34, 38, 92)

SHORTENED = 0b111

SYMBOL_BITS = 7
SYMBOL_MASK = 0x7F

LEAD_PREFIX = 0b11000010
LEAD_MASK = 0b11100010
CONTINUATION_PREFIX = 0b10000000
CONTINUATION_MASK = 0b11000000


@dataclass(frozen=True)
class Alphabet:
    """Mapping between 7-bit symbols and their output bytes.

    Safe symbols map to themselves (a single byte below 0x80). Dangerous
    symbols have no single-byte form and are addressed by escape index.

    Example:
        >>> ALPHABET.is_dangerous(10)
        True
        >>> ALPHABET.escape(ALPHABET.escape_index(10), 65)
        b'\\xc7\\x81'
    """

    dangerous: tuple[int, ...] = DANGEROUS
    _index: Mapping[int, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.dangerous)) != len(self.dangerous):
            raise ValueError(f"Dangerous symbols must be unique, got {self.dangerous}")
        if len(self.dangerous) > SHORTENED:
            raise ValueError(f"At most {SHORTENED} dangerous symbols fit the escape index")
        for symbol in self.dangerous:
            if not 0 <= symbol <= SYMBOL_MASK:
                raise ValueError(f"Dangerous symbol must be 0-127, got {symbol}")
        index = MappingProxyType({symbol: i for i, symbol in enumerate(self.dangerous)})
        object.__setattr__(self, "_index", index)

    def is_dangerous(self, symbol: int) -> bool:
        return symbol in self._index

    def escape_index(self, symbol: int) -> int:
        """Return the escape index of a dangerous symbol.

        Raises:
            KeyError: If the symbol is safe
        """
        return self._index[symbol]

    def dangerous_symbol(self, index: int) -> int:
        """Return the dangerous symbol assigned to an escape index.

        Raises:
            IndexError: If no symbol is assigned to the index
        """
        if not 0 <= index < len(self.dangerous):
            raise IndexError(f"No dangerous symbol for escape index {index}")
        return self.dangerous[index]

    def literal(self, symbol: int) -> int:
        """Return the single output byte for a safe symbol."""
        return symbol

    def escape(self, index: int, payload: int) -> bytes:
        """Build the two-byte escape carrying ``payload`` under ``index``."""
        lead = LEAD_PREFIX | (index << 2) | (payload >> 6)
        continuation = CONTINUATION_PREFIX | (payload & 0b00111111)
        return bytes((lead, continuation))

    @staticmethod
    def is_escape_lead(byte: int) -> bool:
        return byte & LEAD_MASK == LEAD_PREFIX

    @staticmethod
    def is_continuation(byte: int) -> bool:
        return byte & CONTINUATION_MASK == CONTINUATION_PREFIX

    @staticmethod
    def split_escape(lead: int, continuation: int) -> tuple[int, int]:
        """Split an escape into ``(index, payload)``."""
        index = (lead >> 2) & 0b111
        payload = ((lead & 1) << 6) | (continuation & 0b00111111)
        return index, payload


ALPHABET = Alphabet()
