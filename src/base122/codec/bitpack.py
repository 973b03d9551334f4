"""Bit-level packing and unpacking utilities.

This module converts between byte sequences and streams of 7-bit symbols.
All operations are deterministic and big-endian (most significant bit first).
"""

from __future__ import annotations

from typing import Iterator, Optional

from ..exceptions import InconsistentPaddingError
from .alphabet import SYMBOL_BITS, SYMBOL_MASK


class BitExtractor:
    """Reads successive 7-bit symbols out of a byte buffer.

    The last symbol is padded on the right (LSB side) with zero bits when the
    input bit length is not a multiple of 7. After the last symbol has been
    read, ``final_bits`` holds the number of valid bits it carries.

    Example:
        >>> extractor = BitExtractor(b"A")
        >>> list(extractor)
        [32, 64]
        >>> extractor.final_bits
        1
    """

    def __init__(self, data: bytes) -> None:
        """Initialize an extractor over the given data.

        Args:
            data: Byte buffer to split into symbols
        """
        self._data = bytes(data)
        self._index = 0
        self._buffer = 0  # at most 14 pending bits
        self._pending = 0
        self._final_bits: Optional[int] = None

    def __iter__(self) -> Iterator[int]:
        while True:
            symbol = self.read()
            if symbol is None:
                return
            yield symbol

    def read(self) -> Optional[int]:
        """Read the next symbol.

        Returns:
            Symbol value (0-127), or None once the input is exhausted
        """
        while self._pending < SYMBOL_BITS and self._index < len(self._data):
            self._buffer = (self._buffer << 8) | self._data[self._index]
            self._index += 1
            self._pending += 8

        if self._pending == 0:
            return None

        if self._pending >= SYMBOL_BITS:
            self._pending -= SYMBOL_BITS
            symbol = (self._buffer >> self._pending) & SYMBOL_MASK
            self._buffer &= (1 << self._pending) - 1
            if self._pending == 0 and self._index == len(self._data):
                self._final_bits = SYMBOL_BITS
            return symbol

        # Final partial symbol, zero-filled on the right
        valid = self._pending
        symbol = (self._buffer << (SYMBOL_BITS - valid)) & SYMBOL_MASK
        self._buffer = 0
        self._pending = 0
        self._final_bits = valid
        return symbol

    @property
    def final_bits(self) -> Optional[int]:
        """Valid bits in the last symbol (1-7), or None until it has been read."""
        return self._final_bits

    def symbols_remaining(self) -> int:
        """Return the number of symbols not yet read."""
        bits = self._pending + 8 * (len(self._data) - self._index)
        return -(-bits // SYMBOL_BITS)


class BitAccumulator:
    """Reassembles bytes from a stream of 7-bit symbols.

    Each pushed symbol contributes 7 bits; a byte is emitted whenever 8 bits
    are available. Whatever remains at the end is padding.

    Example:
        >>> accumulator = BitAccumulator()
        >>> accumulator.push(32)
        >>> accumulator.push(64)
        >>> accumulator.finish()
        b'A'
    """

    def __init__(self) -> None:
        """Initialize an empty accumulator."""
        self._output = bytearray()
        self._buffer = 0  # at most 13 pending bits
        self._pending = 0
        self._symbols = 0

    def push(self, symbol: int) -> None:
        """Append the 7 bits of a symbol.

        Args:
            symbol: Symbol value (0-127)

        Raises:
            ValueError: If symbol is outside 0-127
        """
        if not 0 <= symbol <= SYMBOL_MASK:
            raise ValueError(f"Symbol must be 0-127, got {symbol}")

        self._buffer = (self._buffer << SYMBOL_BITS) | symbol
        self._pending += SYMBOL_BITS
        self._symbols += 1
        if self._pending >= 8:
            self._pending -= 8
            self._output.append(self._buffer >> self._pending)
            self._buffer &= (1 << self._pending) - 1

    @property
    def symbol_count(self) -> int:
        """Number of symbols pushed so far."""
        return self._symbols

    def pending_bits(self) -> int:
        """Return the number of bits not yet emitted as a byte."""
        return self._pending

    def finish(self, strict: bool = True) -> bytes:
        """Discard the trailing padding and return the reassembled bytes.

        Args:
            strict: If True, padding bits must be zero

        Returns:
            Reassembled bytes

        Raises:
            InconsistentPaddingError: If a whole spurious symbol is left over,
                or (strict) the padding bits are not zero
        """
        if strict:
            if self._pending >= SYMBOL_BITS:
                raise InconsistentPaddingError(
                    f"{self._symbols} symbols leave {self._pending} bits of padding "
                    f"(at most {SYMBOL_BITS - 1} allowed)"
                )
            if self._buffer:
                raise InconsistentPaddingError(
                    f"Padding bits are not zero: {self._buffer:0{self._pending}b}"
                )
        return bytes(self._output)
