"""Unit tests for bit extraction and reassembly."""

from __future__ import annotations

import pytest

from base122.codec.bitpack import BitAccumulator, BitExtractor
from base122.exceptions import InconsistentPaddingError


class TestBitExtractor:
    """Test BitExtractor functionality."""

    def test_empty_input(self) -> None:
        """Test that empty input yields no symbols."""
        extractor = BitExtractor(b"")

        assert list(extractor) == []
        assert extractor.final_bits is None
        assert extractor.read() is None

    def test_single_byte(self) -> None:
        """Test 'A' (0b01000001) splits into two symbols."""
        extractor = BitExtractor(b"A")

        assert list(extractor) == [0b0100000, 0b1000000]
        assert extractor.final_bits == 1

    def test_two_bytes(self) -> None:
        """Test symbols straddling a byte boundary."""
        extractor = BitExtractor(b"\xaa\xcc")  # 10101010 11001100

        assert list(extractor) == [0b1010101, 0b0110011, 0b0000000]
        assert extractor.final_bits == 2

    def test_seven_bytes_fill_exactly(self) -> None:
        """Test 56 bits yield 8 full symbols with no padding."""
        extractor = BitExtractor(b"\xff" * 7)

        assert list(extractor) == [127] * 8
        assert extractor.final_bits == 7

    def test_leading_zeros_preserved(self) -> None:
        """Test that zero bytes produce zero symbols rather than being skipped."""
        extractor = BitExtractor(b"\x00\x00\x01")

        # 24 bits -> 4 symbols, last has 3 valid bits
        assert list(extractor) == [0, 0, 0, 0b0010000]
        assert extractor.final_bits == 3

    def test_final_bits_unknown_until_end(self) -> None:
        """Test final_bits is only set once the last symbol is read."""
        extractor = BitExtractor(b"AB")
        extractor.read()

        assert extractor.final_bits is None

    def test_symbols_remaining(self) -> None:
        """Test remaining symbol count while reading."""
        extractor = BitExtractor(b"Hello")  # 40 bits -> 6 symbols

        assert extractor.symbols_remaining() == 6
        extractor.read()
        extractor.read()
        assert extractor.symbols_remaining() == 4
        list(extractor)
        assert extractor.symbols_remaining() == 0

    def test_accepts_bytearray(self) -> None:
        """Test bytes-like input is accepted."""
        assert list(BitExtractor(bytearray(b"A"))) == list(BitExtractor(b"A"))


class TestBitAccumulator:
    """Test BitAccumulator functionality."""

    def test_empty(self) -> None:
        """Test finishing with nothing pushed."""
        accumulator = BitAccumulator()

        assert accumulator.finish() == b""
        assert accumulator.symbol_count == 0

    def test_reassemble_single_byte(self) -> None:
        """Test two symbols reassemble into one byte."""
        accumulator = BitAccumulator()
        accumulator.push(0b0100000)
        accumulator.push(0b1000000)

        assert accumulator.pending_bits() == 6
        assert accumulator.finish() == b"A"

    def test_reassemble_two_bytes(self) -> None:
        """Test bits carried across byte boundaries."""
        accumulator = BitAccumulator()
        for symbol in (0b1010101, 0b0110011, 0b0000000):
            accumulator.push(symbol)

        assert accumulator.pending_bits() == 5
        assert accumulator.finish() == b"\xaa\xcc"

    def test_push_bounds(self) -> None:
        """Test symbol range checking."""
        accumulator = BitAccumulator()

        with pytest.raises(ValueError, match="0-127"):
            accumulator.push(128)

        with pytest.raises(ValueError, match="0-127"):
            accumulator.push(-1)

    def test_spurious_symbol(self) -> None:
        """Test a whole leftover symbol is inconsistent padding."""
        accumulator = BitAccumulator()
        accumulator.push(0)

        with pytest.raises(InconsistentPaddingError, match="at most 6"):
            accumulator.finish()

    def test_spurious_symbol_lenient(self) -> None:
        """Test a whole leftover symbol is dropped when not strict."""
        accumulator = BitAccumulator()
        accumulator.push(0)

        assert accumulator.finish(strict=False) == b""

    def test_nonzero_padding(self) -> None:
        """Test non-zero padding bits are rejected."""
        accumulator = BitAccumulator()
        accumulator.push(0b0100000)
        accumulator.push(0b1000001)

        with pytest.raises(InconsistentPaddingError, match="not zero"):
            accumulator.finish()

        assert accumulator.finish(strict=False) == b"A"

    def test_extractor_roundtrip(self) -> None:
        """Test accumulator inverts the extractor."""
        data = bytes(range(256))
        accumulator = BitAccumulator()
        for symbol in BitExtractor(data):
            accumulator.push(symbol)

        assert accumulator.finish() == data
