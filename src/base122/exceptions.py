"""Exception hierarchy for base122.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from Base122Error for easy catching of any base122-specific error.
"""

from __future__ import annotations

from typing import Optional


class Base122Error(Exception):
    """Base exception for all base122 errors."""

    pass


class EncodeError(Base122Error):
    """Raised when the input to encode() cannot be treated as bytes.

    Examples:
        - A str passed where bytes were expected
        - An int or other non buffer-protocol object
    """

    pass


class DecodeError(Base122Error):
    """Raised when decoding Base122 text fails.

    Attributes:
        position: Byte offset into the encoded input where the problem was
            detected, or None if it applies to the input as a whole.
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class TruncatedEscapeError(DecodeError):
    """An escape lead byte was the last byte of the input."""

    pass


class MalformedContinuationError(DecodeError):
    """The byte following an escape lead is not a valid continuation.

    Examples:
        - Continuation byte does not match 10xxxxxx
        - Shortened escape carrying a symbol outside the dangerous set (strict mode)
    """

    pass


class InconsistentPaddingError(DecodeError):
    """The recovered bit count does not match a whole number of bytes.

    Examples:
        - A full spurious symbol left over after the last byte
        - Non-zero padding bits in the final symbol (strict mode)
    """

    pass


class UnexpectedTrailingDataError(DecodeError):
    """Bytes remain after the end of the symbol stream."""

    pass


class InvalidLeadByteError(DecodeError):
    """A byte is neither a single-byte symbol nor a valid escape lead.

    Examples:
        - Stray continuation byte (10xxxxxx)
        - Three or four byte UTF-8 lead
        - Escape lead with an unassigned escape index
    """

    pass
