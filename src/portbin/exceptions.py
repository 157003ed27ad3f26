"""Exception hierarchy for portbin.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PortbinError for easy catching of any portbin-specific error.
I/O failures from sinks and sources are not wrapped; they propagate as OSError.
"""

from __future__ import annotations


class PortbinError(Exception):
    """Base exception for all portbin errors."""

    pass


class SchemaError(PortbinError):
    """Raised when a record schema is invalid.

    Examples:
        - Field annotated with a type other than Int32 or Float32
        - Record class with no fields
    """

    pass


class EncodeError(PortbinError):
    """Raised when encoding a value or record fails.

    Examples:
        - Integer outside the signed 32-bit range
        - Field type mismatch (e.g. bool or str where int32 is expected)
    """

    pass


class DecodeError(PortbinError):
    """Raised when decoding binary data fails.

    Examples:
        - Trailing bytes after a fixed-size value
        - Decoded fields rejected by the record model
    """

    pass


class TruncatedInputError(DecodeError):
    """Raised when a source yields fewer bytes than the format requires.

    Attributes:
        needed: Number of bytes the read required
        available: Number of bytes that were actually available
    """

    def __init__(self, needed: int, available: int, what: str = "data") -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input while reading {what}: need {needed} bytes, have {available}"
        )
