"""Exception hierarchy for bitconverter.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BitConverterError for easy catching of any
bitconverter-specific error.
"""

from __future__ import annotations


class BitConverterError(Exception):
    """Base exception for all bitconverter errors."""

    pass


class DecodeError(BitConverterError):
    """Raised when a byte sequence cannot be decoded.

    Examples:
        - Input is not a byte sequence (an int, a str)
        - Input contains values outside 0-255
        - Input has the wrong length for the requested width
    """

    pass


class EncodeError(BitConverterError):
    """Raised when an integer cannot be encoded.

    Examples:
        - Value is not an integer (float, str, bool)
        - Value is outside the range of the requested kind
    """

    pass


class InvalidLengthError(DecodeError):
    """Raised when a byte sequence length does not match the declared width.

    Attributes:
        expected: Required length in bytes (2 or 4)
        actual: Length of the rejected input
    """

    def __init__(self, expected: int, actual: int, kind_name: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.kind_name = kind_name
        target = f" for {kind_name}" if kind_name else ""
        super().__init__(f"Expected exactly {expected} bytes{target}, got {actual} bytes")


class OutOfRangeError(EncodeError):
    """Raised when a value falls outside the bounds of its kind.

    Attributes:
        value: The rejected value
        min_value: Smallest accepted value (inclusive)
        max_value: Largest accepted value (inclusive)
    """

    def __init__(
        self, value: int, min_value: int, max_value: int, kind_name: str | None = None
    ) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        self.kind_name = kind_name
        target = f" {kind_name}" if kind_name else ""
        super().__init__(
            f"Value {value} out of{target} range ({min_value} to {max_value})"
        )


class ByteOrderError(BitConverterError):
    """Raised when a byte order argument is not recognized or is contradictory."""

    pass


class KindError(BitConverterError):
    """Raised when an integer kind name is not recognized."""

    pass


# Short names used in protocol documentation
InvalidLength = InvalidLengthError
OutOfRange = OutOfRangeError
