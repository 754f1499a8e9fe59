"""Fixed-width integer decoder.

This module provides the decode functions that convert a 2- or 4-byte
sequence into a Python integer under a selectable byte order.
"""

from __future__ import annotations

from typing import Iterable, Union

from ..byteorder import ByteOrder, OrderLike, select_order
from ..exceptions import DecodeError, InvalidLengthError
from ..kinds import INT16, INT32, UINT16, UINT32, IntKind, get_kind

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def as_bytes(data: BytesLike) -> bytes:
    """Normalize a byte sequence to immutable bytes.

    Args:
        data: bytes, bytearray, memoryview, or an iterable of ints in 0-255

    Returns:
        The same bytes as an immutable ``bytes`` object

    Raises:
        DecodeError: If data is not a byte sequence
    """
    if isinstance(data, bytes):
        return data
    # bytes(int) would build a zero-filled buffer of that length
    if isinstance(data, (int, str)):
        raise DecodeError(f"Expected a byte sequence, got {type(data).__name__}")
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Invalid byte sequence: {e}") from e


def decode_unsigned(data: bytes, kind: IntKind, order: ByteOrder) -> int:
    """Interpret exactly ``kind.size`` bytes as an unsigned integer.

    Raises:
        InvalidLengthError: If len(data) != kind.size
    """
    if len(data) != kind.size:
        raise InvalidLengthError(kind.size, len(data), kind.name)
    return int.from_bytes(data, order.value, signed=False)


def to_signed(unsigned: int, bits: int) -> int:
    """Reinterpret an unsigned value of the given width as two's complement."""
    if unsigned >= 1 << (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def decode(
    data: BytesLike,
    kind: IntKind | str,
    order: OrderLike | None = None,
    *,
    endianness: OrderLike | None = None,
) -> int:
    """Decode a fixed-width integer of any supported kind.

    Args:
        data: Byte sequence of exactly ``kind.size`` bytes
        kind: IntKind or kind name ("uint16", "i32", ...)
        order: Byte order, little-endian by default
        endianness: Alias for ``order``

    Returns:
        Decoded integer within the kind's bounds

    Raises:
        DecodeError: If data is not a byte sequence
        InvalidLengthError: If data has the wrong length
        ByteOrderError: If the order is invalid
        KindError: If the kind name is unknown

    Example:
        >>> decode(b"\\x00\\x80", "int16")
        -32768
        >>> decode([1, 0], "u16", "big")
        256
    """
    resolved_kind = get_kind(kind)
    resolved_order = select_order(order, endianness)
    unsigned = decode_unsigned(as_bytes(data), resolved_kind, resolved_order)
    if resolved_kind.signed:
        return to_signed(unsigned, resolved_kind.bits)
    return unsigned


def decode_u16(
    data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> int:
    """Decode 2 bytes as an unsigned 16-bit integer (0 to 65,535).

    Little-endian treats data[0] as the least significant byte, big-endian as
    the most significant.

    Raises:
        InvalidLengthError: If data is not exactly 2 bytes

    Example:
        >>> decode_u16(b"\\xff\\xff")
        65535
        >>> decode_u16(b"\\x01\\x00", "big")
        256
    """
    return decode(data, UINT16, order, endianness=endianness)


def decode_i16(
    data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> int:
    """Decode 2 bytes as a signed 16-bit integer (-32,768 to 32,767).

    Example:
        >>> decode_i16(b"\\x00\\x80")
        -32768
        >>> decode_i16(b"\\xff\\x7f", "big")
        -129
    """
    return decode(data, INT16, order, endianness=endianness)


def decode_u32(
    data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> int:
    """Decode 4 bytes as an unsigned 32-bit integer (0 to 4,294,967,295).

    Byte order applies across all 4 bytes, not per 16-bit half.

    Example:
        >>> decode_u32(b"\\x01\\x00\\x00\\x00", "big")
        16777216
    """
    return decode(data, UINT32, order, endianness=endianness)


def decode_i32(
    data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> int:
    """Decode 4 bytes as a signed 32-bit integer (-2,147,483,648 to 2,147,483,647).

    Example:
        >>> decode_i32(b"\\xff\\xff\\xff\\x7f")
        2147483647
    """
    return decode(data, INT32, order, endianness=endianness)


# Long-form names
decode_uint16 = decode_u16
decode_int16 = decode_i16
decode_uint32 = decode_u32
decode_int32 = decode_i32
