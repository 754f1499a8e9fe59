"""Fixed-width integer encoder.

This module provides the encode functions that convert a Python integer into
a 2- or 4-byte sequence. They are the inverse of the decoder: for every valid
value ``v`` and order ``o``, ``decode_X(encode_X(v, o), o) == v``.
"""

from __future__ import annotations

from ..byteorder import OrderLike, select_order
from ..exceptions import EncodeError, OutOfRangeError
from ..kinds import INT16, INT32, UINT16, UINT32, IntKind, get_kind


def check_value(value: int, kind: IntKind) -> int:
    """Validate that value is an integer within the kind's bounds.

    Returns:
        The value, unchanged

    Raises:
        EncodeError: If value is not an int (bool is rejected too)
        OutOfRangeError: If value is outside [kind.min_value, kind.max_value]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError(f"{kind.name} requires an integer value, got {type(value).__name__}")
    if not kind.contains(value):
        raise OutOfRangeError(value, kind.min_value, kind.max_value, kind.name)
    return value


def to_unsigned(value: int, bits: int) -> int:
    """Two's complement bit pattern of value as an unsigned integer."""
    if value < 0:
        return (1 << bits) + value
    return value


def encode(
    value: int,
    kind: IntKind | str,
    order: OrderLike | None = None,
    *,
    endianness: OrderLike | None = None,
) -> bytes:
    """Encode an integer as a fixed-width byte sequence.

    Args:
        value: Integer within the kind's bounds
        kind: IntKind or kind name ("uint16", "i32", ...)
        order: Byte order, little-endian by default
        endianness: Alias for ``order``

    Returns:
        Exactly ``kind.size`` bytes

    Raises:
        EncodeError: If value is not an integer
        OutOfRangeError: If value is out of range (no clamping, no wraparound)
        ByteOrderError: If the order is invalid
        KindError: If the kind name is unknown

    Example:
        >>> encode(-1, "int16")
        b'\\xff\\xff'
        >>> encode(256, "u16", "big")
        b'\\x01\\x00'
    """
    resolved_kind = get_kind(kind)
    resolved_order = select_order(order, endianness)
    check_value(value, resolved_kind)
    unsigned = to_unsigned(value, resolved_kind.bits)
    return unsigned.to_bytes(resolved_kind.size, resolved_order.value, signed=False)


def encode_u16(
    value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> bytes:
    """Encode an unsigned 16-bit integer as 2 bytes.

    Raises:
        OutOfRangeError: If value is not in 0 to 65,535

    Example:
        >>> encode_u16(256, "big")
        b'\\x01\\x00'
    """
    return encode(value, UINT16, order, endianness=endianness)


def encode_i16(
    value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> bytes:
    """Encode a signed 16-bit integer as 2 bytes (two's complement)."""
    return encode(value, INT16, order, endianness=endianness)


def encode_u32(
    value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> bytes:
    """Encode an unsigned 32-bit integer as 4 bytes."""
    return encode(value, UINT32, order, endianness=endianness)


def encode_i32(
    value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
) -> bytes:
    """Encode a signed 32-bit integer as 4 bytes (two's complement).

    Example:
        >>> encode_i32(-2147483648)
        b'\\x00\\x00\\x00\\x80'
    """
    return encode(value, INT32, order, endianness=endianness)


# Long-form names
encode_uint16 = encode_u16
encode_int16 = encode_i16
encode_uint32 = encode_u32
encode_int32 = encode_i32
