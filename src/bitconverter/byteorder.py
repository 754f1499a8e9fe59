"""Byte order selection.

Little-endian stores the least significant byte first; big-endian
("network byte order") stores the most significant byte first.
"""

from __future__ import annotations

import enum
from typing import Union

from .exceptions import ByteOrderError


class ByteOrder(str, enum.Enum):
    """Byte order of a fixed-width integer.

    The values match the ``byteorder`` argument of ``int.from_bytes`` and
    ``int.to_bytes``.
    """

    LITTLE = "little"
    BIG = "big"


DEFAULT_ORDER = ByteOrder.LITTLE

OrderLike = Union[ByteOrder, str]


def resolve_order(order: OrderLike | None = None) -> ByteOrder:
    """Coerce an order argument to a ByteOrder.

    Args:
        order: ByteOrder member, "little"/"big" (case-insensitive), or None
            for the default (little-endian)

    Returns:
        Resolved ByteOrder

    Raises:
        ByteOrderError: If the order is not recognized

    Example:
        >>> resolve_order("BIG")
        <ByteOrder.BIG: 'big'>
        >>> resolve_order(None)
        <ByteOrder.LITTLE: 'little'>
    """
    if order is None:
        return DEFAULT_ORDER
    if isinstance(order, ByteOrder):
        return order
    if isinstance(order, str):
        try:
            return ByteOrder(order.strip().lower())
        except ValueError:
            pass
    raise ByteOrderError(f"Invalid byte order: {order!r}. Must be 'little' or 'big'")


def select_order(
    order: OrderLike | None = None,
    endianness: OrderLike | None = None,
    default: ByteOrder = DEFAULT_ORDER,
) -> ByteOrder:
    """Pick the byte order from an ``order`` argument and its ``endianness`` alias.

    Raises:
        ByteOrderError: If either value is invalid, or both are given and disagree
    """
    if order is None and endianness is None:
        return default
    if endianness is None:
        return resolve_order(order)
    if order is None:
        return resolve_order(endianness)

    resolved = resolve_order(order)
    if resolve_order(endianness) is not resolved:
        raise ByteOrderError(
            f"Conflicting byte order arguments: order={order!r}, endianness={endianness!r}"
        )
    return resolved
