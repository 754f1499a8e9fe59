"""FixedWidthCodec: the decode/encode operations bound to a default byte order."""

from __future__ import annotations

from ..byteorder import ByteOrder, OrderLike, select_order
from ..config import CodecConfig
from ..kinds import INT16, INT32, UINT16, UINT32, IntKind
from . import decoder, encoder
from .decoder import BytesLike


class FixedWidthCodec:
    """Converts between fixed-width byte sequences and integers.

    The codec holds only an immutable CodecConfig, so a single instance can be
    shared freely between threads. Every method accepts an optional ``order``
    (or ``endianness``) that overrides the configured default for that call.

    Example:
        >>> codec = FixedWidthCodec(order="big")
        >>> codec.decode_u16(b"\\x01\\x00")
        256
        >>> codec.encode_i16(-2)
        b'\\xff\\xfe'
        >>> codec.encode_i16(-2, "little")
        b'\\xfe\\xff'
    """

    def __init__(
        self,
        config: CodecConfig | None = None,
        *,
        order: OrderLike | None = None,
        endianness: OrderLike | None = None,
    ) -> None:
        """Initialize the codec.

        Args:
            config: Codec configuration (default: little-endian)
            order: Default byte order, overriding ``config.order``
            endianness: Alias for ``order``

        Raises:
            ByteOrderError: If order/endianness is invalid or contradictory
        """
        if config is None:
            config = CodecConfig()
        if order is not None or endianness is not None:
            config = config.model_copy(update={"order": select_order(order, endianness)})
        self._config = config

    @classmethod
    def little(cls) -> FixedWidthCodec:
        return cls(order=ByteOrder.LITTLE)

    @classmethod
    def big(cls) -> FixedWidthCodec:
        return cls(order=ByteOrder.BIG)

    @property
    def config(self) -> CodecConfig:
        return self._config

    @property
    def order(self) -> ByteOrder:
        return self._config.order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order.value!r})"

    def _order(self, order: OrderLike | None, endianness: OrderLike | None) -> ByteOrder:
        return select_order(order, endianness, default=self._config.order)

    def decode(
        self,
        data: BytesLike,
        kind: IntKind | str,
        order: OrderLike | None = None,
        *,
        endianness: OrderLike | None = None,
    ) -> int:
        """Decode data as the given kind. See :func:`bitconverter.codec.decoder.decode`."""
        return decoder.decode(data, kind, self._order(order, endianness))

    def encode(
        self,
        value: int,
        kind: IntKind | str,
        order: OrderLike | None = None,
        *,
        endianness: OrderLike | None = None,
    ) -> bytes:
        """Encode value as the given kind. See :func:`bitconverter.codec.encoder.encode`."""
        return encoder.encode(value, kind, self._order(order, endianness))

    def decode_u16(
        self, data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> int:
        return self.decode(data, UINT16, order, endianness=endianness)

    def decode_i16(
        self, data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> int:
        return self.decode(data, INT16, order, endianness=endianness)

    def decode_u32(
        self, data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> int:
        return self.decode(data, UINT32, order, endianness=endianness)

    def decode_i32(
        self, data: BytesLike, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> int:
        return self.decode(data, INT32, order, endianness=endianness)

    def encode_u16(
        self, value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> bytes:
        return self.encode(value, UINT16, order, endianness=endianness)

    def encode_i16(
        self, value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> bytes:
        return self.encode(value, INT16, order, endianness=endianness)

    def encode_u32(
        self, value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> bytes:
        return self.encode(value, UINT32, order, endianness=endianness)

    def encode_i32(
        self, value: int, order: OrderLike | None = None, *, endianness: OrderLike | None = None
    ) -> bytes:
        return self.encode(value, INT32, order, endianness=endianness)
