"""Unit tests for CodecConfig and FixedWidthCodec."""

from __future__ import annotations

import threading

import pytest
from pydantic import ValidationError

from bitconverter import (
    ByteOrder,
    ByteOrderError,
    CodecConfig,
    FixedWidthCodec,
    InvalidLengthError,
    OutOfRangeError,
)


class TestCodecConfig:
    """Test codec configuration."""

    def test_default(self) -> None:
        """Test default little-endian config."""
        assert CodecConfig().order is ByteOrder.LITTLE

    def test_order_and_alias(self) -> None:
        """Test populating by field name and by the endianness alias."""
        assert CodecConfig(order="big").order is ByteOrder.BIG
        assert CodecConfig(endianness="BIG").order is ByteOrder.BIG
        assert CodecConfig(order=ByteOrder.LITTLE).order is ByteOrder.LITTLE

    def test_invalid_order(self) -> None:
        """Test invalid order values."""
        with pytest.raises(ValidationError, match="Invalid byte order"):
            CodecConfig(order="middle")

    def test_extra_forbidden(self) -> None:
        """Test that unknown options are rejected."""
        with pytest.raises(ValidationError):
            CodecConfig(width=16)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test that config is immutable."""
        config = CodecConfig()
        with pytest.raises(ValidationError):
            config.order = ByteOrder.BIG  # type: ignore[misc]


class TestFixedWidthCodec:
    """Test codec instances."""

    def test_default_order(self) -> None:
        """Test a default codec is little-endian."""
        codec = FixedWidthCodec()
        assert codec.order is ByteOrder.LITTLE
        assert codec.decode_u16(b"\x01\x00") == 1
        assert codec.encode_u16(1) == b"\x01\x00"

    def test_configured_order(self, big_codec: FixedWidthCodec) -> None:
        """Test that the configured order applies to every method."""
        assert big_codec.decode_u16(b"\x01\x00") == 256
        assert big_codec.decode_i16(b"\xff\x7f") == -129
        assert big_codec.decode_u32(b"\x01\x00\x00\x00") == 16777216
        assert big_codec.decode_i32(b"\xff\xff\xff\x7f") == -129
        assert big_codec.encode_u16(256) == b"\x01\x00"
        assert big_codec.encode_i16(-2) == b"\xff\xfe"
        assert big_codec.encode_u32(1) == b"\x00\x00\x00\x01"
        assert big_codec.encode_i32(-2) == b"\xff\xff\xff\xfe"

    def test_per_call_override(self, big_codec: FixedWidthCodec) -> None:
        """Test overriding the configured order for one call."""
        assert big_codec.decode_u16(b"\x01\x00", "little") == 1
        assert big_codec.encode_i16(-2, endianness="little") == b"\xfe\xff"
        assert big_codec.order is ByteOrder.BIG

    def test_constructors(self) -> None:
        """Test the various ways of choosing the default order."""
        assert FixedWidthCodec.little().order is ByteOrder.LITTLE
        assert FixedWidthCodec(order="big").order is ByteOrder.BIG
        assert FixedWidthCodec(endianness="big").order is ByteOrder.BIG
        assert FixedWidthCodec(CodecConfig(endianness="big")).order is ByteOrder.BIG
        assert FixedWidthCodec(CodecConfig(order="big"), order="little").order is ByteOrder.LITTLE

    def test_conflicting_constructor_orders(self) -> None:
        """Test conflicting order/endianness arguments."""
        with pytest.raises(ByteOrderError):
            FixedWidthCodec(order="big", endianness="little")

    def test_generic_methods(self) -> None:
        """Test decode()/encode() with kind names."""
        codec = FixedWidthCodec()
        assert codec.decode(b"\x00\x80", "i16") == -32768
        assert codec.encode(-32768, "int16") == b"\x00\x80"

    def test_errors_propagate(self, big_codec: FixedWidthCodec) -> None:
        """Test that typed errors reach the caller."""
        with pytest.raises(InvalidLengthError):
            big_codec.decode_u32(b"\x00\x00")

        with pytest.raises(OutOfRangeError):
            big_codec.encode_i16(40000)

    def test_repr(self, big_codec: FixedWidthCodec) -> None:
        """Test repr."""
        assert repr(big_codec) == "FixedWidthCodec(order='big')"

    def test_shared_between_threads(self, big_codec: FixedWidthCodec) -> None:
        """Test concurrent use of one codec instance."""
        errors: list[int] = []

        def worker(offset: int) -> None:
            for value in range(offset, 65536, 64):
                if big_codec.decode_u16(big_codec.encode_u16(value)) != value:
                    errors.append(value)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
