"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bitconverter import (
    KINDS,
    ByteOrder,
    IntKind,
    InvalidLengthError,
    OutOfRangeError,
    decode,
    encode,
)

orders = st.sampled_from(list(ByteOrder))


@st.composite
def kind_and_value(draw: st.DrawFn) -> tuple[IntKind, int]:
    kind = draw(st.sampled_from(KINDS))
    value = draw(st.integers(min_value=kind.min_value, max_value=kind.max_value))
    return kind, value


class TestCodecProperties:
    """Property-based tests for decode/encode."""

    @given(pair=kind_and_value(), order=orders)
    def test_encode_decode_roundtrip(self, pair: tuple[IntKind, int], order: ByteOrder) -> None:
        """Test encode/decode is invertible."""
        kind, value = pair
        data = encode(value, kind, order)

        assert len(data) == kind.size
        assert decode(data, kind, order) == value

    @given(kind=st.sampled_from(KINDS), data=st.data())
    def test_byte_order_symmetry(self, kind: IntKind, data: st.DataObject) -> None:
        """Test little-endian decode equals big-endian decode of reversed bytes."""
        raw = data.draw(st.binary(min_size=kind.size, max_size=kind.size))

        assert decode(raw, kind, ByteOrder.LITTLE) == decode(raw[::-1], kind, ByteOrder.BIG)

    @given(kind=st.sampled_from(KINDS), raw=st.binary(max_size=12), order=orders)
    def test_decode_in_bounds_or_rejected(
        self, kind: IntKind, raw: bytes, order: ByteOrder
    ) -> None:
        """Test decode either rejects the length or returns an in-range value."""
        if len(raw) != kind.size:
            with pytest.raises(InvalidLengthError):
                decode(raw, kind, order)
        else:
            assert kind.contains(decode(raw, kind, order))

    @given(kind=st.sampled_from(KINDS), offset=st.integers(min_value=1, max_value=1 << 40))
    def test_out_of_range_rejected(self, kind: IntKind, offset: int) -> None:
        """Test values just past either bound are rejected."""
        with pytest.raises(OutOfRangeError):
            encode(kind.max_value + offset, kind)

        with pytest.raises(OutOfRangeError):
            encode(kind.min_value - offset, kind)

    @given(pair=kind_and_value())
    def test_signed_matches_unsigned_pattern(self, pair: tuple[IntKind, int]) -> None:
        """Test signed encodings equal the unsigned encoding of the two's complement pattern."""
        kind, value = pair
        if not kind.signed:
            return
        unsigned_kind = next(k for k in KINDS if k.bits == kind.bits and not k.signed)

        assert encode(value, kind) == encode(value % (1 << kind.bits), unsigned_kind)
