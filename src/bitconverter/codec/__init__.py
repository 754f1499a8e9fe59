"""Fixed-width integer codec for bitconverter.

This module provides decoding and encoding of 16- and 32-bit integers,
signed and unsigned, in little-endian or big-endian byte order.
"""

from __future__ import annotations

from .decoder import (
    decode,
    decode_i16,
    decode_i32,
    decode_int16,
    decode_int32,
    decode_u16,
    decode_u32,
    decode_uint16,
    decode_uint32,
)
from .encoder import (
    encode,
    encode_i16,
    encode_i32,
    encode_int16,
    encode_int32,
    encode_u16,
    encode_u32,
    encode_uint16,
    encode_uint32,
)
from .fixed import FixedWidthCodec

__all__ = [
    "FixedWidthCodec",
    "decode",
    "encode",
    "decode_u16",
    "decode_i16",
    "decode_u32",
    "decode_i32",
    "encode_u16",
    "encode_i16",
    "encode_u32",
    "encode_i32",
    "decode_uint16",
    "decode_int16",
    "decode_uint32",
    "decode_int32",
    "encode_uint16",
    "encode_int16",
    "encode_uint32",
    "encode_int32",
]
