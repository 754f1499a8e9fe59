"""bitconverter: Fixed-Width Integer Codec

A Python library for converting between fixed-width byte sequences and
integers, for protocol and file-format code that needs exact, bit-precise
numeric encoding.

Key Features:
- 16-bit and 32-bit integers, signed and unsigned
- Little-endian (default) or big-endian byte order on every call
- Strict length and range checks with typed errors
- Pure Python, stateless, thread-safe

Quick Start:
    >>> from bitconverter import decode_u16, encode_u16
    >>> decode_u16(b"\\x01\\x00")
    1
    >>> decode_u16(b"\\x01\\x00", "big")
    256
    >>> encode_u16(256, endianness="big")
    b'\\x01\\x00'
"""

from __future__ import annotations

from .byteorder import DEFAULT_ORDER, ByteOrder, resolve_order
from .codec import (
    FixedWidthCodec,
    decode,
    decode_i16,
    decode_i32,
    decode_int16,
    decode_int32,
    decode_u16,
    decode_u32,
    decode_uint16,
    decode_uint32,
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
from .config import CodecConfig
from .exceptions import (
    BitConverterError,
    ByteOrderError,
    DecodeError,
    EncodeError,
    InvalidLength,
    InvalidLengthError,
    KindError,
    OutOfRange,
    OutOfRangeError,
)
from .kinds import INT16, INT32, KINDS, UINT16, UINT32, IntKind, get_kind

__version__ = "0.1.0"

__all__ = [
    # Core API
    "decode_u16",
    "decode_i16",
    "decode_u32",
    "decode_i32",
    "encode_u16",
    "encode_i16",
    "encode_u32",
    "encode_i32",
    "decode",
    "encode",
    "FixedWidthCodec",
    # Long-form names
    "decode_uint16",
    "decode_int16",
    "decode_uint32",
    "decode_int32",
    "encode_uint16",
    "encode_int16",
    "encode_uint32",
    "encode_int32",
    # Byte order and kinds
    "ByteOrder",
    "DEFAULT_ORDER",
    "resolve_order",
    "IntKind",
    "UINT16",
    "INT16",
    "UINT32",
    "INT32",
    "KINDS",
    "get_kind",
    # Configuration
    "CodecConfig",
    # Exceptions
    "BitConverterError",
    "DecodeError",
    "EncodeError",
    "InvalidLengthError",
    "InvalidLength",
    "OutOfRangeError",
    "OutOfRange",
    "ByteOrderError",
    "KindError",
    # Version
    "__version__",
]
