#!/usr/bin/env python3
"""Basic usage example for bitconverter.

This example demonstrates:
1. Decoding 16- and 32-bit integers in both byte orders
2. Encoding integers back to bytes
3. Using a FixedWidthCodec configured for network byte order
4. Handling length and range errors
"""

from __future__ import annotations

from bitconverter import (
    CodecConfig,
    FixedWidthCodec,
    InvalidLengthError,
    OutOfRangeError,
    decode_i16,
    decode_u16,
    decode_u32,
    encode_i32,
    encode_u16,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bitconverter Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Decoding...")
    print(f"   decode_u16([1, 0])          = {decode_u16([1, 0])}")
    print(f"   decode_u16([1, 0], 'big')   = {decode_u16([1, 0], 'big')}")
    print(f"   decode_i16([0, 128])        = {decode_i16([0, 128])}")
    print(f"   decode_u32([255] * 4)       = {decode_u32([255] * 4)}")
    print()

    print("2. Encoding...")
    print(f"   encode_u16(256, 'big')      = {encode_u16(256, 'big').hex()}")
    print(f"   encode_i32(-2)              = {encode_i32(-2).hex()}")
    print()

    print("3. Network byte order codec...")
    codec = FixedWidthCodec(CodecConfig(endianness="big"))
    header = codec.encode_u16(0xCAFE) + codec.encode_u32(1024)
    print(f"   header bytes: {header.hex()}")
    print(f"   magic: {codec.decode_u16(header[:2]):#06x}, length: {codec.decode_u32(header[2:])}")
    print()

    print("4. Errors...")
    try:
        decode_u16(b"\x01\x00\x00")
    except InvalidLengthError as e:
        print(f"   InvalidLengthError: {e}")
    try:
        encode_u16(65536)
    except OutOfRangeError as e:
        print(f"   OutOfRangeError: {e}")


if __name__ == "__main__":
    main()
