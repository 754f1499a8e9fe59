"""Main CLI entry point for bitconverter."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..byteorder import ByteOrder
from ..codec import decode, encode
from ..exceptions import BitConverterError
from ..kinds import KINDS


def parse_byte_tokens(tokens: list[str]) -> list[int]:
    """Parse command-line byte tokens.

    Accepts one value per token in decimal ("255") or prefixed hex ("0xff"),
    or a single unprefixed hex string of two or more bytes ("0100").

    Raises:
        ValueError: If a token is not a number
    """
    if len(tokens) == 1:
        token = tokens[0]
        if not token.lower().startswith("0x") and len(token) >= 4 and len(token) % 2 == 0:
            return list(bytes.fromhex(token))
    return [int(token, 0) for token in tokens]


def format_bytes(data: bytes) -> str:
    return " ".join(f"{byte:02x}" for byte in data)


def print_kinds() -> None:
    print("|" * 7, "bitconverter: Fixed-Width Integer Codec", "|" * 7)
    print(f"{'Kind':<8} {'Short':<6} {'Bytes':>5} {'Min':>14} {'Max':>14}")
    for kind in KINDS:
        print(
            f"{kind.name:<8} {kind.short_name:<6} {kind.size:>5} "
            f"{kind.min_value:>14} {kind.max_value:>14}"
        )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bitconverter CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="bitconverter",
        description="bitconverter: Fixed-Width Integer Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitconverter decode u16 1 0 --order big     Decode two bytes (prints 256)
  bitconverter decode i32 ffffff7f            Decode a hex string
  bitconverter encode i16 -2                  Encode a value (prints fe ff)
  bitconverter --kinds                        List supported kinds
        """,
    )

    parser.add_argument(
        "--kinds",
        action="store_true",
        help="List supported integer kinds and their ranges",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bitconverter {__version__}",
    )

    order_choices = [order.value for order in ByteOrder]
    subparsers = parser.add_subparsers(dest="command")

    decode_parser = subparsers.add_parser("decode", help="Decode bytes to an integer")
    decode_parser.add_argument("kind", help="Integer kind (u16, i16, u32, i32)")
    decode_parser.add_argument("bytes", nargs="+", help="Byte values or a hex string")
    decode_parser.add_argument("--order", "--endianness", choices=order_choices, default="little")

    encode_parser = subparsers.add_parser("encode", help="Encode an integer to bytes")
    encode_parser.add_argument("kind", help="Integer kind (u16, i16, u32, i32)")
    encode_parser.add_argument("value", help="Integer value (decimal or 0x-prefixed hex)")
    encode_parser.add_argument("--order", "--endianness", choices=order_choices, default="little")

    args = parser.parse_args(argv)

    if args.kinds:
        print_kinds()
        return 0

    try:
        if args.command == "decode":
            print(decode(parse_byte_tokens(args.bytes), args.kind, args.order))
            return 0
        if args.command == "encode":
            print(format_bytes(encode(int(args.value, 0), args.kind, args.order)))
            return 0
    except (BitConverterError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
