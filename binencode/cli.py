#!/usr/bin/env python3
"""Encode, decode or validate data from the command line.

Usage:
    binencode encode [FILE]
    binencode decode [FILE] [-o OUTPUT]
    binencode validate [FILE]

FILE defaults to stdin. Encoded text read for decode/validate has surrounding
whitespace stripped.
"""
import argparse
import logging
import sys
from typing import BinaryIO, List, Optional, TextIO

from .encode import (
    EncodeType,
    decode_to_bin,
    decode_to_bin_validate,
    encode_to_str,
)
from .errors import FormatError

logger = logging.getLogger(__name__)


def _read_input(path: Optional[str], stdin: BinaryIO) -> bytes:
    if path is None or path == "-":
        return stdin.read()
    with open(path, "rb") as f:
        return f.read()


def _read_encoded(path: Optional[str], stdin: BinaryIO) -> bytes:
    return _read_input(path, stdin).strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="binencode", description="Binary to text encoding")
    parser.add_argument(
        "--type",
        dest="encode_type",
        choices=[t.value for t in EncodeType],
        default=EncodeType.BASE64.value,
        help="Encoding to use (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    encode_cmd = commands.add_parser("encode", help="Encode binary input to text")
    encode_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")

    decode_cmd = commands.add_parser("decode", help="Decode text input to binary")
    decode_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")
    decode_cmd.add_argument("-o", "--output", help="Output file (default: stdout)")

    validate_cmd = commands.add_parser("validate", help="Check that text input can be decoded")
    validate_cmd.add_argument("file", nargs="?", help="Input file (default: stdin)")

    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Run the command line tool and return its exit code."""
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level)
    logging.getLogger("binencode").setLevel(level)

    encode_type = EncodeType(args.encode_type)

    try:
        if args.command == "encode":
            data = _read_input(args.file, stdin)
            logger.debug("Encoding %d bytes as %s", len(data), encode_type.value)
            stdout.write(encode_to_str(encode_type, data).encode("ascii") + b"\n")
            return 0

        text = _read_encoded(args.file, stdin)

        if args.command == "validate":
            decode_to_bin_validate(encode_type, text)
            return 0

        data = decode_to_bin(encode_type, text)
        logger.debug("Decoded %d bytes", len(data))
        if args.output:
            with open(args.output, "wb") as f:
                f.write(data)
        else:
            stdout.write(data)
    except (FormatError, OSError) as e:
        print(f"error: {e}", file=stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
