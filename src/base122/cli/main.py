"""Main CLI entry point for base122."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..codec import decode, encode
from ..exceptions import DecodeError
from ..utils.logging import configure_logging, get_logger
from ..utils.sizing import analyze
from .config import CliOptions
from .demo import format_report, run_demo

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the base122 CLI."""
    parser = argparse.ArgumentParser(
        prog="base122",
        description="base122: Binary-to-text encoding with 7-bit symbols",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  base122 encode "Hello"                Encode inline text
  base122 encode -i image.png           Encode a file
  base122 decode < encoded.txt          Decode from stdin
  base122 stats --json -i data.bin      Show encoding statistics
  base122 demo                          Run demonstration
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"base122 {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    io_parent = argparse.ArgumentParser(add_help=False)
    io_parent.add_argument("text", nargs="?", help="Inline input (default: read stdin)")
    io_parent.add_argument("-i", "--input", metavar="FILE", help="Read input from FILE")

    encode_parser = subparsers.add_parser(
        "encode", parents=[io_parent], help="Encode text or data (or read from stdin)"
    )
    encode_parser.add_argument("-o", "--output", metavar="FILE", help="Write output to FILE")

    decode_parser = subparsers.add_parser(
        "decode", parents=[io_parent], help="Decode Base122 text (or read from stdin)"
    )
    decode_parser.add_argument("-o", "--output", metavar="FILE", help="Write output to FILE")
    decode_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Accept non-canonical input (non-zero padding, unescaped dangerous bytes)",
    )

    stats_parser = subparsers.add_parser(
        "stats", parents=[io_parent], help="Show encoding statistics for the input"
    )
    stats_parser.add_argument("--json", action="store_true", help="Print statistics as JSON")

    subparsers.add_parser("demo", help="Run demonstration")

    return parser


def _read_input(options: CliOptions) -> bytes:
    if options.text is not None:
        return options.text.encode("utf-8")
    if options.input_path is not None:
        return options.input_path.read_bytes()
    return sys.stdin.buffer.read()


def _write_output(options: CliOptions, data: bytes) -> None:
    if options.output_path is not None:
        options.output_path.write_bytes(data)
        return
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _emit(options: CliOptions, data: bytes) -> int:
    try:
        _write_output(options, data)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the base122 CLI.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        options = CliOptions.from_args(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(options.verbose)
    logger.debug("Running %s with %s", options.command, options)

    if options.command == "demo":
        return 0 if run_demo() else 1

    try:
        data = _read_input(options)
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    if options.command == "encode":
        return _emit(options, encode(data).encode("utf-8") + b"\n")

    if options.command == "stats":
        print(format_report(analyze(data), as_json=options.as_json))
        return 0

    # LF and CR are never emitted literally, so stripping them is lossless
    if options.text is None:
        data = data.strip(b"\r\n")
    try:
        decoded = decode(data, strict=options.strict)
    except DecodeError as e:
        print(f"Decode error: {e}", file=sys.stderr)
        return 1

    return _emit(options, decoded)


if __name__ == "__main__":
    sys.exit(main())
