"""Command-line interface: parse a file and print the result.

Usage:
    xferlang data.xfer
    xferlang data.xfer --format json --indent 2
    xferlang data.xfer --error-format json
    python -m xferlang data.xfer

Exit Codes:
    0   Parsed successfully
    1   Parse error (diagnostic printed to stderr)
    2   Usage error or unreadable file

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from xferlang.diagnostics import DiagnosticFormatter, OutputFormat, XferError
from xferlang.syntax import XferParser, render_tree, to_json

__all__ = ["main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"invalid int value: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value < 1:
        msg = f"must be positive, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"invalid int value: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if value < 0:
        msg = f"must be >= 0, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_argument_parser() -> argparse.ArgumentParser:
    """Argument parser for the xferlang command."""
    parser = argparse.ArgumentParser(
        prog="xferlang",
        description="Parse a sigil-typed data file and print its element tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the element tree:
  xferlang data.xfer

  # Export as indented JSON (repeated object keys are kept):
  xferlang data.xfer --format json --indent 2

  # Machine-readable diagnostics:
  xferlang data.xfer --error-format json
""",
    )
    parser.add_argument(
        "file",
        type=Path,
        help="File to parse (UTF-8)",
    )
    parser.add_argument(
        "--format",
        choices=("tree", "json"),
        default="tree",
        help="Output format (default: tree)",
    )
    parser.add_argument(
        "--indent",
        type=_non_negative_int,
        default=None,
        help="Spaces per level for --format json (default: single line)",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help="Maximum array/object nesting depth (default: 100)",
    )
    parser.add_argument(
        "--error-format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic format on parse errors (default: rust)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_argument_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    file_path: Path = args.file
    try:
        source = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"[ERROR] File is not valid UTF-8: {file_path}: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except OSError as e:
        print(f"[ERROR] Cannot read file: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    logger.debug("Read %d characters from %s", len(source), file_path)

    parser = XferParser(max_nesting_depth=args.max_depth)
    try:
        document = parser.parse(source)
        if args.format == "json":
            output = to_json(document, indent=args.indent, max_depth=parser.max_nesting_depth)
        else:
            output = render_tree(document, max_depth=parser.max_nesting_depth)
    except XferError as e:
        formatter = DiagnosticFormatter(output_format=OutputFormat(args.error_format))
        if e.diagnostic is not None:
            print(formatter.format(e.diagnostic), file=sys.stderr)
        else:
            print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except ValueError as e:
        # Source larger than the parser's size limit
        print(f"[ERROR] {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    print(output)
    return EXIT_OK
