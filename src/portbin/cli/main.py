"""Main CLI entry point for portbin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..config import DemoConfig, LOG_LEVELS
from ..exceptions import DecodeError, EncodeError, SchemaError
from ..logging_config import setup_logging
from .demo import dump_file, format_record, run_demo
from .layout import analyze_file, print_layout

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the portbin CLI."""
    parser = argparse.ArgumentParser(
        prog="portbin",
        description="portbin: Portable Binary Records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  portbin demo                          Write and read back the sample record
  portbin demo --id 7 --value -1.5      Use custom sample values
  portbin dump data.bin                 Print every record in a file
  portbin layout                        Show the sample record layout
  portbin layout records.py             Show layouts of records defined in a file
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"portbin {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    demo = subparsers.add_parser("demo", help="Write a sample record and read it back")
    demo.add_argument("--path", type=Path, default=Path("data.bin"), help="File to use")
    demo.add_argument("--id", dest="record_id", type=int, default=123, help="Record id")
    demo.add_argument("--value", type=float, default=456.789, help="Record value")

    dump = subparsers.add_parser("dump", help="Print every record in a file")
    dump.add_argument("path", type=Path, help="File of concatenated records")

    layout = subparsers.add_parser("layout", help="Show record wire layouts")
    layout.add_argument(
        "file", nargs="?", type=Path, help="Python file defining BaseRecord classes"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the portbin CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))

    try:
        if args.command == "demo":
            config = DemoConfig(
                path=args.path,
                record_id=args.record_id,
                value=args.value,
                log_level=args.log_level,
            )
            print(format_record(run_demo(config)))
            return 0

        if args.command == "dump":
            for line in dump_file(args.path):
                print(line)
            return 0

        if args.command == "layout":
            if args.file is None:
                print_layout()
                return 0
            if not args.file.exists():
                print(f"Error: File not found: {args.file}", file=sys.stderr)
                return 1
            analyze_file(args.file)
            return 0
    except (DecodeError, EncodeError, SchemaError, OSError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
