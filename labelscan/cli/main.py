"""
labelscan CLI - Command-line interface.

Usage:
    labelscan extract label.txt               # Extract the delivery address
    labelscan extract - --format json         # Read OCR text from stdin
    labelscan links "BT1 1AA"                 # Map links for an address

    # Info
    labelscan --version
"""

import argparse
import sys
from typing import List, Optional

from labelscan import __version__
from labelscan.exceptions import LabelscanError
from labelscan.logging_config import setup_logging, get_logger
from labelscan.cli.output import echo, error, set_color_enabled

logger = get_logger(__name__)


def cmd_version(args):
    """Show version information."""
    echo(f"labelscan {__version__}")
    echo("Courier address scanner for UK/NI parcel labels")
    echo("")
    echo("Commands:")
    echo("  extract     Extract the delivery address from OCR text")
    echo("  links       Print map links for an address")
    echo("")
    echo("Run 'labelscan <command> --help' for details.")


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="labelscan",
        description="labelscan - Courier address scanner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  labelscan extract label.txt                     # Extract an address
  tesseract label.jpg - | labelscan extract -     # Straight from OCR
  labelscan extract scans/*.txt -f jsonl          # Batch, one JSON per line
  labelscan links "42 HIGH STREET, LONDON, SW1A 1AA" -s google
        """,
    )
    parser.add_argument(
        "--version", "-V",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (shows why lines were rejected)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet mode (errors only)",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file (JSON format)",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default="text",
        help="Console log format",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    from labelscan.cli.commands import add_extract_parser, add_links_parser

    add_extract_parser(subparsers)
    add_links_parser(subparsers)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        cmd_version(args)
        return

    setup_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=args.log_file,
        json_format=args.log_format == "json",
        no_color=args.no_color,
    )

    if args.no_color:
        set_color_enabled(False)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        result = args.func(args)

        if isinstance(result, int) and result != 0:
            sys.exit(result)

    except KeyboardInterrupt:
        sys.exit(130)

    except LabelscanError as e:
        error(str(e))
        sys.exit(1)

    except PermissionError as e:
        error(f"Permission denied: {e.filename or e}")
        sys.exit(1)

    except FileNotFoundError as e:
        error(f"File not found: {e.filename or e}")
        sys.exit(1)

    except Exception as e:
        # Stack trace only with --verbose
        if args.verbose:
            logger.exception("Unexpected error")
        error(f"{type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
