"""
labelscan extract command.

Extract the delivery address from OCR text files.

Usage:
    labelscan extract label.txt
    labelscan extract scans/*.txt --format jsonl
    tesseract label.jpg - | labelscan extract - --links
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from labelscan.config import ExtractionConfig
from labelscan.core import ExtractionResult, extract_result
from labelscan.exceptions import EmptyAddressError
from labelscan.navigation import MAP_SERVICES, build_links
from labelscan.cli.output import echo, error, warn, dim, divider, summary_box
from labelscan.logging_config import get_logger

logger = get_logger(__name__)

# Maximum stdin input size (10MB)
MAX_STDIN_SIZE = 10 * 1024 * 1024

STDIN = "-"


def read_source(source: str) -> str:
    """
    Read OCR text from a file path or '-' for stdin.

    Raises:
        OSError: File is missing or unreadable
        ValueError: stdin input exceeds MAX_STDIN_SIZE
    """
    if source == STDIN:
        text = sys.stdin.read(MAX_STDIN_SIZE + 1)
        if len(text) > MAX_STDIN_SIZE:
            raise ValueError(
                f"stdin input exceeds maximum size ({MAX_STDIN_SIZE // (1024 * 1024)}MB)"
            )
        return text
    return Path(source).read_text(encoding="utf-8", errors="replace")


def links_for(result: ExtractionResult, services: Optional[List[str]] = None) -> Dict[str, str]:
    """Map links for a result; empty when there is nothing to navigate to."""
    try:
        return build_links(result.address, services)
    except EmptyAddressError:
        return {}


def result_to_dict(
    source: str,
    result: ExtractionResult,
    with_links: bool = False,
) -> Dict[str, Any]:
    output = result.to_dict()
    output["source"] = source
    if with_links:
        output["links"] = links_for(result)
    return output


def format_result_text(
    source: str,
    result: ExtractionResult,
    show_source: bool = False,
    show_rejected: bool = False,
    with_links: bool = False,
) -> None:
    """Print one extraction result for humans."""
    if show_source:
        echo(f"File: {source}", style="bold")

    if not result.found:
        warn(f"No postcode found in {source}; showing OCR text unchanged")

    echo(result.address)

    if show_rejected and result.rejected:
        dim("Rejected lines:")
        for line, reason in result.rejected:
            dim(f"  {line!r} ({reason})")

    if with_links:
        for service, url in links_for(result).items():
            echo(f"  {service}: {url}")


def cmd_extract(args) -> int:
    """Execute the extract command."""
    config = ExtractionConfig.from_env()
    sources: List[str] = args.sources

    records: List[Dict[str, Any]] = []
    missing = 0
    errors = 0

    for i, source in enumerate(sources):
        try:
            text = read_source(source)
        except (OSError, ValueError) as e:
            errors += 1
            logger.debug(f"Failed to read {source}: {e}")
            error(f"Cannot read {source}: {e}")
            continue

        result = extract_result(text, config)
        if not result.found:
            missing += 1
            logger.info(f"No postcode found in {source}")

        if args.format == "json":
            records.append(result_to_dict(source, result, args.links))
        elif args.format == "jsonl":
            echo(json.dumps(result_to_dict(source, result, args.links)))
        else:
            if i > 0:
                divider()
            format_result_text(
                source,
                result,
                show_source=len(sources) > 1,
                show_rejected=args.show_rejected,
                with_links=args.links,
            )

    if args.format == "json":
        # A single source maps to a single object; nothing if it was unreadable
        if len(sources) > 1:
            echo(json.dumps(records, indent=2))
        elif records:
            echo(json.dumps(records[0], indent=2))
    elif args.format == "text" and len(sources) > 1:
        summary_box("Summary", [
            ("Labels", len(sources)),
            ("Addresses found", len(sources) - missing - errors),
            ("No postcode", missing),
            ("Unreadable", errors),
        ])

    if errors:
        return 1
    if args.fail_on_missing and missing:
        return 1
    return 0


def add_extract_parser(subparsers):
    """Add the extract subparser."""
    parser = subparsers.add_parser(
        "extract",
        help="Extract the delivery address from OCR text",
        description=(
            "Extract the delivery address from OCR text. Available map "
            f"services for --links: {', '.join(MAP_SERVICES)}."
        ),
    )
    parser.add_argument(
        "sources",
        nargs="+",
        metavar="PATH",
        help="OCR text file(s) to read (or - for stdin)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json", "jsonl"],
        default="text",
        help="Output format",
    )
    parser.add_argument(
        "--links", "-l",
        action="store_true",
        help="Include map-service links for each address",
    )
    parser.add_argument(
        "--show-rejected",
        action="store_true",
        help="List the lines discarded as label noise (text format)",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with code 1 if any input has no postcode",
    )
    parser.set_defaults(func=cmd_extract)
    return parser
