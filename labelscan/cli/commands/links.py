"""
labelscan links command.

Print map-service deep links for an address.

Usage:
    labelscan links "42 HIGH STREET, LONDON, SW1A 1AA"
    labelscan links - --service waze < address.txt
"""

import json

from labelscan.navigation import MAP_SERVICES, build_links
from labelscan.cli.output import echo, table
from labelscan.cli.commands.extract import STDIN, read_source


def cmd_links(args) -> int:
    """Execute the links command."""
    address = read_source(STDIN) if args.address == STDIN else args.address
    links = build_links(address, args.services)

    if args.format == "json":
        echo(json.dumps({"address": address.strip(), "links": links}, indent=2))
    else:
        table(
            headers=["Service", "Link"],
            rows=list(links.items()),
        )
    return 0


def add_links_parser(subparsers):
    """Add the links subparser."""
    parser = subparsers.add_parser(
        "links",
        help="Print map links for an address",
    )
    parser.add_argument("address", help="Address text (or - for stdin)")
    parser.add_argument(
        "--service", "-s",
        dest="services",
        action="append",
        choices=list(MAP_SERVICES),
        help="Map service (repeatable, default: all)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.set_defaults(func=cmd_links)
    return parser
