"""
labelscan CLI commands.

Commands:
    extract     Extract the delivery address from OCR text
    links       Print map-service links for an address
"""

from .extract import add_extract_parser, cmd_extract
from .links import add_links_parser, cmd_links

__all__ = [
    # Parsers
    "add_extract_parser",
    "add_links_parser",
    # Commands
    "cmd_extract",
    "cmd_links",
]
