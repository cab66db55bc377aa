"""
labelscan - Courier address scanner.

Pulls the delivery address out of noisy OCR text from UK / Northern
Ireland parcel labels.

Quick Start:
    >>> from labelscan import extract_address
    >>> extract_address("SHIP TO\\nJOHN SMITH\\n42 HIGH STREET\\nBELFAST\\nBT1 1AA")
    'JOHN SMITH, 42 HIGH STREET, BELFAST, BT1 1AA'

Navigation links:
    >>> from labelscan import build_links
    >>> build_links("BT1 1AA", ["apple"])
    {'apple': 'https://maps.apple.com/?q=BT1%201AA'}
"""

__version__ = "0.1.0"

from .config import ExtractionConfig
from .core import (
    ExtractionResult,
    PostcodeMatch,
    extract_address,
    extract_result,
    is_address_line,
    locate_postcode,
)
from .navigation import build_link, build_links

__all__ = [
    "ExtractionConfig",
    "ExtractionResult",
    "PostcodeMatch",
    "extract_address",
    "extract_result",
    "is_address_line",
    "locate_postcode",
    "build_link",
    "build_links",
    "__version__",
]
