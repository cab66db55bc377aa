"""
labelscan CLI.

Command-line interface for pulling addresses out of parcel-label OCR text.

Usage:
    labelscan extract <path>            # Extract the address
    labelscan extract - --links         # Read stdin, add map links
    labelscan links "<address>"         # Map links for an address
"""

from .main import main

__all__ = [
    "main",
]
