"""UK / Northern Ireland postcode locator."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

# Outward code (A9, A9A, A99, AA9, AA9A, AA99), optional space, inward code (9AA).
# Anchored on word boundaries: 'Room12 3rd' is not a postcode.
POSTCODE_PATTERN = re.compile(r"\b[A-Z]{1,2}\d[A-Z\d]?\s*\d[A-Z]{2}\b", re.IGNORECASE)

_SEPARATORS = re.compile(r"\s+")


@dataclass(frozen=True)
class PostcodeMatch:
    """A located postcode and the index of the line it was found on."""
    index: int
    text: str

    @property
    def normalized(self) -> str:
        """Postcode in canonical form, e.g. 'SW1A 1AA'."""
        return normalize_postcode(self.text)


def locate_postcode(lines: Sequence[str]) -> Optional[PostcodeMatch]:
    """
    Find the first postcode in a list of lines.

    Lines are scanned top-down and only the first match counts, even when
    the same line or a later one holds another postcode-shaped string.

    Args:
        lines: Trimmed OCR lines in scan order

    Returns:
        PostcodeMatch with the exact matched substring, or None
    """
    for index, line in enumerate(lines):
        match = POSTCODE_PATTERN.search(line)
        if match:
            logger.debug(f"Postcode {match.group(0)!r} found on line {index}")
            return PostcodeMatch(index=index, text=match.group(0))
    return None


def normalize_postcode(text: str) -> str:
    """
    Uppercase a postcode and put a single space before the inward code.

    Strings that do not look like a postcode are returned stripped and
    uppercased but otherwise unchanged.
    """
    compact = _SEPARATORS.sub("", text).upper()
    if not POSTCODE_PATTERN.fullmatch(compact):
        return text.strip().upper()
    return f"{compact[:-3]} {compact[-3:]}"
