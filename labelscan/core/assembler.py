"""
Address assembly from OCR text.

Pipeline:
    raw text -> split_lines() -> locate_postcode() -> assemble()

The assembler walks backward from the postcode line, keeping at most
max_address_lines plausible lines out of at most max_inspected_lines
inspected, and joins them with the postcode. When no postcode is found
the raw text is handed back untouched so the caller can let the user
edit it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..config import ExtractionConfig, DEFAULT_CONFIG
from .noise import rejection_reason
from .postcode import PostcodeMatch, locate_postcode

logger = logging.getLogger(__name__)

SEPARATOR = ", "


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting an address from one block of OCR text."""
    address: str
    postcode: Optional[PostcodeMatch] = None
    lines: Tuple[str, ...] = ()
    rejected: Tuple[Tuple[str, str], ...] = ()  # (line, reason)

    @property
    def found(self) -> bool:
        """True when a postcode was located."""
        return self.postcode is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "address": self.address,
            "found": self.found,
            "postcode": self.postcode.text if self.postcode else None,
            "postcode_normalized": self.postcode.normalized if self.postcode else None,
            "postcode_line": self.postcode.index if self.postcode else None,
            "lines": list(self.lines),
            "rejected": [{"line": line, "reason": reason} for line, reason in self.rejected],
        }


def split_lines(text: str) -> List[str]:
    """Split OCR text into trimmed, non-empty lines in scan order."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def _collect(
    lines: Sequence[str],
    postcode_index: int,
    config: ExtractionConfig,
) -> Tuple[List[str], List[Tuple[str, str]]]:
    """Backward scan returning (accepted lines top-down, rejected lines)."""
    accepted: List[str] = []
    rejected: List[Tuple[str, str]] = []
    inspected = 0
    index = min(postcode_index, len(lines)) - 1

    while (
        index >= 0
        and inspected < config.max_inspected_lines
        and len(accepted) < config.max_address_lines
    ):
        line = lines[index]
        inspected += 1
        reason = rejection_reason(line, config)
        if reason is None:
            accepted.insert(0, line)
        else:
            logger.debug(f"Rejected line {index} ({reason}): {line!r}")
            rejected.append((line, reason))
        index -= 1

    return accepted, rejected


def assemble(
    lines: Sequence[str],
    postcode_index: int,
    postcode: str,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> str:
    """
    Join the plausible lines above the postcode with the postcode itself.

    Args:
        lines: Trimmed OCR lines in scan order
        postcode_index: Index of the line holding the postcode
        postcode: The matched postcode text, appended last
        config: Extraction thresholds

    Returns:
        Comma-separated address ending with the postcode. If the postcode is
        on the first line, or every inspected line is rejected, this is just
        the postcode.
    """
    accepted, _ = _collect(lines, postcode_index, config)
    return SEPARATOR.join(accepted + [postcode])


def extract_result(text: str, config: ExtractionConfig = DEFAULT_CONFIG) -> ExtractionResult:
    """
    Extract an address from OCR text, keeping diagnostics.

    Args:
        text: Raw OCR output
        config: Extraction thresholds

    Returns:
        ExtractionResult; when no postcode is found, address is the input
        text unchanged and found is False.
    """
    lines = split_lines(text)
    match = locate_postcode(lines)

    if match is None:
        logger.debug(f"No postcode in {len(lines)} lines, returning text verbatim")
        return ExtractionResult(address=text)

    accepted, rejected = _collect(lines, match.index, config)
    address = SEPARATOR.join(accepted + [match.text])
    logger.debug(f"Assembled address from {len(accepted)} line(s): {address!r}")

    return ExtractionResult(
        address=address,
        postcode=match,
        lines=tuple(accepted),
        rejected=tuple(rejected),
    )


def extract_address(text: str, config: ExtractionConfig = DEFAULT_CONFIG) -> str:
    """
    Extract a comma-separated address from OCR text.

    Returns the input unchanged when it contains no postcode.

    Example:
        >>> extract_address("JOHN SMITH\\n42 HIGH STREET\\nLONDON\\nSW1A 1AA")
        'JOHN SMITH, 42 HIGH STREET, LONDON, SW1A 1AA'
    """
    return extract_result(text, config).address
