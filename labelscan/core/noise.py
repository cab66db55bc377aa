"""Noise classifier for OCR lines.

A line is kept as part of an address only when it is structurally
plausible (is_valid) and not recognisable label debris (is_noise).

is_noise() runs an ordered chain of independent checks and stops at the
first one that fires. Each check is a module-level function taking
(line, config) so it can be exercised on its own:

    >>> is_noise("SHIP TO")
    True
    >>> noise_reason("AB1234567890123456789")
    'tracking_number'
    >>> is_address_line("42 HIGH STREET")
    True
"""

import logging
import re
from typing import Callable, Optional, Tuple

from ..config import ExtractionConfig, DEFAULT_CONFIG
from ..constants import SHORT_ARTIFACT_SYMBOLS, SPECIAL_CHARACTERS

logger = logging.getLogger(__name__)

_TRACKING_SHAPE = re.compile(r"[A-Za-z0-9\-_]+")
_WHITESPACE = re.compile(r"\s+")

NoiseCheck = Callable[[str, ExtractionConfig], bool]


def count_special(line: str) -> int:
    """Count characters from the special-symbol set."""
    return sum(1 for ch in line if ch in SPECIAL_CHARACTERS)


def count_alpha(line: str) -> int:
    return sum(1 for ch in line if ch.isalpha())


def count_digits(line: str) -> int:
    return sum(1 for ch in line if ch.isdigit())


# =============================================================================
# NOISE CHECKS
# =============================================================================

def is_short_artifact(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """Very short line carrying a currency or special symbol, e.g. '3£'."""
    return (
        len(line) < config.short_symbol_max_length
        and any(ch in SHORT_ARTIFACT_SYMBOLS for ch in line)
    )


def is_symbol_dense(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """Barcode or QR misreads: many specials, or any special in a short line."""
    specials = count_special(line)
    if specials > config.symbol_dense_count:
        return True
    return specials > 0 and len(line) < config.symbol_short_length


def is_garbled_token(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """Single token mixing letters, digits and symbols, e.g. 'X9#4k'."""
    if any(ch.isspace() for ch in line):
        return False
    return (
        any(ch.isalpha() for ch in line)
        and any(ch.isdigit() for ch in line)
        and any(ch in SPECIAL_CHARACTERS for ch in line)
    )


def is_overlong(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    return len(line) > config.noise_max_length


def is_tracking_number(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """Long unbroken alphanumeric run once whitespace is removed."""
    compact = _WHITESPACE.sub("", line)
    return (
        len(compact) >= config.tracking_min_length
        and _TRACKING_SHAPE.fullmatch(compact) is not None
    )


def is_label_header(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """
    All-caps line starting with a header keyword, e.g. 'SHIP TO' or 'REF: 1234'.

    The keyword is a plain prefix: 'TORQUAY' starts with 'TO' and is
    rejected along with real headers.
    """
    if not line.isupper():
        return False
    upper = line.upper()
    return any(upper.startswith(keyword) for keyword in config.header_keywords)


def is_numeric_run(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """Mostly digits: tracking or reference numbers."""
    if not line or len(line) <= config.digit_min_length:
        return False
    return count_digits(line) / len(line) > config.digit_ratio


def is_letter_starved(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    return len(line) > config.alpha_min_length and count_alpha(line) < config.min_alpha_chars


# Evaluated in order; the first check that fires names the rejection.
NOISE_CHECKS: Tuple[Tuple[str, NoiseCheck], ...] = (
    ("short_artifact", is_short_artifact),
    ("symbol_dense", is_symbol_dense),
    ("garbled_token", is_garbled_token),
    ("overlong", is_overlong),
    ("tracking_number", is_tracking_number),
    ("label_header", is_label_header),
    ("numeric_run", is_numeric_run),
    ("letter_starved", is_letter_starved),
)


def noise_reason(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> Optional[str]:
    """Name of the first noise check the line fails, or None."""
    for name, check in NOISE_CHECKS:
        if check(line, config):
            return name
    return None


def is_noise(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """True when the line is package metadata or OCR debris."""
    return noise_reason(line, config) is not None


# =============================================================================
# VALIDITY
# =============================================================================

def is_valid(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """
    True when the line is structurally able to be an address fragment.

    Requires at least one letter, a length within bounds, and enough
    letters and spaces. Short lines skip the ratio check so tokens like
    '12 Ty' survive.
    """
    length = len(line)
    if not config.min_line_length <= length <= config.max_line_length:
        return False
    if not any(ch.isalpha() for ch in line):
        return False
    if length <= config.ratio_exempt_length:
        return True
    alpha_space = sum(1 for ch in line if ch.isalpha() or ch.isspace())
    return alpha_space / length >= config.min_alpha_space_ratio


def rejection_reason(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> Optional[str]:
    """Why a line would be dropped from an address, or None if it is kept."""
    if not is_valid(line, config):
        return "invalid"
    return noise_reason(line, config)


def is_address_line(line: str, config: ExtractionConfig = DEFAULT_CONFIG) -> bool:
    """True when the line should be kept as part of an address."""
    return rejection_reason(line, config) is None
