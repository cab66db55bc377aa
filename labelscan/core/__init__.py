"""Address extraction core: postcode locator, noise classifier, assembler."""

from .postcode import (
    POSTCODE_PATTERN,
    PostcodeMatch,
    locate_postcode,
    normalize_postcode,
)
from .noise import (
    NOISE_CHECKS,
    is_noise,
    is_valid,
    is_address_line,
    noise_reason,
    rejection_reason,
)
from .assembler import (
    ExtractionResult,
    split_lines,
    assemble,
    extract_address,
    extract_result,
)

__all__ = [
    "POSTCODE_PATTERN",
    "PostcodeMatch",
    "locate_postcode",
    "normalize_postcode",
    "NOISE_CHECKS",
    "is_noise",
    "is_valid",
    "is_address_line",
    "noise_reason",
    "rejection_reason",
    "ExtractionResult",
    "split_lines",
    "assemble",
    "extract_address",
    "extract_result",
]
