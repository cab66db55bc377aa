"""
Central constants for labelscan.

All extraction thresholds, character classes and keyword sets are defined
here. The numbers were tuned against sample parcel labels; treat them as
empirical defaults (override through ExtractionConfig), not derived values.
"""

__all__ = [
    # Assembler budget
    "MAX_ADDRESS_LINES",
    "MAX_INSPECTED_LINES",
    # Line validity
    "MIN_LINE_LENGTH",
    "MAX_LINE_LENGTH",
    "MIN_ALPHA_SPACE_RATIO",
    "RATIO_EXEMPT_LENGTH",
    # Noise thresholds
    "SHORT_SYMBOL_MAX_LENGTH",
    "SYMBOL_DENSE_COUNT",
    "SYMBOL_SHORT_LENGTH",
    "NOISE_MAX_LENGTH",
    "TRACKING_MIN_LENGTH",
    "DIGIT_RATIO",
    "DIGIT_MIN_LENGTH",
    "MIN_ALPHA_CHARS",
    "ALPHA_MIN_LENGTH",
    # Character classes
    "SHORT_ARTIFACT_SYMBOLS",
    "SPECIAL_CHARACTERS",
    "HEADER_KEYWORDS",
]

# --- ASSEMBLER BUDGET ---
MAX_ADDRESS_LINES = 4  # Lines kept before the postcode
MAX_INSPECTED_LINES = 8  # Lines looked at, accepted or not

# --- LINE VALIDITY ---
MIN_LINE_LENGTH = 2
MAX_LINE_LENGTH = 50
MIN_ALPHA_SPACE_RATIO = 0.4
RATIO_EXEMPT_LENGTH = 5  # "12 Ty" style tokens skip the ratio check

# --- NOISE THRESHOLDS ---
SHORT_SYMBOL_MAX_LENGTH = 4  # Exclusive: "3£" yes, "3 £x" no
SYMBOL_DENSE_COUNT = 2  # More than this many specials is barcode debris
SYMBOL_SHORT_LENGTH = 8  # Any special in a line shorter than this
NOISE_MAX_LENGTH = 40  # Tracking blocks, not address lines
TRACKING_MIN_LENGTH = 15
DIGIT_RATIO = 0.8
DIGIT_MIN_LENGTH = 10  # Exclusive
MIN_ALPHA_CHARS = 2
ALPHA_MIN_LENGTH = 5  # Exclusive

# --- CHARACTER CLASSES ---

# Both the pound sign and the lira sign: OCR returns either for "£".
SHORT_ARTIFACT_SYMBOLS = frozenset("₤£$€¥#@%&*+=<>")

SPECIAL_CHARACTERS = frozenset("£$€¥#@%&*+=<>[]{}|\\/~`^")

# Label headers printed above the recipient block
HEADER_KEYWORDS = (
    "SHIP",
    "DELIVERY",
    "ADDRESS",
    "TO",
    "FROM",
    "ORDER",
    "TRACKING",
    "PARCEL",
    "REF",
)
