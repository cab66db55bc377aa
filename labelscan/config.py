"""Configuration for address extraction."""

import os
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Any
import logging

from .constants import (
    MAX_ADDRESS_LINES,
    MAX_INSPECTED_LINES,
    MIN_LINE_LENGTH,
    MAX_LINE_LENGTH,
    MIN_ALPHA_SPACE_RATIO,
    RATIO_EXEMPT_LENGTH,
    SHORT_SYMBOL_MAX_LENGTH,
    SYMBOL_DENSE_COUNT,
    SYMBOL_SHORT_LENGTH,
    NOISE_MAX_LENGTH,
    TRACKING_MIN_LENGTH,
    DIGIT_RATIO,
    DIGIT_MIN_LENGTH,
    MIN_ALPHA_CHARS,
    ALPHA_MIN_LENGTH,
    HEADER_KEYWORDS,
)
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# Environment variable -> (field name, parser)
ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "LABELSCAN_MAX_ADDRESS_LINES": ("max_address_lines", int),
    "LABELSCAN_MAX_INSPECTED_LINES": ("max_inspected_lines", int),
    "LABELSCAN_MAX_LINE_LENGTH": ("max_line_length", int),
    "LABELSCAN_NOISE_MAX_LENGTH": ("noise_max_length", int),
    "LABELSCAN_MIN_ALPHA_SPACE_RATIO": ("min_alpha_space_ratio", float),
    "LABELSCAN_DIGIT_RATIO": ("digit_ratio", float),
}


@dataclass(frozen=True)
class ExtractionConfig:
    """Thresholds used by the noise classifier and address assembler."""

    # Assembler budget
    max_address_lines: int = MAX_ADDRESS_LINES
    max_inspected_lines: int = MAX_INSPECTED_LINES

    # Validity
    min_line_length: int = MIN_LINE_LENGTH
    max_line_length: int = MAX_LINE_LENGTH
    min_alpha_space_ratio: float = MIN_ALPHA_SPACE_RATIO
    ratio_exempt_length: int = RATIO_EXEMPT_LENGTH

    # Noise
    short_symbol_max_length: int = SHORT_SYMBOL_MAX_LENGTH
    symbol_dense_count: int = SYMBOL_DENSE_COUNT
    symbol_short_length: int = SYMBOL_SHORT_LENGTH
    noise_max_length: int = NOISE_MAX_LENGTH
    tracking_min_length: int = TRACKING_MIN_LENGTH
    digit_ratio: float = DIGIT_RATIO
    digit_min_length: int = DIGIT_MIN_LENGTH
    min_alpha_chars: int = MIN_ALPHA_CHARS
    alpha_min_length: int = ALPHA_MIN_LENGTH
    header_keywords: Tuple[str, ...] = HEADER_KEYWORDS

    def __post_init__(self):
        """Validate configuration values."""
        if self.max_address_lines < 0:
            raise ConfigurationError(
                "max_address_lines must be non-negative", setting="max_address_lines"
            )

        if self.max_inspected_lines < 0:
            raise ConfigurationError(
                "max_inspected_lines must be non-negative", setting="max_inspected_lines"
            )

        if not 0 <= self.min_line_length <= self.max_line_length:
            raise ConfigurationError(
                f"Invalid line length bounds {self.min_line_length}..{self.max_line_length}",
                setting="max_line_length",
            )

        for name in ("min_alpha_space_ratio", "digit_ratio"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ConfigurationError(f"{name} must be between 0 and 1", setting=name)

        if self.noise_max_length < 1:
            raise ConfigurationError(
                "noise_max_length must be at least 1", setting="noise_max_length"
            )

        if isinstance(self.header_keywords, str):
            raise ConfigurationError(
                "header_keywords must be a sequence of words, not a string",
                setting="header_keywords",
            )
        # Normalise to an uppercase tuple so the dataclass stays hashable
        object.__setattr__(
            self, "header_keywords", tuple(k.upper() for k in self.header_keywords)
        )

    @classmethod
    def from_env(cls) -> "ExtractionConfig":
        """Create config from LABELSCAN_* environment variables."""
        overrides = {}

        for env_name, (field_name, parse) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            try:
                overrides[field_name] = parse(raw.strip())
            except ValueError as e:
                raise ConfigurationError(
                    f"{env_name}={raw!r} is not a valid {parse.__name__}",
                    setting=field_name,
                ) from e
            logger.debug(f"Config override from {env_name}: {field_name}={overrides[field_name]}")

        return cls(**overrides)


DEFAULT_CONFIG = ExtractionConfig()
