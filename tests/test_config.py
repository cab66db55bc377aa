"""
Tests for ExtractionConfig validation and environment overrides.
"""

import dataclasses

import pytest
from labelscan import constants
from labelscan.config import ENV_OVERRIDES, DEFAULT_CONFIG, ExtractionConfig
from labelscan.exceptions import ConfigurationError, LabelscanError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all LABELSCAN_* overrides."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    """Tests for default thresholds."""

    def test_defaults_match_constants(self):
        config = ExtractionConfig()
        assert config.max_address_lines == constants.MAX_ADDRESS_LINES == 4
        assert config.max_inspected_lines == constants.MAX_INSPECTED_LINES == 8
        assert config.max_line_length == 50
        assert config.noise_max_length == 40
        assert config.min_alpha_space_ratio == 0.4
        assert config.digit_ratio == 0.8
        assert config.header_keywords == constants.HEADER_KEYWORDS

    def test_default_instance(self):
        assert DEFAULT_CONFIG == ExtractionConfig()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.max_address_lines = 10

    def test_keywords_uppercased(self):
        config = ExtractionConfig(header_keywords=["attn", "Fao"])
        assert config.header_keywords == ("ATTN", "FAO")


class TestValidation:
    """Tests for __post_init__ validation."""

    def test_negative_line_cap(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ExtractionConfig(max_address_lines=-1)
        assert exc_info.value.setting == "max_address_lines"

    def test_negative_inspection_cap(self):
        with pytest.raises(ConfigurationError):
            ExtractionConfig(max_inspected_lines=-1)

    def test_inverted_length_bounds(self):
        with pytest.raises(ConfigurationError):
            ExtractionConfig(min_line_length=10, max_line_length=5)

    @pytest.mark.parametrize("name", ["min_alpha_space_ratio", "digit_ratio"])
    def test_ratio_out_of_range(self, name):
        with pytest.raises(ConfigurationError):
            ExtractionConfig(**{name: 1.5})

    def test_noise_length(self):
        with pytest.raises(ConfigurationError):
            ExtractionConfig(noise_max_length=0)

    def test_keywords_as_string(self):
        """Test a bare string is not split into single-letter keywords."""
        with pytest.raises(ConfigurationError):
            ExtractionConfig(header_keywords="SHIP")

    def test_is_labelscan_error(self):
        assert issubclass(ConfigurationError, LabelscanError)


class TestFromEnv:
    """Tests for ExtractionConfig.from_env()."""

    def test_no_overrides(self, clean_env):
        assert ExtractionConfig.from_env() == ExtractionConfig()

    def test_int_override(self, clean_env):
        clean_env.setenv("LABELSCAN_MAX_ADDRESS_LINES", "2")
        clean_env.setenv("LABELSCAN_MAX_INSPECTED_LINES", " 12 ")

        config = ExtractionConfig.from_env()

        assert config.max_address_lines == 2
        assert config.max_inspected_lines == 12

    def test_float_override(self, clean_env):
        clean_env.setenv("LABELSCAN_DIGIT_RATIO", "0.5")
        assert ExtractionConfig.from_env().digit_ratio == 0.5

    def test_blank_ignored(self, clean_env):
        clean_env.setenv("LABELSCAN_NOISE_MAX_LENGTH", "  ")
        assert ExtractionConfig.from_env().noise_max_length == 40

    def test_malformed_value(self, clean_env):
        clean_env.setenv("LABELSCAN_MAX_LINE_LENGTH", "fifty")
        with pytest.raises(ConfigurationError) as exc_info:
            ExtractionConfig.from_env()
        assert exc_info.value.setting == "max_line_length"

    def test_out_of_range_value(self, clean_env):
        clean_env.setenv("LABELSCAN_MIN_ALPHA_SPACE_RATIO", "2")
        with pytest.raises(ConfigurationError):
            ExtractionConfig.from_env()
