"""Unit tests for AppSettings."""

import pytest
from pydantic import ValidationError

from livecounter.domain.settings import AppSettings, TimingSettings


class TestAppSettings:
    """Tests for AppSettings model."""

    def test_default_settings(self):
        """Default settings are created correctly."""
        settings = AppSettings()

        assert settings.logging.level == "INFO"
        assert settings.timing.fetch_delay_ms == 2000
        assert settings.timing.background_delay_ms == 1000
        assert settings.window.title == "LiveData Demo"
        assert settings.window.width == 420
        assert settings.window.height == 640

    def test_valid_logging_levels(self):
        """Logging level accepts standard level names."""
        settings = AppSettings()
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            settings.logging.level = level
            assert settings.logging.level == level

    def test_invalid_logging_level_raises_error(self):
        """Unknown logging level raises validation error."""
        settings = AppSettings()

        with pytest.raises(ValidationError):
            settings.logging.level = "VERBOSE"

    def test_delay_bounds(self):
        """Delays must be between 0 and 60 seconds."""
        timing = TimingSettings()
        timing.fetch_delay_ms = 0
        assert timing.fetch_delay_ms == 0

        with pytest.raises(ValidationError):
            timing.fetch_delay_ms = -1
        with pytest.raises(ValidationError):
            timing.background_delay_ms = 60001

    def test_window_size_bounds(self):
        """Window dimensions are bounded."""
        settings = AppSettings()

        with pytest.raises(ValidationError):
            settings.window.width = 100
        with pytest.raises(ValidationError):
            settings.window.title = ""

    def test_extra_fields_forbidden(self):
        """Unknown top-level keys are rejected."""
        with pytest.raises(ValidationError):
            AppSettings.model_validate({"theme": {"mode": "dark"}})

    def test_json_round_trip(self):
        """Settings survive JSON serialization."""
        settings = AppSettings()
        settings.timing.background_delay_ms = 10

        restored = AppSettings.model_validate_json(settings.model_dump_json())

        assert restored == settings
