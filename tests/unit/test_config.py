"""
Tests for resume_intel.utils.config — settings loading and validation.
"""

import pytest
from pydantic import ValidationError

from resume_intel.utils.config import (
    AppSettings,
    ExtractionSettings,
    get_settings,
    reload_settings,
)


@pytest.fixture
def restore_settings():
    """Reload settings after a test changes the environment."""
    yield
    reload_settings()


class TestExtractionSettings:
    def test_defaults(self):
        settings = ExtractionSettings()
        assert settings.cache_size == 128
        assert settings.max_text_length == 100_000

    def test_negative_cache_size_rejected(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(cache_size=-1)

    def test_zero_allowed(self):
        assert ExtractionSettings(cache_size=0).cache_size == 0


class TestAppSettings:
    def test_testing_environment(self):
        assert get_settings().environment == "testing"

    def test_file_logging_off(self):
        assert get_settings().logging.file_output is False

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_env_override(self, restore_settings, monkeypatch):
        monkeypatch.setenv("EXTRACT_CACHE_SIZE", "7")
        settings = reload_settings()
        assert settings.extraction.cache_size == 7
        assert get_settings() is settings

    def test_invalid_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "staging")
        with pytest.raises(ValidationError):
            AppSettings()
