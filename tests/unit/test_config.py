"""
Unit tests for configuration.
"""

import pytest

from translit.config import TranslitConfig
from translit.errors import ConfigurationError


class TestTranslitConfig:
    """Tests for TranslitConfig."""

    def test_defaults(self):
        """Test the default settings."""
        config = TranslitConfig()
        assert config.placeholder == "?"
        assert config.verify is True
        assert config.accept_all_ascii is False
        assert config.workers == 1
        assert config.ocr_lang is None
        assert config.log_level == "WARNING"

    def test_from_env_defaults(self):
        """Test that an empty environment gives the defaults."""
        assert TranslitConfig.from_env() == TranslitConfig()

    def test_from_env(self, monkeypatch):
        """Test reading every TRANSLIT_* variable."""
        monkeypatch.setenv("TRANSLIT_PLACEHOLDER", "#")
        monkeypatch.setenv("TRANSLIT_VERIFY", "no")
        monkeypatch.setenv("TRANSLIT_ACCEPT_ASCII", "true")
        monkeypatch.setenv("TRANSLIT_WORKERS", "4")
        monkeypatch.setenv("TRANSLIT_OCR_LANG", "tam")
        monkeypatch.setenv("TRANSLIT_LOG_LEVEL", "debug")

        config = TranslitConfig.from_env()
        assert config.placeholder == "#"
        assert config.verify is False
        assert config.accept_all_ascii is True
        assert config.workers == 4
        assert config.ocr_lang == "tam"
        assert config.log_level == "DEBUG"

    def test_bad_workers_env(self, monkeypatch):
        """Test a non-numeric worker count."""
        monkeypatch.setenv("TRANSLIT_WORKERS", "many")
        with pytest.raises(ConfigurationError):
            TranslitConfig.from_env()

    def test_bad_placeholder(self):
        """Test that the placeholder must be one character."""
        with pytest.raises(ConfigurationError):
            TranslitConfig(placeholder="??")

    def test_bad_workers(self):
        """Test that at least one worker is required."""
        with pytest.raises(ConfigurationError):
            TranslitConfig(workers=0)

    def test_to_dict(self):
        """Test the dictionary form."""
        data = TranslitConfig(workers=2).to_dict()
        assert data["workers"] == 2
        assert set(data) == {"placeholder", "verify", "accept_all_ascii", "workers", "ocr_lang", "log_level"}
