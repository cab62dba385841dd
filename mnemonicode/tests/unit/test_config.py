"""
Unit tests for settings, logging setup and data models
"""

import logging

import pytest
from pydantic import ValidationError

from mnemonicode.config import ABBREVIATE_ENV, FORMAT_ENV, STRICT_ENV, CodecSettings
from mnemonicode.context.encoding import DEFAULT_FORMAT
from mnemonicode.logging_config import DEFAULT_LOGGER_NAME, LOG_LEVEL_ENV, configure_logging
from mnemonicode.models import ByteChunk, EncodingStats


class TestCodecSettings:
    """Test settings defaults and environment overrides"""

    def test_defaults(self):
        settings = CodecSettings()
        assert settings.format_template == DEFAULT_FORMAT
        assert settings.strict is True
        assert settings.abbreviate is False
        assert settings.uses_wire_format

    def test_from_empty_env(self):
        assert CodecSettings.from_env() == CodecSettings()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(FORMAT_ENV, "x x x ")
        monkeypatch.setenv(STRICT_ENV, "no")
        monkeypatch.setenv(ABBREVIATE_ENV, "TRUE")

        settings = CodecSettings.from_env()
        assert settings.format_template == "x x x "
        assert settings.strict is False
        assert settings.abbreviate is True
        assert not settings.uses_wire_format

    def test_blank_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv(FORMAT_ENV, "")
        monkeypatch.setenv(STRICT_ENV, "")
        assert CodecSettings.from_env() == CodecSettings(format_template=DEFAULT_FORMAT)

    def test_invalid_boolean(self, monkeypatch):
        monkeypatch.setenv(STRICT_ENV, "maybe")
        with pytest.raises(ValidationError, match="strict"):
            CodecSettings.from_env()

    def test_explicit_values_override_env(self, monkeypatch):
        monkeypatch.setenv(FORMAT_ENV, "x.")
        settings = CodecSettings(format_template="x x x\n", abbreviate=True)
        assert settings.format_template == "x x x\n"
        assert settings.abbreviate is True

    def test_settings_are_frozen(self):
        settings = CodecSettings()
        with pytest.raises(ValidationError):
            settings.strict = False
        assert settings.model_copy(update={"strict": False}).strict is False


class TestLoggingSetup:
    """Test the rich logging configuration"""

    def test_explicit_level(self):
        logger = configure_logging("debug", force=True)
        assert logger.name == DEFAULT_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_env_level(self, clean_env, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert configure_logging(force=True).level == logging.INFO

    def test_default_level(self, clean_env):
        assert configure_logging(force=True).level == logging.WARNING

    def test_unknown_level_falls_back(self, clean_env):
        assert configure_logging("chatty", force=True).level == logging.WARNING

    def test_no_duplicate_handlers(self):
        configure_logging("INFO", force=True)
        logger = configure_logging("INFO")
        assert len(logger.handlers) == 1


class TestModels:
    """Test data model helpers"""

    def test_byte_chunk(self):
        chunk = ByteChunk(offset=4, data=b"\x01\x02")
        assert chunk.length == 2
        assert chunk.value == 0x0201

    def test_expansion_ratio(self):
        assert EncodingStats(4, 3, 1, 20).expansion_ratio == 5.0
        assert EncodingStats(0, 0, 0, 0).expansion_ratio == 0.0
