"""
Tests for LoggingConfig.
"""

import logging

import pytest

from curl_client.core.logging.config import LoggingConfig, LogLevel, LogFormat


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self):
        """Default config logs INFO text to console."""
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.format == LogFormat.TEXT
        assert config.enable_console is True
        assert config.enable_file is False
        assert config.enable_correlation_id is True

    def test_create_from_strings(self):
        """create() accepts plain strings in any case."""
        config = LoggingConfig.create(level="debug", format="JSON")

        assert config.level == LogLevel.DEBUG
        assert config.format == LogFormat.JSON

    def test_create_rejects_unknown_level(self):
        """Unknown level name is a ValueError."""
        with pytest.raises(ValueError):
            LoggingConfig.create(level="VERBOSE")

    def test_file_requires_path(self):
        """enable_file without file_path is rejected."""
        with pytest.raises(ValueError, match="file_path is required"):
            LoggingConfig(enable_file=True)

    def test_max_bytes_positive(self):
        """max_bytes must be positive."""
        with pytest.raises(ValueError, match="max_bytes"):
            LoggingConfig(max_bytes=0)

    def test_backup_count_non_negative(self):
        """backup_count must not be negative."""
        with pytest.raises(ValueError, match="backup_count"):
            LoggingConfig(backup_count=-1)

    def test_frozen(self):
        """Config is immutable."""
        config = LoggingConfig()

        with pytest.raises(AttributeError):
            config.level = LogLevel.DEBUG  # type: ignore[misc]

    @pytest.mark.parametrize("level,expected", [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.WARNING, logging.WARNING),
        (LogLevel.CRITICAL, logging.CRITICAL),
    ])
    def test_stdlib_level(self, level, expected):
        """Levels map onto the logging module constants."""
        assert level.stdlib_level == expected
