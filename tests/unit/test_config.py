"""Tests for settings and logging setup."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from nibblefont.config import (
    LoggingConfig,
    NibbleFontSettings,
    OutputConfig,
    get_default_settings,
)
from nibblefont.utils import ConversionStats, configure_logging


class TestSettings:
    """Tests for configuration models."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = get_default_settings()
        assert settings.output.extension == ".nfnt"
        assert settings.output.overwrite is False
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_nested_override(self) -> None:
        """Test building settings from parts."""
        settings = NibbleFontSettings(
            output=OutputConfig(extension=".bin", overwrite=True),
            logging=LoggingConfig(log_file=Path("run.log")),
        )
        assert settings.output.extension == ".bin"
        assert settings.logging.log_file == Path("run.log")

    def test_log_level_case_insensitive(self) -> None:
        """Test that level names are normalized to upper case."""
        config = LoggingConfig(log_level="info", file_log_level="Error")
        assert config.log_level == "INFO"
        assert config.file_log_level == "ERROR"

    @pytest.mark.parametrize("level", ["LOUD", "", "trace"])
    def test_invalid_log_level(self, level: str) -> None:
        """Test that unknown level names fail validation."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level=level)

    @pytest.mark.parametrize("extension", ["bin", "."])
    def test_invalid_extension(self, extension: str) -> None:
        """Test that extensions need a leading dot and a name."""
        with pytest.raises(ValidationError):
            OutputConfig(extension=extension)


class TestLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def _restore_root_handlers(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_writes_json_to_file(self, tmp_path: Path) -> None:
        """Test that structured events reach the log file."""
        log_file = tmp_path / "run.log"

        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Font packed", glyphs=16)
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert '"glyphs": 16' in content

    def test_reconfigure_replaces_handlers(self, tmp_path: Path) -> None:
        """Test that a second call does not stack root handlers."""
        root = logging.getLogger()
        before = len(root.handlers)

        configure_logging(log_file=tmp_path / "first.log")
        configure_logging(log_file=tmp_path / "second.log")

        file_handlers = [
            h for h in root.handlers[before:] if isinstance(h, logging.FileHandler)
        ]
        assert len(root.handlers) == before + 2
        assert [Path(h.baseFilename).name for h in file_handlers] == ["second.log"]

    def test_unknown_level_rejected(self, tmp_path: Path) -> None:
        """Test that an unknown level fails before any handler is added."""
        root = logging.getLogger()
        before = list(root.handlers)

        with pytest.raises(ValueError, match="LOUD"):
            configure_logging(log_file=tmp_path / "run.log", console_level="LOUD")

        assert root.handlers == before
        assert not (tmp_path / "run.log").exists()

    def test_stats_defaults(self) -> None:
        """Test ConversionStats defaults."""
        stats = ConversionStats()
        assert stats.glyph_count == 0
        assert stats.bytes_written == 0
