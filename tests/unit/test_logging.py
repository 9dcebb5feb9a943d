"""Unit tests for logging setup."""

import io
import logging

import structlog

from sentimerge.config import Settings
from sentimerge.core.logging import get_logger, resolve_log_level, setup_logging


class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    def test_uses_configured_level(self) -> None:
        """Test the configured level is used as is by default."""
        assert resolve_log_level(Settings(SENTIMERGE_LOG_LEVEL="DEBUG")) == logging.DEBUG

    def test_quiet_raises_to_warning(self) -> None:
        """Test quiet runs never log below WARNING."""
        settings = Settings(SENTIMERGE_LOG_LEVEL="INFO")
        assert resolve_log_level(settings, quiet=True) == logging.WARNING

    def test_quiet_keeps_stricter_level(self) -> None:
        """Test quiet does not lower an ERROR threshold."""
        settings = Settings(SENTIMERGE_LOG_LEVEL="ERROR")
        assert resolve_log_level(settings, quiet=True) == logging.ERROR


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiet_drops_info(self) -> None:
        """Test info events are filtered while warnings reach the stream."""
        stream = io.StringIO()
        setup_logging(Settings(SENTIMERGE_ENV="production"), quiet=True, stream=stream)
        logger = get_logger("sentimerge.test")
        logger.info("Lexicon file loaded")
        logger.warning("Something odd")
        output = stream.getvalue()
        assert "Lexicon file loaded" not in output
        assert "Something odd" in output

    def test_production_renders_json(self) -> None:
        """Test non-development environments emit JSON lines."""
        stream = io.StringIO()
        setup_logging(Settings(SENTIMERGE_ENV="production"), stream=stream)
        get_logger("sentimerge.test").info("Analyzer ready", entries=3)
        line = stream.getvalue().strip()
        assert line.startswith("{")
        assert '"entries": 3' in line

    def test_wrapper_class_level(self) -> None:
        """Test the filtering wrapper matches the resolved level."""
        setup_logging(Settings(SENTIMERGE_LOG_LEVEL="DEBUG"), stream=io.StringIO())
        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(logging.DEBUG)
