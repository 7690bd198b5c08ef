"""Tests for configuration and logging setup."""

import logging
import sys

import pytest
from pydantic import ValidationError

from htmltomd import ConverterConfig, InputFormat, OutputFormat, convert_html, setup_logging
from htmltomd.logging_config import log_level


class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_defaults(self):
        """Test default values."""
        config = ConverterConfig()

        assert config.input_format == InputFormat.HTML
        assert config.output_format == OutputFormat.MD
        assert config.ascii_only is True
        assert config.reduce_headers is True
        assert config.separator == "\n\n"

    def test_formats_from_strings(self):
        """Test formats are parsed from their names."""
        config = ConverterConfig(input_format="google", output_format="hugo")

        assert config.input_format == InputFormat.GOOGLE
        assert config.output_format == OutputFormat.HUGO

    @pytest.mark.parametrize(
        "values",
        [
            {"input_format": "pdf"},
            {"output_format": "rst"},
            {"separator": ""},
            {"unknown": True},
        ],
    )
    def test_invalid(self, values):
        """Test invalid values are rejected."""
        with pytest.raises(ValidationError):
            ConverterConfig(**values)


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("htmltomd")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestLogLevel:
    """Tests for mapping the verbose and quiet flags to levels."""

    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose, quiet, level):
        """Test each flag combination maps to its level."""
        assert log_level(verbose=verbose, quiet=quiet) == level

    def test_verbose_and_quiet(self):
        """Test the flags cannot be combined."""
        with pytest.raises(ValueError):
            log_level(verbose=True, quiet=True)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_package_logger(self, restore_logger):
        """Test the package logger gets the default level and a stderr handler."""
        logger = setup_logging(force=True)

        assert logger is restore_logger
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
        assert logger.propagate is False

    def test_verbose_logs_conversion_decisions(self, restore_logger, tmp_path):
        """Test skipped page breaks are reported when verbose."""
        log_file = tmp_path / "htmltomd.log"
        setup_logging(verbose=True, log_file=str(log_file), force=True)

        convert_html('<body><hr style="page-break-after: auto"></body>', ConverterConfig(input_format="google"))
        for handler in restore_logger.handlers:
            handler.flush()

        assert "Skipping page break rule" in log_file.read_text()

    def test_quiet_hides_conversion_decisions(self, restore_logger, tmp_path):
        """Test debug messages are dropped when quiet."""
        log_file = tmp_path / "htmltomd.log"
        setup_logging(quiet=True, log_file=str(log_file), force=True)

        convert_html('<body><hr style="page-break-after: auto"></body>', ConverterConfig(input_format="google"))
        for handler in restore_logger.handlers:
            handler.flush()

        assert log_file.read_text() == ""

    def test_keeps_existing_handlers(self, restore_logger):
        """Test handlers are not replaced without force."""
        setup_logging(force=True)
        handler = restore_logger.handlers[0]

        setup_logging(quiet=True)

        assert restore_logger.handlers == [handler]
        assert restore_logger.level == logging.ERROR

    def test_verbose_and_quiet(self, restore_logger):
        """Test conflicting flags raise before the logger changes."""
        with pytest.raises(ValueError):
            setup_logging(verbose=True, quiet=True, force=True)
