"""Tests for logging_config.py module."""

import logging

import colorlog
import pytest

from squeakbot.logging_config import LoggerConfigurator


@pytest.fixture
def restore_root():
    """Restore root and project logger state after configure() runs."""
    root = logging.getLogger()
    saved = (root.level, list(root.handlers))
    project = logging.getLogger("squeakbot")
    project_handlers = list(project.handlers)
    yield
    root.handlers[:] = saved[1]
    root.setLevel(saved[0])
    project.handlers[:] = project_handlers


class TestLoggerConfigurator:
    """Tests for LoggerConfigurator env parsing and handler setup."""

    @pytest.fixture
    def configurator(self):
        """Return a LoggerConfigurator instance."""
        return LoggerConfigurator()

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", logging.DEBUG), ("1", logging.DEBUG), ("false", logging.INFO), ("", logging.INFO)],
    )
    def test_resolve_level(self, monkeypatch, value, expected):
        """Test DEBUG env parsing."""
        monkeypatch.setenv("DEBUG", value)
        assert LoggerConfigurator.resolve_level() == expected

    def test_formatter_colors_levels(self, configurator):
        """Test the formatter adds the configured color per level."""
        formatter = configurator.build_formatter()
        record = logging.LogRecord(
            name="test", level=logging.WARNING, pathname="", lineno=0, msg="careful", args=(), exc_info=None
        )
        formatted = formatter.format(record)
        assert "\033[33m" in formatted
        assert "WARNING" in formatted
        assert "careful" in formatted

    def test_configure_integration(self, configurator, monkeypatch, restore_root):
        """Integration test for configure method."""
        monkeypatch.setenv("DEBUG", "1")
        configurator.configure()
        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert isinstance(root_logger.handlers[0].formatter, colorlog.ColoredFormatter)
        assert logging.getLogger("asyncio").level == logging.INFO
        assert logging.getLogger("squeakbot").handlers == []

    def test_custom_quiet_loggers(self, monkeypatch, restore_root):
        """Test quiet logger names come from the config mapping."""
        monkeypatch.setenv("DEBUG", "true")
        LoggerConfigurator({"quiet_loggers": ["noisy.lib"], "project_loggers": []}).configure()
        assert logging.getLogger("noisy.lib").level == logging.INFO
