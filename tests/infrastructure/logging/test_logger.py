"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def reset_singletons():
    for cls in (
        logger_module.Logger,
        logger_module.AppLogger,
        logger_module.UsageLogger,
    ):
        cls._instance = None
    yield
    for cls in (
        logger_module.Logger,
        logger_module.AppLogger,
        logger_module.UsageLogger,
    ):
        cls._instance = None


def test_builder_writes_daily_file_under_subdir(tmp_path, monkeypatch):
    """Log files should land in logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250516"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("finvault.test.usage")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "usage" / "20250516_usage_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    # A second build must not stack handlers.
    assert builder.build() is built
    assert len(built.handlers) == 1
    built.handlers[0].close()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("finvault.test.custom")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "finvault.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_forwards_messages_and_args(monkeypatch, reset_singletons):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )

    wrapper = logger_module.Logger("finvault")
    wrapper.info("Seeded %s entries", 23)
    wrapper.warning("warn")
    wrapper.error("err")
    wrapper.debug("dbg")
    wrapper.critical("crit")

    fake_logger.info.assert_called_with("Seeded %s entries", 23)
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_separate_singletons(
    monkeypatch,
    reset_singletons,
):
    built_subdirs = []

    def _fake_build(self):
        built_subdirs.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_subdirs == ["app", "usage"]
