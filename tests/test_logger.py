"""Tests for the logging setup."""

import logging

import pytest

from model_stacking.core import LogContext, LoggingConfig, PackageConfig, get_logger, set_config, setup_logging


@pytest.fixture
def quiet_logging():
    """Restore a handler-free INFO logger after each test."""
    yield
    setup_logging(log_level="INFO", enable_console=False, enable_file=False)


class TestSetupLogging:
    """Tests for handler installation."""

    def test_child_logger_name(self):
        assert get_logger("checks").name == "model_stacking.checks"

    def test_file_handler_writes(self, tmp_path, quiet_logging):
        setup_logging(log_dir=str(tmp_path), log_level="DEBUG", enable_console=False, enable_file=True)
        get_logger("test").debug("hello from the test")
        for handler in logging.getLogger("model_stacking").handlers:
            handler.flush()

        log_files = list(tmp_path.glob("model_stacking_*.log"))
        assert len(log_files) == 1
        assert "hello from the test" in log_files[0].read_text(encoding="utf-8")

    def test_level_and_console_handler(self, tmp_path, quiet_logging):
        setup_logging(log_dir=str(tmp_path), log_level="WARNING", enable_console=True, enable_file=False)
        root = logging.getLogger("model_stacking")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_unset_arguments_come_from_config(self, tmp_path, quiet_logging):
        set_config(
            PackageConfig(
                logging=LoggingConfig(log_level="ERROR", log_dir=str(tmp_path), enable_console=False, enable_file=True)
            )
        )
        setup_logging()
        root = logging.getLogger("model_stacking")
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1
        assert list(tmp_path.glob("model_stacking_*.log"))


class TestLogContext:
    """Tests for stage logging."""

    def test_reraises(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("model_stacking"), "propagate", True)
        with pytest.raises(RuntimeError, match="boom"):
            with LogContext("stage", "Failing stage"):
                raise RuntimeError("boom")

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "Failing stage failed" in errors[0].getMessage()
