"""
Centralized logging for model_stacking.

Console output through Rich, optional rotating log file.
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler

from .config import get_config


class StackingLogger:
    """
    Centralized logger for model_stacking.

    Features:
    - Console output with Rich formatting
    - File output with rotation
    - Configurable log levels
    """

    _instance: Optional["StackingLogger"] = None
    _initialized: bool = False

    def __new__(cls):
        """Singleton pattern to ensure one logger instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logger (only once)."""
        if self._initialized:
            return

        self.logger = logging.getLogger("model_stacking")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers.clear()

        self._initialized = True

    def setup(
        self,
        log_dir: str = "./logs",
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_file: bool = False,
        max_file_size_mb: int = 10,
        backup_count: int = 5,
    ):
        """
        Setup logging configuration.

        Args:
            log_dir: Directory for log files
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
            enable_console: Enable console output
            enable_file: Enable file output
            max_file_size_mb: Size at which the log file rotates
            backup_count: Number of rotated files to keep
        """
        # Clear existing handlers
        self.logger.handlers.clear()

        level = getattr(logging, log_level.upper(), logging.INFO)
        self.logger.setLevel(level)

        if enable_console:
            console_handler = RichHandler(
                rich_tracebacks=True,
                markup=True,
                show_time=True,
                show_path=False,
            )
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
            self.logger.addHandler(console_handler)

        if enable_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            log_file = log_path / f"model_stacking_{datetime.now().strftime('%Y%m%d')}.log"

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self.logger.addHandler(file_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a child logger for a specific module.

        Args:
            name: Module name (e.g., "checks")

        Returns:
            Logger instance
        """
        return self.logger.getChild(name)


# Global logger instance
_logger_instance = StackingLogger()


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    enable_console: Optional[bool] = None,
    enable_file: Optional[bool] = None,
    max_file_size_mb: Optional[int] = None,
    backup_count: Optional[int] = None,
):
    """
    Setup global logging configuration.

    Arguments left as None fall back to the LoggingConfig of the global
    configuration (MODEL_STACKING_LOG_* environment variables).

    Args:
        log_dir: Directory for log files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output
        enable_file: Enable file output
        max_file_size_mb: Size at which the log file rotates
        backup_count: Number of rotated files to keep
    """
    defaults = get_config().logging

    _logger_instance.setup(
        log_dir=defaults.log_dir if log_dir is None else log_dir,
        log_level=defaults.log_level if log_level is None else log_level,
        enable_console=defaults.enable_console if enable_console is None else enable_console,
        enable_file=defaults.enable_file if enable_file is None else enable_file,
        max_file_size_mb=defaults.max_file_size_mb if max_file_size_mb is None else max_file_size_mb,
        backup_count=defaults.backup_count if backup_count is None else backup_count,
    )


def get_logger(name: str = "main") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance

    Example:
        logger = get_logger("checks")
        logger.info("Validating model list")
    """
    return _logger_instance.get_logger(name)


class LogContext:
    """
    Context manager for logging a processing stage.

    Example:
        with LogContext("matrix", "Assembling prediction matrix"):
            # Do work
            logger.info("3 models aligned")
    """

    def __init__(self, logger_name: str, stage_name: str):
        self.logger = get_logger(logger_name)
        self.stage_name = stage_name
        self.start_time = None

    def __enter__(self):
        """Enter context - log start."""
        self.start_time = datetime.now()
        self.logger.debug(f"→ {self.stage_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context - log completion or error."""
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.debug(f"✓ {self.stage_name} completed ({duration:.2f}s)")
        else:
            self.logger.error(f"✗ {self.stage_name} failed ({duration:.2f}s): {exc_val}")

        return False  # Re-raise exception
