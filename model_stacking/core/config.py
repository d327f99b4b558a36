"""
Centralized configuration for model_stacking.

Dataclass-based settings with environment variable support. A ``.env`` file in
the working directory is honoured through python-dotenv.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class LoggingConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("MODEL_STACKING_LOG_LEVEL", "INFO"))
    log_dir: str = field(default_factory=lambda: os.getenv("MODEL_STACKING_LOG_DIR", "./logs"))
    enable_console: bool = field(default_factory=lambda: _env_flag("MODEL_STACKING_LOG_CONSOLE", "true"))
    enable_file: bool = field(default_factory=lambda: _env_flag("MODEL_STACKING_LOG_FILE", "false"))
    max_file_size_mb: int = 10  # Max size per log file
    backup_count: int = 5  # Number of backup files to keep


@dataclass
class StackingConfig:
    """Settings for assembling prediction matrices."""

    name_separator: str = field(default_factory=lambda: os.getenv("MODEL_STACKING_NAME_SEP", "."))
    sanitize_names: bool = field(default_factory=lambda: _env_flag("MODEL_STACKING_SANITIZE_NAMES", "true"))


@dataclass
class PackageConfig:
    """Main configuration aggregating all sub-configs."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    stacking: StackingConfig = field(default_factory=StackingConfig)

    def validate(self) -> list[str]:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if self.logging.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            issues.append(f"Unknown log level '{self.logging.log_level}'")

        if self.logging.max_file_size_mb <= 0:
            issues.append(f"Log file size {self.logging.max_file_size_mb}MB must be positive")

        if not self.stacking.name_separator:
            issues.append("Name separator must not be empty")

        return issues

    @classmethod
    def from_env(cls, overrides: Optional[dict] = None) -> "PackageConfig":
        """
        Create configuration from environment variables with optional overrides.

        Args:
            overrides: Dictionary of config overrides

        Returns:
            PackageConfig instance
        """
        config = cls()

        if overrides:
            for key, value in overrides.items():
                if hasattr(config, key):
                    setattr(config, key, value)

        return config


# ==================== Global Config Instance ====================

_global_config: Optional[PackageConfig] = None


def get_config() -> PackageConfig:
    """
    Get the global configuration instance.

    Returns:
        Global PackageConfig instance
    """
    global _global_config

    if _global_config is None:
        config = PackageConfig.from_env()

        issues = config.validate()
        if issues:
            raise ValueError("Invalid model_stacking configuration: " + "; ".join(issues))
        _global_config = config

    return _global_config


def set_config(config: PackageConfig) -> None:
    """
    Set the global configuration instance.

    Args:
        config: PackageConfig to set as global
    """
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to None."""
    global _global_config
    _global_config = None
