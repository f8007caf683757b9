"""Centralized logging configuration for content_autodoc.

Supports YAML-based configuration and programmatic setup with defaults.

Usage:
    >>> from content_autodoc.logging import get_autodoc_logger
    >>> logger = get_autodoc_logger(__name__)
    >>> logger.info("Processing started")

Environment variables:
    CONTENT_AUTODOC_LOGGING_CONFIG: Path to custom logging.yml
    CONTENT_AUTODOC_LOG_LEVEL: Default log level (INFO, DEBUG, etc.)
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any

import yaml

# Default log levels for different components
DEFAULT_LOG_LEVELS = {
    "content_autodoc": "INFO",
    "content_autodoc.declarations": "INFO",
    "content_autodoc.model": "INFO",
    "content_autodoc.page": "INFO",
}


class LoggingConfig:
    """Manages logging configuration for documentation runs.

    Attributes:
        config_path: Path to YAML configuration file.
        _config: Cached configuration dictionary.

    Configuration precedence:
        1. Explicit config_path parameter
        2. CONTENT_AUTODOC_LOGGING_CONFIG environment variable
        3. Default configuration

    Example:
        >>> config = LoggingConfig()
        >>> config.apply()
        >>>
        >>> config = LoggingConfig(Path("custom_logging.yml"))
        >>> config.apply()
    """

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: dict[str, Any] | None = None

    @staticmethod
    def _get_default_config_path() -> Path | None:
        if env_path := os.environ.get("CONTENT_AUTODOC_LOGGING_CONFIG"):
            return Path(env_path)
        return None

    def load_config(self) -> dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in logging.config.dictConfig format. Cached after
            the first load; create a new LoggingConfig to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> dict[str, Any]:
        """Get default logging configuration.

        Default format:
            "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "content_autodoc": {
                    "level": os.environ.get("CONTENT_AUTODOC_LOG_LEVEL", "INFO"),
                    "handlers": ["console"],
                    "propagate": True,
                },
            },
            "root": {
                "level": "WARNING",
            },
        }

    def apply(self):
        """Apply the configuration with logging.config.dictConfig.

        Multiple calls reconfigure logging.
        """
        logging.config.dictConfig(self.load_config())


# Global configuration instance
_logging_config: LoggingConfig | None = None


def setup_logging(config_path: Path | None = None, level: str | None = None):
    """Setup logging for content_autodoc.

    Args:
        config_path: Optional path to YAML logging configuration file.
                    If None, uses environment variables or defaults.
        level: Optional log level override (INFO, DEBUG, WARNING, etc.).

    Example:
        >>> setup_logging()
        >>> setup_logging(Path("/etc/autodoc/logging.yml"))
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DEFAULT_LOG_LEVELS:
            logging.getLogger(logger_name).setLevel(level.upper())


def get_autodoc_logger(name: str) -> logging.Logger:
    """Get a logger for content_autodoc components.

    Initializes logging with the default configuration on first use.

    Args:
        name: Logger name, typically __name__.

    Example:
        >>> logger = get_autodoc_logger(__name__)
        >>> logger.warning("Element %s has no type", "Sprite")
    """
    if _logging_config is None:
        setup_logging()

    return logging.getLogger(name)
