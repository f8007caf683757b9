"""Logging infrastructure for content_autodoc.

Example:
    >>> from content_autodoc.logging import get_autodoc_logger
    >>>
    >>> logger = get_autodoc_logger(__name__)
    >>> logger.info("Scanning sources")

Note:
    Use get_autodoc_logger() rather than logging.getLogger() so the default
    configuration is applied before the first record is emitted.
"""

from .logging_config import LoggingConfig, get_autodoc_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_autodoc_logger",
]
