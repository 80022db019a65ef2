"""
Logging configuration for formtree.

Every module logs through ``logging.getLogger(__name__)`` so all records
end up under the ``formtree`` logger, which this module configures.
"""

import logging

from formtree.config import get_config

LOGGER_NAME = "formtree"

CONSOLE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(funcName)s:%(lineno)d): %(message)s"


def setup_logging(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> logging.Logger:
    """
    Configure logging for formtree.

    Args:
        enabled: Whether logging is enabled.
        console: Whether to log to stderr.
        verbose: Whether to log debug records (construction and validation
            decisions) with source locations.
        file_path: Optional file path to write logs to.

    Returns:
        The configured ``formtree`` logger.

    Example:
        >>> from formtree.logging_setup import setup_logging
        >>> setup_logging(console=True, verbose=True)
        >>> # Dependency gating decisions are now printed
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if not enabled:
        logger.disabled = True
        return logger

    logger.disabled = False
    logger.setLevel(logging.DEBUG if verbose else get_config().log_level)

    formatter = logging.Formatter(VERBOSE_FORMAT if verbose else CONSOLE_FORMAT)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def disable_logging() -> None:
    """Disable all formtree logging."""
    logging.getLogger(LOGGER_NAME).disabled = True


def enable_logging() -> None:
    """Re-enable formtree logging with the current handlers."""
    logging.getLogger(LOGGER_NAME).disabled = False
