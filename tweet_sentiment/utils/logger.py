"""
Logging helpers shared by every module in the package.

Modules call ``get_logger(__name__)`` once at import time. Handlers are only
installed by ``configure_logging``, which the command-line entry point calls,
so library users keep control of their own logging setup.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config.settings import LOG_FORMAT, LOG_DATE_FORMAT, DEFAULT_LOG_LEVEL

# Root logger name for the package; module loggers are its children
PACKAGE_LOGGER = "tweet_sentiment"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def configure_logging(level: Union[int, str] = DEFAULT_LOG_LEVEL,
                      log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup logging configuration for the package.

    Installs one console handler (and one file handler if ``log_file`` is
    given) on the package logger. Calling it again replaces the handlers
    instead of stacking duplicates.

    Args:
        level: Logging level name or number (e.g. "INFO", logging.DEBUG)
        log_file: Optional path of a log file to append to

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_error(logger: logging.Logger, error, level: int = logging.ERROR):
    """
    Log a ProcessingError record in a single consistent line.

    Args:
        logger: Logger to write to
        error: ProcessingError describing the failure
        level: Logging level (ERROR for file failures, WARNING for bad lines)
    """
    location = str(error.file_path)
    if error.line_number is not None:
        location = f"{location}:{error.line_number}"
    logger.log(level, f"{error.error_type} in {location}: {error.error_message}")
