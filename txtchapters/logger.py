"""Logging setup for txtchapters.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up under the ``txtchapters`` logger. The CLI calls setup_logging() once; the
TUI leaves logging alone and reports through toasts instead.
"""

import logging
import sys

PACKAGE_LOGGER = "txtchapters"

SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Translate the -v / -q command line flags into a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    level: int = logging.INFO,
    log_file: str | None = None,
    detailed: bool = False,
) -> logging.Logger:
    """Send txtchapters log records to stderr, and optionally to a file.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (default: INFO)
        log_file: Also append records to this file (always detailed format)
        detailed: Include timestamps and logger names on stderr

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else SIMPLE_FORMAT))
    package_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the txtchapters namespace."""
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def set_level(level: int) -> None:
    """Change the level of the package logger after setup."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
