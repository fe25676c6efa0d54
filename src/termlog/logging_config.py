"""Diagnostic logging configuration for termlog."""

import logging
import sys
from typing import Optional

from .constants import COLORS as TYPE_COLORS, LogType, RESET as RESET_CODE


class ColorFormatter(logging.Formatter):
    """Formatter that colors level names with the termlog palette."""

    COLORS = {
        'DEBUG': TYPE_COLORS[LogType.DEBUG],
        'INFO': TYPE_COLORS[LogType.INFO],
        'WARNING': TYPE_COLORS[LogType.WARN],
        'ERROR': TYPE_COLORS[LogType.ERROR],
        'CRITICAL': TYPE_COLORS[LogType.ERROR],
    }
    RESET = RESET_CODE

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up diagnostic logging for the package.

    Diagnostics go to stderr so they never mix with logger output
    written to stdout.

    Args:
        verbose: Enable verbose (DEBUG) logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger('termlog')
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if sys.stderr.isatty():  # Color output only for terminals
        formatter = ColorFormatter('%(levelname)s: %(name)s: %(message)s')
    else:
        formatter = logging.Formatter('%(levelname)s: %(name)s: %(message)s')

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a diagnostic logger.

    Args:
        name: Child logger name (defaults to 'termlog')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f'termlog.{name}')
    return logging.getLogger('termlog')
