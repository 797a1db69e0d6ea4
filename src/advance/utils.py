"""
Utilities Module for Advance
Helper functions for logging and file handling shared by the CLI and engine.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional, Union

from .config import LOG_FORMAT, LOG_FORMAT_DETAILED, LOG_DATE_FORMAT


# =============================================================================
# LOGGING UTILITIES
# =============================================================================

def setup_logger(
    name: str = "advance",
    log_file: Optional[str] = None,
    level: Union[int, str] = logging.WARNING
) -> logging.Logger:
    """
    Setup a logger with console and optional file output.
    Uses centralized log format configuration.

    Args:
        name: Logger name
        log_file: Path to log file (optional)
        level: Logging level, as a number or a name such as "DEBUG"

    Returns:
        Configured logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Console handler - uses simpler format, on stderr; added once per logger
    consoles = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    if consoles:
        for handler in consoles:
            handler.setLevel(level)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(console_handler)

    # File handler - uses detailed format; one per distinct file
    if log_file:
        log_path = os.path.abspath(log_file)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                handler.setLevel(level)
                return logger
        ensure_dir(Path(log_path).parent)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


# =============================================================================
# FILE UTILITIES
# =============================================================================

def ensure_dir(path: Union[str, Path]) -> Path:
    """
    Ensure directory exists, create if not

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def write_text_atomic(path: Union[str, Path], text: str) -> None:
    """Write text to a file through a temporary sibling and a rename."""
    path = Path(path)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(text)
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
