"""
Module: logging_setup

This module provides functions for setting up logging configuration.
"""

from __future__ import annotations

import logging
import sys
from os import PathLike
from pathlib import Path

log = logging.getLogger(__name__)

LOGGING_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOGGING_DATEFMT = "%Y-%m-%d %I:%M %p"

_console_handler: logging.Handler | None = None


def add_filelogger(file_path: str | PathLike, level: str = "INFO", logger_name: str | None = None) -> None:
    """
    Add file logging for the specified logger.

    :param file_path: the path to the log file.
    :param level: Optional; the logging level. Default is 'INFO'.
    :param logger_name: Optional; the name of the logger to add the file handler to.
                        Default is the root logger.
    """
    logger = logging.getLogger(logger_name)

    file_handler = logging.FileHandler(Path(file_path))
    file_handler.setLevel(level.upper())
    file_handler.setFormatter(logging.Formatter(fmt=LOGGING_FORMAT, datefmt=LOGGING_DATEFMT))
    logger.addHandler(file_handler)
    log.info("File logger added for %s at %s with level %s.", logger.name, file_path, level.upper())


def setup_cli_logging(log_file: str | None, log_level: str):
    """
    Setup logging for the CLI: log to stderr, stdout is reserved for results.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Replace a console handler from a previous invocation to avoid duplicated output
    global _console_handler
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(logging.Formatter(fmt=LOGGING_FORMAT, datefmt=LOGGING_DATEFMT))
    root_logger.addHandler(_console_handler)

    if log_file:
        add_filelogger(log_file, log_level)

    log.debug("Logging setup complete.")
