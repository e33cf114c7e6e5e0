"""
Logging configuration for Source Overlap.

Library code only emits records through ``get_logger``. An embedding tool
calls ``setup_logging`` once to route the ``source_overlap`` namespace to a
rich-formatted stderr console and, optionally, a plain log file.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "source_overlap"

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(verbose: bool, quiet: bool) -> int:
    # quiet wins over verbose
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _console_handler(verbose: bool) -> logging.Handler:
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route ``source_overlap`` logs to a rich console handler.

    Calling this again replaces the handlers installed by the previous call,
    so the level and destinations can be changed at runtime.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Only ERROR and above (takes precedence over verbose)
        log_file: Optional file path to append logs to

    Returns:
        The configured ``source_overlap`` logger
    """
    level = _level_for(verbose, quiet)
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(verbose))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger in the ``source_overlap`` namespace.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
              are prefixed with ``source_overlap.``; None gives the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
