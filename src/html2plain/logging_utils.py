"""Logging setup for the html2plain command-line tool."""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "html2plain"

CONSOLE_FORMAT = "html2plain: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"

# Marks handlers installed here so a second call replaces only those
_HANDLER_TAG = "_html2plain_handler"


def resolve_level(log_level: int | str) -> int:
    """Return the numeric level for a level number or name, INFO if unknown."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _tagged(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Only the ``html2plain`` logger is touched; handlers installed on the
    root logger by a host application are left alone. Calling this again
    replaces the handlers from the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps, logger names and line numbers.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    package_logger.addHandler(_tagged(logging.StreamHandler(sys.stderr), level, formatter))

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            package_logger.addHandler(_tagged(file_handler, level, formatter))
            package_logger.info("Logging to file: %s", log_file)

    return package_logger
