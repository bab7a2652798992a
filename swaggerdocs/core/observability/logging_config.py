"""
Logging configuration for the swaggerdocs CLI.

``setup_logging()`` is called once by main.py. It attaches handlers to
the ``swaggerdocs`` package logger, so every module logger
(``logging.getLogger(__name__)``) reports through it while the root
logger and other libraries' loggers are left alone.

Console level, highest precedence first:
    --debug  >  --verbose  >  --quiet  >  SWAGGERDOCS_LOG_LEVEL  >  WARNING

A log file is opt-in through SWAGGERDOCS_LOG_FILE, at
SWAGGERDOCS_LOG_FILE_LEVEL (defaults to the console level).
"""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "swaggerdocs"

LEVEL_ENV = "SWAGGERDOCS_LOG_LEVEL"
FILE_ENV = "SWAGGERDOCS_LOG_FILE"
FILE_LEVEL_ENV = "SWAGGERDOCS_LOG_FILE_LEVEL"

# the missing-docs listing is printed as-is under this format
_FMT_CONSOLE = "%(levelname)s: %(message)s"
_FMT_DETAIL = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Console level name from the CLI flags, falling back to the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LEVEL_ENV, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> logging.Logger:
    """Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call.
    """
    numeric_level = _parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    if numeric_level <= logging.DEBUG:
        console.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_CONSOLE))
    else:
        console.setFormatter(logging.Formatter(_FMT_CONSOLE))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(console)

    effective_level = numeric_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_FILE))
        logger.addHandler(fh)

    logger.setLevel(effective_level)
    return logger


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
