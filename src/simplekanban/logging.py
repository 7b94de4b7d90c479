"""Logging configuration for simplekanban."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from . import __version__

LOGGER_NAME = "simplekanban"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so a repeated setup replaces them
_HANDLER_ATTR = "_simplekanban_handler"


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Configure the ``simplekanban`` logger from verbosity and an optional file.

    Calling this again replaces the handlers from the previous call, so
    running several commands in one process never duplicates log lines.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_own_handlers(logger)

    if verbose == 0 and log_file is None:
        return logger

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if verbose > 0:
        _add_handler(logger, logging.StreamHandler(sys.stderr), level, formatter)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _add_handler(logger, logging.FileHandler(log_file), level, formatter)

    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("")
    logger.info("=" * 60)
    logger.info(
        "simplekanban %s starting | %s | level=%s",
        __version__,
        timestamp,
        logging.getLevelName(level),
    )
    logger.info("=" * 60)
    return logger


def _add_handler(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()
