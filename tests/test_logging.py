"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from simplekanban import __version__
from simplekanban.logging import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the package logger as it was found."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    setup_logging(0)
    logger.setLevel(level)


def own_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, "_simplekanban_handler", False)]


def test_silent_by_default():
    logger = setup_logging()

    assert own_handlers(logger) == []


def test_verbosity_levels():
    assert setup_logging(1).level == logging.INFO
    assert setup_logging(2).level == logging.DEBUG


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(1)
    logger = setup_logging(2)

    assert len(own_handlers(logger)) == 1


def test_log_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "kanban.log"

    logger = setup_logging(0, log_file)
    logger.info("hello from the board")
    for handler in own_handlers(logger):
        handler.flush()

    content = log_file.read_text()
    assert f"simplekanban {__version__} starting" in content
    assert "hello from the board" in content
