"""Tests for logging setup."""

from loguru import logger

from note_creator.utils import setup_logging


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "note-creator.log"
    setup_logging(log_level="DEBUG", log_file=log_file, console=False)
    try:
        logger.debug("written to file sink")
        logger.complete()
    finally:
        logger.remove()
    assert "written to file sink" in log_file.read_text()


def test_setup_logging_filters_below_level(tmp_path):
    log_file = tmp_path / "note-creator.log"
    setup_logging(log_level="WARNING", log_file=log_file, console=False)
    try:
        logger.info("too quiet")
        logger.warning("loud enough")
        logger.complete()
    finally:
        logger.remove()
    text = log_file.read_text()
    assert "loud enough" in text
    assert "too quiet" not in text
