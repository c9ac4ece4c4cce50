"""
Logging setup: rotating file + stream handler, no duplicates, logs dir routing.
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

import core.logging_config as logging_config
from core.logging_config import log_path, setup_logging


@pytest.fixture
def logs_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(logging_config, "LOGS_DIR", tmp_path / "logs")
    return tmp_path / "logs"


@pytest.fixture
def configure():
    """setup_logging that closes every handler it attached after the test."""
    configured = []

    def _configure(name, **kwargs):
        logger = setup_logging(name=name, **kwargs)
        configured.append(logger)
        return logger

    yield _configure

    for logger in configured:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def _file_handler(logger):
    return next(h for h in logger.handlers if isinstance(h, RotatingFileHandler))


def test_setup_logging_creates_rotating_and_stream_handlers(tmp_path, configure):
    log_file = tmp_path / "test.log"
    logger = configure("test_logger", log_file=str(log_file))

    assert logger.name == "test_logger"
    assert len(logger.handlers) == 2

    logger.info("hello")
    for h in logger.handlers:
        h.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_and_closes_handlers(tmp_path, configure):
    first = configure("test_repeat", log_file=str(tmp_path / "again.log"))
    old = _file_handler(first)

    logger = configure("test_repeat", log_file=str(tmp_path / "again.log"))
    assert len(logger.handlers) == 2
    assert old not in logger.handlers
    assert old.stream is None


def test_relative_name_goes_to_logs_dir_with_dirs_stripped(logs_dir, configure):
    logger = configure("test_strip_dirs", log_file="subdir/foo.log")
    assert _file_handler(logger).baseFilename == str(logs_dir / "foo.log")
    assert logs_dir.is_dir()


def test_log_path_keeps_absolute_paths(tmp_path, logs_dir):
    target = tmp_path / "elsewhere" / "x.log"
    assert log_path(target) == target
    assert not logs_dir.exists()


def test_level_accepts_names(tmp_path, configure):
    logger = configure("test_level", log_file=str(tmp_path / "lvl.log"), level="WARNING")
    assert logger.level == logging.WARNING
