import logging
import logging.handlers
import os

import pytest

import logging_config
from logging_config import APP_LOGGER, log_file_path, setup_logging


@pytest.fixture
def fresh_logger(monkeypatch):
    logger = logging.getLogger(APP_LOGGER)
    level = logger.level
    monkeypatch.setattr(logger, "handlers", [])
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.setLevel(level)


def test_file_goes_to_configured_dir(tmp_path, monkeypatch, fresh_logger):
    monkeypatch.setattr(logging_config.config, "LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(logging_config.config, "LOG_MAX_BYTES", 1024)

    logger = setup_logging(level="debug")

    assert logger is fresh_logger
    assert logger.level == logging.DEBUG
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == os.path.abspath(tmp_path / "logs" / "macrodesk.log")
    assert file_handlers[0].maxBytes == 1024
    assert os.path.isdir(tmp_path / "logs")


def test_repeat_calls_do_not_stack_handlers(tmp_path, fresh_logger):
    setup_logging(log_dir=str(tmp_path))
    setup_logging(level="warning", log_dir=str(tmp_path))

    assert len(fresh_logger.handlers) == 2
    assert fresh_logger.level == logging.WARNING


def test_level_falls_back_to_env_then_info(tmp_path, monkeypatch, fresh_logger):
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert setup_logging(log_dir=str(tmp_path)).level == logging.ERROR

    monkeypatch.delenv("LOG_LEVEL")
    assert setup_logging(log_dir=str(tmp_path)).level == logging.INFO


def test_log_file_path_defaults_to_config(monkeypatch):
    monkeypatch.setattr(logging_config.config, "LOG_DIR", "somewhere")
    assert log_file_path() == os.path.join("somewhere", "macrodesk.log")
    assert log_file_path("elsewhere") == os.path.join("elsewhere", "macrodesk.log")
