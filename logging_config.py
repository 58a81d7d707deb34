import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import config

APP_LOGGER = "macrodesk"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"

# SDK and search clients log every request at INFO
QUIET_LOGGERS = ("openai", "httpx", "httpcore", "urllib3", "tenacity", "duckduckgo_search", "primp", "langgraph")


def _parse_level(level: "str | int | None") -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).strip().upper(), logging.INFO)


def log_file_path(log_dir: Optional[str] = None) -> str:
    return os.path.join(log_dir or config.LOG_DIR, config.LOG_FILE_NAME)


def setup_logging(level: "str | int | None" = None, log_dir: Optional[str] = None) -> logging.Logger:
    """Configure the `macrodesk` logger tree and return its root.

    The level comes from `level`, then env LOG_LEVEL, then INFO. The file
    lives in `log_dir` (default `config.LOG_DIR`). Streamlit re-executes the
    page script on every interaction; later calls only adjust the level.
    """
    logger = logging.getLogger(APP_LOGGER)
    desired_level = _parse_level(level if level is not None else os.getenv("LOG_LEVEL"))
    logger.setLevel(desired_level)
    if logger.handlers:
        return logger

    path = log_file_path(log_dir)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        filename=path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging to %s", path)
    return logger
