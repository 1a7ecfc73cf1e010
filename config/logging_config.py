"""Logging setup: console output plus rotating files under the log directory."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOG = "bookdraft.log"
LLM_LOG = "llm_calls.log"
LLM_LOGGER = "tools.gemini_client"

_MAX_BYTES = 10 * 1024 * 1024
_BACKUP_COUNT = 5


def _configure(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _rotating_file(path: Path) -> RotatingFileHandler:
    return RotatingFileHandler(str(path), maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8")


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str | Path] = None,
    console_enabled: bool = True,
) -> None:
    """Install the application's log handlers, replacing any existing root handlers.

    Everything goes to ``bookdraft.log``. Gemini request/response traffic is
    additionally written to ``llm_calls.log`` at DEBUG level.

    Args:
        level: Root logging level.
        log_dir: Directory for log files. Defaults to ./data/logs.
        console_enabled: Also log to stderr.
    """
    directory = Path(log_dir or "./data/logs")
    directory.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    if console_enabled:
        root.addHandler(_configure(logging.StreamHandler(), level, formatter))
    root.addHandler(_configure(_rotating_file(directory / APP_LOG), level, formatter))

    llm_logger = logging.getLogger(LLM_LOGGER)
    llm_logger.handlers.clear()
    llm_logger.setLevel(logging.DEBUG)
    llm_logger.addHandler(_configure(_rotating_file(directory / LLM_LOG), logging.DEBUG, formatter))

    logging.getLogger(__name__).debug("Logging ready (level=%s, dir=%s)", logging.getLevelName(level), directory)
