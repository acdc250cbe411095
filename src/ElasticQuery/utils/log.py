"""ElasticQuery logging utilities.

All modules log through the shared ``ElasticQuery`` logger; the CLI calls
``configure_logging`` once per command to attach handlers.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}

LOG_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
LOG_DATEFMT: Final[str] = "%m-%d %H:%M:%S"


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("ElasticQuery")


def _file_handler(log_dir: str, action: str, formatter: logging.Formatter) -> logging.Handler:
    """Create a DEBUG-level file handler under ``<log_dir>/<action>/``."""
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%m%d%H%M%S")
    handler = logging.FileHandler(action_dir / f"{action}_{stamp}.log", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Configure the ElasticQuery logger.

    Console lines look like ``mm-dd HH:MM:SS [LVL] message`` where LVL is one
    of DEBG/INFO/WARN/ERRO. When a file is requested it always receives
    DEBUG records, including the composed request bodies.

    Args:
        level: Console logging level name (e.g. INFO, DEBUG).
        action: CLI command name, used for the log file path.
        log_to_file: Whether to mirror logs into a file.
        log_dir: Base directory for log files.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    formatter = _AbbrevLevelFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_to_file and action:
        handlers.append(_file_handler(log_dir, action, formatter))

    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, console_level) if len(handlers) > 1 else console_level)
    log.propagate = False
