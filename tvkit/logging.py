"""
logging.py – JSON/std-out logger + nil-safe process-wide handle
===============================================================

`get_logger(name)` hands out stdout loggers with one JSON line per
record.  Components take a logger at construction and fall back to
`null_logger()`, a real `logging.Logger` that drops everything.

`LOG` is the process-wide handle used by `safe_log` / `safe_logf`.  It
starts unset and may be swapped at any time (tests do), so every safe
call reads it exactly once and treats ``None`` as "logging disabled".
"""

from __future__ import annotations
import json, logging, sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, handlers=[])

NULL_LOGGER_NAME = "tvkit.null"

# process-wide handle – unset until init_logger()/set_logger()
LOG: Optional[logging.Logger] = None


class JsonFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own time."""

    def format(self, record: logging.LogRecord) -> str:          # noqa: D401
        line: Dict[str, Any] = {
            "ts":  datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="seconds"),
            "lvl": record.levelname,
            "src": record.name,
            "msg": record.getMessage(),
        }
        if record.levelno >= logging.WARNING:
            line["at"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """stdout JSON logger; handler attached on first request only."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False
    if level:
        logger.setLevel(level.upper())
    return logger


def null_logger() -> logging.Logger:
    """Logger that accepts every call and emits nothing."""
    logger = logging.getLogger(NULL_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        logger.propagate = False
    return logger


def init_logger(name: str = "tvkit") -> logging.Logger:
    """Create the JSON logger and install it as the process-wide handle."""
    global LOG
    LOG = get_logger(name)
    return LOG


def set_logger(handle: Optional[logging.Logger]) -> None:
    global LOG
    LOG = handle


def safe_logf(fmt: str, *args: Any) -> None:
    """printf-style log through `LOG`; no-op while the handle is unset."""
    handle = LOG
    if handle is None:
        return
    handle.info(fmt, *args)


def safe_log(message: Any) -> None:
    handle = LOG
    if handle is None:
        return
    handle.info("%s", message)
