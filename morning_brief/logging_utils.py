"""
Run logging for the digest pipeline.

Console records go through Rich; the per-run file log is JSON lines by
default so each pipeline event can be read back with its structured fields.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from .config import LoggingConfig

PACKAGE_LOGGER = "morning_brief"

# Attributes every LogRecord carries; anything else came in through `extra`.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def setup_logging(cfg: LoggingConfig, output_dir: Path | None) -> logging.Logger:
    """Configure the package logger for one pipeline run.

    Handlers from a previous run are closed and replaced, so repeated runs
    in one process do not accumulate handlers or open log files.
    """
    level = logging.getLevelName(cfg.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(_console_handler())
    if cfg.file and output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(_file_handler(output_dir / cfg.filename, cfg.format))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    _replace_handlers(logger, handlers, level)
    return logger


def log_event(logger: logging.Logger | None, message: str, **fields: Any) -> None:
    if logger is None:
        return
    logger.info(message, extra=fields)


class JsonlFormatter(logging.Formatter):
    """One JSON object per record: time, level, logger, message and extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _STANDARD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _console_handler() -> logging.Handler:
    handler = RichHandler(rich_tracebacks=True, show_time=False, show_level=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(path: Path, fmt: str) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    if fmt == "jsonl":
        handler.setFormatter(JsonlFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    return handler


def _replace_handlers(logger: logging.Logger, handlers: list[logging.Handler], level: int) -> None:
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)
