"""Logging configuration with trace_id support and file rotation.

- Console output at the configured level
- Optional daily-rotated files (info and error split) when LOG_DIR is set
- Every record carries the current request's trace_id
"""
from __future__ import annotations

import logging
import logging.handlers
import re
from pathlib import Path

from copywriter.core.config import get_settings
from copywriter.core.trace_context import get_trace_id

LOG_FORMAT = (
    "%(asctime)s %(levelname)s [trace_id=%(trace_id)s] "
    "%(name)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TraceIdFilter(logging.Filter):
    """Inject trace_id into every LogRecord."""

    def filter(self, record: logging.LogRecord) -> bool:
        trace_id = get_trace_id()
        record.trace_id = trace_id if trace_id else "N/A"
        return True


class ErrorOnlyFilter(logging.Filter):
    """Only let ERROR and above through."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def _dated_namer(name: str) -> str:
    """Rename rotated files from app-info.log.2024-12-23 to app-info-2024-12-23.log."""
    match = re.match(r"(.+)\.log\.(\d{4}-\d{2}-\d{2})$", name)
    if match:
        base, date = match.groups()
        return f"{base}-{date}.log"
    return name


def _rotating_handler(path: Path, level: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        interval=1,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.namer = _dated_namer
    return handler


def init_logging() -> None:
    """
    Initialize the root logger.

    Handlers:
    - console at LOG_LEVEL
    - app-info.log (INFO and above) when LOG_DIR is set
    - app-error.log (ERROR and above) when LOG_DIR is set
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    trace_filter = TraceIdFilter()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(trace_filter)
    root_logger.addHandler(console_handler)

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        info_handler = _rotating_handler(
            log_dir / "app-info.log", logging.INFO, settings.log_backup_count
        )
        info_handler.setFormatter(formatter)
        info_handler.addFilter(trace_filter)
        root_logger.addHandler(info_handler)

        error_handler = _rotating_handler(
            log_dir / "app-error.log", logging.ERROR, settings.log_backup_count
        )
        error_handler.setFormatter(formatter)
        error_handler.addFilter(trace_filter)
        error_handler.addFilter(ErrorOnlyFilter())
        root_logger.addHandler(error_handler)

    logging.getLogger(__name__).info(
        f"Logging initialized: level={settings.log_level}, log_dir={settings.log_dir or '-'}"
    )
