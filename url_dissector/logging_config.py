"""Centralized logging utilities for URL Dissector.

The library modules only obtain loggers; nothing is configured on import.
The command-line front end calls :func:`configure_logging`, which accepts
explicit arguments or falls back to environment variables, and renders
records either as console lines or as structured JSON.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

LOG_LEVEL_ENV_VAR = "URL_DISSECTOR_LOG_LEVEL"
LOG_FORMAT_ENV_VAR = "URL_DISSECTOR_LOG_FORMAT"
_DEFAULT_LEVEL = "WARNING"
_DEFAULT_FORMAT = "console"
_LOG_FORMATS = frozenset({"json", "console"})

_RESERVED_RECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class JsonFormatter(logging.Formatter):
    """Render log records as one JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in payload or key in _RESERVED_RECORD_ATTRS:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False, default=str)


def _resolve_level(level: Optional[str]) -> str:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR, _DEFAULT_LEVEL)
    level = str(level).upper()
    if level not in logging.getLevelNamesMapping():
        return _DEFAULT_LEVEL
    return level


def _resolve_format(fmt: Optional[str]) -> str:
    if fmt is None:
        fmt = os.getenv(LOG_FORMAT_ENV_VAR, _DEFAULT_FORMAT)
    fmt = str(fmt).lower()
    if fmt not in _LOG_FORMATS:
        return _DEFAULT_FORMAT
    return fmt


def configure_logging(*, level: Optional[str] = None, log_format: Optional[str] = None, stream: Any = None) -> None:
    """Configure application-wide logging.

    ``level`` and ``log_format`` default to ``URL_DISSECTOR_LOG_LEVEL`` and
    ``URL_DISSECTOR_LOG_FORMAT``; unknown values fall back to ``WARNING``
    and ``console``.
    """

    resolved_level = _resolve_level(level)
    resolved_format = _resolve_format(log_format)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "stream": stream or sys.stderr,
                    "level": resolved_level,
                    "formatter": resolved_format,
                }
            },
            "root": {
                "level": resolved_level,
                "handlers": ["default"],
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Return a ``logging.Logger`` instance."""

    return logging.getLogger(name)
