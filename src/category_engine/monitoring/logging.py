"""Logging setup for the category engine.

Library modules only call ``logging.getLogger(__name__)``; applications that
want output call ``setup_logging()`` once. Degradations (dropped records,
promoted roots, canonical fallbacks) are logged at DEBUG with optional
``operation`` and ``slug`` context passed through ``extra``.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from dataclasses import dataclass
from typing import Dict

from category_engine.configs.settings import get_settings

ROOT_LOGGER_NAME = "category_engine"
CONTEXT_FIELDS = ("operation", "slug")

_HANDLER_MARKER = "_category_engine_handler"


def _context(record: logging.LogRecord) -> Dict[str, str]:
    return {k: getattr(record, k) for k in CONTEXT_FIELDS if getattr(record, k, None)}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, context fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """``LEVEL logger [op=... slug=...] message``"""

    _LABELS = {"operation": "op", "slug": "slug"}

    def format(self, record: logging.LogRecord) -> str:
        fields = [record.levelname, record.name]
        context = _context(record)
        if context:
            fields.append(
                "[" + " ".join(f"{self._LABELS[k]}={v}" for k, v in context.items()) + "]"
            )
        fields.append(record.getMessage())

        line = " ".join(fields)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


@dataclass(frozen=True)
class LoggingOptions:
    """Where and how the engine logs."""

    level: str = "INFO"
    json_logs: bool = False
    enable_console: bool = True

    @classmethod
    def from_settings(cls) -> "LoggingOptions":
        settings = get_settings()
        return cls(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)


def setup_logging(options: LoggingOptions | None = None) -> logging.Logger:
    """Configure and return the ``category_engine`` logger."""
    options = options or LoggingOptions.from_settings()
    level = getattr(logging, options.level.upper(), logging.INFO)

    engine_logger = logging.getLogger(ROOT_LOGGER_NAME)
    engine_logger.setLevel(level)

    # Replace handlers from earlier calls
    for handler in [h for h in engine_logger.handlers if getattr(h, _HANDLER_MARKER, False)]:
        engine_logger.removeHandler(handler)

    if options.enable_console:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level)
        console.setFormatter(JsonFormatter() if options.json_logs else TextFormatter())
        setattr(console, _HANDLER_MARKER, True)
        engine_logger.addHandler(console)

    return engine_logger
