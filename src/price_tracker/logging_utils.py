from __future__ import annotations

import json
import logging
from typing import Any


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("symbol", "symbols", "price", "interval_s", "exit_code"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str, log_file: str = "") -> None:
    root = logging.getLogger()
    # Raises on an unknown level before the current handlers are dropped.
    root.setLevel(level.upper())
    root.handlers.clear()

    # Hide per-request logs by default; keep them available via DEBUG if needed.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # stdout/stderr belong to the full-screen dashboard, so logs only go to a file.
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(JsonFormatter())
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)
