"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: request_id, level, timestamp. Dispatch fields are added contextually
(method, path, status_code, duration_ms for every call; error_kind and
error_code for failed calls).

SECURITY: Never logs API keys, Authorization headers or card data.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from omise.middleware.request_id import RequestIdFilter

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(secret.key|public.key|api.key|secret|password|authorization|security.code|number)"
    r"[\s]*[=:]\s*(?:basic\s+)?\S+",
    re.IGNORECASE,
)
_KEY_PATTERN = re.compile(r"\b[sp]key_(?:test_)?[A-Za-z0-9]+")

_DISPATCH_FIELDS = (
    "method",
    "path",
    "status_code",
    "error_kind",
    "error_code",
    "duration_ms",
)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: request_id, level, timestamp, message.
    Dispatch fields are copied from the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
            "request_id": getattr(record, "request_id", None),
        }

        for name in _DISPATCH_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(self.formatException(record.exc_info))

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove keys and other sensitive values from log text."""
        text = _KEY_PATTERN.sub("[REDACTED]", text)
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger with JSON formatting.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    handler.addFilter(RequestIdFilter())
    root.addHandler(handler)
