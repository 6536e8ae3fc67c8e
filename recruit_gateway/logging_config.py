"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: level, timestamp, logger, message. Request-specific fields are added
contextually (method, url, status, duration_ms for dispatched requests;
error_reason, page for failures).

SECURITY: Never logs session tokens, authorization headers, or passwords.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

# Patterns that should be redacted from log output
_BEARER_PATTERN = re.compile(r"bearer\s+\S+", re.IGNORECASE)
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|credential|authorization|cookie)"
    r"[\s]*[=:]\s*\S+",
    re.IGNORECASE,
)

_REQUEST_FIELDS = ("method", "url", "status", "duration_ms", "page")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: timestamp, level, logger, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _REQUEST_FIELDS:
            if hasattr(record, name):
                value = getattr(record, name)
                entry[name] = self._sanitize(value) if isinstance(value, str) else value

        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(
                str(getattr(record, "error_reason"))
            )

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        text = _BEARER_PATTERN.sub("[REDACTED]", text)
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
    root.addHandler(handler)
