"""JSON logging for the employee client.

One JSON object per line: timestamp, level, logger, message. Calls against
the employee server add method, url, status_code and duration_ms; command
bindings add the command name. httpx and httpcore keep their own request
logging at WARNING unless the client runs at DEBUG, so each request is
logged once, by the client.

Employee payloads are never logged, and ssn, password, token, secret and
authorization values are masked in any text that does get logged.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import IO


# key=value or key: value pairs whose value is masked
_SENSITIVE_PATTERNS = re.compile(
    r"(ssn|password|secret|token|authorization)"
    r"[\s\"']*[=:]\s*\S+",
    re.IGNORECASE,
)

_CONTEXT_FIELDS = ("command", "method", "url", "status_code", "duration_ms")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(
                str(getattr(record, "error_reason"))
            )

        # Tracebacks are masked like messages
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


_HTTP_LIBRARY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> None:
    """Send all client logging through a single JSON handler.

    Parameters
    ----------
    level:
        Log level name; unknown names fall back to INFO.
    stream:
        Destination for log lines (stderr when omitted).
    """
    resolved = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(resolved)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)

    library_level = logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING
    for name in _HTTP_LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
