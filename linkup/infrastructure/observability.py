"""Structured Logging — one JSON object per log line.

Invariants:
    - Every line carries timestamp, level, logger name and message
    - Request-scoped ids (event_id, cart_id, user_id, ...) appear only when
      the call site passed them via `extra=`
    - setup_logging() can run more than once (app restarts in tests) without
      duplicating output

Design Decisions:
    - Plain logging.Formatter subclass, no logging library
    - LOG_FORMAT=text switches to a one-line human format for local runs
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "error_code", "path", "event_id", "product_id",
    "user_id", "organizer_id", "cart_id",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key])
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _LinkUpHandler(logging.StreamHandler):
    """Marker type so setup_logging() can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the LinkUp handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _LinkUpHandler)]:
        root.removeHandler(existing)

    handler = _LinkUpHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
