from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Tuple

LIBRARY_LOGGER = "jsonhal"

# structured extras emitted by log_event, rendered in this order
LOG_EXTRA_FIELDS = (
    "relation",
    "target",
    "error",
    "strict",
)


class LogfmtFormatter(logging.Formatter):
    """Renders jsonhal records as logfmt pairs; missing extras are skipped."""

    def format(self, record: logging.LogRecord) -> str:
        return " ".join(f"{key}={self._quote(val)}" for key, val in self._pairs(record))

    def _pairs(self, record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
        yield "level", record.levelname.lower()
        yield "logger", record.name
        event = record.getMessage()
        if event:
            yield "event", event
        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                yield key, val
        if record.exc_info and record.exc_info[0] is not None:
            yield "exc_type", record.exc_info[0].__name__

    @staticmethod
    def _quote(val: Any) -> str:
        text = str(val)
        if isinstance(val, (int, float, bool)) or not (" " in text or "=" in text):
            return text
        return '"' + text.replace('"', '\\"') + '"'


def setup_logging(level: str = "INFO", handler: Optional[logging.Handler] = None) -> logging.Logger:
    """
    Attach a logfmt handler to the "jsonhal" logger and set its level.

    Other loggers and the root handlers are left alone. Calling it again only
    updates the level; a second logfmt handler is never added.
    """
    log = logging.getLogger(LIBRARY_LOGGER)
    if not any(isinstance(h.formatter, LogfmtFormatter) for h in log.handlers):
        handler = handler or logging.StreamHandler()
        handler.setFormatter(LogfmtFormatter())
        log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "LIBRARY_LOGGER"]
