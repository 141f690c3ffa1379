from __future__ import annotations

import re
from datetime import datetime

# RFC 3339 requires a full date, a "T" (or space) separator and an offset
RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


class TimestampParseError(ValueError):
    """Raised when a string is not an RFC 3339 timestamp."""


def parse_timestamp(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp such as "2006-01-02T15:04:05Z" into an aware datetime.

    Rules:
    - The UTC offset is mandatory ("Z" or "+hh:mm").
    - Fractional seconds are accepted.
    - Surrounding whitespace is ignored.
    """
    if value is None:
        raise TimestampParseError("Timestamp is required.")

    text = value.strip()
    if not text:
        raise TimestampParseError("Timestamp is required.")
    if not RFC3339_RE.match(text):
        raise TimestampParseError(f"Timestamp {value!r} is not in RFC 3339 format.")

    try:
        return datetime.fromisoformat(text.upper())
    except ValueError as exc:
        # shape is right but the fields are out of range, e.g. month 13
        raise TimestampParseError(f"Timestamp {value!r} is out of range: {exc}") from exc
