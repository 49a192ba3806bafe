"""Timestamp parsing for post identifiers and poll deadlines.

Two shapes are accepted:

- RFC 3339, e.g. ``2025-01-01T12:00:00+01:00`` or ``2025-01-01T12:00:00Z``
- the compact offset form ``2025-01-01T12:00:00+0100``

Anything else is "no time", which sorts last wherever posts are ordered.
"""

import re
from datetime import datetime

_RFC3339 = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_COMPACT_OFFSET = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{4}$")
_COMPACT_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a post timestamp.

    Args:
        value: Raw timestamp string

    Returns:
        Timezone-aware datetime, or None if the value is empty or not a
        recognized timestamp
    """
    if not value:
        return None

    match = _RFC3339.match(value)
    if match:
        fraction, offset = match.group(1), match.group(2)
        normalized = value[:10] + "T" + value[11:19]
        if fraction:
            # datetime keeps microseconds only
            normalized += fraction[:7]
        normalized += "+00:00" if offset in ("Z", "z") else offset
        try:
            return datetime.fromisoformat(normalized)
        except ValueError:
            return None

    if _COMPACT_OFFSET.match(value):
        try:
            return datetime.strptime(value, _COMPACT_FORMAT)
        except ValueError:
            return None

    return None


def current_timestamp() -> str:
    """Current local time as an RFC 3339 string with second precision."""
    return datetime.now().astimezone().replace(microsecond=0).isoformat()
