"""
Transaction time formatting for the viewer summary.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional

# date-only ISO strings are midnight UTC, not local midnight
_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# slash-separated forms read as local time
_LOCAL_FORMATS = ("%Y/%m/%d %H:%M:%S", "%Y/%m/%d %H:%M", "%Y/%m/%d")


def _parse_string(raw: str) -> Optional[datetime]:
    if _DATE_ONLY.match(raw):
        try:
            return datetime.fromisoformat(raw).replace(tzinfo=timezone.utc)
        except ValueError:
            return None

    iso = raw[:-1] + "+00:00" if raw[-1] in "zZ" else raw
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    # RFC 1123 / 2822, e.g. "Tue, 05 Mar 2024 13:07:09 GMT"
    try:
        return parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError):
        pass

    for fmt in _LOCAL_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    return None


def _parse(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        raw = value.strip()
        return _parse_string(raw) if raw else None
    return None


def format_transaction_time(value: Any) -> Optional[str]:
    """Render ``value`` as ``YYYY-MM-DD HH:MM:SS`` in server local time.

    Accepts ISO-8601 (date-only means midnight UTC), RFC 2822 dates,
    ``YYYY/MM/DD[ HH:MM[:SS]]``, ``datetime`` objects and epoch
    milliseconds. Naive date-times are read as local time. Returns
    ``None`` for anything that does not parse; never raises.
    """
    parsed = _parse(value)
    if parsed is None:
        return None
    try:
        local = parsed.astimezone()
    except (OverflowError, OSError, ValueError):
        return None
    return (
        f"{local.year:04d}-{local.month:02d}-{local.day:02d} "
        f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )
