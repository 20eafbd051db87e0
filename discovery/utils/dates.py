"""
Date helpers for work history and education entries.

Store documents carry dates in several shapes: Firestore timestamps (datetime
subclasses), ISO strings, or {"seconds", "nanoseconds"} mappings written by
older clients. Everything is normalised to a calendar date.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

DAYS_PER_YEAR = 365.25


def to_date(value: Any) -> Optional[date]:
    """Normalise a stored date value to a date. None and "" stay None."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, dict) and "seconds" in value:
        try:
            return datetime.fromtimestamp(int(value["seconds"]), tz=timezone.utc).date()
        except (TypeError, OverflowError, OSError) as e:
            raise ValueError(f"invalid timestamp {value!r}") from e
    if isinstance(value, str):
        text = value.strip().replace("Z", "+00:00")
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return date.fromisoformat(text[:10])
    raise ValueError(f"unsupported date value {value!r}")


def years_between(start: date, end: date) -> float:
    """Whole span in years (one decimal). Spans that end before they start count as 0."""
    days = (end - start).days
    if days <= 0:
        return 0.0
    return round(days / DAYS_PER_YEAR, 1)
