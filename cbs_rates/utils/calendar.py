"""Calendar helpers for deciding when CBS publishes new rates."""

from __future__ import annotations

from datetime import date, datetime
from typing import Final

# ``date.weekday()`` numbering: Monday is 0, Saturday 5, Sunday 6.
WEEKEND_DAYS: Final[frozenset[int]] = frozenset({5, 6})


def is_weekend(day: date) -> bool:
    """Return ``True`` when ``day`` falls on a Saturday or Sunday."""

    return day.weekday() in WEEKEND_DAYS


def local_date_from_timestamp(timestamp: float) -> date:
    """Convert a POSIX timestamp into the local calendar date."""

    return datetime.fromtimestamp(timestamp).date()


__all__ = ["WEEKEND_DAYS", "is_weekend", "local_date_from_timestamp"]
