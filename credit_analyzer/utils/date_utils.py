"""Date manipulation utilities"""

from datetime import date
from typing import Iterable, Tuple

DAYS_PER_YEAR = 365.25


def years_between(start: date, end: date) -> float:
    """Fractional years from start to end (negative if end precedes start)"""
    return (end - start).days / DAYS_PER_YEAR


def date_bounds(dates: Iterable[date]) -> Tuple[date, date]:
    """Return (earliest, latest) of a non-empty collection of dates"""
    ordered = sorted(dates)
    if not ordered:
        raise ValueError("date_bounds() requires at least one date")
    return ordered[0], ordered[-1]
