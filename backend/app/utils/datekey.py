"""Date key formatting helpers

A date key is the canonical identifier of a calendar day: ``planner-YYYY-MM-DD``.
Months are zero-based on input (0 = January) to match calendar grid indices.
"""
import re
from datetime import date
from typing import Tuple

DATE_KEY_PREFIX = "planner-"
DATE_KEY_PATTERN = re.compile(r"^planner-(\d{4})-(\d{2})-(\d{2})$")

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def format_date_key(year: int, month: int, day: int) -> str:
    """
    Format a (year, zero-based month, day) triple as a date key

    Args:
        year: Year, 0-9999
        month: Month index, 0-11
        day: Day of month, 1-31

    Returns:
        Date key such as ``planner-2024-03-05``

    Raises:
        ValueError: If any component is out of range
    """
    if not 0 <= year <= 9999:
        raise ValueError(f"year out of range: {year}")
    if not 0 <= month <= 11:
        raise ValueError(f"month must be 0-11, got {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"day must be 1-31, got {day}")
    return f"{DATE_KEY_PREFIX}{year:04d}-{month + 1:02d}-{day:02d}"


def date_key_for(value: date) -> str:
    """Date key for a ``date`` (or ``datetime``)"""
    return format_date_key(value.year, value.month - 1, value.day)


def parse_date_key(date_key: str) -> Tuple[int, int, int]:
    """Inverse of ``format_date_key``: returns (year, zero-based month, day)"""
    match = DATE_KEY_PATTERN.match(date_key)
    if not match:
        raise ValueError(f"not a date key: {date_key!r}")
    year, month, day = (int(part) for part in match.groups())
    return year, month - 1, day


def is_date_key(value: str) -> bool:
    return bool(DATE_KEY_PATTERN.match(value))


def format_date_display(year: int, month: int, day: int) -> str:
    """Human readable date, e.g. ``March 5, 2024``"""
    return f"{MONTH_NAMES[month]} {day}, {year}"
