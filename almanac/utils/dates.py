#!/usr/bin/env python3
"""
dates.py
--------
Date helpers shared by the blog, calendar and filter code.

Metadata dates arrive either as date/datetime objects (YAML frontmatter
parses bare dates) or as strings. Everything downstream works on the
ISO YYYY-MM-DD string form.

Functions:
    date_or_string: Render a date-like value as an ISO string
    effective_date: Item date used for feeds and calendars
    year_month: Extract (year, month) from an ISO date string
    month_name: Full month name for a month number
    to_datetime: Coerce a date-like value into a datetime
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
import re
from datetime import date, datetime, timezone
from typing import Any, Optional, Tuple

DATE_PREFIX = re.compile(r"^(\d+)-(\d+)-(\d+)")


def date_or_string(value: Any) -> str:
    """
    Render a date-like value as a string.

    date and datetime values become ISO YYYY-MM-DD (aware datetimes are
    converted to UTC first); anything else goes through str().

    Examples:
        >>> date_or_string(date(2024, 1, 5))
        '2024-01-05'
        >>> date_or_string("2024-01-05T10:00:00")
        '2024-01-05T10:00:00'
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def effective_date(item: Any) -> str:
    """
    Date of an item as an ISO string truncated to 10 characters.

    `metadata.created` wins over the item's own date.
    """
    created = item.metadata.get("created")
    value = created if created else item.date
    return date_or_string(value)[:10]


def year_month(value: str) -> Optional[Tuple[str, str]]:
    """
    Extract year and month from a string starting with Y-M-D.

    Both come back zero-padded whatever the padding of the input, so
    "2024-1-20" and "2024-01-05" fall in the same month.

    Returns:
        (YYYY, MM), or None if the string does not start with a date or
        the month is outside 1..12

    Examples:
        >>> year_month("2024-01-15")
        ('2024', '01')
        >>> year_month("2024-1-20")
        ('2024', '01')
        >>> year_month("soon") is None
        True
    """
    match = DATE_PREFIX.match(value)
    if not match:
        return None
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        return None
    return f"{year:04d}", f"{month:02d}"


def month_name(month: int | str) -> str:
    """
    Full month name for a 1-based month number.

    Raises:
        ValueError: If month is outside 1..12
    """
    number = int(month)
    if not 1 <= number <= 12:
        raise ValueError(f"Month out of range: {month!r}")
    return calendar.month_name[number]


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Coerce a date, datetime or ISO string into a datetime.

    Returns:
        The datetime, or None if the value is empty or not a date
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    for candidate in (text, text[:10]):
        try:
            return datetime.fromisoformat(candidate)
        except ValueError:
            continue
    return None
