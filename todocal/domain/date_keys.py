from __future__ import annotations

"""Date-key helpers shared by the store, calendar grid, and view models.

A date-key is the zero-padded ``YYYY-MM-DD`` form of a calendar date. Keys sort
lexicographically in calendar order, which the upcoming aggregation relies on.
"""

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional

DateKey = str

_DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def to_date_key(value: date) -> DateKey:
    """Format a ``date`` (or ``datetime``) as a zero-padded date-key."""
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise TypeError("to_date_key requires a date instance.")
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(text: Any) -> date:
    """Parse a date-key into a ``date``; raise ``ValueError`` when malformed."""
    if isinstance(text, date) and not isinstance(text, datetime):
        return text
    token = str(text or "").strip()
    if not _DATE_KEY_PATTERN.match(token):
        raise ValueError(f"Invalid date key '{token}', expected YYYY-MM-DD.")
    try:
        return date.fromisoformat(token)
    except ValueError as exc:
        raise ValueError(f"Invalid date key '{token}': {exc}") from exc


def normalize_date_key(value: Any) -> DateKey:
    """Return the canonical date-key for a ``date`` or date-key string."""
    return to_date_key(parse_date_key(value))


def today_key(today: Optional[date] = None) -> DateKey:
    """Date-key for ``today`` or for the local wall-clock date."""
    return to_date_key(today or date.today())


def format_long_date(value: Any) -> str:
    """Render e.g. ``Saturday, June 15, 2024``."""
    day = parse_date_key(value)
    weekday = calendar.day_name[day.weekday()]
    month = calendar.month_name[day.month]
    return f"{weekday}, {month} {day.day}, {day.year}"


def format_short_date(value: Any) -> str:
    """Render e.g. ``Sat, Jun 15, 2024`` for list rows."""
    day = parse_date_key(value)
    weekday = calendar.day_abbr[day.weekday()]
    month = calendar.month_abbr[day.month]
    return f"{weekday}, {month} {day.day}, {day.year}"


def format_month_label(value: Any) -> str:
    """Render e.g. ``June 2024``."""
    day = parse_date_key(value)
    return f"{calendar.month_name[day.month]} {day.year}"


__all__ = [
    "DateKey",
    "format_long_date",
    "format_month_label",
    "format_short_date",
    "normalize_date_key",
    "parse_date_key",
    "to_date_key",
    "today_key",
]
