"""Month grid generation for the calendar panel."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Tuple

from .date_keys import DateKey, format_month_label, to_date_key
from .store import TodoStore

WEEKDAY_HEADERS: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MAX_WEEKS = 6
# Rows with index >= this may end the grid once the next month has started.
EARLY_BREAK_ROW = 4


@dataclass(frozen=True)
class CalendarCell:
    """One day button in the month grid."""

    date: date
    date_key: DateKey
    day: int
    is_current_month: bool
    is_today: bool
    is_selected: bool
    has_todos: bool


CalendarWeek = List[CalendarCell]


def grid_start(today: date) -> date:
    """Sunday on or before the first of ``today``'s month."""
    first = today.replace(day=1)
    # date.weekday(): Monday=0 .. Sunday=6
    offset = (first.weekday() + 1) % 7
    return first - timedelta(days=offset)


def generate_calendar(
    today: date, selected_date: DateKey, store: TodoStore
) -> List[CalendarWeek]:
    """Build the week rows for the month containing ``today``.

    The grid always starts on a Sunday and holds 5 or 6 full weeks: after the
    fifth row, iteration stops as soon as the following day falls outside the
    displayed month.
    """
    month = today.month
    today_token = to_date_key(today)
    current = grid_start(today)

    weeks: List[CalendarWeek] = []
    for week in range(MAX_WEEKS):
        row: CalendarWeek = []
        for _ in range(7):
            key = to_date_key(current)
            row.append(
                CalendarCell(
                    date=current,
                    date_key=key,
                    day=current.day,
                    is_current_month=current.month == month,
                    is_today=key == today_token,
                    is_selected=key == selected_date,
                    has_todos=store.has_todos(key),
                )
            )
            current = current + timedelta(days=1)
        weeks.append(row)
        if current.month != month and week >= EARLY_BREAK_ROW:
            break
    return weeks


def month_label(today: date) -> str:
    """Heading for the displayed month, always derived from ``today``."""
    return format_month_label(today)


__all__ = [
    "CalendarCell",
    "CalendarWeek",
    "WEEKDAY_HEADERS",
    "generate_calendar",
    "grid_start",
    "month_label",
]
