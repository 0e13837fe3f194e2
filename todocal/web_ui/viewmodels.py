"""Thin web-facing projections for NiceGUI bindings.

These helpers turn ``CalendarVM`` read models into CSS classes and grouped
rows without touching state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from todocal.domain.calendar_grid import CalendarCell
from todocal.domain.upcoming import OverviewStats, UpcomingTodo


@dataclass
class UpcomingGroup:
    """Overview section: one date heading and its rows."""

    date: str
    label: str
    rows: List[UpcomingTodo]


def day_css_classes(cell: CalendarCell) -> str:
    """CSS classes for one calendar day button."""
    classes = ["todocal-day"]
    if not cell.is_current_month:
        classes.append("todocal-day--overflow")
    if cell.is_today:
        classes.append("todocal-day--today")
    if cell.is_selected:
        classes.append("todocal-day--selected")
    if cell.has_todos:
        classes.append("todocal-day--has-todos")
    return " ".join(classes)


def group_upcoming_by_date(rows: Sequence[UpcomingTodo]) -> List[UpcomingGroup]:
    """Split an already sorted upcoming list into consecutive date groups."""
    groups: List[UpcomingGroup] = []
    for row in rows:
        if not groups or groups[-1].date != row.date:
            groups.append(UpcomingGroup(date=row.date, label=row.display_date, rows=[]))
        groups[-1].rows.append(row)
    return groups


def stats_chips(stats: OverviewStats) -> List[Tuple[str, int]]:
    return [
        ("Total", stats.total),
        ("Pending", stats.pending),
        ("Completed", stats.completed),
        ("Days", stats.dates_with_todos),
    ]


__all__ = ["UpcomingGroup", "day_css_classes", "group_upcoming_by_date", "stats_chips"]
