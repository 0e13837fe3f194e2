from __future__ import annotations

"""Aggregation of todos from today onwards for the overview panel."""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .date_keys import DateKey, format_short_date
from .store import TodoStore

DateLabeler = Callable[[DateKey], str]


@dataclass(frozen=True)
class UpcomingTodo:
    """Overview row: a todo plus a display label for its date."""

    id: int
    text: str
    completed: bool
    date: DateKey
    display_date: str


@dataclass(frozen=True)
class OverviewStats:
    total: int
    completed: int
    pending: int
    dates_with_todos: int


def _sort_key(row: UpcomingTodo) -> Tuple[DateKey, bool, int]:
    return (row.date, row.completed, row.id)


def get_upcoming_todos(
    store: TodoStore,
    today_key: DateKey,
    *,
    label_for: Optional[DateLabeler] = None,
) -> List[UpcomingTodo]:
    """Return todos dated ``today_key`` or later.

    Rows are ordered by date, then open before completed, then by id.
    """
    labeler = label_for or format_short_date
    labels = {}
    rows: List[UpcomingTodo] = []
    for date_key in store.date_keys():
        if date_key < today_key:
            continue
        for todo in store.todos_for(date_key):
            if date_key not in labels:
                labels[date_key] = labeler(date_key)
            rows.append(
                UpcomingTodo(
                    id=todo.id,
                    text=todo.text,
                    completed=todo.completed,
                    date=todo.date,
                    display_date=labels[date_key],
                )
            )
    rows.sort(key=_sort_key)
    return rows


def get_overview_stats(upcoming: Iterable[UpcomingTodo]) -> OverviewStats:
    """Summarize an already filtered upcoming sequence."""
    rows = list(upcoming)
    completed = sum(1 for row in rows if row.completed)
    return OverviewStats(
        total=len(rows),
        completed=completed,
        pending=len(rows) - completed,
        dates_with_todos=len({row.date for row in rows}),
    )


__all__ = ["DateLabeler", "OverviewStats", "UpcomingTodo", "get_overview_stats", "get_upcoming_todos"]
