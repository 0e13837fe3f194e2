"""Domain package exports for todo value objects and pure transitions."""

from .calendar_grid import WEEKDAY_HEADERS, CalendarCell, generate_calendar, month_label
from .date_keys import (
    DateKey,
    format_long_date,
    format_short_date,
    normalize_date_key,
    parse_date_key,
    to_date_key,
    today_key,
)
from .entities import Todo, ViewName, ViewState
from .state import AppState
from .store import TodoStore, add_todo, delete_todo, next_todo_id, toggle_todo
from .upcoming import OverviewStats, UpcomingTodo, get_overview_stats, get_upcoming_todos

__all__ = [
    "AppState",
    "CalendarCell",
    "DateKey",
    "OverviewStats",
    "Todo",
    "TodoStore",
    "UpcomingTodo",
    "ViewName",
    "ViewState",
    "WEEKDAY_HEADERS",
    "add_todo",
    "delete_todo",
    "format_long_date",
    "format_short_date",
    "generate_calendar",
    "get_overview_stats",
    "get_upcoming_todos",
    "month_label",
    "next_todo_id",
    "normalize_date_key",
    "parse_date_key",
    "to_date_key",
    "today_key",
    "toggle_todo",
]
