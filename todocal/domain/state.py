"""Whole-state transitions consumed by ``CalendarVM``.

Call context:
    ``CalendarVM`` commands each call exactly one function here and replace
    their current ``AppState`` with the result, so a view never observes a
    store update without the matching view-state update.

Responsibilities:
    - Resolve the "date defaults to the selected date" rule for delete/toggle.
    - Keep view navigation (``show_in_calendar``) atomic.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Optional

from .date_keys import DateKey, normalize_date_key, today_key
from .entities import ViewName, ViewState
from .store import TodoStore, add_todo, delete_todo, toggle_todo


@dataclass(frozen=True)
class AppState:
    """Store plus view state, replaced as a unit on every action."""

    view: ViewState
    store: TodoStore = field(default_factory=TodoStore.empty)

    @classmethod
    def initial(cls, today: Optional[date] = None) -> "AppState":
        """Fresh session state with ``selected_date`` set to today."""
        return cls(view=ViewState(selected_date=today_key(today)))


def _resolve_date(state: AppState, date_key: Optional[DateKey]) -> DateKey:
    if date_key is None:
        return state.view.selected_date
    return normalize_date_key(date_key)


def set_input(state: AppState, text: str) -> AppState:
    return replace(state, view=replace(state.view, input_value=text or ""))


def select_date(state: AppState, date_key: DateKey) -> AppState:
    """Select any date, including overflow days from adjacent months."""
    key = normalize_date_key(date_key)
    return replace(state, view=replace(state.view, selected_date=key))


def add_todo_to_state(
    state: AppState,
    text: str,
    date_key: Optional[DateKey] = None,
    *,
    now_ms: Optional[int] = None,
) -> AppState:
    store = add_todo(state.store, _resolve_date(state, date_key), text, now_ms=now_ms)
    if store is state.store:
        return state
    return replace(state, store=store)


def add_draft(state: AppState, *, now_ms: Optional[int] = None) -> AppState:
    """Add the draft input to the selected date and clear it on success.

    A blank draft leaves both the store and the draft untouched.
    """
    updated = add_todo_to_state(state, state.view.input_value, now_ms=now_ms)
    if updated is state:
        return state
    return replace(updated, view=replace(updated.view, input_value=""))


def delete_todo_in_state(
    state: AppState, todo_id: int, date_key: Optional[DateKey] = None
) -> AppState:
    """Delete ``todo_id``; ``date_key=None`` targets the selected date.

    Callers listing todos from several dates must pass the todo's own date.
    """
    store = delete_todo(state.store, todo_id, _resolve_date(state, date_key))
    if store is state.store:
        return state
    return replace(state, store=store)


def toggle_todo_in_state(
    state: AppState, todo_id: int, date_key: Optional[DateKey] = None
) -> AppState:
    """Toggle ``todo_id``; same date default as ``delete_todo_in_state``."""
    store = toggle_todo(state.store, todo_id, _resolve_date(state, date_key))
    if store is state.store:
        return state
    return replace(state, store=store)


def switch_view(state: AppState, view: ViewName) -> AppState:
    return replace(state, view=replace(state.view, current_view=ViewName(view)))


def toggle_view(state: AppState) -> AppState:
    return switch_view(state, state.view.current_view.other())


def show_in_calendar(state: AppState, date_key: DateKey) -> AppState:
    """Jump from the overview to the calendar focused on ``date_key``."""
    key = normalize_date_key(date_key)
    view = replace(state.view, selected_date=key, current_view=ViewName.CALENDAR)
    return replace(state, view=view)


__all__ = [
    "AppState",
    "add_draft",
    "add_todo_to_state",
    "delete_todo_in_state",
    "select_date",
    "set_input",
    "show_in_calendar",
    "switch_view",
    "toggle_todo_in_state",
    "toggle_view",
]
