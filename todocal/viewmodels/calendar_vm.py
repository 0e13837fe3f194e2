"""Calendar/todo view model bound by the NiceGUI page.

Call context:
    ``todocal/web_ui/main.py`` builds one ``CalendarVM`` per page visit and
    routes widget events to the ``cmd_*``/setter methods below. Renderers read
    the accessor methods and never touch ``AppState`` directly.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional, Tuple

from ..domain import state as transitions
from ..domain.calendar_grid import CalendarWeek, generate_calendar, month_label
from ..domain.date_keys import (
    DateKey,
    format_long_date,
    format_short_date,
    normalize_date_key,
    to_date_key,
)
from ..domain.entities import Todo, ViewName
from ..domain.state import AppState
from ..domain.store import TodoStore
from ..domain.upcoming import (
    DateLabeler,
    OverviewStats,
    UpcomingTodo,
    get_overview_stats,
    get_upcoming_todos,
)


class CalendarVM:
    """Holds the session's ``AppState`` and exposes commands for the views.

    Every command applies a single transition from ``todocal.domain.state``
    and swaps the whole state object, then fires ``on_state_changed``.
    """

    def __init__(
        self,
        *,
        today: Optional[date] = None,
        state: Optional[AppState] = None,
        label_for: Optional[DateLabeler] = None,
        on_state_changed: Optional[Callable[[AppState], None]] = None,
    ) -> None:
        """Create a view model for one session.

        Args:
            today: Session date; defaults to the local wall-clock date.
            state: Optional pre-built state (tests, restored sessions).
            label_for: Date label formatter for overview rows.
            on_state_changed: Callback invoked after every state change.
        """
        self._log = logging.getLogger(__name__)
        self.today: date = today or date.today()
        self._state = state or AppState.initial(self.today)
        self._label_for = label_for or format_short_date
        self.on_state_changed = on_state_changed

    # ------------------------------------------------------------------
    # State snapshot
    # ------------------------------------------------------------------
    @property
    def state(self) -> AppState:
        return self._state

    @property
    def store(self) -> TodoStore:
        return self._state.store

    @property
    def selected_date(self) -> DateKey:
        return self._state.view.selected_date

    @property
    def current_view(self) -> ViewName:
        return self._state.view.current_view

    @property
    def input_value(self) -> str:
        return self._state.view.input_value

    @property
    def today_key(self) -> DateKey:
        return to_date_key(self.today)

    # ------------------------------------------------------------------
    # Commands surfaced to the views
    # ------------------------------------------------------------------
    def set_input(self, text: str) -> None:
        self._apply(transitions.set_input(self._state, text))

    def cmd_add(self) -> Optional[Todo]:
        """Add the draft to the selected date; return the new todo if any."""
        before = self._state
        self._apply(transitions.add_draft(before))
        return self._added_todo(before, before.view.selected_date)

    def cmd_add_text(self, text: str, date_key: Optional[DateKey] = None) -> Optional[Todo]:
        before = self._state
        self._apply(transitions.add_todo_to_state(before, text, date_key))
        key = normalize_date_key(date_key) if date_key is not None else before.view.selected_date
        return self._added_todo(before, key)

    def cmd_delete(self, todo_id: int, date_key: Optional[DateKey] = None) -> None:
        self._log.debug("Delete todo %s (date=%s)", todo_id, date_key or self.selected_date)
        self._apply(transitions.delete_todo_in_state(self._state, todo_id, date_key))

    def cmd_toggle(self, todo_id: int, date_key: Optional[DateKey] = None) -> None:
        self._log.debug("Toggle todo %s (date=%s)", todo_id, date_key or self.selected_date)
        self._apply(transitions.toggle_todo_in_state(self._state, todo_id, date_key))

    def select_date(self, date_key: DateKey) -> None:
        self._apply(transitions.select_date(self._state, date_key))

    def switch_view(self, view: ViewName) -> None:
        self._apply(transitions.switch_view(self._state, view))

    def toggle_view(self) -> None:
        self._apply(transitions.toggle_view(self._state))

    def cmd_view_in_calendar(self, date_key: DateKey) -> None:
        """Overview action: focus ``date_key`` and show the calendar together."""
        self._apply(transitions.show_in_calendar(self._state, date_key))

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    def current_todos(self) -> Tuple[Todo, ...]:
        return self.store.todos_for(self.selected_date)

    def upcoming_todos(self) -> List[UpcomingTodo]:
        return get_upcoming_todos(self.store, self.today_key, label_for=self._label_for)

    def overview_stats(self) -> OverviewStats:
        return get_overview_stats(self.upcoming_todos())

    def calendar_rows(self) -> List[CalendarWeek]:
        return generate_calendar(self.today, self.selected_date, self.store)

    def month_label(self) -> str:
        return month_label(self.today)

    def format_selected_date(self) -> str:
        return format_long_date(self.selected_date)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _apply(self, new_state: AppState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        if self.on_state_changed:
            self.on_state_changed(new_state)

    def _added_todo(self, before: AppState, date_key: DateKey) -> Optional[Todo]:
        if self._state.store is before.store:
            return None
        todo = self._state.store.todos_for(date_key)[-1]
        self._log.debug("Added todo %s for %s", todo.id, todo.date)
        return todo


__all__ = ["CalendarVM"]
