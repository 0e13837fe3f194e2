"""Domain value objects for todos and view state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .date_keys import DateKey, normalize_date_key


@dataclass(frozen=True)
class Todo:
    """Single task attached to one calendar date."""

    id: int
    """Unique, time-derived identifier (creation timestamp in milliseconds)."""

    text: str
    """Trimmed, non-empty task text."""

    date: DateKey
    """Date-key of the bucket that owns this todo."""

    completed: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("Todo.id must be an integer.")
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("Todo.text must be a non-empty string.")
        if self.text != self.text.strip():
            object.__setattr__(self, "text", self.text.strip())
        object.__setattr__(self, "date", normalize_date_key(self.date))
        object.__setattr__(self, "completed", bool(self.completed))

    def toggled(self) -> "Todo":
        return Todo(id=self.id, text=self.text, date=self.date, completed=not self.completed)


class ViewName(str, Enum):
    """Top-level views the page can show."""

    CALENDAR = "calendar"
    OVERVIEW = "overview"

    def other(self) -> "ViewName":
        return ViewName.OVERVIEW if self is ViewName.CALENDAR else ViewName.CALENDAR


@dataclass(frozen=True)
class ViewState:
    """UI-facing selection, active view, and add-box draft."""

    selected_date: DateKey
    current_view: ViewName = ViewName.CALENDAR
    input_value: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected_date", normalize_date_key(self.selected_date))
        object.__setattr__(self, "current_view", ViewName(self.current_view))
        if self.input_value is None:
            object.__setattr__(self, "input_value", "")
        elif not isinstance(self.input_value, str):
            raise TypeError("ViewState.input_value must be a string.")


__all__ = ["Todo", "ViewName", "ViewState"]
