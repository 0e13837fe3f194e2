"""Date-keyed todo storage and its pure mutation functions.

Call context:
    ``todocal.domain.state`` wraps these functions into whole-state
    transitions; ``CalendarVM`` never calls them with a mutable store.

Every function returns a new ``TodoStore`` and leaves its input untouched.
Degenerate inputs (blank text, unknown ids) return the input store as-is.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .date_keys import DateKey, normalize_date_key
from .entities import Todo

Bucket = Tuple[Todo, ...]


@dataclass(frozen=True)
class TodoStore:
    """Immutable mapping of date-key -> todos in insertion order.

    Buckets emptied by deletions are kept rather than pruned.
    """

    buckets: Mapping[DateKey, Bucket] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized: Dict[DateKey, Bucket] = {}
        for raw_key, todos in dict(self.buckets).items():
            key = normalize_date_key(raw_key)
            bucket = tuple(todos)
            for todo in bucket:
                if todo.date != key:
                    raise ValueError(
                        f"Todo {todo.id} is dated {todo.date} but filed under {key}."
                    )
            normalized[key] = bucket
        object.__setattr__(self, "buckets", normalized)

    @classmethod
    def empty(cls) -> "TodoStore":
        return cls()

    def todos_for(self, date_key: DateKey) -> Bucket:
        """Return the bucket for ``date_key`` (empty when absent)."""
        return self.buckets.get(date_key, ())

    def has_todos(self, date_key: DateKey) -> bool:
        return len(self.todos_for(date_key)) > 0

    def date_keys(self) -> Tuple[DateKey, ...]:
        return tuple(self.buckets.keys())

    def all_todos(self) -> Iterator[Todo]:
        for todos in self.buckets.values():
            yield from todos

    def find(self, todo_id: int, date_key: DateKey) -> Optional[Todo]:
        for todo in self.todos_for(date_key):
            if todo.id == todo_id:
                return todo
        return None

    def with_bucket(self, date_key: DateKey, todos: Bucket) -> "TodoStore":
        buckets = dict(self.buckets)
        buckets[date_key] = tuple(todos)
        return TodoStore(buckets)


def _clock_ms() -> int:
    return int(time.time() * 1000)


def next_todo_id(store: TodoStore, now_ms: Optional[int] = None) -> int:
    """Return a time-derived id strictly greater than every id in ``store``."""
    candidate = _clock_ms() if now_ms is None else int(now_ms)
    highest = max((todo.id for todo in store.all_todos()), default=None)
    if highest is not None and candidate <= highest:
        candidate = highest + 1
    return candidate


def add_todo(
    store: TodoStore,
    date_key: DateKey,
    text: str,
    *,
    todo_id: Optional[int] = None,
    now_ms: Optional[int] = None,
) -> TodoStore:
    """Append a new incomplete todo for ``date_key``; blank text is a no-op.

    An explicit ``todo_id`` already present anywhere in ``store`` raises
    ``ValueError``.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return store
    key = normalize_date_key(date_key)
    if todo_id is None:
        new_id = next_todo_id(store, now_ms)
    elif any(todo.id == todo_id for todo in store.all_todos()):
        raise ValueError(f"Todo id {todo_id} is already in use.")
    else:
        new_id = todo_id
    todo = Todo(id=new_id, text=cleaned, date=key, completed=False)

    buckets = dict(store.buckets)
    if key not in buckets:
        buckets[key] = ()
    buckets[key] = buckets[key] + (todo,)
    return TodoStore(buckets)


def delete_todo(store: TodoStore, todo_id: int, date_key: DateKey) -> TodoStore:
    """Remove the todo ``todo_id`` from the bucket at ``date_key``."""
    bucket = store.todos_for(date_key)
    remaining = tuple(todo for todo in bucket if todo.id != todo_id)
    if len(remaining) == len(bucket):
        return store
    return store.with_bucket(date_key, remaining)


def toggle_todo(store: TodoStore, todo_id: int, date_key: DateKey) -> TodoStore:
    """Flip ``completed`` on the todo ``todo_id`` at ``date_key``."""
    bucket = store.todos_for(date_key)
    if not any(todo.id == todo_id for todo in bucket):
        return store
    updated = tuple(todo.toggled() if todo.id == todo_id else todo for todo in bucket)
    return store.with_bucket(date_key, updated)


__all__ = [
    "Bucket",
    "TodoStore",
    "add_todo",
    "delete_todo",
    "next_todo_id",
    "toggle_todo",
]
