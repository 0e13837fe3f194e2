from __future__ import annotations

import pytest

from todocal.domain.entities import Todo
from todocal.domain.store import TodoStore, add_todo, delete_todo, next_todo_id, toggle_todo

DAY = "2024-06-15"


def _store_with_two() -> TodoStore:
    store = add_todo(TodoStore.empty(), DAY, "Buy milk", now_ms=1_000)
    return add_todo(store, DAY, "Call Alex", now_ms=2_000)


@pytest.mark.parametrize("text", ["", " ", "   ", "\t", "\n", " \t\r\n "])
def test_add_todo_ignores_blank_text(text: str) -> None:
    store = _store_with_two()
    assert add_todo(store, DAY, text) is store
    assert add_todo(TodoStore.empty(), DAY, text).buckets == {}


def test_add_todo_trims_text_and_appends_in_order() -> None:
    store = add_todo(_store_with_two(), DAY, "  Water plants  ", now_ms=3_000)

    todos = store.todos_for(DAY)
    assert [todo.text for todo in todos] == ["Buy milk", "Call Alex", "Water plants"]
    assert todos[-1] == Todo(id=3_000, text="Water plants", date=DAY, completed=False)


def test_add_todo_does_not_mutate_input_store() -> None:
    before = _store_with_two()
    snapshot = dict(before.buckets)

    add_todo(before, DAY, "Another", now_ms=5_000)
    add_todo(before, "2024-06-16", "Elsewhere", now_ms=6_000)

    assert before.buckets == snapshot
    assert "2024-06-16" not in before.buckets


def test_next_todo_id_is_strictly_increasing_for_same_clock_tick() -> None:
    store = add_todo(TodoStore.empty(), DAY, "a", now_ms=42)
    store = add_todo(store, "2024-06-16", "b", now_ms=42)
    store = add_todo(store, DAY, "c", now_ms=10)

    ids = [todo.id for todo in store.all_todos()]
    assert sorted(ids) == [42, 43, 44]
    assert next_todo_id(store, now_ms=99) == 99
    assert next_todo_id(store, now_ms=44) == 45


def test_add_then_delete_restores_date_content() -> None:
    store = _store_with_two()
    added = add_todo(store, DAY, "Temporary", now_ms=9_000)
    new_id = added.todos_for(DAY)[-1].id

    restored = delete_todo(added, new_id, DAY)

    assert restored.todos_for(DAY) == store.todos_for(DAY)


def test_delete_keeps_emptied_bucket() -> None:
    store = add_todo(TodoStore.empty(), DAY, "Only one", now_ms=1)
    emptied = delete_todo(store, 1, DAY)

    assert DAY in emptied.buckets
    assert emptied.todos_for(DAY) == ()
    assert emptied.has_todos(DAY) is False


def test_delete_and_toggle_unknown_targets_are_noops() -> None:
    store = _store_with_two()

    assert delete_todo(store, 12345, DAY) is store
    assert delete_todo(store, 1_000, "2024-06-16") is store
    assert toggle_todo(store, 12345, DAY) is store
    assert toggle_todo(store, 1_000, "2024-06-16") is store
    assert "2024-06-16" not in store.buckets


def test_toggle_is_its_own_inverse() -> None:
    store = _store_with_two()

    once = toggle_todo(store, 2_000, DAY)
    twice = toggle_todo(once, 2_000, DAY)

    assert once.find(2_000, DAY).completed is True
    assert once.find(1_000, DAY).completed is False
    assert twice == store
    assert store.find(2_000, DAY).completed is False


def test_todo_rejects_blank_text() -> None:
    with pytest.raises(ValueError):
        Todo(id=1, text="  ", date=DAY)


def test_add_todo_rejects_explicit_id_already_in_store() -> None:
    store = add_todo(TodoStore.empty(), DAY, "a", todo_id=7)
    store = add_todo(store, "2024-06-16", "b", todo_id=8)

    with pytest.raises(ValueError):
        add_todo(store, DAY, "c", todo_id=7)
    with pytest.raises(ValueError):
        add_todo(store, "2024-06-20", "d", todo_id=8)

    ids = [todo.id for todo in store.all_todos()]
    assert len(set(ids)) == len(ids)
    assert delete_todo(store, 7, DAY).todos_for(DAY) == ()
    assert delete_todo(store, 7, DAY).todos_for("2024-06-16") == store.todos_for("2024-06-16")


def test_store_rejects_todo_filed_under_another_date() -> None:
    misplaced = Todo(id=1, text="Wrong bucket", date="2024-06-20")

    with pytest.raises(ValueError):
        TodoStore({DAY: (misplaced,)})
    with pytest.raises(ValueError):
        TodoStore.empty().with_bucket(DAY, (misplaced,))
