from __future__ import annotations

from datetime import date

from todocal.domain.calendar_grid import CalendarCell
from todocal.domain.upcoming import OverviewStats, UpcomingTodo
from todocal.web_ui.viewmodels import day_css_classes, group_upcoming_by_date, stats_chips


def _cell(**flags) -> CalendarCell:
    base = dict(
        date=date(2024, 6, 15),
        date_key="2024-06-15",
        day=15,
        is_current_month=True,
        is_today=False,
        is_selected=False,
        has_todos=False,
    )
    base.update(flags)
    return CalendarCell(**base)


def _row(todo_id: int, day: str, completed: bool = False) -> UpcomingTodo:
    return UpcomingTodo(
        id=todo_id, text=f"t{todo_id}", completed=completed, date=day, display_date=f"label {day}"
    )


def test_day_css_classes_reflect_cell_flags() -> None:
    assert day_css_classes(_cell()) == "todocal-day"
    classes = day_css_classes(
        _cell(is_current_month=False, is_today=True, is_selected=True, has_todos=True)
    ).split()
    assert classes == [
        "todocal-day",
        "todocal-day--overflow",
        "todocal-day--today",
        "todocal-day--selected",
        "todocal-day--has-todos",
    ]


def test_group_upcoming_by_date_keeps_order() -> None:
    rows = [_row(3, "2024-06-09"), _row(2, "2024-06-10"), _row(1, "2024-06-10", True)]

    groups = group_upcoming_by_date(rows)

    assert [(group.date, group.label) for group in groups] == [
        ("2024-06-09", "label 2024-06-09"),
        ("2024-06-10", "label 2024-06-10"),
    ]
    assert [row.id for row in groups[1].rows] == [2, 1]
    assert group_upcoming_by_date([]) == []


def test_stats_chips_order() -> None:
    chips = stats_chips(OverviewStats(total=3, completed=1, pending=2, dates_with_todos=2))
    assert chips == [("Total", 3), ("Pending", 2), ("Completed", 1), ("Days", 2)]
