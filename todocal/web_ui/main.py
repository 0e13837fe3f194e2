"""NiceGUI entrypoint for the calendar todo page."""

from __future__ import annotations

import argparse
import logging
import os
from datetime import date
from typing import Any, Callable, Optional, Sequence

from nicegui import ui

from todocal.domain.calendar_grid import WEEKDAY_HEADERS, CalendarCell
from todocal.domain.date_keys import parse_date_key
from todocal.domain.entities import ViewName
from todocal.utils.logging import configure_root, level_name
from todocal.viewmodels.calendar_vm import CalendarVM
from todocal.web_ui.viewmodels import day_css_classes, group_upcoming_by_date, stats_chips

LOGGER = logging.getLogger(__name__)

VIEW_OPTIONS = {ViewName.CALENDAR.value: "Calendar", ViewName.OVERVIEW.value: "Overview"}


def _install_theme() -> None:
    """Install global CSS for the calendar page."""
    ui.add_head_html(
        """
<style>
:root {
  --todocal-bg: #f3f5f9;
  --todocal-card: #ffffff;
  --todocal-border: #d7dde8;
  --todocal-accent: #2563eb;
  --todocal-today: #dbeafe;
  --todocal-muted: #6b7280;
  --todocal-dot: #16a34a;
}
body { background: var(--todocal-bg); }
.todocal-page { max-width: 1040px; margin: 0 auto; padding: 24px; }
.todocal-card {
  background: var(--todocal-card);
  border: 1px solid var(--todocal-border);
  border-radius: 12px;
}
.todocal-muted { color: var(--todocal-muted); }
.todocal-chip {
  border: 1px solid var(--todocal-border);
  border-radius: 8px;
  padding: 2px 10px;
  font-size: 13px;
}
.todocal-day { position: relative; min-width: 40px; }
.todocal-day--overflow { opacity: 0.45; }
.todocal-day--today { background: var(--todocal-today) !important; font-weight: 700; }
.todocal-day--selected { background: var(--todocal-accent) !important; color: #fff !important; }
.todocal-day--has-todos::after {
  content: "";
  position: absolute;
  top: 4px;
  right: 4px;
  width: 7px;
  height: 7px;
  border-radius: 50%;
  background: var(--todocal-dot);
}
.todocal-done { text-decoration: line-through; color: var(--todocal-muted); }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    ui.notify(str(exc), color="negative", close_button="OK")


def _build_ui(today_provider: Callable[[], date]) -> None:
    """Register the NiceGUI page; each visit gets its own view model."""

    @ui.page("/")
    def index() -> None:
        vm = CalendarVM(today=today_provider())
        LOGGER.debug("New page session for %s", vm.today_key)

        def run(action: Callable[[], Any]) -> None:
            """Apply one VM command, then repaint."""
            try:
                action()
            except ValueError as exc:
                LOGGER.warning("Action rejected: %s", exc)
                _notify_error(exc)
                return
            render_header.refresh()
            render_body.refresh()

        @ui.refreshable
        def render_header() -> None:
            with ui.row().classes("w-full justify-between items-center q-mb-md"):
                ui.label("Calendar Todo App").classes("text-h4")
                ui.toggle(
                    VIEW_OPTIONS,
                    value=vm.current_view.value,
                    on_change=lambda e: run(lambda: vm.switch_view(ViewName(e.value))),
                )

        def render_day(cell: CalendarCell) -> None:
            ui.button(
                str(cell.day),
                on_click=lambda _, key=cell.date_key: run(lambda: vm.select_date(key)),
            ).props("flat dense").classes(day_css_classes(cell))

        def render_calendar_view() -> None:
            with ui.row().classes("w-full q-gutter-md items-start"):
                with ui.card().classes("todocal-card q-pa-md"):
                    ui.label(vm.month_label()).classes("text-h6")
                    with ui.grid(columns=7).classes("gap-1"):
                        for header in WEEKDAY_HEADERS:
                            ui.label(header).classes("text-center text-caption todocal-muted")
                        for week in vm.calendar_rows():
                            for cell in week:
                                render_day(cell)

                with ui.card().classes("todocal-card q-pa-md col"):
                    ui.label(f"Todos for {vm.format_selected_date()}").classes("text-h6")
                    with ui.row().classes("w-full items-center no-wrap"):
                        ui.input(
                            placeholder="Add a new todo...",
                            value=vm.input_value,
                            on_change=lambda e: vm.set_input(str(e.value or "")),
                        ).props("dense outlined").classes("col").on(
                            "keydown.enter", lambda _: run(vm.cmd_add)
                        )
                        ui.button("Add", on_click=lambda: run(vm.cmd_add), color="primary")

                    todos = vm.current_todos()
                    if not todos:
                        ui.label("No todos for this day yet. Add one above!").classes(
                            "todocal-muted q-mt-md"
                        )
                    for todo in todos:
                        with ui.row().classes("w-full items-center no-wrap"):
                            ui.checkbox(
                                value=todo.completed,
                                on_change=lambda _, t=todo: run(lambda: vm.cmd_toggle(t.id)),
                            )
                            ui.label(todo.text).classes(
                                "col todocal-done" if todo.completed else "col"
                            )
                            ui.button(
                                "Delete",
                                on_click=lambda _, t=todo: run(lambda: vm.cmd_delete(t.id)),
                            ).props("flat dense color=negative")

        def render_overview_view() -> None:
            with ui.card().classes("todocal-card q-pa-md w-full"):
                ui.label("Upcoming todos").classes("text-h6")
                with ui.row().classes("q-gutter-sm"):
                    for label, value in stats_chips(vm.overview_stats()):
                        ui.label(f"{label}: {value}").classes("todocal-chip")
                groups = group_upcoming_by_date(vm.upcoming_todos())
                if not groups:
                    ui.label("Nothing scheduled from today on.").classes("todocal-muted q-mt-md")
                for group in groups:
                    ui.label(group.label).classes("text-subtitle1 q-mt-md")
                    for row in group.rows:
                        # Rows span several dates, so every command passes row.date.
                        with ui.row().classes("w-full items-center no-wrap"):
                            ui.checkbox(
                                value=row.completed,
                                on_change=lambda _, r=row: run(lambda: vm.cmd_toggle(r.id, r.date)),
                            )
                            ui.label(row.text).classes(
                                "col todocal-done" if row.completed else "col"
                            )
                            ui.button(
                                "View in calendar",
                                on_click=lambda _, r=row: run(lambda: vm.cmd_view_in_calendar(r.date)),
                            ).props("flat dense")
                            ui.button(
                                "Delete",
                                on_click=lambda _, r=row: run(lambda: vm.cmd_delete(r.id, r.date)),
                            ).props("flat dense color=negative")

        @ui.refreshable
        def render_body() -> None:
            if vm.current_view is ViewName.OVERVIEW:
                render_overview_view()
            else:
                render_calendar_view()

        with ui.column().classes("todocal-page w-full"):
            render_header()
            render_body()


def _parse_today(text: str) -> date:
    try:
        return parse_date_key(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the calendar todo NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument(
        "--today",
        type=_parse_today,
        default=None,
        help="Pin the session date (YYYY-MM-DD) instead of the wall-clock date.",
    )
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    level = configure_root()
    LOGGER.debug("Effective log level: %s", level_name(level))
    pinned: Optional[date] = args.today
    if args.smoke_test:
        vm = CalendarVM(today=pinned)
        print("web-smoke-ok", vm.month_label(), f"weeks={len(vm.calendar_rows())}")
        return
    _install_theme()
    _build_ui(lambda: pinned or date.today())
    LOGGER.info("Serving calendar todo UI on http://%s:%s", args.host, args.port)
    ui.run(
        host=args.host,
        port=args.port,
        title="Calendar Todo App",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("TODOCAL_WEB_STORAGE_SECRET", "todocal-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
