"""Helpers shared by several screens."""

import logging
from typing import Sequence

from todolist.errors import AppError
from todolist.logging_utils import log_event
from todolist.models import Todo, TodoStatus
from todolist.tui.components import render_footer, render_header, render_message
from todolist.tui.components.markup import status_label
from todolist.tui.keys import KeyInput, navigation_direction
from todolist.tui.state import (
    AppState,
    SCREEN_TITLES,
    MessageKind,
    Screen,
    move_selection,
    refresh_data,
    reset_selection,
    set_message,
)


def compose_screen(
    state: AppState,
    header: str,
    body: str,
    shortcuts: Sequence[tuple[str, str]],
) -> str:
    """Stack header, body, message banner and footer."""
    parts = [header, "", body, ""]
    banner = render_message(state.message, state.message_kind)
    if banner:
        parts.extend([banner, ""])
    parts.append(render_footer(shortcuts))
    return "\n".join(parts)


def screen_header(state: AppState, subtitle: str | None = None) -> str:
    """Header titled after the current screen."""
    return render_header(SCREEN_TITLES[state.current_screen], subtitle)


def quit_app(state: AppState) -> None:
    state.running = False


def handle_list_navigation(state: AppState, key: KeyInput, items: Sequence) -> bool:
    """Move the cursor for up/down keys; returns True if key was consumed."""
    direction = navigation_direction(key)
    if direction == 0:
        return False
    move_selection(state, direction, items)
    return True


def enter_list_screen(state: AppState, screen: Screen) -> None:
    """Show a list screen with a fresh cursor, clearing the back slot."""
    state.current_screen = screen
    state.previous_screen = None
    reset_selection(state)
    refresh_data(state)


def report_persistence_error(
    state: AppState,
    operation: str,
    error: AppError,
    prefix: str,
) -> None:
    """Turn a storage failure into an error message."""
    log_event(
        "persistence_error",
        level=logging.WARNING,
        operation=operation,
        error_type=type(error).__name__,
        error=str(error),
    )
    set_message(state, f"{prefix}: {error}", MessageKind.ERROR)


def toggle_todo_status(state: AppState, todo: Todo) -> bool:
    """Flip a todo between pending and completed.

    Returns True when the change was persisted.
    """
    if todo.id is None:
        return False
    new_status = (
        TodoStatus.PENDING.value if todo.is_completed else TodoStatus.COMPLETED.value
    )
    try:
        updated = state.repo.update_todo(todo.id, status=new_status)
    except AppError as e:
        report_persistence_error(state, "toggle_todo", e, "Error updating todo")
        return False

    if not updated:
        refresh_data(state)
        set_message(state, "Todo no longer exists", MessageKind.ERROR)
        return False

    log_event(
        "todo_status_toggled",
        id=todo.id,
        old_status=todo.status,
        new_status=new_status,
    )
    refresh_data(state)
    set_message(
        state,
        f"Marked '{todo.title}' as {status_label(new_status)}",
        MessageKind.SUCCESS,
    )
    return True


def log_filters(state: AppState) -> None:
    log_event(
        "filters_changed",
        status=state.filter_status,
        project_id=state.filter_project_id,
        category_id=state.filter_category_id,
    )
