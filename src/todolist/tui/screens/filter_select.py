"""Selection screens for the status, project and category filters.

Each screen lists "All" followed by every concrete value. Choosing an
entry sets (or, for "All", clears) one filter and shows the main list.
"""

from dataclasses import dataclass
from typing import Any, Callable

from todolist.models import VALID_STATUSES
from todolist.tui.components import render_option_list
from todolist.tui.components.markup import status_label
from todolist.tui.keys import KeyInput, is_back_key, is_confirm_key, is_quit_key
from todolist.tui.state import (
    AppState,
    Screen,
    clear_message,
    go_back,
    reset_selection,
)
from todolist.tui.screens.common import (
    compose_screen,
    enter_list_screen,
    handle_list_navigation,
    log_filters,
    quit_app,
    screen_header,
)

ALL_OPTION = "All"

SHORTCUTS = (
    ("↑↓/jk", "Navigate"),
    ("Enter", "Apply"),
    ("b/Esc", "Back"),
    ("q", "Quit"),
)


@dataclass(frozen=True)
class FilterChoice:
    """How one filter screen lists values and stores the chosen one."""

    values: Callable[[AppState], list[tuple[Any, str]]]
    current: Callable[[AppState], Any]
    apply: Callable[[AppState, Any], None]


def _status_values(state: AppState) -> list[tuple[Any, str]]:
    return [(status, status_label(status)) for status in VALID_STATUSES]


def _project_values(state: AppState) -> list[tuple[Any, str]]:
    return [(project.id, project.name) for project in state.projects]


def _category_values(state: AppState) -> list[tuple[Any, str]]:
    return [(category.id, category.name) for category in state.categories]


def _set_status(state: AppState, value: Any) -> None:
    state.filter_status = value


def _set_project(state: AppState, value: Any) -> None:
    state.filter_project_id = value


def _set_category(state: AppState, value: Any) -> None:
    state.filter_category_id = value


FILTER_CHOICES: dict[Screen, FilterChoice] = {
    Screen.FILTER_STATUS: FilterChoice(_status_values, lambda s: s.filter_status, _set_status),
    Screen.FILTER_PROJECT: FilterChoice(
        _project_values, lambda s: s.filter_project_id, _set_project
    ),
    Screen.FILTER_CATEGORY: FilterChoice(
        _category_values, lambda s: s.filter_category_id, _set_category
    ),
}


def options(state: AppState) -> list[tuple[Any, str]]:
    """(value, label) pairs for the current filter screen, "All" first."""
    choice = FILTER_CHOICES[state.current_screen]
    return [(None, ALL_OPTION)] + choice.values(state)


def render(state: AppState) -> str:
    choice = FILTER_CHOICES[state.current_screen]
    entries = options(state)
    current = choice.current(state)
    active = next(
        (position for position, (value, _) in enumerate(entries, start=1) if value == current),
        None,
    )
    body = render_option_list([label for _, label in entries], state.selected_index, active)
    return compose_screen(state, screen_header(state), body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    entries = options(state)
    if handle_list_navigation(state, key, entries):
        return

    if is_back_key(key):
        go_back(state)
        reset_selection(state)
    elif is_confirm_key(key):
        if not 1 <= state.selected_index <= len(entries):
            return
        value, _ = entries[state.selected_index - 1]
        FILTER_CHOICES[state.current_screen].apply(state, value)
        log_filters(state)
        enter_list_screen(state, Screen.MAIN_LIST)
