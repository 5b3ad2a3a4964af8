"""Filter menu: pick which filter to change, or clear them all."""

from todolist.tui.components import render_filter_summary, render_option_list
from todolist.tui.components.markup import status_label
from todolist.tui.keys import KeyInput, is_back_key, is_confirm_key, is_quit_key
from todolist.tui.state import (
    AppState,
    MessageKind,
    Screen,
    category_name,
    clear_all_filters,
    clear_message,
    go_back,
    go_to_screen,
    project_name,
    refresh_data,
    reset_selection,
    set_message,
)
from todolist.tui.screens.common import (
    compose_screen,
    enter_list_screen,
    handle_list_navigation,
    log_filters,
    quit_app,
    screen_header,
)

MENU_OPTIONS = (
    "Filter by Status",
    "Filter by Project",
    "Filter by Category",
    "Clear All Filters",
)

_TARGETS = (Screen.FILTER_STATUS, Screen.FILTER_PROJECT, Screen.FILTER_CATEGORY)

SHORTCUTS = (
    ("↑↓/jk", "Navigate"),
    ("Enter", "Select"),
    ("b/Esc", "Back"),
    ("q", "Quit"),
)


def _menu_labels(state: AppState) -> list[str]:
    current = (
        status_label(state.filter_status) if state.filter_status else None,
        project_name(state, state.filter_project_id) if state.filter_project_id else None,
        category_name(state, state.filter_category_id) if state.filter_category_id else None,
    )
    labels = []
    for option, value in zip(MENU_OPTIONS, current):
        labels.append(f"{option} ({value})" if value else option)
    labels.append(MENU_OPTIONS[-1])
    return labels


def render(state: AppState) -> str:
    summary = render_filter_summary(
        state.filter_status,
        project_name(state, state.filter_project_id) if state.filter_project_id else None,
        category_name(state, state.filter_category_id) if state.filter_category_id else None,
    )
    header = screen_header(state, summary or "No filters active")
    body = render_option_list(_menu_labels(state), state.selected_index)
    return compose_screen(state, header, body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if handle_list_navigation(state, key, MENU_OPTIONS):
        return

    if is_back_key(key):
        go_back(state)
        reset_selection(state)
        refresh_data(state)
    elif is_confirm_key(key):
        choice = state.selected_index
        if choice <= len(_TARGETS):
            go_to_screen(state, _TARGETS[choice - 1])
            reset_selection(state)
        else:
            clear_all_filters(state)
            log_filters(state)
            enter_list_screen(state, Screen.MAIN_LIST)
            set_message(state, "All filters cleared", MessageKind.SUCCESS)
