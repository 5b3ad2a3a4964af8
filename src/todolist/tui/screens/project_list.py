"""Project management list."""

from todolist.models import EntityKind
from todolist.tui.components import render_project_table
from todolist.tui.keys import (
    KEY_ADD,
    KEY_DELETE,
    KEY_EDIT,
    KeyInput,
    is_back_key,
    is_char,
    is_confirm_key,
    is_quit_key,
)
from todolist.tui.state import (
    VISIBLE_ROWS,
    AppState,
    Screen,
    clear_message,
    go_back,
    go_to_screen,
    refresh_data,
    reset_selection,
    selected_item,
    setup_delete,
)
from todolist.tui.screens.common import (
    compose_screen,
    enter_list_screen,
    handle_list_navigation,
    log_filters,
    quit_app,
    screen_header,
)
from todolist.tui.screens.project_form import open_project_add, open_project_edit

SHORTCUTS = (
    ("↑↓/jk", "Navigate"),
    ("Enter", "Show todos"),
    ("a", "Add"),
    ("e", "Edit"),
    ("d", "Delete"),
    ("b/Esc", "Back"),
    ("q", "Quit"),
)


def render(state: AppState) -> str:
    counts = state.repo.todo_counts_by_project()
    count = len(state.projects)
    header = screen_header(state, f"[{count} project{'' if count == 1 else 's'}]")
    body = render_project_table(
        state.projects, counts, state.selected_index, state.scroll_offset, VISIBLE_ROWS
    )
    return compose_screen(state, header, body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if handle_list_navigation(state, key, state.projects):
        return

    if is_back_key(key):
        go_back(state)
        reset_selection(state)
        refresh_data(state)
        return
    if is_char(key, KEY_ADD):
        open_project_add(state)
        return

    project = selected_item(state, state.projects)
    if project is None:
        return

    if is_confirm_key(key):
        state.filter_project_id = project.id
        log_filters(state)
        enter_list_screen(state, Screen.MAIN_LIST)
    elif is_char(key, KEY_EDIT):
        open_project_edit(state, project)
    elif is_char(key, KEY_DELETE):
        setup_delete(state, EntityKind.PROJECT, project.id, project.name)
        go_to_screen(state, Screen.DELETE_CONFIRM)
