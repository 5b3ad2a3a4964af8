"""Main todo list."""

from todolist.models import EntityKind
from todolist.tui.components import render_filter_summary, render_todo_table
from todolist.tui.keys import (
    KEY_ADD,
    KEY_CATEGORIES,
    KEY_DELETE,
    KEY_EDIT,
    KEY_FILTER,
    KEY_PROJECTS,
    KEY_TOGGLE,
    KeyInput,
    is_char,
    is_confirm_key,
    is_quit_key,
)
from todolist.tui.state import (
    VISIBLE_ROWS,
    AppState,
    Screen,
    category_name,
    clear_message,
    go_to_screen,
    project_name,
    reset_selection,
    selected_item,
    setup_delete,
)
from todolist.tui.screens.common import (
    compose_screen,
    handle_list_navigation,
    quit_app,
    screen_header,
    toggle_todo_status,
)
from todolist.tui.screens.todo_form import open_todo_add, open_todo_edit

SHORTCUTS = (
    ("↑↓/jk", "Navigate"),
    ("Enter", "View"),
    ("a", "Add"),
    ("e", "Edit"),
    ("d", "Delete"),
    ("c", "Toggle done"),
    ("f", "Filter"),
    ("p", "Projects"),
    ("g", "Categories"),
    ("q", "Quit"),
)


def subtitle(state: AppState) -> str:
    """``[Filter: ...] [N items]`` line under the title."""
    summary = render_filter_summary(
        state.filter_status,
        project_name(state, state.filter_project_id) if state.filter_project_id else None,
        category_name(state, state.filter_category_id) if state.filter_category_id else None,
    )
    count = len(state.todos)
    items = f"[{count} item{'' if count == 1 else 's'}]"
    return f"[Filter: {summary}] {items}" if summary else items


def render(state: AppState) -> str:
    if state.has_filters:
        empty = "No todos match the current filters. Press 'f' to change filters."
    else:
        empty = "No todos yet. Press 'a' to add one."
    body = render_todo_table(
        state.todos,
        state.projects,
        state.selected_index,
        state.scroll_offset,
        VISIBLE_ROWS,
        empty,
    )
    return compose_screen(state, screen_header(state, subtitle(state)), body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if handle_list_navigation(state, key, state.todos):
        return

    if is_char(key, KEY_ADD):
        open_todo_add(state)
    elif is_char(key, KEY_FILTER):
        go_to_screen(state, Screen.FILTER_MENU)
        reset_selection(state)
    elif is_char(key, KEY_PROJECTS):
        go_to_screen(state, Screen.PROJECT_LIST)
        reset_selection(state)
    elif is_char(key, KEY_CATEGORIES):
        go_to_screen(state, Screen.CATEGORY_LIST)
        reset_selection(state)
    else:
        todo = selected_item(state, state.todos)
        if todo is None:
            return
        if is_confirm_key(key):
            state.current_todo = todo
            go_to_screen(state, Screen.TODO_DETAIL)
        elif is_char(key, KEY_EDIT):
            open_todo_edit(state, todo)
        elif is_char(key, KEY_DELETE):
            setup_delete(state, EntityKind.TODO, todo.id, todo.title)
            go_to_screen(state, Screen.DELETE_CONFIRM)
        elif is_char(key, KEY_TOGGLE):
            toggle_todo_status(state, todo)
