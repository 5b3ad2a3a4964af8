"""Category management list."""

from todolist.models import EntityKind
from todolist.tui.components import render_category_table
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
from todolist.tui.screens.category_form import open_category_add, open_category_edit

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
    counts = state.repo.todo_counts_by_category()
    count = len(state.categories)
    header = screen_header(state, f"[{count} categor{'y' if count == 1 else 'ies'}]")
    body = render_category_table(
        state.categories, counts, state.selected_index, state.scroll_offset, VISIBLE_ROWS
    )
    return compose_screen(state, header, body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if handle_list_navigation(state, key, state.categories):
        return

    if is_back_key(key):
        go_back(state)
        reset_selection(state)
        refresh_data(state)
        return
    if is_char(key, KEY_ADD):
        open_category_add(state)
        return

    category = selected_item(state, state.categories)
    if category is None:
        return

    if is_confirm_key(key):
        state.filter_category_id = category.id
        log_filters(state)
        enter_list_screen(state, Screen.MAIN_LIST)
    elif is_char(key, KEY_EDIT):
        open_category_edit(state, category)
    elif is_char(key, KEY_DELETE):
        setup_delete(state, EntityKind.CATEGORY, category.id, category.name)
        go_to_screen(state, Screen.DELETE_CONFIRM)
