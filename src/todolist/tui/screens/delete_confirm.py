"""Generic delete confirmation for todos, projects and categories."""

from todolist.errors import AppError
from todolist.models import EntityKind
from todolist.tui.components import render_delete_dialog
from todolist.tui.components.markup import styled
from todolist.tui.keys import (
    KEY_BACK,
    KEY_NO,
    KEY_YES,
    KeyInput,
    is_cancel_key,
    is_char,
    is_confirm_key,
    is_quit_key,
)
from todolist.tui.state import (
    AppState,
    MessageKind,
    Screen,
    clear_delete,
    clear_message,
    go_back,
    refresh_data,
    set_message,
)
from todolist.tui.screens.common import (
    compose_screen,
    quit_app,
    report_persistence_error,
    screen_header,
)

SHORTCUTS = (
    ("y/Enter", "Confirm"),
    ("n/Esc", "Cancel"),
    ("q", "Quit"),
)

DELETE_OPERATIONS = {
    EntityKind.TODO: "delete_todo",
    EntityKind.PROJECT: "delete_project",
    EntityKind.CATEGORY: "delete_category",
}

# Where each kind of delete lands, independent of the back slot.
RETURN_SCREENS = {
    EntityKind.TODO: Screen.MAIN_LIST,
    EntityKind.PROJECT: Screen.PROJECT_LIST,
    EntityKind.CATEGORY: Screen.CATEGORY_LIST,
}


def _forget_deleted(state: AppState, kind: EntityKind, entity_id: int) -> None:
    """Drop cached references and filters pointing at the deleted row."""
    if kind is EntityKind.TODO:
        state.current_todo = None
    elif kind is EntityKind.PROJECT:
        state.current_project = None
        if state.filter_project_id == entity_id:
            state.filter_project_id = None
    else:
        state.current_category = None
        if state.filter_category_id == entity_id:
            state.filter_category_id = None


def confirm_delete(state: AppState) -> None:
    kind, entity_id, name = state.delete_kind, state.delete_id, state.delete_name
    clear_delete(state)

    if kind is None or entity_id is None:
        set_message(state, "Nothing to delete", MessageKind.ERROR)
        go_back(state)
        return

    label = kind.value.capitalize()
    try:
        deleted = getattr(state.repo, DELETE_OPERATIONS[kind])(entity_id)
    except AppError as e:
        go_back(state)
        report_persistence_error(state, f"delete_{kind.value}", e, f"Error deleting {kind.value}")
        return

    if not deleted:
        go_back(state)
        refresh_data(state)
        set_message(state, f"{label} no longer exists", MessageKind.ERROR)
        return

    _forget_deleted(state, kind, entity_id)
    state.current_screen = RETURN_SCREENS[kind]
    state.previous_screen = None
    refresh_data(state)
    set_message(state, f"{label} '{name}' deleted", MessageKind.SUCCESS)


def cancel_delete(state: AppState) -> None:
    clear_delete(state)
    go_back(state)


def render(state: AppState) -> str:
    if state.delete_kind is None:
        body = styled("dim", "Nothing selected for deletion.")
    else:
        body = render_delete_dialog(state.delete_kind.value, state.delete_name)
    return compose_screen(state, screen_header(state), body, SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if is_char(key, KEY_YES) or is_confirm_key(key):
        confirm_delete(state)
    elif is_char(key, KEY_NO) or is_char(key, KEY_BACK) or is_cancel_key(key):
        cancel_delete(state)
