"""Read-only view of a single todo."""

from todolist.errors import AppError
from todolist.models import EntityKind
from todolist.tui.components.markup import (
    escape,
    or_dash,
    priority_label,
    priority_style,
    status_badge,
    styled,
)
from todolist.tui.keys import (
    KEY_DELETE,
    KEY_EDIT,
    KEY_TOGGLE,
    KeyInput,
    is_back_key,
    is_char,
    is_quit_key,
)
from todolist.tui.state import (
    AppState,
    Screen,
    category_name,
    clear_message,
    go_back,
    go_to_screen,
    project_name,
    refresh_data,
    setup_delete,
)
from todolist.tui.screens.common import (
    compose_screen,
    quit_app,
    report_persistence_error,
    screen_header,
    toggle_todo_status,
)
from todolist.tui.screens.todo_form import open_todo_edit

SHORTCUTS = (
    ("e", "Edit"),
    ("c", "Toggle done"),
    ("d", "Delete"),
    ("b/Esc", "Back"),
    ("q", "Quit"),
)

LABEL_WIDTH = 12


def _row(label: str, value_markup: str) -> str:
    return f"{styled('label', (label + ':').ljust(LABEL_WIDTH))} {value_markup}"


def render(state: AppState) -> str:
    todo = state.current_todo
    if todo is None:
        body = styled("dim", "No todo selected.")
        return compose_screen(state, screen_header(state), body, SHORTCUTS)

    description = todo.description or ""
    lines = [
        _row("Title", styled("b", todo.title)),
        _row("Status", status_badge(todo.status)),
        _row("Priority", styled(priority_style(todo.priority), priority_label(todo.priority))),
        _row("Project", escape(or_dash(project_name(state, todo.project_id)))),
        _row("Category", escape(or_dash(category_name(state, todo.category_id)))),
        _row("Start Date", escape(or_dash(todo.start_date))),
        _row("Due Date", escape(or_dash(todo.due_date))),
        _row("Completed", escape(or_dash(todo.completed_at))),
        _row("Created", styled("dim", or_dash(todo.created_at))),
        _row("Updated", styled("dim", or_dash(todo.updated_at))),
        "",
        styled("label", "Description:"),
    ]
    if description:
        lines.extend("  " + escape(line) for line in description.splitlines())
    else:
        lines.append("  " + styled("dim", "(none)"))

    header = screen_header(state, f"#{todo.id}")
    return compose_screen(state, header, "\n".join(lines), SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    if is_quit_key(key):
        quit_app(state)
        return
    clear_message(state)

    if is_back_key(key):
        go_back(state)
        refresh_data(state)
        return

    todo = state.current_todo
    if todo is None:
        return

    if is_char(key, KEY_EDIT):
        open_todo_edit(state, todo)
    elif is_char(key, KEY_DELETE):
        setup_delete(state, EntityKind.TODO, todo.id, todo.title)
        go_to_screen(state, Screen.DELETE_CONFIRM)
    elif is_char(key, KEY_TOGGLE):
        if not toggle_todo_status(state, todo):
            return
        try:
            state.current_todo = state.repo.get_todo(todo.id)
        except AppError as e:
            report_persistence_error(state, "get_todo", e, "Error loading todo")
