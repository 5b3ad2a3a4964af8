"""Add and edit forms for todos."""

from todolist.errors import AppError
from todolist.models import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    VALID_STATUSES,
    Priority,
    Todo,
)
from todolist.tui.components.markup import status_label
from todolist.tui.keys import KeyInput
from todolist.tui.state import (
    AppState,
    MessageKind,
    Screen,
    go_to_screen,
    reset_form,
    set_message,
)
from todolist.tui.screens.common import (
    compose_screen,
    report_persistence_error,
    screen_header,
)
from todolist.tui.screens.forms import (
    FORM_SHORTCUTS,
    FieldKind,
    FormField,
    finish_form,
    handle_form_input,
    reject_form,
    render_form_body,
)
from todolist.validation import validate_todo_form


def _status_options(state: AppState) -> list[tuple[str, str]]:
    return [(status, status_label(status)) for status in VALID_STATUSES]


def _priority_options(state: AppState) -> list[tuple[str, str]]:
    return [(str(p.value), f"{p.value} - {p.label}") for p in Priority]


def _project_options(state: AppState) -> list[tuple[str, str]]:
    return [("", "None")] + [(str(p.id), p.name) for p in state.projects]


def _category_options(state: AppState) -> list[tuple[str, str]]:
    return [("", "None")] + [(str(c.id), c.name) for c in state.categories]


TODO_FIELDS = (
    FormField("title", "Title", FieldKind.TEXT, required=True),
    FormField("description", "Description"),
    FormField("status", "Status", FieldKind.RADIO, options=_status_options),
    FormField("priority", "Priority", FieldKind.RADIO, options=_priority_options),
    FormField("start_date", "Start Date", FieldKind.DATE),
    FormField("due_date", "Due Date", FieldKind.DATE),
    FormField("project_id", "Project", FieldKind.DROPDOWN, options=_project_options),
    FormField("category_id", "Category", FieldKind.DROPDOWN, options=_category_options),
)


def _id_text(value: int | None) -> str:
    return "" if value is None else str(value)


def load_todo_form(state: AppState, todo: Todo | None = None) -> None:
    """Fill the form buffer with defaults or with an existing todo."""
    reset_form(state)
    if todo is None:
        state.form_fields = {
            "title": "",
            "description": "",
            "status": DEFAULT_STATUS,
            "priority": str(DEFAULT_PRIORITY),
            "start_date": "",
            "due_date": "",
            "project_id": "",
            "category_id": "",
        }
        return
    state.form_fields = {
        "title": todo.title,
        "description": todo.description or "",
        "status": todo.status,
        "priority": str(todo.priority),
        "start_date": todo.start_date or "",
        "due_date": todo.due_date or "",
        "project_id": _id_text(todo.project_id),
        "category_id": _id_text(todo.category_id),
    }


def open_todo_add(state: AppState) -> None:
    load_todo_form(state)
    go_to_screen(state, Screen.TODO_ADD)


def open_todo_edit(state: AppState, todo: Todo) -> None:
    state.current_todo = todo
    load_todo_form(state, todo)
    go_to_screen(state, Screen.TODO_EDIT)


def _optional_id(text: str) -> int | None:
    text = text.strip()
    return int(text) if text else None


def _optional_text(text: str) -> str | None:
    text = text.strip()
    return text or None


def todo_payload(fields: dict[str, str]) -> dict:
    """Typed keyword arguments for the repository from validated fields."""
    return {
        "title": fields.get("title", "").strip(),
        "description": _optional_text(fields.get("description", "")),
        "status": fields.get("status", DEFAULT_STATUS),
        "priority": int(fields.get("priority", DEFAULT_PRIORITY)),
        "project_id": _optional_id(fields.get("project_id", "")),
        "category_id": _optional_id(fields.get("category_id", "")),
        "start_date": _optional_text(fields.get("start_date", "")),
        "due_date": _optional_text(fields.get("due_date", "")),
    }


def save_todo(state: AppState) -> None:
    """Validate and persist the form; stays on the form on any failure."""
    errors = validate_todo_form(state.form_fields)
    if errors:
        reject_form(state, errors)
        return
    state.form_errors = {}

    payload = todo_payload(state.form_fields)
    editing = state.current_screen is Screen.TODO_EDIT

    if editing:
        todo = state.current_todo
        if todo is None or todo.id is None:
            set_message(state, "No todo selected", MessageKind.ERROR)
            return
        try:
            updated = state.repo.update_todo(todo.id, **payload)
            if updated:
                state.current_todo = state.repo.get_todo(todo.id)
        except AppError as e:
            report_persistence_error(state, "update_todo", e, "Error saving todo")
            return
        if not updated:
            set_message(state, "Todo no longer exists", MessageKind.ERROR)
            return
        finish_form(state, "Todo updated")
        return

    try:
        state.repo.create_todo(**payload)
    except AppError as e:
        report_persistence_error(state, "create_todo", e, "Error saving todo")
        return
    finish_form(state, "Todo created")


def render(state: AppState) -> str:
    if state.current_screen is Screen.TODO_EDIT:
        todo = state.current_todo
        header = screen_header(state, f"#{todo.id}" if todo else None)
    else:
        header = screen_header(state)
    return compose_screen(state, header, render_form_body(state, TODO_FIELDS), FORM_SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    handle_form_input(state, key, TODO_FIELDS, save_todo)
