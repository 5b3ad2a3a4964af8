"""Add and edit forms for projects."""

from todolist.errors import AppError
from todolist.models import Project
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
    FormField,
    finish_form,
    handle_form_input,
    reject_form,
    render_form_body,
)
from todolist.validation import validate_project_form

PROJECT_FIELDS = (
    FormField("name", "Name", required=True),
    FormField("description", "Description"),
    FormField("color", "Color (#RRGGBB)"),
)


def load_project_form(state: AppState, project: Project | None = None) -> None:
    reset_form(state)
    state.form_fields = {
        "name": project.name if project else "",
        "description": (project.description or "") if project else "",
        "color": (project.color or "") if project else "",
    }


def open_project_add(state: AppState) -> None:
    load_project_form(state)
    go_to_screen(state, Screen.PROJECT_ADD)


def open_project_edit(state: AppState, project: Project) -> None:
    state.current_project = project
    load_project_form(state, project)
    go_to_screen(state, Screen.PROJECT_EDIT)


def save_project(state: AppState) -> None:
    errors = validate_project_form(state.form_fields)
    if errors:
        reject_form(state, errors)
        return
    state.form_errors = {}

    name = state.form_fields.get("name", "").strip()
    description = state.form_fields.get("description", "").strip() or None
    color = state.form_fields.get("color", "").strip() or None

    if state.current_screen is Screen.PROJECT_EDIT:
        project = state.current_project
        if project is None or project.id is None:
            set_message(state, "No project selected", MessageKind.ERROR)
            return
        try:
            updated = state.repo.update_project(
                project.id, name=name, description=description, color=color
            )
            if updated:
                state.current_project = state.repo.get_project(project.id)
        except AppError as e:
            report_persistence_error(state, "update_project", e, "Error saving project")
            return
        if not updated:
            set_message(state, "Project no longer exists", MessageKind.ERROR)
            return
        finish_form(state, f"Project '{name}' updated")
        return

    try:
        state.repo.create_project(name, description=description, color=color)
    except AppError as e:
        report_persistence_error(state, "create_project", e, "Error saving project")
        return
    finish_form(state, f"Project '{name}' created")


def render(state: AppState) -> str:
    body = render_form_body(state, PROJECT_FIELDS)
    return compose_screen(state, screen_header(state), body, FORM_SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    handle_form_input(state, key, PROJECT_FIELDS, save_project)
