"""Add and edit forms for categories."""

from todolist.errors import AppError
from todolist.models import Category
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
from todolist.validation import validate_category_form

CATEGORY_FIELDS = (
    FormField("name", "Name", required=True),
    FormField("color", "Color (#RRGGBB)"),
)


def load_category_form(state: AppState, category: Category | None = None) -> None:
    reset_form(state)
    state.form_fields = {
        "name": category.name if category else "",
        "color": (category.color or "") if category else "",
    }


def open_category_add(state: AppState) -> None:
    load_category_form(state)
    go_to_screen(state, Screen.CATEGORY_ADD)


def open_category_edit(state: AppState, category: Category) -> None:
    state.current_category = category
    load_category_form(state, category)
    go_to_screen(state, Screen.CATEGORY_EDIT)


def save_category(state: AppState) -> None:
    errors = validate_category_form(state.form_fields)
    if errors:
        reject_form(state, errors)
        return
    state.form_errors = {}

    name = state.form_fields.get("name", "").strip()
    color = state.form_fields.get("color", "").strip() or None

    if state.current_screen is Screen.CATEGORY_EDIT:
        category = state.current_category
        if category is None or category.id is None:
            set_message(state, "No category selected", MessageKind.ERROR)
            return
        try:
            updated = state.repo.update_category(category.id, name=name, color=color)
            if updated:
                state.current_category = state.repo.get_category(category.id)
        except AppError as e:
            report_persistence_error(state, "update_category", e, "Error saving category")
            return
        if not updated:
            set_message(state, "Category no longer exists", MessageKind.ERROR)
            return
        finish_form(state, f"Category '{name}' updated")
        return

    try:
        state.repo.create_category(name, color=color)
    except AppError as e:
        report_persistence_error(state, "create_category", e, "Error saving category")
        return
    finish_form(state, f"Category '{name}' created")


def render(state: AppState) -> str:
    body = render_form_body(state, CATEGORY_FIELDS)
    return compose_screen(state, screen_header(state), body, FORM_SHORTCUTS)


def handle_input(state: AppState, key: KeyInput) -> None:
    handle_form_input(state, key, CATEGORY_FIELDS, save_category)
