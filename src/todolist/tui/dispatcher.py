"""Screen dispatch for the TUI.

Every Screen maps to one ScreenHandler. The dispatcher only looks the
handler up and delegates; all transitions happen inside the handlers.
"""

from dataclasses import dataclass
from typing import Callable

from todolist.errors import UnknownScreenError
from todolist.tui.keys import KeyInput
from todolist.tui.state import AppState, Screen
from todolist.tui.screens import (
    category_form,
    category_list,
    delete_confirm,
    filter_menu,
    filter_select,
    main_list,
    project_form,
    project_list,
    todo_detail,
    todo_form,
)


@dataclass(frozen=True)
class ScreenHandler:
    """Defines how a screen is drawn and how it reacts to keys."""

    render: Callable[[AppState], str]
    handle_input: Callable[[AppState, KeyInput], None]


SCREEN_REGISTRY: dict[Screen, ScreenHandler] = {
    Screen.MAIN_LIST: ScreenHandler(main_list.render, main_list.handle_input),
    Screen.TODO_DETAIL: ScreenHandler(todo_detail.render, todo_detail.handle_input),
    Screen.TODO_ADD: ScreenHandler(todo_form.render, todo_form.handle_input),
    Screen.TODO_EDIT: ScreenHandler(todo_form.render, todo_form.handle_input),
    Screen.FILTER_MENU: ScreenHandler(filter_menu.render, filter_menu.handle_input),
    Screen.FILTER_STATUS: ScreenHandler(filter_select.render, filter_select.handle_input),
    Screen.FILTER_PROJECT: ScreenHandler(filter_select.render, filter_select.handle_input),
    Screen.FILTER_CATEGORY: ScreenHandler(filter_select.render, filter_select.handle_input),
    Screen.PROJECT_LIST: ScreenHandler(project_list.render, project_list.handle_input),
    Screen.PROJECT_ADD: ScreenHandler(project_form.render, project_form.handle_input),
    Screen.PROJECT_EDIT: ScreenHandler(project_form.render, project_form.handle_input),
    Screen.CATEGORY_LIST: ScreenHandler(category_list.render, category_list.handle_input),
    Screen.CATEGORY_ADD: ScreenHandler(category_form.render, category_form.handle_input),
    Screen.CATEGORY_EDIT: ScreenHandler(category_form.render, category_form.handle_input),
    Screen.DELETE_CONFIRM: ScreenHandler(delete_confirm.render, delete_confirm.handle_input),
}


def register_screen(screen: Screen, handler: ScreenHandler) -> None:
    """Add or replace the handler for a screen."""
    SCREEN_REGISTRY[screen] = handler


def resolve_handler(screen: Screen) -> ScreenHandler:
    handler = SCREEN_REGISTRY.get(screen)
    if handler is None:
        raise UnknownScreenError(f"No handler registered for screen: {screen!r}")
    return handler


def render_screen(state: AppState) -> str:
    """Markup for the current screen."""
    return resolve_handler(state.current_screen).render(state)


def handle_input(state: AppState, key: KeyInput) -> None:
    """Route one key press to the current screen."""
    resolve_handler(state.current_screen).handle_input(state, key)
