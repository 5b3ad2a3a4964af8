"""Application state for the TUI and the helpers that mutate it.

A single AppState is created at startup and passed explicitly to every
render and input handler. All navigation goes through go_to_screen and
go_back; the back-stack is a single slot, so "back" only undoes one hop.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence, TypeVar

from todolist.models import Category, EntityKind, Project, Todo
from todolist.repository import Repository

T = TypeVar("T")

VISIBLE_ROWS = 15


class Screen(str, Enum):
    """Named UI states."""

    MAIN_LIST = "main_list"
    TODO_DETAIL = "todo_detail"
    TODO_ADD = "todo_add"
    TODO_EDIT = "todo_edit"
    FILTER_MENU = "filter_menu"
    FILTER_STATUS = "filter_status"
    FILTER_PROJECT = "filter_project"
    FILTER_CATEGORY = "filter_category"
    PROJECT_LIST = "project_list"
    PROJECT_ADD = "project_add"
    PROJECT_EDIT = "project_edit"
    CATEGORY_LIST = "category_list"
    CATEGORY_ADD = "category_add"
    CATEGORY_EDIT = "category_edit"
    DELETE_CONFIRM = "delete_confirm"


class MessageKind(str, Enum):
    """Severity of the transient message banner."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


SCREEN_TITLES: dict[Screen, str] = {
    Screen.MAIN_LIST: "Todo List",
    Screen.TODO_DETAIL: "Todo Details",
    Screen.TODO_ADD: "Add Todo",
    Screen.TODO_EDIT: "Edit Todo",
    Screen.FILTER_MENU: "Filter Todos",
    Screen.FILTER_STATUS: "Filter by Status",
    Screen.FILTER_PROJECT: "Filter by Project",
    Screen.FILTER_CATEGORY: "Filter by Category",
    Screen.PROJECT_LIST: "Projects",
    Screen.PROJECT_ADD: "Add Project",
    Screen.PROJECT_EDIT: "Edit Project",
    Screen.CATEGORY_LIST: "Categories",
    Screen.CATEGORY_ADD: "Add Category",
    Screen.CATEGORY_EDIT: "Edit Category",
    Screen.DELETE_CONFIRM: "Confirm Delete",
}

PROJECT_SCREENS = frozenset({Screen.PROJECT_LIST, Screen.PROJECT_ADD, Screen.PROJECT_EDIT})
CATEGORY_SCREENS = frozenset(
    {Screen.CATEGORY_LIST, Screen.CATEGORY_ADD, Screen.CATEGORY_EDIT}
)


@dataclass
class AppState:
    """Mutable state shared by every screen."""

    repo: Repository

    current_screen: Screen = Screen.MAIN_LIST
    previous_screen: Screen | None = None

    selected_index: int = 1
    scroll_offset: int = 0

    todos: list[Todo] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    current_todo: Todo | None = None
    current_project: Project | None = None
    current_category: Category | None = None

    delete_kind: EntityKind | None = None
    delete_id: int | None = None
    delete_name: str = ""

    filter_status: str | None = None
    filter_project_id: int | None = None
    filter_category_id: int | None = None

    form_fields: dict[str, str] = field(default_factory=dict)
    form_field_index: int = 1
    form_errors: dict[str, str] = field(default_factory=dict)

    message: str = ""
    message_kind: MessageKind | None = None

    running: bool = True

    # Private per-screen state, see tui.screen_state
    screen_state: dict[Screen, Any] = field(default_factory=dict)

    @property
    def has_filters(self) -> bool:
        return (
            self.filter_status is not None
            or self.filter_project_id is not None
            or self.filter_category_id is not None
        )


def create_initial_state(repo: Repository) -> AppState:
    """Create the startup state with all lists loaded."""
    state = AppState(repo=repo)
    refresh_data(state)
    return state


def go_to_screen(state: AppState, screen: Screen) -> None:
    """Switch screens, remembering the current one for go_back."""
    state.previous_screen = state.current_screen
    state.current_screen = screen


def go_back(state: AppState) -> None:
    """Return to the previous screen and clear the back slot.

    With nothing recorded the main list is shown.
    """
    state.current_screen = state.previous_screen or Screen.MAIN_LIST
    state.previous_screen = None


def items_for_screen(state: AppState, screen: Screen | None = None) -> Sequence[Any]:
    """The cached list a list-like screen navigates over."""
    screen = state.current_screen if screen is None else screen
    if screen in PROJECT_SCREENS:
        return state.projects
    if screen in CATEGORY_SCREENS:
        return state.categories
    return state.todos


def refresh_data(state: AppState) -> None:
    """Reload projects, categories and the filtered todo list.

    Selection and scroll position are clamped against the list shown by
    the current screen.
    """
    repo = state.repo
    state.projects = repo.list_projects()
    state.categories = repo.list_categories()
    state.todos = repo.filter_todos(
        status=state.filter_status,
        project_id=state.filter_project_id,
        category_id=state.filter_category_id,
    )
    _clamp_selection(state, len(items_for_screen(state)))


def _clamp_selection(state: AppState, count: int, visible_rows: int = VISIBLE_ROWS) -> None:
    if count == 0:
        state.selected_index = 1
        state.scroll_offset = 0
        return
    state.selected_index = min(max(state.selected_index, 1), count)
    _scroll_into_view(state, visible_rows)
    state.scroll_offset = max(0, min(state.scroll_offset, max(count - visible_rows, 0)))


def _scroll_into_view(state: AppState, visible_rows: int) -> None:
    if state.selected_index - 1 < state.scroll_offset:
        state.scroll_offset = state.selected_index - 1
    elif state.selected_index > state.scroll_offset + visible_rows:
        state.scroll_offset = state.selected_index - visible_rows


def reset_selection(state: AppState) -> None:
    state.selected_index = 1
    state.scroll_offset = 0


def move_selection(
    state: AppState,
    delta: int,
    items: Sequence[Any],
    visible_rows: int = VISIBLE_ROWS,
) -> None:
    """Move the cursor by delta rows, clamped to the list bounds.

    An empty list leaves the cursor untouched.
    """
    if not items:
        return
    state.selected_index = min(max(state.selected_index + delta, 1), len(items))
    _scroll_into_view(state, visible_rows)


def selected_item(state: AppState, items: Sequence[T]) -> T | None:
    """The item under the cursor, or None for an empty list."""
    if 1 <= state.selected_index <= len(items):
        return items[state.selected_index - 1]
    return None


def reset_form(state: AppState) -> None:
    state.form_fields = {}
    state.form_field_index = 1
    state.form_errors = {}


def set_message(state: AppState, text: str, kind: MessageKind = MessageKind.INFO) -> None:
    state.message = text
    state.message_kind = kind


def clear_message(state: AppState) -> None:
    state.message = ""
    state.message_kind = None


def setup_delete(state: AppState, kind: EntityKind, entity_id: int, name: str) -> None:
    """Record the delete target before entering the confirmation screen."""
    state.delete_kind = kind
    state.delete_id = entity_id
    state.delete_name = name


def clear_delete(state: AppState) -> None:
    state.delete_kind = None
    state.delete_id = None
    state.delete_name = ""


def clear_all_filters(state: AppState) -> None:
    state.filter_status = None
    state.filter_project_id = None
    state.filter_category_id = None


def project_name(state: AppState, project_id: int | None) -> str | None:
    for project in state.projects:
        if project.id == project_id:
            return project.name
    return None


def category_name(state: AppState, category_id: int | None) -> str | None:
    for category in state.categories:
        if category.id == category_id:
            return category.name
    return None
