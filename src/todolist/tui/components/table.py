"""Windowed tables with a selection cursor."""

from dataclasses import dataclass
from typing import Mapping, Sequence, Union

from todolist.models import Category, Project, Todo
from todolist.tui.components.markup import (
    escape,
    fit,
    or_dash,
    priority_label,
    priority_style,
    status_label,
    styled,
    tag,
)

SELECTED_MARKER = "▶ "
UNSELECTED_MARKER = "  "

# A cell is plain text, or (plain text, style class).
Cell = Union[str, tuple[str, str]]


@dataclass(frozen=True)
class Column:
    """Column title and fixed width."""

    title: str
    width: int
    align: str = "left"


def _render_cell(cell: Cell, column: Column) -> str:
    if isinstance(cell, tuple):
        text, style = cell
        return styled(style, fit(text, column.width, column.align))
    return escape(fit(cell, column.width, column.align))


def window_bounds(total: int, scroll_offset: int, visible_rows: int) -> tuple[int, int]:
    """0-based [start, end) slice of rows inside the visible window."""
    start = max(0, min(scroll_offset, max(total - visible_rows, 0)))
    return start, min(start + visible_rows, total)


def render_table(
    columns: Sequence[Column],
    rows: Sequence[Sequence[Cell]],
    selected_index: int,
    scroll_offset: int,
    visible_rows: int,
    empty_message: str = "No items to display.",
) -> str:
    """Render the in-window slice of rows.

    selected_index is 1-based. Rows outside the window are omitted and a
    ``Showing a-b of n`` line is added when the list does not fit.
    """
    if not rows:
        return styled("dim", empty_message)

    header = UNSELECTED_MARKER + " ".join(
        fit(column.title, column.width, column.align) for column in columns
    )
    width = len(header)
    lines = [styled("header", header), styled("dim", "─" * width)]

    start, end = window_bounds(len(rows), scroll_offset, visible_rows)
    for position in range(start, end):
        cells = " ".join(
            _render_cell(cell, column) for cell, column in zip(rows[position], columns)
        )
        if position + 1 == selected_index:
            lines.append(tag("selected", escape(SELECTED_MARKER) + cells))
        else:
            lines.append(UNSELECTED_MARKER + cells)

    if len(rows) > visible_rows:
        lines.append(styled("dim", f"Showing {start + 1}-{end} of {len(rows)}"))

    return "\n".join(lines)


TODO_COLUMNS = (
    Column("ID", 4, "right"),
    Column("Title", 30),
    Column("Status", 11),
    Column("Priority", 8),
    Column("Due", 10),
    Column("Project", 14),
)

PROJECT_COLUMNS = (
    Column("Name", 20),
    Column("Description", 30),
    Column("Color", 7),
    Column("Todos", 5, "right"),
)

CATEGORY_COLUMNS = (
    Column("Name", 24),
    Column("Color", 7),
    Column("Todos", 5, "right"),
)


def todo_row(todo: Todo, project_names: Mapping[int, str]) -> list[Cell]:
    project = project_names.get(todo.project_id, "") if todo.project_id else ""
    return [
        str(todo.id),
        todo.title,
        (status_label(todo.status), todo.status),
        (priority_label(todo.priority), priority_style(todo.priority)),
        or_dash(todo.due_date),
        or_dash(project),
    ]


def render_todo_table(
    todos: Sequence[Todo],
    projects: Sequence[Project],
    selected_index: int,
    scroll_offset: int,
    visible_rows: int,
    empty_message: str = "No todos found. Press 'a' to add one.",
) -> str:
    project_names = {project.id: project.name for project in projects if project.id is not None}
    rows = [todo_row(todo, project_names) for todo in todos]
    return render_table(
        TODO_COLUMNS, rows, selected_index, scroll_offset, visible_rows, empty_message
    )


def render_project_table(
    projects: Sequence[Project],
    todo_counts: Mapping[int, int],
    selected_index: int,
    scroll_offset: int,
    visible_rows: int,
) -> str:
    rows: list[list[Cell]] = [
        [
            project.name,
            or_dash(project.description),
            or_dash(project.color),
            str(todo_counts.get(project.id, 0)),
        ]
        for project in projects
    ]
    return render_table(
        PROJECT_COLUMNS,
        rows,
        selected_index,
        scroll_offset,
        visible_rows,
        "No projects yet. Press 'a' to add one.",
    )


def render_category_table(
    categories: Sequence[Category],
    todo_counts: Mapping[int, int],
    selected_index: int,
    scroll_offset: int,
    visible_rows: int,
) -> str:
    rows: list[list[Cell]] = [
        [
            category.name,
            or_dash(category.color),
            str(todo_counts.get(category.id, 0)),
        ]
        for category in categories
    ]
    return render_table(
        CATEGORY_COLUMNS,
        rows,
        selected_index,
        scroll_offset,
        visible_rows,
        "No categories yet. Press 'a' to add one.",
    )
