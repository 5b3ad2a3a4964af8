"""Data access for projects, categories and todos.

The repository is the only module that issues SQL. Every call is a single
synchronous round-trip; sqlite3 failures are translated into the
StorageError family so callers never see driver exceptions.
"""

import logging
import sqlite3
from datetime import datetime
from typing import Any, Iterable

from todolist.errors import (
    DuplicateNameError,
    ForeignKeyError,
    StorageError,
    ValidationError,
)
from todolist.logging_utils import log_event
from todolist.models import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    Category,
    EntityKind,
    Project,
    Todo,
    TodoStatus,
)
from todolist.validation import (
    validate_date_format,
    validate_name,
    validate_priority,
    validate_status,
)

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_TODO_ORDER = "ORDER BY created_at DESC, id DESC"

# Table name -> entity label used in user-facing constraint messages.
_ENTITY_LABELS = {"projects": "project", "categories": "category"}


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


# Sentinel for "argument not passed" so that None can mean "clear the column".
_UNSET: Any = _Unset()


def _now() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def _clean_optional(value: str | None) -> str | None:
    """Blank strings are stored as NULL."""
    if value is None:
        return None
    return value if value.strip() else None


def _validate_optional_date(value: str | None) -> None:
    if value is not None:
        validate_date_format(value)


def _validate_title(title: str | None) -> None:
    if title is None or not title.strip():
        raise ValidationError("Todo title is required")


def _duplicate_message(driver_text: str) -> str:
    """User-facing text for a UNIQUE violation like "...: projects.name"."""
    table = driver_text.rsplit(": ", 1)[-1].split(".", 1)[0]
    label = _ENTITY_LABELS.get(table, "record")
    return f"A {label} with this name already exists"


class Repository:
    """CRUD access over an open SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    # Low-level helpers

    def _execute(self, sql: str, params: Iterable[Any] = ()) -> sqlite3.Cursor:
        """Run one write statement in its own transaction."""
        try:
            with self.conn:
                return self.conn.execute(sql, tuple(params))
        except sqlite3.IntegrityError as e:
            text = str(e)
            log_event("integrity_error", level=logging.WARNING, error=text)
            if "UNIQUE" in text:
                raise DuplicateNameError(_duplicate_message(text)) from e
            if "FOREIGN KEY" in text:
                raise ForeignKeyError(
                    "Referenced project or category does not exist"
                ) from e
            raise StorageError(f"Constraint violation: {text}") from e
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e

    def _query(self, sql: str, params: Iterable[Any] = ()) -> list[sqlite3.Row]:
        try:
            return self.conn.execute(sql, tuple(params)).fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Database error: {e}") from e

    def _query_one(self, sql: str, params: Iterable[Any] = ()) -> sqlite3.Row | None:
        rows = self._query(sql, params)
        return rows[0] if rows else None

    def _update(
        self,
        table: str,
        row_id: int,
        changes: dict[str, Any],
        *,
        touch: bool,
    ) -> bool:
        if touch:
            changes = {**changes, "updated_at": _now()}
        if not changes:
            return self._query_one(f"SELECT id FROM {table} WHERE id = ?", (row_id,)) is not None

        assignments = ", ".join(f"{column} = ?" for column in changes)
        cursor = self._execute(
            f"UPDATE {table} SET {assignments} WHERE id = ?",
            [*changes.values(), row_id],
        )
        return cursor.rowcount > 0

    def _delete(self, table: str, row_id: int) -> bool:
        cursor = self._execute(f"DELETE FROM {table} WHERE id = ?", (row_id,))
        return cursor.rowcount > 0

    # Projects

    def create_project(
        self,
        name: str,
        description: str | None = None,
        color: str | None = None,
    ) -> int:
        """Insert a project and return its id.

        Raises:
            ValidationError: If the name is blank
            DuplicateNameError: If a project with this name exists
        """
        validate_name(name, "Project")
        now = _now()
        cursor = self._execute(
            "INSERT INTO projects (name, description, color, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?)",
            (name, _clean_optional(description), _clean_optional(color), now, now),
        )
        project_id = int(cursor.lastrowid)
        log_event("entity_created", kind=EntityKind.PROJECT, id=project_id, name=name)
        return project_id

    def get_project(self, project_id: int) -> Project | None:
        row = self._query_one("SELECT * FROM projects WHERE id = ?", (project_id,))
        return Project.from_row(row) if row is not None else None

    def list_projects(self) -> list[Project]:
        rows = self._query("SELECT * FROM projects ORDER BY name")
        return [Project.from_row(row) for row in rows]

    def update_project(
        self,
        project_id: int,
        *,
        name: str = _UNSET,
        description: str | None = _UNSET,
        color: str | None = _UNSET,
    ) -> bool:
        """Update the given fields; returns False if the project is absent."""
        changes: dict[str, Any] = {}
        if name is not _UNSET:
            validate_name(name, "Project")
            changes["name"] = name
        if description is not _UNSET:
            changes["description"] = _clean_optional(description)
        if color is not _UNSET:
            changes["color"] = _clean_optional(color)

        updated = self._update("projects", project_id, changes, touch=True)
        if updated:
            log_event(
                "entity_updated",
                kind=EntityKind.PROJECT,
                id=project_id,
                fields=sorted(changes),
            )
        return updated

    def delete_project(self, project_id: int) -> bool:
        """Delete a project; its todos keep existing with no project."""
        deleted = self._delete("projects", project_id)
        if deleted:
            log_event("entity_deleted", kind=EntityKind.PROJECT, id=project_id)
        return deleted

    # Categories

    def create_category(self, name: str, color: str | None = None) -> int:
        """Insert a category and return its id.

        Raises:
            ValidationError: If the name is blank
            DuplicateNameError: If a category with this name exists
        """
        validate_name(name, "Category")
        cursor = self._execute(
            "INSERT INTO categories (name, color, created_at) VALUES (?, ?, ?)",
            (name, _clean_optional(color), _now()),
        )
        category_id = int(cursor.lastrowid)
        log_event("entity_created", kind=EntityKind.CATEGORY, id=category_id, name=name)
        return category_id

    def get_category(self, category_id: int) -> Category | None:
        row = self._query_one("SELECT * FROM categories WHERE id = ?", (category_id,))
        return Category.from_row(row) if row is not None else None

    def list_categories(self) -> list[Category]:
        rows = self._query("SELECT * FROM categories ORDER BY name")
        return [Category.from_row(row) for row in rows]

    def update_category(
        self,
        category_id: int,
        *,
        name: str = _UNSET,
        color: str | None = _UNSET,
    ) -> bool:
        """Update the given fields; returns False if the category is absent."""
        changes: dict[str, Any] = {}
        if name is not _UNSET:
            validate_name(name, "Category")
            changes["name"] = name
        if color is not _UNSET:
            changes["color"] = _clean_optional(color)

        updated = self._update("categories", category_id, changes, touch=False)
        if updated:
            log_event(
                "entity_updated",
                kind=EntityKind.CATEGORY,
                id=category_id,
                fields=sorted(changes),
            )
        return updated

    def delete_category(self, category_id: int) -> bool:
        """Delete a category; its todos keep existing with no category."""
        deleted = self._delete("categories", category_id)
        if deleted:
            log_event("entity_deleted", kind=EntityKind.CATEGORY, id=category_id)
        return deleted

    # Todos

    def create_todo(
        self,
        title: str,
        *,
        description: str | None = None,
        status: str = DEFAULT_STATUS,
        priority: int = DEFAULT_PRIORITY,
        project_id: int | None = None,
        category_id: int | None = None,
        start_date: str | None = None,
        due_date: str | None = None,
    ) -> int:
        """Insert a todo and return its id.

        Raises:
            ValidationError: If a field value is invalid
            ForeignKeyError: If project_id or category_id does not exist
        """
        status = str(getattr(status, "value", status))
        start_date = _clean_optional(start_date)
        due_date = _clean_optional(due_date)

        _validate_title(title)
        validate_status(status)
        validate_priority(priority)
        _validate_optional_date(start_date)
        _validate_optional_date(due_date)

        now = _now()
        completed_at = now if status == TodoStatus.COMPLETED.value else None
        cursor = self._execute(
            "INSERT INTO todos (title, description, status, priority, project_id, "
            "category_id, start_date, due_date, completed_at, created_at, updated_at) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                title,
                _clean_optional(description),
                status,
                int(priority),
                project_id,
                category_id,
                start_date,
                due_date,
                completed_at,
                now,
                now,
            ),
        )
        todo_id = int(cursor.lastrowid)
        log_event("entity_created", kind=EntityKind.TODO, id=todo_id, name=title)
        return todo_id

    def get_todo(self, todo_id: int) -> Todo | None:
        row = self._query_one("SELECT * FROM todos WHERE id = ?", (todo_id,))
        return Todo.from_row(row) if row is not None else None

    def list_todos(self) -> list[Todo]:
        """All todos, newest first."""
        return self.filter_todos()

    def update_todo(
        self,
        todo_id: int,
        *,
        title: str = _UNSET,
        description: str | None = _UNSET,
        status: str = _UNSET,
        priority: int = _UNSET,
        project_id: int | None = _UNSET,
        category_id: int | None = _UNSET,
        start_date: str | None = _UNSET,
        due_date: str | None = _UNSET,
    ) -> bool:
        """Update the given fields; returns False if the todo is absent.

        Passing None for an optional field clears it. Moving into the
        completed status stamps completed_at; moving out of it clears it.
        """
        existing = self.get_todo(todo_id)
        if existing is None:
            return False

        changes: dict[str, Any] = {}
        if title is not _UNSET:
            _validate_title(title)
            changes["title"] = title
        if description is not _UNSET:
            changes["description"] = _clean_optional(description)
        if status is not _UNSET:
            status = str(getattr(status, "value", status))
            validate_status(status)
            changes["status"] = status
            if status == TodoStatus.COMPLETED.value:
                if not existing.is_completed:
                    changes["completed_at"] = _now()
            else:
                changes["completed_at"] = None
        if priority is not _UNSET:
            validate_priority(priority)
            changes["priority"] = int(priority)
        if project_id is not _UNSET:
            changes["project_id"] = project_id
        if category_id is not _UNSET:
            changes["category_id"] = category_id
        for column, value in (("start_date", start_date), ("due_date", due_date)):
            if value is not _UNSET:
                value = _clean_optional(value)
                _validate_optional_date(value)
                changes[column] = value

        updated = self._update("todos", todo_id, changes, touch=True)
        if updated:
            log_event(
                "entity_updated",
                kind=EntityKind.TODO,
                id=todo_id,
                fields=sorted(changes),
            )
        return updated

    def complete_todo(self, todo_id: int) -> bool:
        return self.update_todo(todo_id, status=TodoStatus.COMPLETED.value)

    def delete_todo(self, todo_id: int) -> bool:
        deleted = self._delete("todos", todo_id)
        if deleted:
            log_event("entity_deleted", kind=EntityKind.TODO, id=todo_id)
        return deleted

    def filter_todos(
        self,
        status: str | None = None,
        project_id: int | None = None,
        category_id: int | None = None,
        *,
        start_date: str | None = None,
        due_date: str | None = None,
    ) -> list[Todo]:
        """Todos matching every given filter, newest first.

        A filter left as None does not constrain the result. start_date
        keeps todos starting on or after that day and due_date keeps todos
        due on or before it; todos without the date are excluded.

        Raises:
            ValidationError: If a date is not YYYY-MM-DD
        """
        _validate_optional_date(start_date)
        _validate_optional_date(due_date)

        clauses: list[str] = []
        params: list[Any] = []
        if status is not None:
            clauses.append("status = ?")
            params.append(str(getattr(status, "value", status)))
        if project_id is not None:
            clauses.append("project_id = ?")
            params.append(project_id)
        if category_id is not None:
            clauses.append("category_id = ?")
            params.append(category_id)
        if start_date is not None:
            clauses.append("start_date IS NOT NULL AND start_date >= ?")
            params.append(start_date)
        if due_date is not None:
            clauses.append("due_date IS NOT NULL AND due_date <= ?")
            params.append(due_date)

        where = f"WHERE {' AND '.join(clauses)} " if clauses else ""
        logger.debug("filter_todos where=%r params=%r", where, params)
        rows = self._query(f"SELECT * FROM todos {where}{_TODO_ORDER}", params)
        return [Todo.from_row(row) for row in rows]

    def filter_todos_by_date_range(
        self,
        *,
        start_date: str | None = None,
        due_date: str | None = None,
    ) -> list[Todo]:
        return self.filter_todos(start_date=start_date, due_date=due_date)

    def todo_counts_by_project(self) -> dict[int, int]:
        """Number of todos per project id, ignoring active filters."""
        return self._counts_by("project_id")

    def todo_counts_by_category(self) -> dict[int, int]:
        """Number of todos per category id, ignoring active filters."""
        return self._counts_by("category_id")

    def _counts_by(self, column: str) -> dict[int, int]:
        rows = self._query(
            f"SELECT {column} AS ref, COUNT(*) AS total FROM todos "
            f"WHERE {column} IS NOT NULL GROUP BY {column}"
        )
        return {int(row["ref"]): int(row["total"]) for row in rows}
