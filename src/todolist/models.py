"""Typed domain models for todolist."""

import sqlite3
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class TodoStatus(str, Enum):
    """Todo lifecycle statuses."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class Priority(int, Enum):
    """Todo priority, 1 is the most urgent."""

    HIGH = 1
    MEDIUM = 2
    LOW = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class EntityKind(str, Enum):
    """Entity types that can be targeted by the delete confirmation flow."""

    TODO = "todo"
    PROJECT = "project"
    CATEGORY = "category"


VALID_STATUSES = tuple(status.value for status in TodoStatus)
VALID_PRIORITIES = tuple(priority.value for priority in Priority)
DEFAULT_STATUS = TodoStatus.PENDING.value
DEFAULT_PRIORITY = Priority.MEDIUM.value


def coerce_status(value: Any) -> str:
    """Return the canonical status string or raise ValueError."""
    if isinstance(value, TodoStatus):
        return value.value
    if value not in VALID_STATUSES:
        raise ValueError(f"Invalid todo status: {value}")
    return value


def coerce_priority(value: Any) -> int:
    """Return the canonical priority int or raise ValueError."""
    try:
        priority = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid priority: {value}")
    if priority not in VALID_PRIORITIES:
        raise ValueError(f"Invalid priority: {value}")
    return priority


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload[key] if key in payload.keys() else None
    return None if value is None else str(value)


def _optional_int(payload: Mapping[str, Any], key: str) -> int | None:
    value = payload[key] if key in payload.keys() else None
    return None if value is None else int(value)


@dataclass
class Project:
    """A named group of related todos."""

    id: int | None
    name: str
    description: str | None = None
    color: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row | Mapping[str, Any]) -> "Project":
        """Create project from a database row."""
        return cls(
            id=_optional_int(row, "id"),
            name=str(row["name"]),
            description=_optional_str(row, "description"),
            color=_optional_str(row, "color"),
            created_at=_optional_str(row, "created_at"),
            updated_at=_optional_str(row, "updated_at"),
        )


@dataclass
class Category:
    """A label for organizing todos across projects."""

    id: int | None
    name: str
    color: str | None = None
    created_at: str | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row | Mapping[str, Any]) -> "Category":
        """Create category from a database row."""
        return cls(
            id=_optional_int(row, "id"),
            name=str(row["name"]),
            color=_optional_str(row, "color"),
            created_at=_optional_str(row, "created_at"),
        )


@dataclass
class Todo:
    """A single todo item."""

    id: int | None
    title: str
    description: str | None = None
    status: str = DEFAULT_STATUS
    priority: int = DEFAULT_PRIORITY
    project_id: int | None = None
    category_id: int | None = None
    start_date: str | None = None
    due_date: str | None = None
    completed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        self.status = coerce_status(self.status)
        self.priority = coerce_priority(self.priority)

    @property
    def is_completed(self) -> bool:
        return self.status == TodoStatus.COMPLETED.value

    @classmethod
    def from_row(cls, row: sqlite3.Row | Mapping[str, Any]) -> "Todo":
        """Create todo from a database row."""
        return cls(
            id=_optional_int(row, "id"),
            title=str(row["title"]),
            description=_optional_str(row, "description"),
            status=str(row["status"]),
            priority=int(row["priority"]),
            project_id=_optional_int(row, "project_id"),
            category_id=_optional_int(row, "category_id"),
            start_date=_optional_str(row, "start_date"),
            due_date=_optional_str(row, "due_date"),
            completed_at=_optional_str(row, "completed_at"),
            created_at=_optional_str(row, "created_at"),
            updated_at=_optional_str(row, "updated_at"),
        )
