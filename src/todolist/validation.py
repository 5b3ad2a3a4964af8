"""Input validation helpers for todolist.

Field validators raise ValidationError and are shared by the repository
(the last line of defence before SQL) and the form screens. The form
validators never raise: they return a field-name -> message mapping that
the TUI shows inline next to each field.
"""

import re
from datetime import date
from typing import Mapping

from todolist.errors import ValidationError
from todolist.models import VALID_PRIORITIES, VALID_STATUSES

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")

DATE_ERROR = "Invalid date format (use YYYY-MM-DD)"
COLOR_ERROR = "Invalid color format (use #RRGGBB)"


def validate_date_format(date_str: str) -> None:
    """Validate YYYY-MM-DD date format and semantic correctness.

    Args:
        date_str: Date string to validate

    Raises:
        ValidationError: If date is not in YYYY-MM-DD format or is semantically invalid
    """
    if not _DATE_RE.match(date_str):
        raise ValidationError(
            f"Invalid date: {date_str}. Expected valid YYYY-MM-DD format"
        )
    try:
        date.fromisoformat(date_str)
    except ValueError:
        raise ValidationError(
            f"Invalid date: {date_str}. Expected valid YYYY-MM-DD format"
        )


def is_valid_date(date_str: str) -> bool:
    """Return True for an empty string or a valid YYYY-MM-DD date."""
    if not date_str:
        return True
    try:
        validate_date_format(date_str)
    except ValidationError:
        return False
    return True


def is_valid_color(color: str) -> bool:
    """Return True for an empty string or a #RRGGBB hex color."""
    return not color or bool(_COLOR_RE.match(color))


def validate_status(status: str) -> None:
    if status not in VALID_STATUSES:
        raise ValidationError(
            f"Invalid status '{status}'. Must be one of: {', '.join(VALID_STATUSES)}"
        )


def validate_priority(priority: int) -> None:
    if priority not in VALID_PRIORITIES:
        raise ValidationError(
            f"Invalid priority {priority}. Must be 1 (high), 2 (medium), or 3 (low)"
        )


def validate_name(name: str, what: str) -> None:
    if not name or not name.strip():
        raise ValidationError(f"{what} name is required")


def _is_optional_id(value: str) -> bool:
    return not value or value.isdigit()


def validate_todo_form(fields: Mapping[str, str]) -> dict[str, str]:
    """Validate todo form buffer values and return field errors."""
    errors: dict[str, str] = {}

    if not fields.get("title", "").strip():
        errors["title"] = "Title is required"

    if fields.get("status", "") not in VALID_STATUSES:
        errors["status"] = f"Status must be one of: {', '.join(VALID_STATUSES)}"

    priority = fields.get("priority", "")
    if priority not in {str(p) for p in VALID_PRIORITIES}:
        errors["priority"] = "Priority must be 1, 2, or 3"

    for field in ("start_date", "due_date"):
        if not is_valid_date(fields.get(field, "").strip()):
            errors[field] = DATE_ERROR

    for field in ("project_id", "category_id"):
        if not _is_optional_id(fields.get(field, "").strip()):
            errors[field] = "Invalid selection"

    return errors


def validate_project_form(fields: Mapping[str, str]) -> dict[str, str]:
    """Validate project form buffer values and return field errors."""
    errors: dict[str, str] = {}

    if not fields.get("name", "").strip():
        errors["name"] = "Name is required"

    if not is_valid_color(fields.get("color", "").strip()):
        errors["color"] = COLOR_ERROR

    return errors


def validate_category_form(fields: Mapping[str, str]) -> dict[str, str]:
    """Validate category form buffer values and return field errors."""
    errors: dict[str, str] = {}

    if not fields.get("name", "").strip():
        errors["name"] = "Name is required"

    if not is_valid_color(fields.get("color", "").strip()):
        errors["color"] = COLOR_ERROR

    return errors
