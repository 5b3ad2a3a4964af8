"""Markup helpers shared by all rendering components.

Components produce prompt_toolkit HTML markup. Tag names are style
classes resolved by the application style (``<error>`` -> ``class:error``).
User supplied text always goes through ``escape``; padding and truncation
are applied to plain text before escaping so widths stay exact.
"""

import html
import re

from todolist.models import Priority, TodoStatus

ELLIPSIS = "…"

_TAG_RE = re.compile(r"</?[A-Za-z_][A-Za-z0-9_-]*>")

STATUS_LABELS = {
    TodoStatus.PENDING.value: "Pending",
    TodoStatus.IN_PROGRESS.value: "In Progress",
    TodoStatus.COMPLETED.value: "Completed",
    TodoStatus.BLOCKED.value: "Blocked",
}

STATUS_ICONS = {
    TodoStatus.PENDING.value: "○",
    TodoStatus.IN_PROGRESS.value: "◐",
    TodoStatus.COMPLETED.value: "●",
    TodoStatus.BLOCKED.value: "✗",
}

PRIORITY_STYLES = {
    Priority.HIGH.value: "high",
    Priority.MEDIUM.value: "medium",
    Priority.LOW.value: "low",
}


def escape(text: object) -> str:
    return html.escape(str(text), quote=False)


def tag(style: str, markup: str) -> str:
    """Wrap already-escaped markup in a style tag."""
    if not markup:
        return markup
    return f"<{style}>{markup}</{style}>"


def styled(style: str, text: object) -> str:
    """Escape plain text and wrap it in a style tag."""
    return tag(style, escape(text))


def strip_markup(markup: str) -> str:
    """Plain text of a markup string."""
    return html.unescape(_TAG_RE.sub("", markup))


def truncate(text: str, width: int) -> str:
    """Cut text to width characters, marking the cut with an ellipsis."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width == 1:
        return ELLIPSIS
    return text[: width - 1] + ELLIPSIS


def fit(text: str, width: int, align: str = "left") -> str:
    """Truncate or pad plain text to exactly width characters."""
    text = truncate(text, width)
    if align == "right":
        return text.rjust(width)
    if align == "center":
        return text.center(width)
    return text.ljust(width)


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def status_badge(status: str) -> str:
    """Icon and label styled by status."""
    icon = STATUS_ICONS.get(status, "?")
    return styled(status, f"{icon} {status_label(status)}")


def priority_label(priority: int) -> str:
    try:
        return Priority(priority).label
    except ValueError:
        return str(priority)


def priority_style(priority: int) -> str:
    return PRIORITY_STYLES.get(priority, "dim")


def or_dash(value: object) -> str:
    return "-" if value is None or value == "" else str(value)
