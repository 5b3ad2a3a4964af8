"""Filter summary and option lists."""

from typing import Sequence

from todolist.tui.components.markup import escape, status_label, styled, tag

ACTIVE_MARK = " ✓"


def filter_parts(
    status: str | None,
    project: str | None,
    category: str | None,
) -> list[str]:
    parts = []
    if status is not None:
        parts.append(f"Status: {status_label(status)}")
    if project is not None:
        parts.append(f"Project: {project}")
    if category is not None:
        parts.append(f"Category: {category}")
    return parts


def render_filter_summary(
    status: str | None,
    project: str | None,
    category: str | None,
) -> str:
    """Plain ``Status: x, Project: y`` text, empty when nothing is active."""
    return ", ".join(filter_parts(status, project, category))


def render_option_list(
    options: Sequence[str],
    selected_index: int,
    active_index: int | None = None,
) -> str:
    """Vertical menu; selected_index and active_index are 1-based."""
    lines = []
    for position, option in enumerate(options, start=1):
        text = option + (ACTIVE_MARK if position == active_index else "")
        if position == selected_index:
            lines.append(tag("selected", escape("▶ " + text)))
        elif position == active_index:
            lines.append("  " + styled("success", text))
        else:
            lines.append("  " + escape(text))
    return "\n".join(lines)
