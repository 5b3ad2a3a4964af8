"""Transient message banner."""

from todolist.tui.components.markup import styled

MESSAGE_ICONS = {
    "success": "✓",
    "error": "✗",
    "info": "ℹ",
    "warning": "⚠",
}


def render_message(text: str | None, kind: str | None = "info") -> str:
    """Render a message with its icon, or an empty string for no message."""
    if not text:
        return ""
    kind = str(getattr(kind, "value", kind) or "info")
    if kind not in MESSAGE_ICONS:
        kind = "info"
    return styled(kind, f"{MESSAGE_ICONS[kind]} {text}")
