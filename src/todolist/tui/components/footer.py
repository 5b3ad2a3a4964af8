"""Shortcut legend shown at the bottom of every screen."""

from typing import Sequence

from todolist.tui.components.markup import escape, styled

SEPARATOR = "  "


def render_footer(shortcuts: Sequence[tuple[str, str]]) -> str:
    """Render (key, action) pairs in order as ``[key] Action``."""
    if not shortcuts:
        return ""
    parts = [f"{styled('accent', f'[{key}]')} {escape(action)}" for key, action in shortcuts]
    return styled("dim", "─" * 60) + "\n" + SEPARATOR.join(parts)
