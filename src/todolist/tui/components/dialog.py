"""Delete confirmation dialog."""

from todolist.tui.components.markup import escape, styled

DIALOG_WIDTH = 50

_UNASSIGN_NOTES = {
    "project": "Todos in this project will be kept without a project.",
    "category": "Todos in this category will be kept without a category.",
}


def render_delete_dialog(kind: str, name: str) -> str:
    """Warning box naming the entity plus the fixed y/n legend."""
    kind = str(getattr(kind, "value", kind))
    lines = [
        styled("warning", f"⚠  Delete {kind}?"),
        "",
        f"Are you sure you want to delete this {escape(kind)}?",
        "  " + styled("b", f'"{name}"'),
        "",
        styled("dim", "This action cannot be undone."),
    ]
    note = _UNASSIGN_NOTES.get(kind)
    if note:
        lines.append(styled("dim", note))

    border = styled("warning", "═" * DIALOG_WIDTH)
    legend = (
        f"{styled('accent', '[y]')} Yes, delete    "
        f"{styled('accent', '[n]')} No, cancel"
    )
    return "\n".join([border, *lines, border, "", legend])
