"""Boxed screen header."""

from todolist.tui.components.markup import escape, styled, tag

MIN_INNER_WIDTH = 20


def render_header(title: str, subtitle: str | None = None) -> str:
    """Render title and optional subtitle in a box sized to the longest line."""
    lines = [title] + ([subtitle] if subtitle else [])
    inner = max(MIN_INNER_WIDTH, *(len(line) for line in lines)) + 2

    out = [styled("accent", "╭" + "─" * inner + "╮")]
    border = styled("accent", "│")
    out.append(f"{border} {tag('title', escape(title.ljust(inner - 2)))} {border}")
    if subtitle:
        out.append(f"{border} {styled('dim', subtitle.ljust(inner - 2))} {border}")
    out.append(styled("accent", "╰" + "─" * inner + "╯"))
    return "\n".join(out)
