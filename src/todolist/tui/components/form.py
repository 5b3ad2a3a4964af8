"""Form field widgets.

Each widget returns one or more lines of markup. The focused field is
marked with a cursor arrow and its label highlighted; an error, when
given, is rendered on the line below the field.
"""

from typing import Sequence

from todolist.tui.components.markup import escape, styled, tag

FOCUS_MARKER = "▶ "
BLUR_MARKER = "  "
TEXT_CURSOR = "█"
RADIO_ON = "(•)"
RADIO_OFF = "( )"
DATE_HINT = "YYYY-MM-DD"
NONE_DISPLAY = "None"


def _label(label: str, focused: bool, required: bool) -> str:
    text = f"{label}{'*' if required else ''}:"
    marker = FOCUS_MARKER if focused else BLUR_MARKER
    if focused:
        return styled("focused", marker + text)
    return escape(marker) + styled("label", text)


def _error_line(error: str | None) -> list[str]:
    if not error:
        return []
    return ["    " + styled("error", f"✗ {error}")]


def render_text_field(
    label: str,
    value: str,
    focused: bool,
    error: str | None = None,
    required: bool = False,
) -> str:
    cursor = styled("cursor", TEXT_CURSOR) if focused else ""
    line = f"{_label(label, focused, required)} [{escape(value)}{cursor}]"
    return "\n".join([line, *_error_line(error)])


def render_date_field(
    label: str,
    value: str,
    focused: bool,
    error: str | None = None,
) -> str:
    cursor = styled("cursor", TEXT_CURSOR) if focused else ""
    hint = "" if value else " " + styled("dim", DATE_HINT)
    line = f"{_label(label, focused, False)} [{escape(value)}{cursor}]{hint}"
    return "\n".join([line, *_error_line(error)])


def render_radio_group(
    label: str,
    options: Sequence[tuple[str, str]],
    selected: str,
    focused: bool,
    error: str | None = None,
) -> str:
    """Options are (value, display) pairs shown on one line."""
    choices = []
    for value, display in options:
        if value == selected:
            choices.append(tag("b", escape(f"{RADIO_ON} {display}")))
        else:
            choices.append(escape(f"{RADIO_OFF} {display}"))
    line = f"{_label(label, focused, False)} {'  '.join(choices)}"
    return "\n".join([line, *_error_line(error)])


def render_dropdown(
    label: str,
    options: Sequence[tuple[str, str]],
    selected: str,
    focused: bool,
    expanded: bool = False,
    error: str | None = None,
) -> str:
    """Options are (value, display) pairs; expanded lists them all below."""
    display = NONE_DISPLAY
    for value, option_display in options:
        if value == selected:
            display = option_display
            break

    arrow = "▲" if expanded else "▼"
    lines = [f"{_label(label, focused, False)} [{escape(display)} {arrow}]"]
    if expanded:
        for value, option_display in options:
            if value == selected:
                lines.append("      " + styled("accent", f"● {option_display}"))
            else:
                lines.append("      " + escape(f"○ {option_display}"))
    lines.extend(_error_line(error))
    return "\n".join(lines)


def render_save_button(focused: bool, label: str = "Save") -> str:
    text = f"[ {label} ]"
    if focused:
        return styled("focused", FOCUS_MARKER + text)
    return escape(BLUR_MARKER + text)
