"""Generic add/edit form machinery.

A form is an ordered tuple of FormField definitions plus a save callback.
Fields are focused by a 1-based ``form_field_index``; the index after the
last field is the Save action. Values live in ``state.form_fields`` as
strings and are converted to typed values only when saving.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

from todolist.tui.components import (
    render_date_field,
    render_dropdown,
    render_radio_group,
    render_save_button,
    render_text_field,
)
from todolist.tui.keys import (
    KEY_QUIT,
    KEY_SPACE,
    Key,
    KeyInput,
    is_cancel_key,
    is_char,
    is_confirm_key,
    is_interrupt_key,
    is_printable_char,
)
from todolist.tui.screen_state import (
    clear_screen_state,
    get_screen_state,
    set_screen_state,
)
from todolist.tui.state import (
    AppState,
    MessageKind,
    clear_message,
    go_back,
    refresh_data,
    reset_form,
    set_message,
)
from todolist.tui.screens.common import quit_app

OptionSource = Callable[[AppState], list[tuple[str, str]]]


class FieldKind(str, Enum):
    TEXT = "text"
    DATE = "date"
    RADIO = "radio"
    DROPDOWN = "dropdown"


@dataclass(frozen=True)
class FormField:
    """One input on a form."""

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    options: OptionSource | None = None

    @property
    def accepts_text(self) -> bool:
        return self.kind in (FieldKind.TEXT, FieldKind.DATE)

    def option_list(self, state: AppState) -> list[tuple[str, str]]:
        return self.options(state) if self.options is not None else []


FORM_SHORTCUTS = (
    ("Tab", "Next"),
    ("Shift-Tab", "Prev"),
    ("↑↓", "Choose"),
    ("Space", "Expand"),
    ("Enter", "Save"),
    ("Esc", "Cancel"),
)

PLEASE_FIX = "Please fix the highlighted fields"


def save_index(fields: Sequence[FormField]) -> int:
    return len(fields) + 1


def focused_field(state: AppState, fields: Sequence[FormField]) -> FormField | None:
    """The focused field, or None when Save is focused."""
    if 1 <= state.form_field_index <= len(fields):
        return fields[state.form_field_index - 1]
    return None


def expanded_field(state: AppState) -> str | None:
    return get_screen_state(state, state.current_screen, {}).get("expanded")


def _set_expanded(state: AppState, name: str | None) -> None:
    set_screen_state(state, state.current_screen, {"expanded": name})


def render_form_body(state: AppState, fields: Sequence[FormField]) -> str:
    """Widgets for every field followed by the Save action."""
    lines = []
    expanded = expanded_field(state)
    for position, form_field in enumerate(fields, start=1):
        focused = position == state.form_field_index
        value = state.form_fields.get(form_field.name, "")
        error = state.form_errors.get(form_field.name)
        if form_field.kind is FieldKind.TEXT:
            lines.append(
                render_text_field(
                    form_field.label, value, focused, error, form_field.required
                )
            )
        elif form_field.kind is FieldKind.DATE:
            lines.append(render_date_field(form_field.label, value, focused, error))
        elif form_field.kind is FieldKind.RADIO:
            lines.append(
                render_radio_group(
                    form_field.label, form_field.option_list(state), value, focused, error
                )
            )
        else:
            lines.append(
                render_dropdown(
                    form_field.label,
                    form_field.option_list(state),
                    value,
                    focused,
                    expanded == form_field.name,
                    error,
                )
            )
    lines.append("")
    lines.append(render_save_button(state.form_field_index == save_index(fields)))
    return "\n".join(lines)


def _move_focus(state: AppState, fields: Sequence[FormField], delta: int) -> None:
    state.form_field_index = min(
        max(state.form_field_index + delta, 1), save_index(fields)
    )
    _set_expanded(state, None)


def _cycle_option(state: AppState, form_field: FormField, delta: int) -> None:
    values = [value for value, _ in form_field.option_list(state)]
    if not values:
        return
    current = state.form_fields.get(form_field.name, "")
    position = values.index(current) if current in values else -1
    if position == -1 and delta < 0:
        position = 0
    state.form_fields[form_field.name] = values[(position + delta) % len(values)]


def _quick_select(state: AppState, form_field: FormField, digit: str) -> None:
    options = form_field.option_list(state)
    choice = int(digit)
    if 1 <= choice <= len(options):
        state.form_fields[form_field.name] = options[choice - 1][0]


def leave_form(state: AppState) -> None:
    """Discard the form buffer and return to the previous screen."""
    clear_screen_state(state, state.current_screen)
    reset_form(state)
    go_back(state)


def cancel_form(state: AppState) -> None:
    clear_message(state)
    leave_form(state)


def finish_form(state: AppState, message: str) -> None:
    """Leave the form after a successful save."""
    leave_form(state)
    refresh_data(state)
    set_message(state, message, MessageKind.SUCCESS)


def reject_form(state: AppState, errors: dict[str, str]) -> None:
    state.form_errors = errors
    set_message(state, PLEASE_FIX, MessageKind.ERROR)


def handle_form_input(
    state: AppState,
    key: KeyInput,
    fields: Sequence[FormField],
    save: Callable[[AppState], None],
) -> None:
    """Shared key handling for every add/edit form."""
    if is_interrupt_key(key):
        quit_app(state)
        return

    current = focused_field(state, fields)
    if is_char(key, KEY_QUIT) and (current is None or not current.accepts_text):
        quit_app(state)
        return

    # Errors stay visible until the next save attempt.
    if state.message_kind is not MessageKind.ERROR:
        clear_message(state)

    if is_cancel_key(key):
        cancel_form(state)
    elif key is Key.TAB:
        _move_focus(state, fields, 1)
    elif key is Key.SHIFT_TAB:
        _move_focus(state, fields, -1)
    elif is_confirm_key(key):
        clear_message(state)
        save(state)
    elif key in (Key.UP, Key.DOWN):
        delta = -1 if key is Key.UP else 1
        if current is not None and not current.accepts_text:
            _cycle_option(state, current, delta)
        else:
            _move_focus(state, fields, delta)
    elif key is Key.BACKSPACE:
        if current is not None and current.accepts_text:
            value = state.form_fields.get(current.name, "")
            state.form_fields[current.name] = value[:-1]
    elif is_printable_char(key) and current is not None:
        if current.accepts_text:
            state.form_fields[current.name] = state.form_fields.get(current.name, "") + key
        elif current.kind is FieldKind.RADIO and key.isdigit():
            _quick_select(state, current, key)
        elif current.kind is FieldKind.DROPDOWN and key == KEY_SPACE:
            is_open = expanded_field(state) == current.name
            _set_expanded(state, None if is_open else current.name)
