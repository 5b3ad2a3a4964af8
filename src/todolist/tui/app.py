"""Full-screen prompt_toolkit application driving the screen dispatcher."""

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from todolist.tui import dispatcher
from todolist.tui.keys import Key, KeyInput
from todolist.tui.state import AppState

# prompt_toolkit key names -> Key values handed to screens.
KEY_TRANSLATIONS: dict[str, Key] = {
    "enter": Key.ENTER,
    "escape": Key.ESCAPE,
    "tab": Key.TAB,
    "s-tab": Key.SHIFT_TAB,
    "up": Key.UP,
    "down": Key.DOWN,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
    "c-c": Key.CTRL_C,
}

STYLE = Style.from_dict(
    {
        "title": "bold #5fd7ff",
        "accent": "#5fafff",
        "header": "bold underline",
        "label": "bold",
        "dim": "#808080",
        "selected": "reverse",
        "focused": "bold #ffd75f",
        "cursor": "#ffd75f",
        "success": "#5fd75f",
        "error": "bold #ff5f5f",
        "info": "#5fafff",
        "warning": "bold #ffaf00",
        "pending": "#ffd75f",
        "in_progress": "#5fafff",
        "completed": "#5fd75f",
        "blocked": "#ff5f5f",
        "high": "bold #ff5f5f",
        "medium": "#ffd75f",
        "low": "#5fd75f",
    }
)


def translate_char(data: str) -> str | None:
    """The printable character carried by a key press, if any."""
    if len(data) == 1 and data.isprintable():
        return data
    return None


def _dispatch(state: AppState, event: KeyPressEvent, key: KeyInput) -> None:
    dispatcher.handle_input(state, key)
    if not state.running:
        event.app.exit()


def build_key_bindings(state: AppState) -> KeyBindings:
    kb = KeyBindings()

    def _bind(name: str, key: Key) -> None:
        # escape must not wait for a possible meta sequence
        @kb.add(name, eager=(key is Key.ESCAPE))
        def _(event: KeyPressEvent) -> None:
            _dispatch(state, event, key)

    for name, key in KEY_TRANSLATIONS.items():
        _bind(name, key)

    @kb.add(Keys.Any)
    def _(event: KeyPressEvent) -> None:
        char = translate_char(event.data)
        if char is not None:
            _dispatch(state, event, char)

    @kb.add(Keys.BracketedPaste)
    def _(event: KeyPressEvent) -> None:
        # pasted text arrives as one event; replay it key by key
        for data in event.data:
            char = translate_char(data)
            if char is not None and state.running:
                dispatcher.handle_input(state, char)
        if not state.running:
            event.app.exit()

    return kb


def build_application(state: AppState) -> Application:
    control = FormattedTextControl(
        text=lambda: HTML(dispatcher.render_screen(state)),
        focusable=True,
        show_cursor=False,
    )
    return Application(
        layout=Layout(Window(content=control, always_hide_cursor=True)),
        key_bindings=build_key_bindings(state),
        style=STYLE,
        full_screen=True,
        mouse_support=False,
    )


def run_tui(state: AppState) -> None:
    """Run until a screen clears state.running.

    prompt_toolkit restores the terminal on every exit path, including
    exceptions raised by a handler.
    """
    build_application(state).run()
