"""Per-screen extension map.

Screens that need private state (for example which dropdown is expanded
on a form) keep it here, keyed by their Screen value, instead of adding
fields to AppState.
"""

from typing import Any

from todolist.tui.state import AppState, Screen


def get_screen_state(state: AppState, screen: Screen, default: Any = None) -> Any:
    return state.screen_state.get(screen, default)


def set_screen_state(state: AppState, screen: Screen, value: Any) -> None:
    state.screen_state[screen] = value


def has_screen_state(state: AppState, screen: Screen) -> bool:
    return screen in state.screen_state


def clear_screen_state(state: AppState, screen: Screen) -> None:
    state.screen_state.pop(screen, None)


def clear_all_screen_states(state: AppState) -> None:
    state.screen_state.clear()
