"""Terminal user interface: state, dispatch, screens and components."""

from .keys import Key
from .state import AppState, MessageKind, Screen, create_initial_state

__all__ = ["AppState", "Key", "MessageKind", "Screen", "create_initial_state"]
