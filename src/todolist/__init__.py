"""Terminal todo-list manager backed by SQLite."""

__version__ = "0.1.0"
