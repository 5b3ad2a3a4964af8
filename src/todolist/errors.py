"""Custom exception hierarchy for todolist."""


class AppError(Exception):
    """Base exception for app-specific failures."""


class ConfigError(ValueError, AppError):
    """Configuration and path validation errors."""


class ValidationError(ValueError, AppError):
    """Domain validation errors."""


class StorageError(AppError):
    """Database read/write failures."""


class DuplicateNameError(StorageError):
    """A project or category with the same name already exists."""


class ForeignKeyError(StorageError):
    """A todo references a project or category that does not exist."""


class UnknownScreenError(LookupError):
    """A screen has no registered handler.

    This is a programming error, not a runtime condition: it is deliberately
    outside the AppError hierarchy so the TUI never presents it as a message.
    """
