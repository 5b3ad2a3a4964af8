"""Environment-driven configuration and path mapping."""

import os
import re
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from todolist.errors import ConfigError
from todolist.storage import MEMORY_DATABASE

ENV_DATABASE = "TODOLIST_DB"
ENV_LOG = "TODOLIST_LOG"
ENV_DEBUG = "TODOLIST_DEBUG"

DEFAULT_DATABASE_PATH = "~/.todo-list/todos.db"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    """Resolved runtime configuration."""

    database_path: str
    log_path: str | None = None
    debug: bool = False


def _normalize_path_text(path: str) -> str:
    normalized = unicodedata.normalize("NFC", path)
    if "\0" in normalized:
        raise ConfigError("Path cannot contain NUL bytes")
    return normalized


def map_path(path: str) -> str:
    """Resolve a path string to an absolute path string.

    ~ or ~/...  -> user home directory
    Absolute    -> used as-is
    Relative    -> error (the working directory of a TUI is not meaningful)
    """
    normalized = _normalize_path_text(path).strip()
    if not normalized:
        raise ConfigError("Path cannot be empty")

    candidate = Path(re.sub(r"[\\/]+", "/", normalized)).expanduser()
    if candidate.is_absolute():
        return str(candidate.resolve())

    raise ConfigError(
        f"Invalid path: {path}. Use an absolute path or one starting with '~'."
    )


def _parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


def load_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Variables to read, defaults to ``os.environ``

    Raises:
        ConfigError: If a configured path is invalid
    """
    env = os.environ if environ is None else environ

    raw_db = env.get(ENV_DATABASE) or DEFAULT_DATABASE_PATH
    if raw_db == MEMORY_DATABASE:
        database_path = raw_db
    else:
        database_path = map_path(raw_db)

    raw_log = env.get(ENV_LOG)
    log_path = map_path(raw_log) if raw_log else None

    return AppConfig(
        database_path=database_path,
        log_path=log_path,
        debug=_parse_bool(env.get(ENV_DEBUG)),
    )
