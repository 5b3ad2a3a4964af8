"""SQLite connection management and schema initialization."""

import logging
import sqlite3
from pathlib import Path

from todolist.errors import StorageError

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS projects (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        description TEXT,
        color TEXT,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS categories (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        color TEXT,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS todos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        description TEXT,
        status TEXT NOT NULL DEFAULT 'pending'
            CHECK(status IN ('pending', 'in_progress', 'completed', 'blocked')),
        priority INTEGER NOT NULL DEFAULT 2
            CHECK(priority IN (1, 2, 3)),
        project_id INTEGER,
        category_id INTEGER,
        start_date TEXT,
        due_date TEXT,
        completed_at TEXT,
        created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP,
        FOREIGN KEY (project_id) REFERENCES projects(id) ON DELETE SET NULL,
        FOREIGN KEY (category_id) REFERENCES categories(id) ON DELETE SET NULL
    )
    """,
)

_INDEXES = (
    ("idx_todos_status", "todos", "status"),
    ("idx_todos_project", "todos", "project_id"),
    ("idx_todos_category", "todos", "category_id"),
    ("idx_todos_due_date", "todos", "due_date"),
)


def connect_database(path: str) -> sqlite3.Connection:
    """Open a SQLite connection with foreign keys enforced.

    File databases get their parent directory created and use WAL
    journaling; ``:memory:`` is used as-is.
    """
    conn = None
    try:
        if path != MEMORY_DATABASE:
            Path(path).parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        # foreign_keys is per-connection and off by default
        conn.execute("PRAGMA foreign_keys = ON")
        conn.execute("PRAGMA busy_timeout = 5000")
        if path != MEMORY_DATABASE:
            conn.execute("PRAGMA journal_mode = WAL")
    except (OSError, sqlite3.Error) as e:
        if conn is not None:
            conn.close()
        raise StorageError(f"Failed to open database: {path}: {e}") from e

    logger.debug("Connected to database %s", path)
    return conn


def init_schema(conn: sqlite3.Connection) -> None:
    """Create tables and indexes if they do not exist yet."""
    try:
        with conn:
            for statement in _SCHEMA:
                conn.execute(statement)
            for index_name, table, column in _INDEXES:
                conn.execute(
                    f"CREATE INDEX IF NOT EXISTS {index_name} ON {table}({column})"
                )
    except sqlite3.Error as e:
        raise StorageError(f"Failed to initialize schema: {e}") from e


def open_database(path: str) -> sqlite3.Connection:
    """Connect and make sure the schema exists."""
    conn = connect_database(path)
    try:
        init_schema(conn)
    except StorageError:
        conn.close()
        raise
    return conn
