"""Pytest configuration and fixtures for todolist tests."""

import logging

import pytest

from todolist.repository import Repository
from todolist.storage import open_database
from todolist.tui import dispatcher
from todolist.tui.state import create_initial_state


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo global logging changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    logging.disable(logging.NOTSET)
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def conn():
    """In-memory database with the schema applied."""
    connection = open_database(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def repo(conn):
    """Empty repository."""
    return Repository(conn)


@pytest.fixture
def seeded_repo(repo):
    """Repository with one project, one category and two todos.

    "Test Todo 1" is pending, high priority and linked to the project and
    category. "Test Todo 2" is completed and unlinked; it is newer, so it
    is listed first.
    """
    project_id = repo.create_project(
        "Test Project", description="A test project", color="#FF0000"
    )
    category_id = repo.create_category("Test Category", color="#00FF00")
    repo.create_todo(
        "Test Todo 1",
        description="First todo",
        priority=1,
        project_id=project_id,
        category_id=category_id,
        due_date="2026-03-01",
    )
    repo.create_todo("Test Todo 2", status="completed")
    return repo


@pytest.fixture
def state(repo):
    """App state over an empty repository."""
    return create_initial_state(repo)


@pytest.fixture
def seeded_state(seeded_repo):
    """App state over the seeded repository."""
    return create_initial_state(seeded_repo)


@pytest.fixture
def press():
    """Feed keys to the dispatcher one at a time."""

    def _press(state, *keys):
        for key in keys:
            dispatcher.handle_input(state, key)

    return _press


@pytest.fixture
def type_text(press):
    """Type a string character by character."""

    def _type(state, text):
        press(state, *text)

    return _type
