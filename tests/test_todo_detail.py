"""Tests for the todo detail screen."""

import pytest

from todolist.errors import StorageError
from todolist.tui import dispatcher
from todolist.tui.components import strip_markup
from todolist.tui.keys import Key
from todolist.tui.state import MessageKind, Screen


@pytest.fixture
def detail_state(seeded_state, press):
    """Detail screen showing "Test Todo 1", opened from the main list."""
    press(seeded_state, "j", Key.ENTER)
    return seeded_state


class TestRender:
    """Test detail rendering."""

    def test_all_fields_shown(self, detail_state):
        text = strip_markup(dispatcher.render_screen(detail_state))

        assert "Todo Details" in text
        assert "Test Todo 1" in text
        assert "Pending" in text
        assert "High" in text
        assert "Test Project" in text
        assert "Test Category" in text
        assert "2026-03-01" in text
        assert "First todo" in text

    def test_missing_values_shown_as_dash(self, seeded_state, press):
        press(seeded_state, Key.ENTER)
        text = strip_markup(dispatcher.render_screen(seeded_state))

        assert "Test Todo 2" in text
        assert "(none)" in text
        assert "Project:     -" in text

    def test_no_todo_selected(self, state):
        state.current_screen = Screen.TODO_DETAIL

        assert "No todo selected." in strip_markup(dispatcher.render_screen(state))

    def test_multiline_description(self, repo, state, press):
        repo.create_todo("Notes", description="line one\nline two")
        state.todos = repo.list_todos()
        press(state, Key.ENTER)

        text = strip_markup(dispatcher.render_screen(state))

        assert "  line one\n  line two" in text


class TestInput:
    """Test detail key handling."""

    @pytest.mark.parametrize("key", ["b", Key.ESCAPE])
    def test_back_returns_to_list(self, detail_state, press, key):
        press(detail_state, key)

        assert detail_state.current_screen is Screen.MAIN_LIST
        assert detail_state.previous_screen is None

    def test_edit(self, detail_state, press):
        press(detail_state, "e")

        assert detail_state.current_screen is Screen.TODO_EDIT
        assert detail_state.previous_screen is Screen.TODO_DETAIL
        assert detail_state.form_fields["title"] == "Test Todo 1"

    def test_delete(self, detail_state, press):
        press(detail_state, "d")

        assert detail_state.current_screen is Screen.DELETE_CONFIRM
        assert detail_state.delete_name == "Test Todo 1"

    def test_toggle_updates_shown_todo(self, detail_state, press):
        press(detail_state, "c")

        assert detail_state.current_screen is Screen.TODO_DETAIL
        assert detail_state.current_todo.status == "completed"
        assert detail_state.current_todo.completed_at is not None
        assert detail_state.message_kind is MessageKind.SUCCESS

        press(detail_state, "c")

        assert detail_state.current_todo.status == "pending"
        assert detail_state.current_todo.completed_at is None

    def test_toggle_failure_reported(self, detail_state, press, monkeypatch):
        def fail(*args, **kwargs):
            raise StorageError("Database error: disk I/O error")

        monkeypatch.setattr(detail_state.repo, "update_todo", fail)

        press(detail_state, "c")

        assert detail_state.current_screen is Screen.TODO_DETAIL
        assert detail_state.message_kind is MessageKind.ERROR
        assert detail_state.message.startswith("Error updating todo:")
        assert detail_state.current_todo.status == "pending"

    def test_quit(self, detail_state, press):
        press(detail_state, "q")

        assert detail_state.running is False
