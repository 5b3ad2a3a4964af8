"""Tests for the delete confirmation screen."""

import pytest

from todolist.errors import StorageError
from todolist.models import EntityKind
from todolist.tui import dispatcher
from todolist.tui.components import strip_markup
from todolist.tui.keys import Key
from todolist.tui.screens import delete_confirm
from todolist.tui.state import MessageKind, Screen


class TestRender:
    """Test the confirmation dialog."""

    def test_names_target(self, seeded_state, press):
        press(seeded_state, "j", "d")

        text = strip_markup(dispatcher.render_screen(seeded_state))

        assert "Confirm Delete" in text
        assert "Delete todo?" in text
        assert '"Test Todo 1"' in text
        assert "[y] Yes, delete" in text

    def test_without_target(self, state):
        state.current_screen = Screen.DELETE_CONFIRM

        text = strip_markup(dispatcher.render_screen(state))

        assert "Nothing selected for deletion." in text


class TestTodoDelete:
    """Test deleting todos."""

    @pytest.mark.parametrize("key", ["y", Key.ENTER])
    def test_confirm(self, seeded_state, seeded_repo, press, key):
        press(seeded_state, "j", "d", key)

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert seeded_state.previous_screen is None
        assert [t.title for t in seeded_state.todos] == ["Test Todo 2"]
        assert seeded_state.message == "Todo 'Test Todo 1' deleted"
        assert seeded_state.message_kind is MessageKind.SUCCESS
        assert seeded_state.delete_kind is None
        assert seeded_state.delete_id is None

    @pytest.mark.parametrize("key", ["n", "b", Key.ESCAPE])
    def test_cancel(self, seeded_state, seeded_repo, press, key):
        press(seeded_state, "d", key)

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert len(seeded_repo.list_todos()) == 2
        assert seeded_state.delete_kind is None
        assert seeded_state.message == ""

    def test_from_detail_returns_to_main_list(self, seeded_state, press):
        press(seeded_state, Key.ENTER, "d", "y")

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert seeded_state.current_todo is None

    def test_cancel_from_detail_returns_to_detail(self, seeded_state, press):
        press(seeded_state, Key.ENTER, "d", "n")

        assert seeded_state.current_screen is Screen.TODO_DETAIL

    def test_selection_clamped_after_delete(self, seeded_state, press):
        press(seeded_state, "j", "d", "y")

        assert seeded_state.selected_index == 1

    def test_already_gone(self, seeded_state, seeded_repo, press):
        press(seeded_state, "d")
        seeded_repo.delete_todo(seeded_state.delete_id)

        press(seeded_state, "y")

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert seeded_state.message == "Todo no longer exists"
        assert seeded_state.message_kind is MessageKind.ERROR
        assert len(seeded_state.todos) == 1

    def test_storage_error(self, seeded_state, press, monkeypatch):
        def fail(todo_id):
            raise StorageError("Database error: database is locked")

        monkeypatch.setattr(seeded_state.repo, "delete_todo", fail)
        press(seeded_state, "d", "y")

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert seeded_state.message == "Error deleting todo: Database error: database is locked"
        assert seeded_state.message_kind is MessageKind.ERROR

    def test_unknown_key_ignored(self, seeded_state, press):
        press(seeded_state, "d", "x", Key.DOWN)

        assert seeded_state.current_screen is Screen.DELETE_CONFIRM
        assert seeded_state.delete_kind is EntityKind.TODO

    def test_quit(self, seeded_state, press):
        press(seeded_state, "d", "q")

        assert seeded_state.running is False


class TestProjectAndCategoryDelete:
    """Test deleting projects and categories."""

    def test_project_delete_unassigns_todos(self, seeded_state, seeded_repo, press):
        todo_id = seeded_state.todos[1].id

        press(seeded_state, "p", "d", "y")

        assert seeded_state.current_screen is Screen.PROJECT_LIST
        assert seeded_state.projects == []
        assert seeded_state.message == "Project 'Test Project' deleted"
        todo = seeded_repo.get_todo(todo_id)
        assert todo is not None
        assert todo.project_id is None

    def test_project_delete_clears_matching_filter(self, seeded_state, press):
        press(seeded_state, "p", Key.ENTER)
        assert seeded_state.filter_project_id is not None

        press(seeded_state, "p", "d", "y")

        assert seeded_state.filter_project_id is None
        assert len(seeded_state.todos) == 2

    def test_category_delete(self, seeded_state, seeded_repo, press):
        todo_id = seeded_state.todos[1].id

        press(seeded_state, "g", "d", "y")

        assert seeded_state.current_screen is Screen.CATEGORY_LIST
        assert seeded_state.categories == []
        assert seeded_state.message == "Category 'Test Category' deleted"
        assert seeded_repo.get_todo(todo_id).category_id is None

    def test_cancel_returns_to_list(self, seeded_state, press):
        press(seeded_state, "g", "d", Key.ESCAPE)

        assert seeded_state.current_screen is Screen.CATEGORY_LIST
        assert len(seeded_state.categories) == 1


class TestConfirmDelete:
    """Test confirm_delete directly."""

    def test_nothing_to_delete(self, state):
        state.current_screen = Screen.DELETE_CONFIRM
        state.previous_screen = Screen.PROJECT_LIST

        delete_confirm.confirm_delete(state)

        assert state.current_screen is Screen.PROJECT_LIST
        assert state.message == "Nothing to delete"
        assert state.message_kind is MessageKind.ERROR

    def test_every_kind_has_an_operation(self):
        assert set(delete_confirm.DELETE_OPERATIONS) == set(EntityKind)
        assert set(delete_confirm.RETURN_SCREENS) == set(EntityKind)
