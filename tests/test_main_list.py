"""Tests for the main todo list screen."""

from todolist.models import EntityKind
from todolist.tui import dispatcher
from todolist.tui.components import strip_markup
from todolist.tui.keys import Key
from todolist.tui.screens import main_list
from todolist.tui.state import MessageKind, Screen, refresh_data, set_message


class TestRender:
    """Test main list rendering."""

    def test_lists_todos_with_count(self, seeded_state):
        text = strip_markup(dispatcher.render_screen(seeded_state))

        assert "Todo List" in text
        assert "[2 items]" in text
        assert text.index("Test Todo 2") < text.index("Test Todo 1")
        assert "[q] Quit" in text

    def test_singular_item_count(self, repo, state):
        repo.create_todo("Only")
        state.todos = repo.list_todos()

        assert main_list.subtitle(state) == "[1 item]"

    def test_empty_guidance(self, state):
        text = strip_markup(dispatcher.render_screen(state))

        assert "No todos yet. Press 'a' to add one." in text
        assert "[0 items]" in text

    def test_filtered_empty_guidance(self, seeded_state):
        seeded_state.filter_status = "blocked"
        refresh_data(seeded_state)

        text = strip_markup(dispatcher.render_screen(seeded_state))

        assert "No todos match the current filters" in text

    def test_filter_summary_in_subtitle(self, seeded_state):
        seeded_state.filter_status = "pending"
        seeded_state.filter_project_id = seeded_state.projects[0].id

        assert main_list.subtitle(seeded_state).startswith(
            "[Filter: Status: Pending, Project: Test Project]"
        )

    def test_message_banner(self, seeded_state):
        set_message(seeded_state, "Todo created", MessageKind.SUCCESS)

        assert "✓ Todo created" in strip_markup(dispatcher.render_screen(seeded_state))


class TestNavigation:
    """Test cursor movement and screen changes."""

    def test_down_and_up(self, seeded_state, press):
        press(seeded_state, Key.DOWN)
        assert seeded_state.selected_index == 2

        press(seeded_state, Key.DOWN)
        assert seeded_state.selected_index == 2

        press(seeded_state, "k", "k")
        assert seeded_state.selected_index == 1

    def test_enter_opens_detail(self, seeded_state, press):
        press(seeded_state, "j", Key.ENTER)

        assert seeded_state.current_screen is Screen.TODO_DETAIL
        assert seeded_state.previous_screen is Screen.MAIN_LIST
        assert seeded_state.current_todo.title == "Test Todo 1"

    def test_add_opens_blank_form(self, seeded_state, press):
        press(seeded_state, "a")

        assert seeded_state.current_screen is Screen.TODO_ADD
        assert seeded_state.form_fields["title"] == ""
        assert seeded_state.form_fields["status"] == "pending"
        assert seeded_state.form_fields["priority"] == "2"
        assert seeded_state.form_field_index == 1

    def test_edit_prefills_form(self, seeded_state, press):
        press(seeded_state, "j", "e")

        assert seeded_state.current_screen is Screen.TODO_EDIT
        assert seeded_state.form_fields["title"] == "Test Todo 1"
        assert seeded_state.form_fields["due_date"] == "2026-03-01"
        assert seeded_state.form_fields["project_id"] == str(seeded_state.projects[0].id)

    def test_delete_sets_target(self, seeded_state, press):
        press(seeded_state, "d")

        assert seeded_state.current_screen is Screen.DELETE_CONFIRM
        assert seeded_state.delete_kind is EntityKind.TODO
        assert seeded_state.delete_name == "Test Todo 2"

    def test_shortcut_screens_start_at_top(self, seeded_state, press):
        for key, screen in (
            ("f", Screen.FILTER_MENU),
            ("p", Screen.PROJECT_LIST),
            ("g", Screen.CATEGORY_LIST),
        ):
            seeded_state.current_screen = Screen.MAIN_LIST
            seeded_state.selected_index = 2

            press(seeded_state, key)

            assert seeded_state.current_screen is screen
            assert seeded_state.previous_screen is Screen.MAIN_LIST
            assert seeded_state.selected_index == 1

    def test_quit(self, seeded_state, press):
        press(seeded_state, "q")
        assert seeded_state.running is False

    def test_ctrl_c_quits(self, seeded_state, press):
        press(seeded_state, Key.CTRL_C)
        assert seeded_state.running is False

    def test_item_keys_ignored_on_empty_list(self, state, press):
        press(state, Key.ENTER, "e", "d", "c")

        assert state.current_screen is Screen.MAIN_LIST
        assert state.current_todo is None

    def test_unknown_key_ignored(self, seeded_state, press):
        press(seeded_state, "z", Key.LEFT)

        assert seeded_state.current_screen is Screen.MAIN_LIST
        assert seeded_state.running is True

    def test_key_clears_message(self, seeded_state, press):
        set_message(seeded_state, "Saved", MessageKind.SUCCESS)

        press(seeded_state, "j")

        assert seeded_state.message == ""


class TestToggle:
    """Test the completion toggle."""

    def test_pending_becomes_completed(self, seeded_state, seeded_repo, press):
        press(seeded_state, "j", "c")

        todo = seeded_repo.get_todo(seeded_state.todos[1].id)
        assert todo.status == "completed"
        assert todo.completed_at is not None
        assert seeded_state.message == "Marked 'Test Todo 1' as Completed"
        assert seeded_state.message_kind is MessageKind.SUCCESS

    def test_completed_becomes_pending(self, seeded_state, seeded_repo, press):
        press(seeded_state, "c")

        todo = seeded_repo.get_todo(seeded_state.todos[0].id)
        assert todo.status == "pending"
        assert todo.completed_at is None
        assert seeded_state.message == "Marked 'Test Todo 2' as Pending"

    def test_toggle_refreshes_filtered_list(self, seeded_state, press):
        seeded_state.filter_status = "pending"
        refresh_data(seeded_state)

        press(seeded_state, "c")

        assert seeded_state.todos == []
        assert seeded_state.selected_index == 1

    def test_toggle_of_vanished_todo(self, seeded_state, seeded_repo, press):
        seeded_repo.delete_todo(seeded_state.todos[0].id)

        press(seeded_state, "c")

        assert seeded_state.message == "Todo no longer exists"
        assert seeded_state.message_kind is MessageKind.ERROR
        assert len(seeded_state.todos) == 1
