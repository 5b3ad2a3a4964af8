"""Tests for the filter menu and filter selection screens."""

import pytest

from todolist.tui import dispatcher
from todolist.tui.components import strip_markup
from todolist.tui.keys import Key
from todolist.tui.screens import filter_select
from todolist.tui.state import MessageKind, Screen


@pytest.fixture
def menu_state(seeded_state, press):
    press(seeded_state, "f")
    return seeded_state


class TestFilterMenu:
    """Test the filter menu."""

    def test_render_without_filters(self, menu_state):
        text = strip_markup(dispatcher.render_screen(menu_state))

        assert "Filter Todos" in text
        assert "No filters active" in text
        assert "▶ Filter by Status" in text
        assert "Clear All Filters" in text

    def test_render_shows_current_values(self, menu_state):
        menu_state.filter_status = "blocked"
        menu_state.filter_category_id = menu_state.categories[0].id

        text = strip_markup(dispatcher.render_screen(menu_state))

        assert "Status: Blocked, Category: Test Category" in text
        assert "Filter by Status (Blocked)" in text
        assert "Filter by Category (Test Category)" in text
        assert "Filter by Project\n" in text

    @pytest.mark.parametrize(
        "moves, screen",
        [
            (0, Screen.FILTER_STATUS),
            (1, Screen.FILTER_PROJECT),
            (2, Screen.FILTER_CATEGORY),
        ],
    )
    def test_enter_opens_selection(self, menu_state, press, moves, screen):
        press(menu_state, *(["j"] * moves), Key.ENTER)

        assert menu_state.current_screen is screen
        assert menu_state.previous_screen is Screen.FILTER_MENU
        assert menu_state.selected_index == 1

    def test_navigation_clamped_to_menu(self, menu_state, press):
        press(menu_state, *(["j"] * 10))

        assert menu_state.selected_index == 4

    def test_clear_all(self, menu_state, press):
        menu_state.filter_status = "pending"
        menu_state.filter_project_id = menu_state.projects[0].id

        press(menu_state, "j", "j", "j", Key.ENTER)

        assert not menu_state.has_filters
        assert menu_state.current_screen is Screen.MAIN_LIST
        assert menu_state.previous_screen is None
        assert menu_state.message == "All filters cleared"
        assert menu_state.message_kind is MessageKind.SUCCESS
        assert len(menu_state.todos) == 2

    @pytest.mark.parametrize("key", ["b", Key.ESCAPE])
    def test_back(self, menu_state, press, key):
        press(menu_state, "j", key)

        assert menu_state.current_screen is Screen.MAIN_LIST
        assert menu_state.selected_index == 1

    def test_quit(self, menu_state, press):
        press(menu_state, "q")

        assert menu_state.running is False


class TestFilterSelect:
    """Test the status, project and category selection screens."""

    def test_status_options(self, menu_state, press):
        press(menu_state, Key.ENTER)

        labels = [label for _, label in filter_select.options(menu_state)]

        assert labels == ["All", "Pending", "In Progress", "Completed", "Blocked"]

    def test_apply_status(self, menu_state, press):
        press(menu_state, Key.ENTER, "j", Key.ENTER)

        assert menu_state.filter_status == "pending"
        assert menu_state.current_screen is Screen.MAIN_LIST
        assert menu_state.previous_screen is None
        assert [t.title for t in menu_state.todos] == ["Test Todo 1"]

    def test_apply_project(self, menu_state, press):
        press(menu_state, "j", Key.ENTER, "j", Key.ENTER)

        assert menu_state.filter_project_id == menu_state.projects[0].id
        assert [t.title for t in menu_state.todos] == ["Test Todo 1"]

    def test_apply_category(self, menu_state, press):
        press(menu_state, "j", "j", Key.ENTER, "j", Key.ENTER)

        assert menu_state.filter_category_id == menu_state.categories[0].id
        assert [t.title for t in menu_state.todos] == ["Test Todo 1"]

    def test_all_clears_one_filter(self, menu_state, press):
        menu_state.filter_status = "completed"
        menu_state.filter_project_id = menu_state.projects[0].id

        press(menu_state, Key.ENTER, Key.ENTER)

        assert menu_state.filter_status is None
        assert menu_state.filter_project_id == menu_state.projects[0].id

    def test_active_value_marked(self, menu_state, press):
        menu_state.filter_status = "completed"
        press(menu_state, Key.ENTER)

        text = strip_markup(dispatcher.render_screen(menu_state))

        assert "Completed ✓" in text
        assert "All ✓" not in text

    def test_all_marked_without_filter(self, menu_state, press):
        press(menu_state, "j", Key.ENTER)

        text = strip_markup(dispatcher.render_screen(menu_state))

        assert "Filter by Project" in text
        assert "All ✓" in text

    def test_back_to_menu(self, menu_state, press):
        press(menu_state, Key.ENTER, "j", "j", Key.ESCAPE)

        assert menu_state.current_screen is Screen.FILTER_MENU
        assert menu_state.selected_index == 1
        assert menu_state.filter_status is None

    def test_filters_combine(self, seeded_state, seeded_repo, press):
        """Test that project and status filters are applied together."""
        project_id = seeded_state.projects[0].id
        seeded_repo.create_todo("Done in project", status="completed", project_id=project_id)

        press(seeded_state, "f", "j", Key.ENTER, "j", Key.ENTER)
        assert len(seeded_state.todos) == 2

        press(seeded_state, "f", Key.ENTER, "j", "j", "j", Key.ENTER)

        assert [t.title for t in seeded_state.todos] == ["Done in project"]
        assert seeded_state.filter_status == "completed"
        assert seeded_state.filter_project_id == project_id
