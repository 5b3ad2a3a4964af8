"""Tests for CLI bootstrap and shutdown handling."""

import sqlite3

import pytest

from todolist import cli
from todolist.tui.state import AppState


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Point configuration at a temporary database and log file."""
    db_path = tmp_path / "data" / "todos.db"
    log_path = tmp_path / "todolist.log"
    monkeypatch.setenv("TODOLIST_DB", str(db_path))
    monkeypatch.setenv("TODOLIST_LOG", str(log_path))
    monkeypatch.delenv("TODOLIST_DEBUG", raising=False)
    return db_path, log_path


def _events(log_path):
    return [
        line.removeprefix("=== ").removesuffix(" ===")
        for line in log_path.read_text(encoding="utf-8").splitlines()
        if line.startswith("=== ")
    ]


class TestMain:
    """Test CLI main entry point."""

    def test_normal_run(self, env, monkeypatch):
        """Test that main opens the database, runs the TUI and logs start/stop."""
        db_path, log_path = env
        captured = {}

        def fake_run_tui(state):
            captured["state"] = state
            state.repo.create_todo("From the TUI")

        monkeypatch.setattr(cli, "run_tui", fake_run_tui)

        cli.main()

        assert isinstance(captured["state"], AppState)
        assert db_path.exists()
        with sqlite3.connect(db_path) as conn:
            titles = [row[0] for row in conn.execute("SELECT title FROM todos")]
        assert titles == ["From the TUI"]

        events = _events(log_path)
        assert events[0] == "app_start"
        assert "entity_created" in events
        assert events[-1] == "app_stop"
        assert "reason: normal" in log_path.read_text(encoding="utf-8")

    def test_memory_database(self, monkeypatch):
        monkeypatch.setenv("TODOLIST_DB", ":memory:")
        monkeypatch.delenv("TODOLIST_LOG", raising=False)
        seen = []
        monkeypatch.setattr(cli, "run_tui", lambda state: seen.append(state.todos))

        cli.main()

        assert seen == [[]]

    def test_keyboard_interrupt_exits_cleanly(self, env, monkeypatch, capsys):
        _, log_path = env

        def interrupted(state):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_tui", interrupted)

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        assert "Interrupted" in capsys.readouterr().out
        assert "reason: keyboard_interrupt" in log_path.read_text(encoding="utf-8")

    def test_fatal_error_exits_with_message(self, env, monkeypatch, capsys):
        _, log_path = env

        def broken(state):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli, "run_tui", broken)

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        output = capsys.readouterr().out
        assert exc_info.value.code == 1
        assert "Error: boom" in output
        assert "Traceback" not in output
        log_text = log_path.read_text(encoding="utf-8")
        assert "reason: fatal_error" in log_text
        assert "error_type: RuntimeError" in log_text

    def test_debug_prints_traceback(self, env, monkeypatch, capsys):
        monkeypatch.setenv("TODOLIST_DEBUG", "1")

        def broken(state):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli, "run_tui", broken)

        with pytest.raises(SystemExit):
            cli.main()

        assert "Traceback" in capsys.readouterr().err

    def test_relative_database_path_rejected(self, monkeypatch, capsys):
        monkeypatch.setenv("TODOLIST_DB", "relative/todos.db")
        monkeypatch.delenv("TODOLIST_LOG", raising=False)
        called = []
        monkeypatch.setattr(cli, "run_tui", called.append)

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "Invalid path: relative/todos.db" in capsys.readouterr().out
        assert called == []

    def test_connection_closed_on_exit(self, env, monkeypatch):
        captured = {}

        def keep_conn(state):
            captured["conn"] = state.repo.conn

        monkeypatch.setattr(cli, "run_tui", keep_conn)

        cli.main()

        with pytest.raises(sqlite3.ProgrammingError):
            captured["conn"].execute("SELECT 1")

