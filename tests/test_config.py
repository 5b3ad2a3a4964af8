"""Tests for configuration loading and path mapping."""

from pathlib import Path

import pytest

from todolist.config import (
    DEFAULT_DATABASE_PATH,
    AppConfig,
    load_config,
    map_path,
)
from todolist.errors import ConfigError


class TestMapPath:
    """Test path mapping."""

    def test_tilde_expands_to_home(self):
        assert map_path("~/todos.db") == str((Path.home() / "todos.db").resolve())

    def test_absolute_path(self, tmp_path):
        target = tmp_path / "db" / "todos.db"

        assert map_path(str(target)) == str(target.resolve())

    def test_relative_path_rejected(self):
        with pytest.raises(ConfigError, match="Invalid path"):
            map_path("todos.db")

    def test_nul_byte_rejected(self):
        with pytest.raises(ConfigError, match="NUL"):
            map_path("/tmp/to\0dos.db")

    def test_empty_rejected(self):
        with pytest.raises(ConfigError):
            map_path("  ")


class TestLoadConfig:
    """Test environment-driven configuration."""

    def test_defaults(self):
        config = load_config({})

        assert config == AppConfig(
            database_path=map_path(DEFAULT_DATABASE_PATH),
            log_path=None,
            debug=False,
        )

    def test_memory_database_passthrough(self):
        assert load_config({"TODOLIST_DB": ":memory:"}).database_path == ":memory:"

    def test_log_and_debug(self, tmp_path):
        config = load_config(
            {
                "TODOLIST_DB": str(tmp_path / "t.db"),
                "TODOLIST_LOG": str(tmp_path / "t.log"),
                "TODOLIST_DEBUG": "yes",
            }
        )

        assert config.log_path == str((tmp_path / "t.log").resolve())
        assert config.debug is True

    @pytest.mark.parametrize("raw", ["0", "false", "", "nope"])
    def test_debug_false_values(self, raw):
        assert load_config({"TODOLIST_DEBUG": raw}).debug is False

    def test_invalid_database_path(self):
        with pytest.raises(ConfigError):
            load_config({"TODOLIST_DB": "relative/todos.db"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("TODOLIST_DB", ":memory:")

        assert load_config().database_path == ":memory:"
