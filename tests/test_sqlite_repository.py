"""Integration tests for SqliteRepository."""

import sqlite3
from pathlib import Path

import pytest

from quicktodo.exceptions import BackendUnavailableError
from quicktodo.models import Task
from quicktodo.repositories import SqliteRepository


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a database file in a temporary directory."""
    return tmp_path / "todo.db"


class TestSqliteRepository:
    """Tests for SQLite-specific behaviour."""

    def test_creates_database_and_parent_dirs(self, tmp_path: Path):
        """Opening creates missing parent directories and the file."""
        db_path = tmp_path / "nested" / "dir" / "todo.db"

        with SqliteRepository(db_path):
            pass

        assert db_path.exists()

    def test_schema_has_three_columns(self, db_path: Path):
        """The tasks table holds title, content and completed."""
        SqliteRepository(db_path).close()

        conn = sqlite3.connect(db_path)
        columns = [row[1] for row in conn.execute("PRAGMA table_info(tasks)")]
        conn.close()

        assert columns == ["title", "content", "completed"]

    def test_tasks_persist_across_instances(self, db_path: Path):
        """Data written by one instance is visible to the next."""
        with SqliteRepository(db_path) as repo:
            repo.add("Buy milk", "semi-skimmed")
            repo.add("Walk dog", "")
            repo.complete("Walk dog")

        with SqliteRepository(db_path) as repo:
            assert repo.list() == [
                Task(title="Buy milk", content="semi-skimmed"),
                Task(title="Walk dog", content="", completed=True),
            ]

    def test_in_memory_database(self):
        """':memory:' opens a private in-memory database."""
        with SqliteRepository(":memory:") as repo:
            repo.add("a", "b")
            assert len(repo.list()) == 1

    def test_parameters_are_not_interpolated(self, db_path: Path):
        """Titles containing SQL are stored literally."""
        title = "x'); DROP TABLE tasks; --"
        with SqliteRepository(db_path) as repo:
            repo.add(title, "content with 'quotes'")
            assert repo.find_by_title(title) == Task(
                title=title, content="content with 'quotes'"
            )

    def test_unopenable_path_raises_backend_unavailable(self, tmp_path: Path):
        """A directory in place of the database file is reported as unavailable."""
        directory = tmp_path / "todo.db"
        directory.mkdir()

        with pytest.raises(BackendUnavailableError):
            SqliteRepository(directory)

    def test_operations_after_close_raise_backend_unavailable(self, db_path: Path):
        """Using a closed repository raises BackendUnavailableError."""
        repo = SqliteRepository(db_path)
        repo.close()

        with pytest.raises(BackendUnavailableError):
            repo.list()
