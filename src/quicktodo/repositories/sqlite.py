"""SQLite-backed repository for task storage."""

from __future__ import annotations

import builtins
import logging
import sqlite3
from pathlib import Path

from ..exceptions import BackendUnavailableError, DuplicateTaskError, TaskNotFoundError
from ..models import Task

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    title TEXT PRIMARY KEY,
    content TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0
)
"""


class SqliteRepository:
    """
    Repository for tasks stored in a local SQLite database.

    A single table holds title, content and the completed flag.
    Rows are listed in insertion (rowid) order.
    """

    def __init__(self, db_path: Path | str) -> None:
        """
        Open the database, creating the file and table if needed.

        Args:
            db_path: Path to the database file, or ":memory:"

        Raises:
            BackendUnavailableError: The database could not be opened.
        """
        self.db_path = db_path
        try:
            if str(db_path) != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(db_path))
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.execute(SCHEMA)
        except (OSError, sqlite3.Error) as e:
            logger.error("Failed to open database %s: %s", db_path, e)
            raise BackendUnavailableError(f"Cannot open database {db_path}: {e}") from e
        logger.info("SQLite repository ready db=%s", db_path)

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> SqliteRepository:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run a statement inside a transaction, mapping errors."""
        try:
            with self._conn:
                return self._conn.execute(sql, params)
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            logger.error("SQLite error: %s", e)
            raise BackendUnavailableError(f"Database error: {e}") from e

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            title=row["title"],
            content=row["content"],
            completed=bool(row["completed"]),
        )

    # --- Task Operations ---

    def add(self, title: str, content: str) -> Task:
        """Insert a new task row."""
        try:
            self._execute(
                "INSERT INTO tasks (title, content, completed) VALUES (?, ?, 0)",
                (title, content),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateTaskError(title) from e
        logger.debug("Inserted task %r", title)
        return Task(title=title, content=content)

    def list(self) -> builtins.list[Task]:
        """Select all task rows."""
        cursor = self._execute("SELECT title, content, completed FROM tasks ORDER BY rowid")
        return [self._row_to_task(row) for row in cursor.fetchall()]

    def find_by_title(self, title: str) -> Task | None:
        """Select a single task row by title."""
        cursor = self._execute(
            "SELECT title, content, completed FROM tasks WHERE title = ?",
            (title,),
        )
        row = cursor.fetchone()
        return self._row_to_task(row) if row is not None else None

    def complete(self, title: str) -> Task:
        """Set the completed flag on a task row."""
        cursor = self._execute("UPDATE tasks SET completed = 1 WHERE title = ?", (title,))
        if cursor.rowcount == 0:
            raise TaskNotFoundError(title)
        logger.debug("Completed task %r", title)
        task = self.find_by_title(title)
        if task is None:
            raise TaskNotFoundError(title)
        return task

    def remove(self, title: str) -> None:
        """Delete a task row."""
        cursor = self._execute("DELETE FROM tasks WHERE title = ?", (title,))
        if cursor.rowcount == 0:
            raise TaskNotFoundError(title)
        logger.debug("Deleted task %r", title)
