"""Unit tests for the Task model and configuration models."""

import pytest
from pydantic import ValidationError

from quicktodo.models import (
    CHECKBOX_DONE,
    CHECKBOX_TODO,
    DEFAULT_TASK_LIST,
    GoogleConfig,
    QuicktodoConfig,
    Task,
)


class TestTask:
    """Tests for Task defaults and display."""

    def test_new_task_is_not_completed(self):
        """A task defaults to not completed with empty content."""
        task = Task(title="Buy milk")
        assert task.completed is False
        assert task.content == ""
        assert task.task_id is None
        assert task.due is None

    def test_checkbox_reflects_completed_flag(self):
        """checkbox switches between [ ] and [X]."""
        assert Task(title="a").checkbox == CHECKBOX_TODO == "[ ]"
        assert Task(title="a", completed=True).checkbox == CHECKBOX_DONE == "[X]"

    def test_summary_open_task(self):
        """summary renders checkbox, title and content."""
        task = Task(title="Buy milk", content="semi-skimmed")
        assert task.summary() == "[ ] Buy milk: semi-skimmed"

    def test_summary_completed_task(self):
        """summary marks completed tasks with [X]."""
        task = Task(title="Buy milk", content="semi-skimmed", completed=True)
        assert task.summary() == "[X] Buy milk: semi-skimmed"

    def test_summary_includes_due_date(self):
        """summary appends the due date when present."""
        task = Task(title="Pay rent", content="", due="2026-11-01T00:00:00.000Z")
        assert task.summary() == "[ ] Pay rent:  (due: 2026-11-01T00:00:00.000Z)"


class TestQuicktodoConfig:
    """Tests for QuicktodoConfig validation."""

    def test_default_config(self):
        """Defaults select the sqlite backend with todo.db."""
        config = QuicktodoConfig.default()
        assert config.backend == "sqlite"
        assert str(config.sqlite.path) == "todo.db"
        assert str(config.google.credentials_file) == "credentials.json"
        assert str(config.google.token_cache) == "tokencache.json"
        assert config.google.task_list == DEFAULT_TASK_LIST

    def test_nested_sections_parse(self):
        """Nested sqlite/google sections are parsed from dicts."""
        config = QuicktodoConfig(
            backend="google",
            sqlite={"path": "data/tasks.db"},
            google={"task_list": "Errands"},
        )
        assert config.backend == "google"
        assert str(config.sqlite.path) == "data/tasks.db"
        assert config.google.task_list == "Errands"

    def test_unknown_backend_rejected(self):
        """Backends other than sqlite, google and memory are rejected."""
        with pytest.raises(ValidationError):
            QuicktodoConfig(backend="postgres")

    def test_blank_task_list_rejected(self):
        """A whitespace-only task list title is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GoogleConfig(task_list="   ")
        assert "task_list cannot be empty" in str(exc_info.value)
