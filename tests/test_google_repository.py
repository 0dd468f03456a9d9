"""Tests for GoogleTasksRepository against a mocked client."""

from unittest.mock import MagicMock

import pytest

from quicktodo.exceptions import DuplicateTaskError, TaskNotFoundError
from quicktodo.google import (
    GoogleTasksClient,
    GoogleTasksClientError,
    GoogleTasksNotFoundError,
    TaskListResource,
    TaskResource,
)
from quicktodo.models import Task
from quicktodo.repositories import GoogleTasksRepository


class FakeTasksApi:
    """Minimal stand-in for the remote task list, keyed by task id."""

    def __init__(self) -> None:
        self.tasks: dict[str, TaskResource] = {}
        self._next_id = 1

    def list_tasks(self, tasklist_id: str) -> list[TaskResource]:
        return list(self.tasks.values())

    def create_task(self, tasklist_id: str, task: TaskResource) -> TaskResource:
        created = task.model_copy(update={"id": f"t{self._next_id}"})
        self._next_id += 1
        self.tasks[created.id] = created
        return created

    def update_task(self, tasklist_id: str, task_id: str, fields: dict) -> TaskResource:
        if task_id not in self.tasks:
            raise GoogleTasksNotFoundError("Resource not found")
        self.tasks[task_id] = self.tasks[task_id].model_copy(update=fields)
        return self.tasks[task_id]

    def delete_task(self, tasklist_id: str, task_id: str) -> None:
        if self.tasks.pop(task_id, None) is None:
            raise GoogleTasksNotFoundError("Resource not found")


@pytest.fixture
def api() -> FakeTasksApi:
    return FakeTasksApi()


@pytest.fixture
def client(api: FakeTasksApi) -> MagicMock:
    """Mock client whose task endpoints delegate to the fake API."""
    client = MagicMock(spec=GoogleTasksClient)
    client.list_tasklists.return_value = [
        TaskListResource(id="default", title="My Tasks"),
        TaskListResource(id="cli", title="My Tasks CLI"),
    ]
    client.list_tasks.side_effect = api.list_tasks
    client.create_task.side_effect = api.create_task
    client.update_task.side_effect = api.update_task
    client.delete_task.side_effect = api.delete_task
    return client


@pytest.fixture
def repo(client: MagicMock) -> GoogleTasksRepository:
    return GoogleTasksRepository(client, "My Tasks CLI")


class TestTaskListResolution:
    """Tests for locating the task list."""

    def test_uses_existing_list(self, repo: GoogleTasksRepository, client: MagicMock):
        """An existing list with the configured title is reused."""
        assert repo.tasklist_id == "cli"
        client.create_tasklist.assert_not_called()

    def test_creates_missing_list(self, client: MagicMock):
        """A missing list is created."""
        client.create_tasklist.return_value = TaskListResource(id="new", title="Errands")

        repo = GoogleTasksRepository(client, "Errands")

        client.create_tasklist.assert_called_once_with("Errands")
        assert repo.tasklist_id == "new"

    def test_created_list_without_id_raises(self, client: MagicMock):
        """A created list missing its id is a client error."""
        client.create_tasklist.return_value = TaskListResource(title="Errands")

        with pytest.raises(GoogleTasksClientError):
            GoogleTasksRepository(client, "Errands")

    def test_close_closes_client(self, repo: GoogleTasksRepository, client: MagicMock):
        """close() closes the HTTP client."""
        repo.close()
        client.close.assert_called_once()


class TestGoogleTasksRepository:
    """Task operations against the fake remote list."""

    def test_add_then_list(self, repo: GoogleTasksRepository, client: MagicMock):
        """An added task is listed, not completed, with notes as content."""
        repo.add("Buy milk", "semi-skimmed")

        sent = client.create_task.call_args.args[1]
        assert sent == TaskResource(title="Buy milk", notes="semi-skimmed", status="needsAction")
        assert repo.list() == [
            Task(title="Buy milk", content="semi-skimmed", completed=False, task_id="t1")
        ]

    def test_add_duplicate_raises(self, repo: GoogleTasksRepository, client: MagicMock):
        """Adding an existing title raises without calling the API."""
        repo.add("Buy milk", "")
        client.create_task.reset_mock()

        with pytest.raises(DuplicateTaskError):
            repo.add("Buy milk", "again")
        client.create_task.assert_not_called()

    def test_missing_fields_map_to_empty_strings(
        self, repo: GoogleTasksRepository, api: FakeTasksApi
    ):
        """Tasks without title or notes list with empty strings."""
        api.tasks["x"] = TaskResource(id="x")

        assert repo.list() == [Task(title="", content="", task_id="x")]

    def test_complete_patches_status(self, repo: GoogleTasksRepository, client: MagicMock):
        """complete sends status=completed for the matching task id."""
        repo.add("a", "")
        repo.add("b", "")

        task = repo.complete("b")

        client.update_task.assert_called_once_with("cli", "t2", {"status": "completed"})
        assert task.completed is True
        assert {t.title: t.completed for t in repo.list()} == {"a": False, "b": True}

    def test_complete_unknown_raises(self, repo: GoogleTasksRepository, client: MagicMock):
        """Completing an unknown title raises TaskNotFoundError."""
        with pytest.raises(TaskNotFoundError):
            repo.complete("nope")
        client.update_task.assert_not_called()

    def test_complete_vanished_task_raises_not_found(
        self, repo: GoogleTasksRepository, client: MagicMock
    ):
        """A 404 from the API during complete becomes TaskNotFoundError."""
        repo.add("a", "")
        client.update_task.side_effect = GoogleTasksNotFoundError("Resource not found")

        with pytest.raises(TaskNotFoundError):
            repo.complete("a")

    def test_remove_deletes_by_id(self, repo: GoogleTasksRepository, client: MagicMock):
        """remove deletes the matching task id."""
        repo.add("a", "")

        repo.remove("a")

        client.delete_task.assert_called_once_with("cli", "t1")
        assert repo.list() == []

    def test_removed_title_is_gone(self, repo: GoogleTasksRepository):
        """After removal, complete and remove raise TaskNotFoundError."""
        repo.add("a", "")
        repo.remove("a")

        with pytest.raises(TaskNotFoundError):
            repo.complete("a")
        with pytest.raises(TaskNotFoundError):
            repo.remove("a")

    def test_round_trip(self, repo: GoogleTasksRepository):
        """add -> list -> remove -> list yields an empty list."""
        repo.add("Buy milk", "semi-skimmed")
        assert len(repo.list()) == 1
        repo.remove("Buy milk")
        assert repo.list() == []

    def test_due_is_carried_through(self, repo: GoogleTasksRepository, api: FakeTasksApi):
        """Remote due dates appear on listed tasks."""
        api.tasks["x"] = TaskResource(id="x", title="Pay rent", due="2026-11-01T00:00:00.000Z")

        assert repo.find_by_title("Pay rent").due == "2026-11-01T00:00:00.000Z"
