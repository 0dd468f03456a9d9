"""Google Tasks repository implementation."""

from __future__ import annotations

import builtins
import logging

from ..exceptions import DuplicateTaskError, TaskNotFoundError
from ..google.client import (
    STATUS_COMPLETED,
    STATUS_NEEDS_ACTION,
    GoogleTasksClient,
    GoogleTasksClientError,
    GoogleTasksNotFoundError,
    TaskResource,
)
from ..models import DEFAULT_TASK_LIST, Task

logger = logging.getLogger(__name__)


class GoogleTasksRepository:
    """Repository storing tasks in a single Google Tasks list.

    The list is located by title and created on first use. Tasks are matched
    by title, so every mutating operation looks the task up first.
    """

    def __init__(self, client: GoogleTasksClient, task_list: str = DEFAULT_TASK_LIST) -> None:
        """
        Initialize the repository and resolve the task list.

        Args:
            client: Authorized Google Tasks client
            task_list: Title of the task list to use
        """
        self._client = client
        self.task_list = task_list
        self.tasklist_id = self._resolve_tasklist()

    def _resolve_tasklist(self) -> str:
        """Find the configured task list, creating it when missing."""
        for tasklist in self._client.list_tasklists():
            if tasklist.title == self.task_list and tasklist.id:
                logger.info("Using task list %r (%s)", self.task_list, tasklist.id)
                return tasklist.id

        created = self._client.create_tasklist(self.task_list)
        if not created.id:
            raise GoogleTasksClientError(
                f"Task list {self.task_list!r} was created without an id"
            )
        logger.info("Created task list %r (%s)", self.task_list, created.id)
        return created.id

    @staticmethod
    def _to_task(resource: TaskResource) -> Task:
        return Task(
            title=resource.title or "",
            content=resource.notes or "",
            completed=resource.status == STATUS_COMPLETED,
            task_id=resource.id,
            due=resource.due,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    # --- Task Operations ---

    def list(self) -> builtins.list[Task]:
        """Fetch all tasks in the list."""
        return [self._to_task(r) for r in self._client.list_tasks(self.tasklist_id)]

    def find_by_title(self, title: str) -> Task | None:
        """Fetch the first task whose title matches."""
        for task in self.list():
            if task.title == title:
                return task
        return None

    def _require_id(self, title: str) -> str:
        task = self.find_by_title(title)
        if task is None or not task.task_id:
            raise TaskNotFoundError(title)
        return task.task_id

    def add(self, title: str, content: str) -> Task:
        """Create a task, rejecting duplicate titles."""
        if self.find_by_title(title) is not None:
            raise DuplicateTaskError(title)
        created = self._client.create_task(
            self.tasklist_id,
            TaskResource(title=title, notes=content, status=STATUS_NEEDS_ACTION),
        )
        logger.info("Created task %r (%s)", title, created.id)
        return self._to_task(created)

    def complete(self, title: str) -> Task:
        """Mark a task completed."""
        task_id = self._require_id(title)
        try:
            updated = self._client.update_task(
                self.tasklist_id, task_id, {"status": STATUS_COMPLETED}
            )
        except GoogleTasksNotFoundError as e:
            raise TaskNotFoundError(title) from e
        logger.info("Completed task %r (%s)", title, task_id)
        return self._to_task(updated)

    def remove(self, title: str) -> None:
        """Delete a task."""
        task_id = self._require_id(title)
        try:
            self._client.delete_task(self.tasklist_id, task_id)
        except GoogleTasksNotFoundError as e:
            raise TaskNotFoundError(title) from e
        logger.info("Deleted task %r (%s)", title, task_id)
