"""In-memory repository for task storage."""

import builtins
import logging

from ..exceptions import DuplicateTaskError, TaskNotFoundError
from ..models import Task

logger = logging.getLogger(__name__)


class MemoryRepository:
    """Repository backed by a title-keyed dict. Nothing is persisted."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def add(self, title: str, content: str) -> Task:
        """Add a task, rejecting duplicate titles."""
        if title in self._tasks:
            raise DuplicateTaskError(title)
        task = Task(title=title, content=content)
        self._tasks[title] = task
        logger.debug("Added task %r", title)
        return task.model_copy()

    def list(self) -> builtins.list[Task]:
        """Return all tasks in insertion order."""
        return [task.model_copy() for task in self._tasks.values()]

    def complete(self, title: str) -> Task:
        """Mark a task completed."""
        if title not in self._tasks:
            raise TaskNotFoundError(title)
        task = self._tasks[title].model_copy(update={"completed": True})
        self._tasks[title] = task
        logger.debug("Completed task %r", title)
        return task.model_copy()

    def remove(self, title: str) -> None:
        """Remove a task."""
        if self._tasks.pop(title, None) is None:
            raise TaskNotFoundError(title)
        logger.debug("Removed task %r", title)

    def find_by_title(self, title: str) -> Task | None:
        task = self._tasks.get(title)
        return task.model_copy() if task is not None else None

    def close(self) -> None:
        pass
