"""Repository protocol for task storage backends."""

from typing import Protocol

from ..models import Task


class RepositoryProtocol(Protocol):
    """Interface for task storage backends.

    This protocol defines the contract that all repository implementations
    must follow. It supports:
    - SQLite (local database file)
    - Google Tasks (hosted task-list API)
    - Memory (title-keyed mapping, for tests)

    Tasks are addressed by title in every backend. Titles are unique.
    """

    def add(self, title: str, content: str) -> Task:
        """Create a new task.

        Args:
            title: Unique task title
            content: Free-form task content

        Returns:
            The created task, not completed.

        Raises:
            DuplicateTaskError: A task with this title already exists.
        """
        ...

    def list(self) -> list[Task]:
        """Load all tasks from the backend.

        Returns:
            All tasks, in backend-native order.
        """
        ...

    def complete(self, title: str) -> Task:
        """Mark a task as completed.

        Args:
            title: The task title

        Returns:
            The updated task.

        Raises:
            TaskNotFoundError: No task has this title.
        """
        ...

    def remove(self, title: str) -> None:
        """Delete a task by title.

        Args:
            title: The task title

        Raises:
            TaskNotFoundError: No task has this title.
        """
        ...

    def find_by_title(self, title: str) -> Task | None:
        """Get a single task by title.

        Returns:
            The task if found, None otherwise.
        """
        ...

    def close(self) -> None:
        """Release any connections held by the backend."""
        ...
