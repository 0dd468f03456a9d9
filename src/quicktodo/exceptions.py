"""Exceptions raised by task storage backends."""


class TodoError(Exception):
    """Base exception for quicktodo errors."""

    pass


class TaskNotFoundError(TodoError):
    """An operation referenced a title that does not exist."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Task not found: {title}")
        self.title = title


class DuplicateTaskError(TodoError):
    """A task with the same title already exists."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Task already exists: {title}")
        self.title = title


class BackendUnavailableError(TodoError):
    """The database file or remote API could not be reached."""

    pass


class AuthError(TodoError):
    """Authentication with the remote task API failed."""

    pass
