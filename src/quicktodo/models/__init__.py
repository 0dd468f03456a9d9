"""Data models."""

from .quicktodo_config import (
    DEFAULT_TASK_LIST,
    Backend,
    GoogleConfig,
    QuicktodoConfig,
    SqliteConfig,
)
from .task import CHECKBOX_DONE, CHECKBOX_TODO, Task

__all__ = [
    "CHECKBOX_DONE",
    "CHECKBOX_TODO",
    "DEFAULT_TASK_LIST",
    "Backend",
    "GoogleConfig",
    "QuicktodoConfig",
    "SqliteConfig",
    "Task",
]
