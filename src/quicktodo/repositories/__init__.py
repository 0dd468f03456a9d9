"""Repository layer for data access."""

from .google_tasks import GoogleTasksRepository
from .memory import MemoryRepository
from .protocol import RepositoryProtocol
from .sqlite import SqliteRepository

__all__ = [
    "GoogleTasksRepository",
    "MemoryRepository",
    "RepositoryProtocol",
    "SqliteRepository",
]
