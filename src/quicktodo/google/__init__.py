"""Google Tasks API integration."""

from .client import (
    STATUS_COMPLETED,
    STATUS_NEEDS_ACTION,
    GoogleTasksAuthError,
    GoogleTasksClient,
    GoogleTasksClientError,
    GoogleTasksNotFoundError,
    TaskListResource,
    TaskResource,
)

__all__ = [
    "STATUS_COMPLETED",
    "STATUS_NEEDS_ACTION",
    "GoogleTasksAuthError",
    "GoogleTasksClient",
    "GoogleTasksClientError",
    "GoogleTasksNotFoundError",
    "TaskListResource",
    "TaskResource",
]
