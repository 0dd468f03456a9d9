"""Google Tasks REST API client."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import AuthError, BackendUnavailableError

logger = logging.getLogger(__name__)

STATUS_NEEDS_ACTION = "needsAction"
STATUS_COMPLETED = "completed"


class GoogleTasksClientError(BackendUnavailableError):
    """Base exception for Google Tasks client errors."""

    pass


class GoogleTasksAuthError(AuthError):
    """Authentication failed."""

    pass


class GoogleTasksNotFoundError(GoogleTasksClientError):
    """Resource not found."""

    pass


class TaskListResource(BaseModel):
    """A task list as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    title: str | None = None


class TaskResource(BaseModel):
    """A task as returned by the API.

    ``due`` stays a plain string; the API's timestamp precision varies.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    title: str | None = None
    notes: str | None = None
    status: str | None = None
    due: str | None = None


class GoogleTasksClient:
    """Google Tasks API client.

    Provides a thin wrapper around the Tasks v1 REST API with:
    - Bearer token authentication, refreshed once on a 401 when possible
    - Pagination over list endpoints
    - Error handling mapped onto quicktodo exceptions
    """

    PAGE_SIZE = 100

    def __init__(
        self,
        token: str,
        base_url: str = "tasks.googleapis.com",
        refresh_token: Callable[[], str] | None = None,
    ):
        """Initialize the client.

        Args:
            token: OAuth2 access token with the tasks scope
            base_url: API host (default: tasks.googleapis.com)
            refresh_token: Returns a new access token when the current one
                is rejected; raises AuthError if it cannot
        """
        self.token = token
        self.base_url = base_url
        self._refresh_token = refresh_token
        self._api_url = f"https://{base_url}/tasks/v1"
        self._client = httpx.Client(
            base_url=self._api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=30.0,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> GoogleTasksClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    @classmethod
    def from_token_cache(
        cls,
        credentials_file: Path,
        token_cache: Path,
        base_url: str = "tasks.googleapis.com",
    ) -> GoogleTasksClient:
        """Create a client using cached OAuth2 tokens.

        Runs the browser authorization flow when no usable token is cached.
        The credentials are kept so an expired access token can be refreshed
        mid-session and written back to the cache.

        Raises:
            AuthError: If no access token could be obtained
        """
        from .auth import load_credentials, refresh_credentials

        credentials = load_credentials(credentials_file, token_cache)
        return cls(
            credentials.token,
            base_url,
            refresh_token=lambda: refresh_credentials(credentials, token_cache),
        )

    def _set_token(self, token: str) -> None:
        self.token = token
        self._client.headers["Authorization"] = f"Bearer {token}"

    def _send(
        self,
        op_name: str,
        method: str,
        path: str,
        params: dict[str, Any] | None,
        json: dict[str, Any] | None,
    ) -> tuple[httpx.Response, float]:
        """Send one HTTP request, returning the response and elapsed ms."""
        start_time = time.monotonic()
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s failed after %.0fms: %s", op_name, elapsed_ms, e)
            raise GoogleTasksClientError(f"Request failed: {e}") from e
        return response, (time.monotonic() - start_time) * 1000

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON body.

        A 401 triggers one token refresh and retry when a refresher is set.

        Args:
            method: HTTP method
            path: Path relative to the API root (e.g., "/users/@me/lists")
            params: Query parameters
            json: JSON request body

        Returns:
            Decoded response body (empty dict for 204 responses)

        Raises:
            GoogleTasksAuthError: Authentication failed
            GoogleTasksNotFoundError: Resource not found
            GoogleTasksClientError: Transport, HTTP or decoding errors
        """
        op_name = f"{method} {path}"
        logger.debug("%s: params=%s", op_name, params)

        response, elapsed_ms = self._send(op_name, method, path, params, json)

        if response.status_code == 401 and self._refresh_token is not None:
            logger.info("%s: 401 Unauthorized, refreshing access token", op_name)
            self._set_token(self._refresh_token())
            response, elapsed_ms = self._send(op_name, method, path, params, json)

        if response.status_code == 401:
            logger.error("%s: 401 Unauthorized (%.0fms)", op_name, elapsed_ms)
            raise GoogleTasksAuthError(
                "Authentication failed. Delete the token cache and authorize again."
            )
        if response.status_code == 404:
            logger.error("%s: 404 Not Found (%.0fms)", op_name, elapsed_ms)
            raise GoogleTasksNotFoundError("Resource not found")
        if response.status_code >= 400:
            logger.error("%s: HTTP %d (%.0fms)", op_name, response.status_code, elapsed_ms)
            raise GoogleTasksClientError(f"HTTP {response.status_code}: {response.text}")

        logger.info("%s: %d (%.0fms)", op_name, response.status_code, elapsed_ms)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            result = response.json()
        except ValueError as e:
            logger.error("%s: Invalid JSON response", op_name)
            raise GoogleTasksClientError(f"Invalid JSON response: {e}") from e

        if not isinstance(result, dict):
            logger.error("%s: Expected a JSON object, got %s", op_name, type(result).__name__)
            raise GoogleTasksClientError(
                f"Expected a JSON object, got {type(result).__name__}"
            )
        return result

    # --- Task lists ---

    def list_tasklists(self) -> list[TaskListResource]:
        """Return every task list of the authorized user."""
        items = self._paginate("/users/@me/lists", {})
        return [self._parse(TaskListResource, item) for item in items]

    def create_tasklist(self, title: str) -> TaskListResource:
        """Create a new task list."""
        data = self.request("POST", "/users/@me/lists", json={"title": title})
        return self._parse(TaskListResource, data)

    # --- Tasks ---

    def list_tasks(self, tasklist_id: str) -> list[TaskResource]:
        """Return every task in a list, completed and hidden ones included."""
        items = self._paginate(
            f"/lists/{tasklist_id}/tasks",
            {"showCompleted": "true", "showHidden": "true"},
        )
        return [self._parse(TaskResource, item) for item in items]

    def create_task(self, tasklist_id: str, task: TaskResource) -> TaskResource:
        """Create a task in a list."""
        data = self.request(
            "POST",
            f"/lists/{tasklist_id}/tasks",
            json=task.model_dump(exclude_none=True),
        )
        return self._parse(TaskResource, data)

    def update_task(self, tasklist_id: str, task_id: str, fields: dict[str, Any]) -> TaskResource:
        """Patch the given fields of a task."""
        data = self.request("PATCH", f"/lists/{tasklist_id}/tasks/{task_id}", json=fields)
        return self._parse(TaskResource, data)

    def delete_task(self, tasklist_id: str, task_id: str) -> None:
        """Delete a task from a list."""
        self.request("DELETE", f"/lists/{tasklist_id}/tasks/{task_id}")

    def _paginate(self, path: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Collect ``items`` across pages. A missing ``items`` key means no items."""
        items: list[dict[str, Any]] = []
        page_token: str | None = None
        while True:
            page_params = {**params, "maxResults": self.PAGE_SIZE}
            if page_token:
                page_params["pageToken"] = page_token
            data = self.request("GET", path, params=page_params)
            page_items = data.get("items") or []
            if not isinstance(page_items, list):
                raise GoogleTasksClientError(f"Unexpected items in {path} response")
            items.extend(page_items)
            page_token = data.get("nextPageToken")
            if not page_token:
                return items

    @staticmethod
    def _parse(model: type[BaseModel], data: dict[str, Any]) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GoogleTasksClientError(f"Unexpected response shape: {e}") from e
