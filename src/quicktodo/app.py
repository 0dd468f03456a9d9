"""Application wiring: configuration, backend selection and the command loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

from pydantic import ValidationError

from .cli import TodoShell
from .cli.output import error, info, warning
from .config import Settings
from .exceptions import TodoError
from .models import QuicktodoConfig
from .repositories import MemoryRepository, RepositoryProtocol, SqliteRepository
from .services import ConfigService

logger = logging.getLogger(__name__)


def create_repository(config: QuicktodoConfig) -> RepositoryProtocol:
    """Build the storage backend selected by the configuration.

    Raises:
        TodoError: If the backend cannot be opened or authorized.
    """
    logger.info("Using %s backend", config.backend)

    if config.backend == "memory":
        return MemoryRepository()

    if config.backend == "google":
        from .google import GoogleTasksClient
        from .repositories import GoogleTasksRepository

        client = GoogleTasksClient.from_token_cache(
            config.google.credentials_file,
            config.google.token_cache,
            config.google.base_url,
        )
        try:
            return GoogleTasksRepository(client, config.google.task_list)
        except TodoError:
            client.close()
            raise

    return SqliteRepository(config.sqlite.path)


def run(settings: Settings | None = None, lines: Iterable[str] | None = None) -> int:
    """Run the interactive TODO prompt.

    Args:
        settings: Application settings (default: from environment)
        lines: Input lines (default: stdin)

    Returns:
        Exit code (0 for success, non-zero when the backend could not start)
    """
    settings = settings or Settings()

    config_service = ConfigService(settings.config_file)
    try:
        config = config_service.get_effective_config(settings)
    except ValidationError as e:
        logger.error("Invalid settings: %s", e)
        error(f"Invalid settings: {e}")
        return 1
    if config_service.has_config_error:
        warning(f"Ignoring configuration: {config_service.config_error}")

    try:
        repository = create_repository(config)
    except TodoError as e:
        logger.error("Failed to initialize %s backend: %s", config.backend, e)
        error(f"Failed to initialize {config.backend} backend: {e}")
        return 1

    info("TODO CLI")
    info("Type 'help' for a list of commands")
    try:
        TodoShell(repository).run(lines if lines is not None else sys.stdin)
    finally:
        repository.close()
    return 0
