"""Configuration service for loading quicktodo.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..config import Settings
from ..models import GoogleConfig, QuicktodoConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "quicktodo.yml"

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the config service.

        Args:
            config_path: Path to the YAML file (default: ./quicktodo.yml)
        """
        self.config_path = config_path if config_path is not None else Path(self.CONFIG_FILE)
        self._config: QuicktodoConfig | None = None
        self._config_error: str | None = None

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> QuicktodoConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_effective_config(self, settings: Settings) -> QuicktodoConfig:
        """Get configuration with environment and CLI settings applied on top."""
        config = self.get_config()

        sqlite = config.sqlite
        if settings.db_path is not None:
            sqlite = sqlite.model_copy(update={"path": settings.db_path})

        google_updates: dict = {}
        if settings.credentials_file is not None:
            google_updates["credentials_file"] = settings.credentials_file
        if settings.token_cache is not None:
            google_updates["token_cache"] = settings.token_cache
        if settings.task_list is not None:
            google_updates["task_list"] = settings.task_list
        google = GoogleConfig.model_validate(
            {**config.google.model_dump(), **google_updates}
        )

        return config.model_copy(
            update={
                "backend": settings.backend or config.backend,
                "sqlite": sqlite,
                "google": google,
            }
        )

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> QuicktodoConfig:
        """Load configuration from file or return default."""
        self._config_error = None

        if not self.config_path.exists():
            logger.debug("No %s found, using defaults", self.config_path)
            return QuicktodoConfig.default()

        try:
            with self.config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.config_path}: {e}"
            logger.warning(self._config_error)
            return QuicktodoConfig.default()
        except (OSError, UnicodeDecodeError) as e:
            self._config_error = f"Cannot read {self.config_path}: {e}"
            logger.warning(self._config_error)
            return QuicktodoConfig.default()

        if data is None:
            self._config_error = f"{self.config_path} is empty"
            logger.warning(self._config_error)
            return QuicktodoConfig.default()

        if not isinstance(data, dict):
            self._config_error = f"{self.config_path} must contain a mapping"
            logger.warning(self._config_error)
            return QuicktodoConfig.default()

        try:
            config = QuicktodoConfig(**data)
        except ValidationError as e:
            self._config_error = f"Invalid configuration in {self.config_path}: {e}"
            logger.warning(self._config_error)
            return QuicktodoConfig.default()

        logger.info("Loaded %s (backend=%s)", self.config_path, config.backend)
        return config
