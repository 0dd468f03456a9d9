"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from ..models import Backend


class Settings(BaseSettings):
    """Application settings.

    Values left as ``None`` fall through to quicktodo.yml, then to the
    built-in defaults.
    """

    config_file: Path = Field(
        default=Path("quicktodo.yml"),
        description="Path to the YAML configuration file",
    )

    backend: Backend | None = Field(
        default=None,
        description="Storage backend: sqlite, google or memory",
    )

    db_path: Path | None = Field(
        default=None,
        description="SQLite database file",
    )

    credentials_file: Path | None = Field(
        default=None,
        description="Google OAuth2 client secrets file",
    )

    token_cache: Path | None = Field(
        default=None,
        description="Google OAuth2 token cache file",
    )

    task_list: str | None = Field(
        default=None,
        description="Google Tasks list title",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "QUICKTODO_",
    }
