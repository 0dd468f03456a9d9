"""Configuration models for quicktodo.yml."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

Backend = Literal["sqlite", "google", "memory"]

DEFAULT_TASK_LIST = "My Tasks CLI"


class SqliteConfig(BaseModel):
    """Settings for the local SQLite backend."""

    path: Path = Field(default=Path("todo.db"), description="Database file")


class GoogleConfig(BaseModel):
    """Settings for the Google Tasks backend."""

    credentials_file: Path = Field(
        default=Path("credentials.json"),
        description="OAuth2 client secrets downloaded from Google Cloud Console",
    )
    token_cache: Path = Field(
        default=Path("tokencache.json"),
        description="Where authorized user tokens are persisted",
    )
    task_list: str = Field(
        default=DEFAULT_TASK_LIST,
        description="Title of the task list holding quicktodo's tasks",
    )
    base_url: str = Field(default="tasks.googleapis.com")

    @field_validator("task_list")
    @classmethod
    def validate_task_list(cls, v: str) -> str:
        """Task list title must contain something besides whitespace."""
        if not v.strip():
            raise ValueError("task_list cannot be empty")
        return v


class QuicktodoConfig(BaseModel):
    """Root configuration model for quicktodo.yml."""

    version: int = 1
    backend: Backend = "sqlite"
    sqlite: SqliteConfig = Field(default_factory=SqliteConfig)
    google: GoogleConfig = Field(default_factory=GoogleConfig)

    @classmethod
    def default(cls) -> "QuicktodoConfig":
        """Return the built-in default configuration."""
        return cls()
