"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings.

    Every field can also come from a ``SIMPLEKANBAN_`` environment variable,
    e.g. ``SIMPLEKANBAN_STORAGE_PATH=~/boards/home.json``. Command line
    flags win over the environment, which wins over kanban.yml.
    """

    project_root: Path = Field(
        default=Path(),
        description="Path to project root containing kanban.yml",
    )

    storage_path: Path | None = Field(
        default=None,
        description="Board file or directory, overriding storage.path in kanban.yml",
    )

    storage_backend: Literal["json", "markdown"] | None = Field(
        default=None,
        description="Storage backend, overriding storage.backend in kanban.yml",
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
        "env_prefix": "SIMPLEKANBAN_",
    }

    @property
    def has_storage_override(self) -> bool:
        """True if the board location was chosen outside kanban.yml."""
        return self.storage_path is not None or self.storage_backend is not None
