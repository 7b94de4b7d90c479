"""Configuration models for kanban.yml."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

# Where each backend stores the board when storage.path is not given
DEFAULT_STORAGE_PATHS: dict[str, str] = {
    "json": "kanbanTasks.json",
    "markdown": ".tasks",
}


class StorageConfig(BaseModel):
    """Where and how the board is persisted."""

    backend: Literal["json", "markdown"] = "json"
    path: str | None = Field(
        default=None,
        description=(
            "File (json) or directory (markdown), relative to project root. "
            "Defaults to kanbanTasks.json or .tasks depending on the backend."
        ),
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str | None) -> str | None:
        """Reject blank paths."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Storage path cannot be blank")
        return v.strip()

    @model_validator(mode="after")
    def default_path_for_backend(self) -> "StorageConfig":
        """Fill in the backend's default location when no path was given."""
        if self.path is None:
            self.path = DEFAULT_STORAGE_PATHS[self.backend]
        return self

    @classmethod
    def default(cls) -> "StorageConfig":
        """Return default JSON storage."""
        return cls()


class KanbanConfig(BaseModel):
    """Root configuration from kanban.yml."""

    version: int = 1
    storage: StorageConfig = Field(default_factory=StorageConfig.default)
    seed_defaults: bool = Field(
        default=True,
        description="Create the onboarding cards when no board exists yet",
    )

    @classmethod
    def default(cls) -> "KanbanConfig":
        """Return default configuration."""
        return cls(storage=StorageConfig.default())
