"""Configuration service for loading kanban.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..models.kanban_config import KanbanConfig, StorageConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "kanban.yml"

    def __init__(self, project_root: Path) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory containing kanban.yml
        """
        self.project_root = project_root
        self._config: KanbanConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        """Path of the config file."""
        return self.project_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    def get_config(self) -> KanbanConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_storage(
        self, backend: str | None = None, path: Path | str | None = None
    ) -> StorageConfig:
        """Storage settings from kanban.yml with optional overrides applied.

        Overriding only the backend switches to that backend's default
        location unless it is the backend kanban.yml already names.
        """
        storage = self.get_config().storage
        if backend is None and path is None:
            return storage

        backend = backend or storage.backend
        if path is None and backend == storage.backend:
            path = storage.path
        return StorageConfig(backend=backend, path=str(path) if path is not None else None)

    def get_storage_path(self, storage: StorageConfig | None = None) -> Path:
        """Resolve a storage path (default: the configured one) against the project root."""
        storage = storage or self.get_config().storage
        return self.resolve_path(storage.path)

    def resolve_path(self, path: Path | str) -> Path:
        """Expand ``~`` and anchor relative paths at the project root."""
        path = Path(path).expanduser()
        if path.is_absolute():
            return path
        return self.project_root / path

    def reload(self) -> None:
        """Clear cached configuration, forcing reload on next access."""
        self._config = None
        self._config_error = None

    def _load_config(self) -> KanbanConfig:
        """Load configuration from file or return default."""
        config_path = self.config_path
        self._config_error = None

        if not config_path.exists():
            logger.debug("No %s found, using defaults", self.CONFIG_FILE)
            return KanbanConfig.default()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f)

            if data is None:
                self._config_error = f"{self.CONFIG_FILE} is empty"
                logger.warning(self._config_error)
                return KanbanConfig.default()

            if not isinstance(data, dict):
                self._config_error = f"{self.CONFIG_FILE} must contain a mapping"
                logger.warning(self._config_error)
                return KanbanConfig.default()

            config = KanbanConfig(**data)
            logger.info(
                "Loaded %s (storage=%s at %s)",
                self.CONFIG_FILE,
                config.storage.backend,
                config.storage.path,
            )
            return config

        except yaml.YAMLError as e:
            self._config_error = f"Invalid YAML in {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KanbanConfig.default()

        except PydanticValidationError as e:
            self._config_error = f"Invalid {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KanbanConfig.default()

        except OSError as e:
            self._config_error = f"Error reading {self.CONFIG_FILE}: {e}"
            logger.warning(self._config_error)
            return KanbanConfig.default()
