"""Composition root: wires settings, config, storage and the board store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import Settings
from .interaction import DragSession
from .repositories import JsonRepository, MarkdownRepository, RepositoryProtocol
from .services import BoardStore, ConfigService, IntentDispatcher

logger = logging.getLogger(__name__)


@dataclass
class KanbanApp:
    """One board session: a store plus the collaborators that feed it."""

    settings: Settings
    config_service: ConfigService
    store: BoardStore
    dispatcher: IntentDispatcher
    drag: DragSession = field(default_factory=DragSession)

    def start(self) -> None:
        """Load the board from storage."""
        self.store.load()


def build_repository(
    config_service: ConfigService, settings: Settings | None = None
) -> RepositoryProtocol:
    """Create the repository selected by kanban.yml and any settings overrides."""
    if settings is not None and settings.has_storage_override:
        logger.info(
            "Storage overridden by settings (backend=%s, path=%s)",
            settings.storage_backend,
            settings.storage_path,
        )
        storage = config_service.get_storage(settings.storage_backend, settings.storage_path)
    else:
        storage = config_service.get_storage()
    path = config_service.get_storage_path(storage)
    logger.debug("Using %s storage at %s", storage.backend, path)
    if storage.backend == "markdown":
        return MarkdownRepository(path)
    return JsonRepository(path)


def build_app(settings: Settings) -> KanbanApp:
    """Construct and start a board session for ``settings.project_root``."""
    config_service = ConfigService(settings.project_root)
    config = config_service.get_config()

    repository = build_repository(config_service, settings)
    store = BoardStore(repository, seed_defaults=config.seed_defaults)
    app = KanbanApp(
        settings=settings,
        config_service=config_service,
        store=store,
        dispatcher=IntentDispatcher(store),
    )
    app.start()
    return app
