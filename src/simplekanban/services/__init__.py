"""Service layer for business logic."""

from .board_store import BoardStore
from .config_service import ConfigService
from .intents import IntentDispatcher

__all__ = [
    "BoardStore",
    "ConfigService",
    "IntentDispatcher",
]
