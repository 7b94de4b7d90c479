"""Data models."""

from .board import Board
from .enums import Column
from .intents import AddIntent, DeleteIntent, EditIntent, Intent, MoveIntent
from .item import Item, ItemRecord, new_item_id
from .kanban_config import KanbanConfig, StorageConfig

__all__ = [
    "AddIntent",
    "Board",
    "Column",
    "DeleteIntent",
    "EditIntent",
    "Intent",
    "Item",
    "ItemRecord",
    "KanbanConfig",
    "MoveIntent",
    "StorageConfig",
    "new_item_id",
]
