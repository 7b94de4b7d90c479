"""Dispatch of UI intents onto the board store."""

from __future__ import annotations

import logging

from ..models import AddIntent, Column, DeleteIntent, EditIntent, Intent, Item, MoveIntent
from .board_store import BoardStore

logger = logging.getLogger(__name__)


class IntentDispatcher:
    """Applies intents from the input layer to a ``BoardStore``.

    Each intent maps to exactly one store operation. Validation and
    not-found errors propagate unchanged so the caller can reject the
    intent.
    """

    def __init__(self, store: BoardStore) -> None:
        self.store = store

    def dispatch(self, intent: Intent) -> Item:
        """Apply an intent and return the affected item."""
        logger.debug("Dispatching %s", type(intent).__name__)
        if isinstance(intent, AddIntent):
            return self.store.add(intent.title, intent.description)
        elif isinstance(intent, EditIntent):
            return self.store.edit(
                intent.item_id, intent.title, intent.description, intent.column
            )
        elif isinstance(intent, DeleteIntent):
            return self.store.remove(intent.item_id)
        elif isinstance(intent, MoveIntent):
            return self.store.move(intent.item_id, intent.target_column, intent.before_id)
        raise TypeError(f"Unsupported intent: {type(intent).__name__}")

    def request_add(self, title: str, description: str = "") -> Item:
        """Add an item to the default column."""
        return self.dispatch(AddIntent(title=title, description=description))

    def request_edit(
        self,
        item_id: str,
        title: str,
        description: str = "",
        column: Column | str | None = None,
    ) -> Item:
        """Edit an item's text and column."""
        return self.dispatch(
            EditIntent(item_id=item_id, title=title, description=description, column=column)
        )

    def request_delete(self, item_id: str) -> Item:
        """Delete an item."""
        return self.dispatch(DeleteIntent(item_id=item_id))

    def request_move(
        self, item_id: str, target_column: Column | str, before_id: str | None = None
    ) -> Item:
        """Move an item, optionally before a sibling."""
        return self.dispatch(
            MoveIntent(item_id=item_id, target_column=target_column, before_id=before_id)
        )
