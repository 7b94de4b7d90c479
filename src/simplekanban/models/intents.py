"""Intents emitted by the input layer and applied to the board store.

Column fields accept a ``Column`` or any spelling ``Column.parse``
understands; the store resolves them, so a bad column surfaces as the
store's ``ValidationError`` like every other rejected intent.
"""

from pydantic import BaseModel

from .enums import Column


class AddIntent(BaseModel):
    """Create a new item at the end of the default column."""

    title: str
    description: str = ""


class EditIntent(BaseModel):
    """Replace an item's text and optionally change its column."""

    item_id: str
    title: str
    description: str = ""
    column: Column | str | None = None


class DeleteIntent(BaseModel):
    """Remove an item from the board."""

    item_id: str


class MoveIntent(BaseModel):
    """Relocate an item to a column, optionally before a sibling."""

    item_id: str
    target_column: Column | str
    before_id: str | None = None


Intent = AddIntent | EditIntent | DeleteIntent | MoveIntent
