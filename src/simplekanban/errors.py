"""Exceptions raised by the board core."""


class KanbanError(Exception):
    """Base exception for board errors."""


class ValidationError(KanbanError):
    """Required input is missing or malformed (e.g. an empty title)."""


class NotFoundError(KanbanError):
    """A referenced item does not exist in the collection."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item not found: {item_id}")


class PersistenceError(KanbanError):
    """Loading or saving the collection failed."""


class DragStateError(KanbanError):
    """A drag gesture event arrived in a phase that cannot accept it."""
