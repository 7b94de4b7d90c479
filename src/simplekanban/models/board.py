"""Board view models."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from .enums import Column
from .item import Item


class Board(BaseModel):
    """Snapshot of the board with items grouped by column.

    Built fresh from the store on every request; it is never updated in
    place, so a rendered board can't go stale behind the store's back.
    """

    columns: dict[Column, list[Item]] = Field(default_factory=dict)

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> Board:
        """
        Create Board from items, grouping by column.

        Every column is present, empty ones included. Items within a column
        are in display order.
        """
        # Import here to avoid circular import
        from ..services.reindex import column_items

        items = list(items)
        return cls(columns={column: column_items(items, column) for column in Column})

    def get_column(self, column: Column) -> list[Item]:
        """Get items for a specific column."""
        return self.columns.get(column, [])

    def get_visible_columns(self) -> list[tuple[Column, str, list[Item]]]:
        """
        Get columns with their titles.

        Returns:
            List of (column, title, items) tuples in display order.
        """
        return [
            (column, column.display_title, self.columns.get(column, []))
            for column in Column
        ]

    @property
    def total(self) -> int:
        """Number of items across all columns."""
        return sum(len(items) for items in self.columns.values())
