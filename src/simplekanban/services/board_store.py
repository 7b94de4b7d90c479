"""Board store: the authoritative item collection and its mutations."""

from __future__ import annotations

import logging

from ..errors import NotFoundError, PersistenceError, ValidationError
from ..models import Board, Column, Item
from ..repositories import RepositoryProtocol
from . import reindex

logger = logging.getLogger(__name__)

# Onboarding cards created on first launch, as (title, description, column)
DEFAULT_ITEMS: list[tuple[str, str, Column]] = [
    ("Run 'add' to create a task", "Run 'edit' to change it", Column.TODO),
    (
        "Delete a task, or move it to a new position",
        "Within the same column, or in a different one",
        Column.IN_PROGRESS,
    ),
    ("Everything is saved on your device", "", Column.IN_PROGRESS),
    ("I hope you enjoy simplekanban :)", "", Column.DONE),
]


class BoardStore:
    """
    In-memory owner of the board's items.

    Every mutation validates its input before touching anything, renumbers
    the affected columns so their keys are 0..n-1 again, and then writes the
    whole collection to the repository. Save failures are logged and kept
    in ``last_error``; the in-memory state stays authoritative.

    Reads and mutations hand out copies of items, so changing a returned
    item never changes the board.
    """

    def __init__(self, repository: RepositoryProtocol, seed_defaults: bool = False) -> None:
        self.repository = repository
        self.seed_defaults = seed_defaults
        self.last_error: PersistenceError | None = None
        # Insertion order doubles as the tiebreak for equal order keys
        self._items: list[Item] = []

    # --- Lifecycle ---

    def load(self) -> None:
        """
        Load the collection from the repository.

        Never raises: a missing board starts empty (or seeded), an
        unreadable one starts empty with ``last_error`` set. Columns whose
        stored keys are not already 0..n-1 are renumbered and saved.
        """
        self.last_error = None

        if not self.repository.exists():
            if self.seed_defaults:
                logger.info("No stored board found, creating default items")
                self._items = _default_items()
                self.save()
            else:
                logger.info("No stored board found, starting empty")
                self._items = []
            return

        try:
            self._items = list(self.repository.load())
        except PersistenceError as e:
            logger.warning("Could not load board, starting empty: %s", e)
            self.last_error = e
            self._items = []
            return

        migrated = [column for column in Column if not reindex.is_dense(self._items, column)]
        for column in migrated:
            reindex.renumber(self._items, column)
        logger.info("Loaded %d items", len(self._items))
        if migrated:
            logger.info(
                "Renumbered columns after load: %s",
                ", ".join(column.value for column in migrated),
            )
            self.save()

    def save(self) -> bool:
        """
        Write the collection to the repository.

        Returns:
            True if the write succeeded
        """
        try:
            self.repository.save(list(self._items))
        except PersistenceError as e:
            logger.warning("Could not save board: %s", e)
            self.last_error = e
            return False
        self.last_error = None
        return True

    # --- Reads ---

    @property
    def items(self) -> list[Item]:
        """Snapshot of the full collection in insertion order."""
        return [item.model_copy() for item in self._items]

    def get(self, item_id: str) -> Item:
        """Get a snapshot of an item by ID."""
        return self._find(item_id).model_copy()

    def list_by_column(self, column: Column | str) -> list[Item]:
        """Items in ``column`` in display order (a new list each call)."""
        items = reindex.column_items(self._items, Column.parse(column))
        return [item.model_copy() for item in items]

    def board(self) -> Board:
        """Current board grouped by column."""
        return Board.from_items(self.items)

    # --- Mutations ---

    def add(self, title: str, description: str = "") -> Item:
        """
        Create an item at the end of the default column.

        Raises:
            ValidationError: If the title is blank
        """
        title = _clean_title(title)
        column = Column.default()

        item = Item(
            title=title,
            description=description,
            column=column,
            order_key=reindex.next_order_key(self._items, column),
        )
        self._items.append(item)
        reindex.renumber(self._items, column)

        logger.info("Item created: %s (column=%s)", item.id, column.value)
        self.save()
        return item.model_copy()

    def edit(
        self,
        item_id: str,
        title: str,
        description: str = "",
        column: Column | str | None = None,
    ) -> Item:
        """
        Update an item's text and optionally its column.

        Changing the column appends the item to the end of the new column.
        Text-only edits leave every order key as it was.

        Raises:
            NotFoundError: If the item doesn't exist
            ValidationError: If the title is blank or the column unknown
        """
        item = self._find(item_id)
        title = _clean_title(title)
        new_column = item.column if column is None else Column.parse(column)

        item.title = title
        item.description = description or None

        old_column = item.column
        if new_column != old_column:
            item.order_key = reindex.next_order_key(self._items, new_column, exclude_id=item.id)
            item.column = new_column
            reindex.renumber(self._items, old_column)
            reindex.renumber(self._items, new_column)
            logger.info(
                "Item moved by edit: %s (%s -> %s)", item.id, old_column.value, new_column.value
            )

        logger.info("Item edited: %s", item.id)
        self.save()
        return item.model_copy()

    def remove(self, item_id: str) -> Item:
        """
        Delete an item and close the gap it leaves in its column.

        Raises:
            NotFoundError: If the item doesn't exist
        """
        item = self._find(item_id)
        self._items.remove(item)
        reindex.renumber(self._items, item.column)

        logger.info("Item deleted: %s (column=%s)", item.id, item.column.value)
        self.save()
        return item.model_copy()

    def move(
        self,
        item_id: str,
        target_column: Column | str,
        before_id: str | None = None,
    ) -> Item:
        """
        Move an item to ``target_column``, before ``before_id`` or at the end.

        If ``before_id`` names an item in another column (a stale drop
        target) the item goes to the end of ``target_column``. Moving an
        item before itself does nothing.

        Raises:
            NotFoundError: If the item or ``before_id`` doesn't exist
            ValidationError: If the column is unknown
        """
        item = self._find(item_id)
        if before_id == item_id:
            logger.debug("move: item dropped before itself, ignoring: %s", item_id)
            return item.model_copy()
        target_column = Column.parse(target_column)
        before = self._find(before_id) if before_id is not None else None

        if before is not None and before.column == target_column:
            order_key = reindex.order_key_before(before)
        else:
            if before is not None:
                logger.debug(
                    "move: %s is not in %s, placing at end", before.id, target_column.value
                )
            order_key = reindex.next_order_key(self._items, target_column, exclude_id=item.id)

        old_column = item.column
        item.order_key = order_key
        item.column = target_column

        reindex.renumber(self._items, target_column)
        if old_column != target_column:
            reindex.renumber(self._items, old_column)

        logger.info(
            "Item moved: %s (%s -> %s, position %d)",
            item.id,
            old_column.value,
            target_column.value,
            int(item.order_key),
        )
        self.save()
        return item.model_copy()

    # --- Private Methods ---

    def _find(self, item_id: str) -> Item:
        """Get the stored item itself, for in-place mutation."""
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFoundError(item_id)


def _clean_title(title: str) -> str:
    """Trim a title, rejecting blank ones."""
    cleaned = (title or "").strip()
    if not cleaned:
        raise ValidationError("Title cannot be empty")
    return cleaned


def _default_items() -> list[Item]:
    """Build the onboarding cards with dense keys per column."""
    items: list[Item] = []
    for title, description, column in DEFAULT_ITEMS:
        items.append(
            Item(
                title=title,
                description=description,
                column=column,
                order_key=reindex.next_order_key(items, column),
            )
        )
    return items
