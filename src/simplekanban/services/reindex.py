"""Order key computation and column renumbering.

Every item carries a float ``order_key`` that is only meaningful relative to
the other items in the same column. Positional intents are captured cheaply
by giving the moved item a key between or after its neighbours (``- 0.5``
before a sibling, ``max + 1`` at the end), and ``renumber`` then rewrites the
column back to the dense sequence ``0, 1, ..., n-1``.

Ties on ``order_key`` are broken by the item's position in the collection
passed in: ``sorted`` is stable, so callers that keep the collection in
insertion order get insertion order as the tiebreak.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from operator import attrgetter

from ..models.enums import Column
from ..models.item import Item

logger = logging.getLogger(__name__)

BEFORE_OFFSET = 0.5

_by_key = attrgetter("order_key")


def column_items(items: Iterable[Item], column: Column) -> list[Item]:
    """Return the items in ``column`` in display order (a new list)."""
    return sorted((item for item in items if item.column == column), key=_by_key)


def next_order_key(
    items: Iterable[Item], column: Column, exclude_id: str | None = None
) -> float:
    """Key that places an item after everything currently in ``column``.

    Args:
        items: Full collection
        column: Target column
        exclude_id: Item to ignore (the one being placed, if already present)

    Returns:
        max key + 1, or 0 for an empty column
    """
    keys = [
        item.order_key
        for item in items
        if item.column == column and item.id != exclude_id
    ]
    if not keys:
        return 0.0
    return max(keys) + 1.0


def order_key_before(target: Item) -> float:
    """Key that sorts immediately before ``target`` until the next renumber."""
    return target.order_key - BEFORE_OFFSET


def renumber(items: Iterable[Item], column: Column) -> int:
    """Rewrite keys in ``column`` to their zero-based rank.

    Items in other columns are left untouched. Calling this twice with no
    mutation in between changes nothing the second time.

    Returns:
        Number of items whose key changed
    """
    ordered = column_items(items, column)
    changed = 0
    for rank, item in enumerate(ordered):
        key = float(rank)
        if item.order_key != key:
            item.order_key = key
            changed += 1
    logger.debug(
        "Renumbered column %s: %d items, %d keys changed",
        column.value,
        len(ordered),
        changed,
    )
    return changed


def is_dense(items: Iterable[Item], column: Column) -> bool:
    """Check whether ``column`` already holds exactly the keys 0..n-1."""
    ordered = column_items(items, column)
    return all(item.order_key == rank for rank, item in enumerate(ordered))
