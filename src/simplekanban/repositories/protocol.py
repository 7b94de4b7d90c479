"""Repository protocol for board storage backends."""

from collections.abc import Sequence
from typing import Protocol

from ..models import Item


class RepositoryProtocol(Protocol):
    """Interface for board storage backends.

    The store loads the whole collection once at startup and writes the
    whole collection back after every mutation. Implementations raise
    ``PersistenceError`` for any I/O or decoding failure.
    """

    def exists(self) -> bool:
        """Check whether a board has been stored before.

        Returns:
            False on first launch, before anything was saved.
        """
        ...

    def load(self) -> list[Item]:
        """Load every stored item.

        Returns:
            Items in storage order. Keys are returned as stored; the store
            is responsible for renumbering.

        Raises:
            PersistenceError: If storage can't be read or decoded.
        """
        ...

    def save(self, items: Sequence[Item]) -> None:
        """Replace the stored collection with ``items``.

        Raises:
            PersistenceError: If storage can't be written.
        """
        ...
