"""Drag-and-drop gesture state machine.

A gesture is a sequence of discrete events::

    IDLE --start--> DRAGGING --drop--> DROPPED
                        |  ^
                   hover/leave
                        |
                        +--cancel--> CANCELLED

Only ``drop`` produces output: exactly one ``MoveIntent`` for a drop on a
valid target, and nothing for a cancel or a release outside any target.
Hover updates only change the preview used for highlighting; they never
touch the store.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from ..errors import DragStateError
from ..models import Column, MoveIntent

logger = logging.getLogger(__name__)


class DragPhase(str, Enum):
    """Phases of a drag gesture."""

    IDLE = "idle"
    DRAGGING = "dragging"
    DROPPED = "dropped"
    CANCELLED = "cancelled"


class DropTarget(BaseModel):
    """Where the dragged item would land: before ``before_id``, or at the end."""

    column: Column
    before_id: str | None = None


class DragSession:
    """Tracks one drag gesture at a time."""

    def __init__(self) -> None:
        self._phase = DragPhase.IDLE
        self._item_id: str | None = None
        self._preview: DropTarget | None = None

    @property
    def phase(self) -> DragPhase:
        """Current phase."""
        return self._phase

    @property
    def item_id(self) -> str | None:
        """Item being dragged, or the last one dragged once terminal."""
        return self._item_id

    @property
    def preview(self) -> DropTarget | None:
        """Current hover target, for drop highlighting."""
        return self._preview

    @property
    def is_active(self) -> bool:
        """True while a drag is in progress."""
        return self._phase == DragPhase.DRAGGING

    def start(self, item_id: str) -> None:
        """Begin dragging ``item_id``."""
        if self.is_active:
            raise DragStateError(
                f"Cannot start dragging {item_id}: already dragging {self._item_id}"
            )
        self._phase = DragPhase.DRAGGING
        self._item_id = item_id
        self._preview = None
        logger.debug("Drag started: %s", item_id)

    def hover(self, column: Column | str, before_id: str | None = None) -> DropTarget | None:
        """Update the preview target.

        Hovering over the dragged item itself shows no target.
        """
        self._require_active("hover")
        if before_id is not None and before_id == self._item_id:
            self._preview = None
        else:
            self._preview = DropTarget(column=Column.parse(column), before_id=before_id)
        return self._preview

    def leave(self) -> None:
        """Pointer left every drop target."""
        self._require_active("leave")
        self._preview = None

    def drop(
        self, column: Column | str | None = None, before_id: str | None = None
    ) -> MoveIntent | None:
        """Finish the gesture.

        Uses the explicit target if given, otherwise the current preview.
        With no target, or a target of the item itself, the gesture is
        cancelled.

        Returns:
            The move to apply, or None if nothing should change
        """
        item_id = self._require_active("drop")
        if column is not None:
            target = DropTarget(column=Column.parse(column), before_id=before_id)
        else:
            target = self._preview

        if target is None or target.before_id == item_id:
            self.cancel()
            return None

        intent = MoveIntent(
            item_id=item_id,
            target_column=target.column,
            before_id=target.before_id,
        )
        self._phase = DragPhase.DROPPED
        self._preview = None
        logger.debug(
            "Drag dropped: %s -> %s (before=%s)",
            intent.item_id,
            target.column.value,
            target.before_id,
        )
        return intent

    def cancel(self) -> None:
        """Abort the gesture without producing a move."""
        self._require_active("cancel")
        self._phase = DragPhase.CANCELLED
        self._preview = None
        logger.debug("Drag cancelled: %s", self._item_id)

    def _require_active(self, event: str) -> str:
        """Return the dragged item id, or raise if no gesture is in progress."""
        if not self.is_active or self._item_id is None:
            raise DragStateError(f"Cannot {event}: no drag in progress ({self._phase.value})")
        return self._item_id
