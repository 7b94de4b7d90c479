"""Input-side helpers that turn gestures into intents."""

from .drag import DragPhase, DragSession, DropTarget

__all__ = [
    "DragPhase",
    "DragSession",
    "DropTarget",
]
