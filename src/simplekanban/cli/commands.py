"""CLI subcommands that turn arguments into board intents."""

from __future__ import annotations

import argparse
import logging

from ..app import KanbanApp
from ..errors import NotFoundError, ValidationError
from ..models import Board, Item
from ..services import BoardStore
from .output import card, column_heading, empty_column, error, success, warning

logger = logging.getLogger(__name__)

SHORT_ID_LENGTH = 8


def short_id(item: Item) -> str:
    """Abbreviated ID for display."""
    return item.id[:SHORT_ID_LENGTH]


def resolve_item_id(store: BoardStore, ref: str) -> str:
    """
    Resolve a full ID or a unique ID prefix to a full item ID.

    Raises:
        NotFoundError: If nothing matches
        ValidationError: If the prefix matches more than one item
    """
    ref = ref.strip()
    matches = [item.id for item in store.items if item.id.startswith(ref)] if ref else []
    if ref in matches:
        return ref
    if not matches:
        raise NotFoundError(ref)
    if len(matches) > 1:
        raise ValidationError(f"ID prefix '{ref}' matches {len(matches)} items")
    return matches[0]


def print_board(board: Board) -> None:
    """Print every column with its items in display order."""
    for column, title, items in board.get_visible_columns():
        column_heading(column, title, len(items))
        if not items:
            empty_column()
        for position, item in enumerate(items, start=1):
            card(position, item.title, short_id(item), item.description)
        print()


def cmd_list(app: KanbanApp, args: argparse.Namespace) -> int:
    """Show the board."""
    print_board(app.store.board())
    return 0


def cmd_add(app: KanbanApp, args: argparse.Namespace) -> int:
    """Add an item to the default column."""
    item = app.dispatcher.request_add(args.title, args.description)
    success(f"Added [{short_id(item)}] to {item.column.value}: {item.title}")
    return 0


def cmd_edit(app: KanbanApp, args: argparse.Namespace) -> int:
    """Edit an item; omitted fields keep their current value."""
    store = app.store
    current = store.get(resolve_item_id(store, args.item_id))
    title = args.title if args.title is not None else current.title
    if args.description is not None:
        description = args.description
    else:
        description = current.description or ""

    item = app.dispatcher.request_edit(current.id, title, description, args.column)
    success(f"Updated [{short_id(item)}] in {item.column.value}: {item.title}")
    return 0


def cmd_delete(app: KanbanApp, args: argparse.Namespace) -> int:
    """Delete an item."""
    store = app.store
    item = app.dispatcher.request_delete(resolve_item_id(store, args.item_id))
    success(f"Deleted [{short_id(item)}]: {item.title}")
    return 0


def cmd_move(app: KanbanApp, args: argparse.Namespace) -> int:
    """Move an item to a column, before a sibling or at the end."""
    store = app.store
    item_id = resolve_item_id(store, args.item_id)
    before_id = resolve_item_id(store, args.before) if args.before else None

    item = app.dispatcher.request_move(item_id, args.column, before_id)
    position = int(item.order_key) + 1
    success(f"Moved [{short_id(item)}] to {item.column.value}, position {position}")
    return 0


COMMANDS = {
    "list": cmd_list,
    "add": cmd_add,
    "edit": cmd_edit,
    "delete": cmd_delete,
    "move": cmd_move,
}


def run_command(app: KanbanApp, args: argparse.Namespace) -> int:
    """
    Run the selected subcommand.

    Returns:
        Exit code (0 = success, 1 = rejected intent)
    """
    handler = COMMANDS[args.command or "list"]
    try:
        exit_code = handler(app, args)
    except (NotFoundError, ValidationError) as e:
        logger.debug("Command %s rejected: %s", args.command, e)
        error(str(e))
        return 1

    if app.store.last_error is not None:
        warning(f"storage problem: {app.store.last_error}")
    return exit_code
