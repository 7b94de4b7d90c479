"""Markdown-directory repository (one front matter file per item)."""

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import frontmatter
import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import PersistenceError
from ..models import Item, ItemRecord

logger = logging.getLogger(__name__)


class MarkdownRepository:
    """
    Repository for items stored as markdown files.

    Each item is ``<id>.md`` with YAML front matter holding the record
    fields and the description as the markdown body::

        ---
        id: 1b4e28ba-2fa1-11d2-883f-0016d3cca427
        title: Buy milk
        column: To Do
        orderKey: 0.0
        ---
        Semi-skimmed
    """

    def __init__(self, task_root: Path) -> None:
        """
        Initialize repository.

        Args:
            task_root: Directory holding the item files (e.g., .tasks/)
        """
        self.task_root = task_root
        # Filenames this repository loaded or wrote; only these may be deleted
        self._owned: set[str] = set()

    def ensure_directory(self) -> None:
        """Create the item directory if it doesn't exist."""
        self.task_root.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        """Check whether the item directory exists."""
        return self.task_root.is_dir()

    def load(self) -> list[Item]:
        """Parse every item file, in filename order.

        Files that can't be parsed are skipped with a warning so one broken
        card doesn't hide the rest of the board. Skipped files are never
        deleted by ``save``.
        """
        try:
            paths = sorted(self._iter_item_files())
        except OSError as e:
            raise PersistenceError(f"Could not list {self.task_root}: {e}") from e

        items: list[Item] = []
        owned: set[str] = set()
        for filepath in paths:
            item = self._parse_item_file(filepath)
            if item is not None:
                items.append(item)
                owned.add(filepath.name)
        self._owned = owned

        logger.debug("Loaded %d items from %s", len(items), self.task_root)
        return items

    def save(self, items: Sequence[Item]) -> None:
        """Write one file per item and delete files of removed items.

        Only files this repository loaded or wrote earlier are candidates for
        deletion; anything else in the directory is left alone.
        """
        keep = {self._filename(item) for item in items}
        try:
            self.ensure_directory()
            for item in items:
                self._write_item_file(item)
            for name in sorted(self._owned - keep):
                filepath = self.task_root / name
                logger.debug("Removing stale item file: %s", name)
                filepath.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not save to {self.task_root}: {e}") from e
        self._owned = keep

        logger.debug("Saved %d items to %s", len(items), self.task_root)

    # --- Private Methods ---

    @staticmethod
    def _filename(item: Item) -> str:
        return f"{item.id}.md"

    def _iter_item_files(self) -> Iterator[Path]:
        """Iterate over all .md files in the item directory."""
        if not self.task_root.exists():
            return
        yield from self.task_root.glob("*.md")

    def _parse_item_file(self, filepath: Path) -> Item | None:
        """Parse a single item file."""
        try:
            post = frontmatter.load(filepath)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Skipping unreadable item file %s: %s", filepath.name, e)
            return None

        data = dict(post.metadata)
        data.setdefault("id", filepath.stem)
        data["description"] = post.content or None

        try:
            record = ItemRecord.model_validate(data)
        except PydanticValidationError as e:
            logger.warning("Skipping invalid item file %s: %s", filepath.name, e)
            return None
        return Item.from_record(record)

    def _write_item_file(self, item: Item) -> None:
        """Write a single item file."""
        metadata = item.to_record().to_dict()
        body = metadata.pop("description", "")

        post = frontmatter.Post(body)
        post.metadata = metadata

        filepath = self.task_root / self._filename(item)
        with open(filepath, "w") as f:
            f.write(frontmatter.dumps(post, sort_keys=False))
