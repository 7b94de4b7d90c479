"""Single-file JSON repository."""

import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import PersistenceError
from ..models import Item, ItemRecord

logger = logging.getLogger(__name__)

_records = TypeAdapter(list[ItemRecord])


class JsonRepository:
    """
    Repository storing the whole board in one JSON file.

    The file holds a list of item records, e.g.::

        [{"id": "...", "title": "Buy milk", "column": "To Do", "orderKey": 0}]
    """

    DEFAULT_FILENAME = "kanbanTasks.json"

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Path to the JSON file (created on first save)
        """
        self.path = path

    def exists(self) -> bool:
        """Check whether the board file exists."""
        return self.path.exists()

    def load(self) -> list[Item]:
        """Read and decode the board file."""
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Could not read {self.path}: {e}") from e

        try:
            records = _records.validate_json(data)
        except PydanticValidationError as e:
            raise PersistenceError(f"Could not decode {self.path}: {e}") from e

        logger.debug("Loaded %d items from %s", len(records), self.path)
        return [Item.from_record(record) for record in records]

    def save(self, items: Sequence[Item]) -> None:
        """Write the board file atomically (temp file, then rename)."""
        records = [item.to_record() for item in items]
        payload = _records.dump_json(records, indent=2, by_alias=True, exclude_none=True)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                tmp_path.replace(self.path)
            finally:
                tmp_path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not save {self.path}: {e}") from e

        logger.debug("Saved %d items to %s", len(records), self.path)
