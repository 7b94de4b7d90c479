"""Enums for board columns."""

from enum import Enum

from ..errors import ValidationError


class Column(str, Enum):
    """Fixed set of board columns, in display order.

    Values are the display titles, which are also the serialized form.
    """

    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"

    @property
    def display_title(self) -> str:
        """Display title for the column header."""
        return self.value

    @property
    def slug(self) -> str:
        """Lowercase identifier, e.g. "in_progress"."""
        return self.name.lower()

    @classmethod
    def default(cls) -> "Column":
        """Column that new items are placed in."""
        return next(iter(cls))

    @classmethod
    def parse(cls, value: "str | Column") -> "Column":
        """Resolve a column from its title, member name, or slug.

        Matching ignores case and treats spaces, hyphens and underscores
        alike, so "To Do", "todo", "TODO" and "to-do" all resolve to TODO.

        Raises:
            ValidationError: If the value names no column.
        """
        if isinstance(value, cls):
            return value
        wanted = _normalize(str(value))
        if wanted:
            for column in cls:
                if wanted in (_normalize(column.value), _normalize(column.name)):
                    return column
        valid = ", ".join(column.value for column in cls)
        raise ValidationError(f"Unknown column '{value}' (valid: {valid})")


def _normalize(value: str) -> str:
    """Strip separators and case for lenient column matching."""
    return "".join(c for c in value.lower() if c.isalnum())
