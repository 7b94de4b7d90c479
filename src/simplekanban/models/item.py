"""Item domain model and its serialized record shape."""

from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..errors import ValidationError
from .enums import Column


def new_item_id() -> str:
    """Generate a fresh item identifier."""
    return str(uuid4())


class Item(BaseModel):
    """A single card on the board."""

    id: str = Field(default_factory=new_item_id, frozen=True)
    title: str
    description: str | None = None
    column: Column = Column.TODO
    order_key: float = 0.0  # Dense 0..n-1 within the column once renumbered

    @field_validator("description")
    @classmethod
    def empty_description_is_none(cls, v: str | None) -> str | None:
        """Store an empty description as absent."""
        return v or None

    def to_record(self) -> "ItemRecord":
        """Convert to the serialized record shape."""
        return ItemRecord(
            id=self.id,
            title=self.title,
            description=self.description,
            column=self.column,
            order_key=self.order_key,
        )

    @classmethod
    def from_record(cls, record: "ItemRecord") -> "Item":
        """Create Item from a stored record.

        A record without an order key loads at key 0; the store renumbers
        such columns right after loading.
        """
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            column=record.column,
            order_key=record.order_key if record.order_key is not None else 0.0,
        )


class ItemRecord(BaseModel):
    """Persisted form of an item.

    Serialized as ``{id, title, description, column, orderKey}``. The keys
    ``status`` and ``orderIndex`` written by older versions are accepted on
    load.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str | None = None
    column: Column = Field(
        default=Column.TODO,
        validation_alias=AliasChoices("column", "status"),
    )
    order_key: float | None = Field(
        default=None,
        alias="orderKey",
        validation_alias=AliasChoices("orderKey", "orderIndex", "order_key"),
    )

    @field_validator("column", mode="before")
    @classmethod
    def parse_column(cls, v: object) -> Column:
        """Accept any spelling Column.parse understands."""
        try:
            return Column.parse(v if isinstance(v, Column) else str(v))
        except ValidationError as e:
            raise ValueError(str(e)) from e

    def to_dict(self) -> dict:
        """Dump using the on-disk key names, omitting an absent description."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
