"""Unit tests for models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from simplekanban.errors import ValidationError
from simplekanban.models import Board, Column, Item, ItemRecord, StorageConfig


class TestColumn:
    """Tests for the Column enum."""

    def test_display_order(self):
        assert list(Column) == [Column.TODO, Column.IN_PROGRESS, Column.DONE]

    def test_default_is_first(self):
        assert Column.default() == Column.TODO

    @pytest.mark.parametrize(
        "value",
        ["In Progress", "in progress", "IN_PROGRESS", "in_progress", "in-progress", "inprogress"],
    )
    def test_parse_spellings(self, value: str):
        assert Column.parse(value) == Column.IN_PROGRESS

    def test_parse_member_passthrough(self):
        assert Column.parse(Column.DONE) is Column.DONE

    @pytest.mark.parametrize("value", ["", "Backlog", "   "])
    def test_parse_unknown(self, value: str):
        with pytest.raises(ValidationError):
            Column.parse(value)

    def test_slug_and_title(self):
        assert Column.IN_PROGRESS.slug == "in_progress"
        assert Column.IN_PROGRESS.display_title == "In Progress"


class TestItem:
    """Tests for Item."""

    def test_generates_uuid_id(self):
        import uuid

        item = Item(title="A")

        assert uuid.UUID(item.id).version == 4

    def test_id_is_immutable(self):
        item = Item(title="A")

        with pytest.raises(PydanticValidationError):
            item.id = "other"

    def test_empty_description_is_none(self):
        assert Item(title="A", description="").description is None

    def test_defaults(self):
        item = Item(title="A")

        assert item.column == Column.TODO
        assert item.order_key == 0

    def test_record_round_trip(self):
        item = Item(title="A", description="d", column=Column.DONE, order_key=3)

        assert Item.from_record(item.to_record()).model_dump() == item.model_dump()


class TestItemRecord:
    """Tests for ItemRecord parsing."""

    def test_wire_names(self):
        record = ItemRecord.model_validate(
            {"id": "x", "title": "A", "column": "Done", "orderKey": 2}
        )

        assert record.column == Column.DONE
        assert record.order_key == 2

    def test_legacy_names(self):
        record = ItemRecord.model_validate(
            {"id": "x", "title": "A", "status": "To Do", "orderIndex": 1.5}
        )

        assert record.column == Column.TODO
        assert record.order_key == 1.5

    def test_missing_order_key(self):
        record = ItemRecord.model_validate({"id": "x", "title": "A", "column": "Done"})

        assert record.order_key is None
        assert Item.from_record(record).order_key == 0

    def test_unknown_column_rejected(self):
        with pytest.raises(PydanticValidationError):
            ItemRecord.model_validate({"id": "x", "title": "A", "column": "Later"})

    def test_to_dict(self):
        record = Item(title="A", column=Column.IN_PROGRESS, order_key=1).to_record()

        data = record.to_dict()

        assert data["column"] == "In Progress"
        assert data["orderKey"] == 1
        assert "description" not in data


class TestBoard:
    """Tests for Board view derivation."""

    def test_all_columns_present(self):
        board = Board.from_items([])

        assert set(board.columns) == set(Column)
        assert board.total == 0

    def test_groups_and_sorts(self):
        a = Item(title="A", column=Column.DONE, order_key=1)
        b = Item(title="B", column=Column.DONE, order_key=0)
        c = Item(title="C", column=Column.TODO, order_key=0)

        board = Board.from_items([a, b, c])

        assert [i.title for i in board.get_column(Column.DONE)] == ["B", "A"]
        assert [i.title for i in board.get_column(Column.TODO)] == ["C"]
        assert board.get_column(Column.IN_PROGRESS) == []
        assert board.total == 3

    def test_visible_columns(self):
        board = Board.from_items([Item(title="A")])

        visible = board.get_visible_columns()

        assert [(column, title) for column, title, _ in visible] == [
            (Column.TODO, "To Do"),
            (Column.IN_PROGRESS, "In Progress"),
            (Column.DONE, "Done"),
        ]
        assert [i.title for i in visible[0][2]] == ["A"]


class TestStorageConfig:
    """Tests for StorageConfig defaults."""

    def test_json_default_path(self):
        assert StorageConfig().path == "kanbanTasks.json"

    def test_markdown_default_path(self):
        assert StorageConfig(backend="markdown").path == ".tasks"

    def test_explicit_path_kept(self):
        config = StorageConfig(backend="markdown", path="  cards  ")

        assert config.path == "cards"

    def test_blank_path_rejected(self):
        with pytest.raises(PydanticValidationError):
            StorageConfig(path="   ")
