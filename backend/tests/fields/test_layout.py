# tests/fields/test_layout.py
import json
from urllib.parse import unquote

import pytest
from pydantic import ValidationError

from pagecraft.fields import Assignee, FieldLayout, FieldType, json_data_uri, new_field
from pagecraft.fields.geometry import Delta, Point, Size

CONTAINER = Size(800, 1000)


@pytest.fixture
def layout():
    return FieldLayout()


def test_new_field_defaults():
    signature = new_field(FieldType.SIGNATURE, 2)
    assert signature.label == "Signature Field"
    assert (signature.x, signature.y) == (25, 25)
    assert (signature.width, signature.height) == (30, 8)
    assert signature.page == 2
    assert signature.required is True
    assert signature.assignee == Assignee.SIGNER1
    assert signature.placeholder == "Sign here"
    assert signature.font_size == 12
    assert signature.id.startswith("field_")

    checkbox = new_field("checkbox", 1)
    assert (checkbox.width, checkbox.height) == (3, 3)
    assert checkbox.required is False

    text = new_field(FieldType.TEXT, 1)
    assert (text.width, text.height) == (20, 5)


def test_add_field_selects_it(layout):
    first = layout.add_field(FieldType.TEXT, 1)
    second = layout.add_field(FieldType.DATE, 1)

    assert [f.id for f in layout.fields] == [first.id, second.id]
    assert layout.selected_id == second.id
    assert first.id != second.id


def test_update_field_clamps_geometry(layout):
    field = layout.add_field(FieldType.TEXT, 1)

    updated = layout.update_field(field.id, x=120, y=-4, width=0, label="Company")

    assert updated.x == 95
    assert updated.y == 0
    assert updated.width == 1
    assert updated.label == "Company"
    assert layout.get(field.id) == updated


def test_update_field_rejects_bad_values(layout):
    field = layout.add_field(FieldType.TEXT, 1)

    with pytest.raises(ValidationError):
        layout.update_field(field.id, page=0)
    assert layout.get(field.id) == field


def test_move_and_resize(layout):
    field = layout.add_field(FieldType.TEXT, 1)

    moved = layout.move_field(field.id, Delta(800, 0), CONTAINER)
    assert moved.x == 95

    resized = layout.resize_field(field.id, Delta(-800, -800), CONTAINER)
    assert (resized.width, resized.height) == (5, 5)
    assert resized.x == 95


def test_pointer_drag(layout):
    field = layout.add_field(FieldType.TEXT, 1)
    layout.select(None)

    layout.begin_drag(field.id, Point(0, 0))
    assert layout.is_dragging(field.id)
    assert layout.z_index(field.id) == 1000

    layout.track(field.id, Point(80, 100), CONTAINER)
    tracked = layout.track(field.id, Point(160, 200), CONTAINER)
    assert (tracked.x, tracked.y) == pytest.approx((45, 45))

    finished = layout.finish(field.id)
    assert finished == tracked
    assert not layout.is_dragging(field.id)
    assert layout.z_index(field.id) == 10

    with pytest.raises(KeyError):
        layout.track(field.id, Point(0, 0), CONTAINER)


def test_selected_field_stacks_above_others(layout):
    first = layout.add_field(FieldType.TEXT, 1)
    second = layout.add_field(FieldType.TEXT, 1)

    assert layout.z_index(second.id) == 100
    assert layout.z_index(first.id) == 10


def test_duplicate_field(layout):
    first = layout.add_field(FieldType.NAME, 1)
    last = layout.add_field(FieldType.EMAIL, 1)

    copy = layout.duplicate_field(first.id)

    assert [f.id for f in layout.fields] == [first.id, copy.id, last.id]
    assert copy.id != first.id
    assert copy.model_dump(exclude={"id"}) == first.model_dump(exclude={"id"})


def test_delete_selected_field(layout):
    field = layout.add_field(FieldType.TEXT, 1)

    layout.delete_field(field.id)

    assert layout.fields == []
    assert layout.selected is None
    with pytest.raises(KeyError):
        layout.delete_field(field.id)


def test_select_unknown_field(layout):
    with pytest.raises(KeyError):
        layout.select("field_missing")


def test_fields_on_page_and_clear(layout):
    layout.add_field(FieldType.TEXT, 1)
    second_page = layout.add_field(FieldType.TEXT, 2)

    assert layout.fields_on_page(2) == [second_page]

    layout.clear()
    assert layout.fields == []
    assert layout.selected_id is None


def test_export_config(layout):
    layout.add_field(FieldType.SIGNATURE, 3)

    config = layout.export_config("contract.pdf", 3)

    assert config["filename"] == "contract.pdf"
    assert config["totalPages"] == 3
    assert "createdAt" in config
    exported = config["fields"][0]
    assert exported["type"] == "signature"
    assert exported["fontSize"] == 12
    assert exported["assignee"] == "signer1"

    assert FieldLayout.export_filename("contract.pdf") == "contract-fields.json"
    assert FieldLayout.export_filename("notes") == "notes-fields.json"


def test_json_data_uri():
    uri = json_data_uri({"a": [1, 2]})

    prefix = "data:application/json;charset=utf-8,"
    assert uri.startswith(prefix)
    assert json.loads(unquote(uri[len(prefix):])) == {"a": [1, 2]}
