# backend/pagecraft/fields/layout.py
import enum
import json
import uuid
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from pydantic import Field

from ..schemas.base import BaseSchema
from .geometry import (
    MANUAL_BOUNDS,
    Delta,
    DragGesture,
    Point,
    Rect,
    ResizeGesture,
    Size,
    clamp_rect,
    drag_rect,
    resize_rect,
    stacking_order,
)


class FieldType(str, enum.Enum):
    SIGNATURE = "signature"
    DATE = "date"
    TEXT = "text"
    CHECKBOX = "checkbox"
    INITIAL = "initial"
    NAME = "name"
    EMAIL = "email"
    TITLE = "title"


class Assignee(str, enum.Enum):
    SIGNER1 = "signer1"
    SIGNER2 = "signer2"
    SENDER = "sender"


PLACEHOLDERS = {
    FieldType.SIGNATURE: "Sign here",
    FieldType.DATE: "Date",
    FieldType.TEXT: "Enter text",
    FieldType.NAME: "Full name",
    FieldType.EMAIL: "Email address",
    FieldType.TITLE: "Job title",
    FieldType.INITIAL: "Initial",
}

# (width, height) in percent
DEFAULT_SIZES = {
    FieldType.SIGNATURE: (30.0, 8.0),
    FieldType.CHECKBOX: (3.0, 3.0),
}
FALLBACK_SIZE = (20.0, 5.0)

DEFAULT_X = 25.0
DEFAULT_Y = 25.0
DEFAULT_FONT_SIZE = 12


def new_field_id() -> str:
    return f"field_{uuid.uuid4().hex[:12]}"


class PlacedField(BaseSchema):
    """A typed placeholder positioned on a page, geometry in percent"""
    id: str = Field(default_factory=new_field_id)
    type: FieldType
    label: str
    x: float
    y: float
    width: float
    height: float
    page: int = Field(..., ge=1)
    required: bool = False
    assignee: Assignee = Assignee.SIGNER1
    placeholder: Optional[str] = None
    font_size: int = DEFAULT_FONT_SIZE
    value: Optional[str] = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def with_rect(self, rect: Rect) -> "PlacedField":
        return self.model_copy(update={
            "x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height
        })


def new_field(field_type: FieldType, page: int) -> PlacedField:
    field_type = FieldType(field_type)
    width, height = DEFAULT_SIZES.get(field_type, FALLBACK_SIZE)
    return PlacedField(
        type=field_type,
        label=f"{field_type.value.capitalize()} Field",
        x=DEFAULT_X,
        y=DEFAULT_Y,
        width=width,
        height=height,
        page=page,
        required=field_type in (FieldType.SIGNATURE, FieldType.DATE),
        assignee=Assignee.SIGNER1,
        placeholder=PLACEHOLDERS.get(field_type, "Field"),
        font_size=DEFAULT_FONT_SIZE,
    )


def json_data_uri(payload: Dict[str, Any]) -> str:
    """Inline download link for a JSON payload"""
    body = json.dumps(payload, indent=2, default=str)
    return "data:application/json;charset=utf-8," + quote(body, safe="")


GEOMETRY_KEYS = ("x", "y", "width", "height")


class FieldLayout:
    """
    Fields placed on a multi-page document, in insertion order, plus the
    single selected field (or none).
    """

    def __init__(self):
        self.fields: List[PlacedField] = []
        self.selected_id: Optional[str] = None
        self._gestures: Dict[str, Any] = {}

    def _index(self, field_id: str) -> int:
        for index, field in enumerate(self.fields):
            if field.id == field_id:
                return index
        raise KeyError(f"Unknown field: {field_id}")

    def get(self, field_id: str) -> PlacedField:
        return self.fields[self._index(field_id)]

    @property
    def selected(self) -> Optional[PlacedField]:
        if self.selected_id is None:
            return None
        return self.get(self.selected_id)

    def select(self, field_id: Optional[str]) -> None:
        if field_id is not None:
            self._index(field_id)
        self.selected_id = field_id

    def add_field(self, field_type: FieldType, page: int) -> PlacedField:
        field = new_field(field_type, page)
        self.fields.append(field)
        self.selected_id = field.id
        return field

    def _replace(self, field: PlacedField) -> PlacedField:
        self.fields[self._index(field.id)] = field
        return field

    def update_field(self, field_id: str, **changes: Any) -> PlacedField:
        """Property-panel edit; geometry values are clamped like manual entry"""
        changes.pop("id", None)
        field = PlacedField.model_validate({**self.get(field_id).model_dump(), **changes})
        if any(key in changes for key in GEOMETRY_KEYS):
            field = field.with_rect(clamp_rect(field.rect, MANUAL_BOUNDS))
        return self._replace(field)

    def move_field(self, field_id: str, delta: Delta, container: Size) -> PlacedField:
        field = self.get(field_id)
        return self._replace(field.with_rect(drag_rect(field.rect, delta, container)))

    def resize_field(self, field_id: str, delta: Delta, container: Size) -> PlacedField:
        field = self.get(field_id)
        return self._replace(field.with_rect(resize_rect(field.rect, delta, container)))

    # Pointer-driven variants: begin on pointer-down, track on pointer-move
    def begin_drag(self, field_id: str, pointer: Point) -> DragGesture:
        gesture = DragGesture(self.get(field_id).rect, pointer)
        self._gestures[field_id] = gesture
        return gesture

    def begin_resize(self, field_id: str, pointer: Point) -> ResizeGesture:
        gesture = ResizeGesture(self.get(field_id).rect, pointer)
        self._gestures[field_id] = gesture
        return gesture

    def track(self, field_id: str, pointer: Point, container: Size) -> PlacedField:
        gesture = self._gestures.get(field_id)
        if gesture is None:
            raise KeyError(f"No gesture in progress for field: {field_id}")
        rect = gesture.move(pointer, container)
        return self._replace(self.get(field_id).with_rect(rect))

    def finish(self, field_id: str) -> PlacedField:
        gesture = self._gestures.pop(field_id, None)
        if gesture is not None:
            gesture.end()
        return self.get(field_id)

    def is_dragging(self, field_id: str) -> bool:
        gesture = self._gestures.get(field_id)
        return isinstance(gesture, DragGesture) and gesture.active

    def z_index(self, field_id: str) -> int:
        return stacking_order(self.is_dragging(field_id), self.selected_id == field_id)

    def duplicate_field(self, field_id: str) -> PlacedField:
        index = self._index(field_id)
        copy = self.fields[index].model_copy(update={"id": new_field_id()})
        self.fields.insert(index + 1, copy)
        return copy

    def delete_field(self, field_id: str) -> None:
        del self.fields[self._index(field_id)]
        self._gestures.pop(field_id, None)
        if self.selected_id == field_id:
            self.selected_id = None

    def fields_on_page(self, page: int) -> List[PlacedField]:
        return [field for field in self.fields if field.page == page]

    def clear(self) -> None:
        """Drop every field, e.g. when another PDF is loaded"""
        self.fields = []
        self.selected_id = None
        self._gestures = {}

    def export_config(self, filename: str, total_pages: int) -> Dict[str, Any]:
        return {
            "filename": filename,
            "totalPages": total_pages,
            "fields": [field.model_dump(mode="json", by_alias=True) for field in self.fields],
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def export_filename(filename: str) -> str:
        stem = PurePath(filename).name
        if stem.lower().endswith(".pdf"):
            stem = stem[:-4]
        return f"{stem}-fields.json"
