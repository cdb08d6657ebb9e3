# backend/pagecraft/forms/builder.py
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, TypeVar

from .models import (
    SEEDED_OPTION_TYPES,
    FormField,
    FormFieldType,
    new_form_field_id,
)

T = TypeVar("T")

DEFAULT_TITLE = "Untitled Form"
DEFAULT_OPTIONS = ["Option 1", "Option 2"]
WHITESPACE = re.compile(r"\s+")


def move(items: List[T], old_index: int, new_index: int) -> List[T]:
    """
    Return a copy of `items` with the element at old_index moved to new_index.
    Every other element keeps its relative order.
    """
    size = len(items)
    for name, index in (("old_index", old_index), ("new_index", new_index)):
        if not 0 <= index < size:
            raise IndexError(f"{name} {index} out of range for {size} items")
    result = list(items)
    result.insert(new_index, result.pop(old_index))
    return result


def new_form_field(field_type: FormFieldType) -> FormField:
    field_type = FormFieldType(field_type)
    if field_type == FormFieldType.TEXTAREA:
        placeholder = "Enter your text here..."
    else:
        placeholder = f"Enter {field_type.value}..."
    return FormField(
        type=field_type,
        label=f"{field_type.value.capitalize()} Field",
        placeholder=placeholder,
        required=False,
        options=list(DEFAULT_OPTIONS) if field_type in SEEDED_OPTION_TYPES else None,
    )


class FormBuilder:
    """Ordered list of form fields with a single optional selection"""

    def __init__(self, title: str = DEFAULT_TITLE, fields: Optional[List[FormField]] = None):
        self.title = title
        self.fields: List[FormField] = list(fields or [])
        self.selected_id: Optional[str] = None

    def _index(self, field_id: str) -> int:
        for index, field in enumerate(self.fields):
            if field.id == field_id:
                return index
        raise KeyError(f"Unknown form field: {field_id}")

    def get(self, field_id: str) -> FormField:
        return self.fields[self._index(field_id)]

    @property
    def selected(self) -> Optional[FormField]:
        return self.get(self.selected_id) if self.selected_id is not None else None

    def select(self, field_id: Optional[str]) -> None:
        if field_id is not None:
            self._index(field_id)
        self.selected_id = field_id

    def add_field(self, field_type: FormFieldType) -> FormField:
        field = new_form_field(field_type)
        self.fields.append(field)
        self.selected_id = field.id
        return field

    def update_field(self, field_id: str, **changes: Any) -> FormField:
        """Partial update; the id is fixed"""
        index = self._index(field_id)
        changes.pop("id", None)
        updated = FormField.model_validate({**self.fields[index].model_dump(), **changes})
        self.fields[index] = updated
        return updated

    def duplicate_field(self, field_id: str) -> FormField:
        index = self._index(field_id)
        source = self.fields[index]
        copy = source.model_copy(
            update={"id": new_form_field_id(), "label": f"{source.label} (Copy)"},
            deep=True,
        )
        self.fields.insert(index + 1, copy)
        return copy

    def delete_field(self, field_id: str) -> None:
        del self.fields[self._index(field_id)]
        if self.selected_id == field_id:
            self.selected_id = None

    def move_field(self, old_index: int, new_index: int) -> None:
        self.fields = move(self.fields, old_index, new_index)

    def move_field_to(self, field_id: str, over_id: Optional[str]) -> None:
        """Drag-end handler: drop `field_id` at the position of `over_id`"""
        if over_id is None or field_id == over_id:
            return
        self.move_field(self._index(field_id), self._index(over_id))

    # Options of choice fields

    def _choice_field(self, field_id: str) -> FormField:
        field = self.get(field_id)
        if not field.is_choice:
            raise ValueError(f"Field {field_id} of type {field.type.value} has no options")
        return field

    def add_option(self, field_id: str, option: Optional[str] = None) -> FormField:
        options = list(self._choice_field(field_id).options or [])
        options.append(option if option is not None else f"Option {len(options) + 1}")
        return self.update_field(field_id, options=options)

    def update_option(self, field_id: str, index: int, option: str) -> FormField:
        options = list(self._choice_field(field_id).options or [])
        options[index] = option
        return self.update_field(field_id, options=options)

    def remove_option(self, field_id: str, index: int) -> FormField:
        options = list(self._choice_field(field_id).options or [])
        del options[index]
        return self.update_field(field_id, options=options)

    # Export

    def export(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "fields": [field.model_dump(mode="json", by_alias=True, exclude_none=True) for field in self.fields],
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }

    def export_filename(self) -> str:
        slug = WHITESPACE.sub("-", self.title.lower())
        return f"{slug}-form.json"
