# backend/pagecraft/forms/models.py
import enum
import re
import uuid
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from ..schemas.base import BaseSchema


class FormFieldType(str, enum.Enum):
    TEXT = "text"
    EMAIL = "email"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    DATE = "date"
    SIGNATURE = "signature"


# Types whose answers come from `options`
CHOICE_TYPES = {FormFieldType.SELECT, FormFieldType.RADIO, FormFieldType.CHECKBOX}

# Types created with a starter option list
SEEDED_OPTION_TYPES = {FormFieldType.SELECT, FormFieldType.RADIO}


def new_form_field_id() -> str:
    return f"field_{uuid.uuid4().hex[:12]}"


class FieldValidation(BaseSchema):
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    pattern: Optional[str] = None

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, pattern: Optional[str]) -> Optional[str]:
        if pattern is not None:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid pattern {pattern!r}: {e}") from e
        return pattern

    @model_validator(mode="after")
    def check_range(self) -> "FieldValidation":
        if self.min_length is not None and self.max_length is not None \
                and self.min_length > self.max_length:
            raise ValueError(f"minLength ({self.min_length}) exceeds maxLength ({self.max_length})")
        return self


class FormField(BaseSchema):
    id: str = Field(default_factory=new_form_field_id)
    type: FormFieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[List[str]] = None
    validation: Optional[FieldValidation] = None

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_TYPES
