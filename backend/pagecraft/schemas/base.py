# backend/pagecraft/schemas/base.py
from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True
    )


class TimestampMixin(BaseModel):
    created_at: datetime
    updated_at: datetime


def reject_explicit_nulls(schema: BaseModel, fields: Iterable[str]) -> None:
    """Partial updates may omit a field but not null out a required one"""
    for name in fields:
        if name in schema.model_fields_set and getattr(schema, name) is None:
            raise ValueError(f"{to_camel(name)} may not be null")
