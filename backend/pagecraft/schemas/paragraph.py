# backend/pagecraft/schemas/paragraph.py
from typing import Any, Dict, Optional

from pydantic import StrictBool, StrictInt, StrictStr, model_validator

from .base import BaseSchema, TimestampMixin, reject_explicit_nulls


class ParagraphBase(BaseSchema):
    page_id: StrictStr
    content: StrictStr  # rich text (HTML)
    order_index: StrictInt
    formatting: Optional[Dict[str, Any]] = None


class ParagraphCreate(ParagraphBase):
    pass


class ParagraphUpdate(BaseSchema):
    page_id: Optional[StrictStr] = None
    content: Optional[StrictStr] = None
    order_index: Optional[StrictInt] = None
    is_editing: Optional[StrictBool] = None
    formatting: Optional[Dict[str, Any]] = None

    @model_validator(mode="after")
    def no_nulls(self) -> "ParagraphUpdate":
        reject_explicit_nulls(self, ("page_id", "content", "order_index", "is_editing"))
        return self


class Paragraph(ParagraphBase, TimestampMixin):
    id: str
    is_editing: bool = False
