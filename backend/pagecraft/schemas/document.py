# backend/pagecraft/schemas/document.py
from typing import Optional

from pydantic import Field, StrictStr, model_validator

from .base import BaseSchema, TimestampMixin, reject_explicit_nulls
from ..models.document import DocumentStatus


class DocumentBase(BaseSchema):
    title: StrictStr = Field(..., min_length=1)
    filename: StrictStr = Field(..., min_length=1)


class DocumentCreate(DocumentBase):
    owner_id: StrictStr


class DocumentUpdate(BaseSchema):
    title: Optional[StrictStr] = Field(None, min_length=1)
    filename: Optional[StrictStr] = Field(None, min_length=1)
    status: Optional[DocumentStatus] = None

    @model_validator(mode="after")
    def no_nulls(self) -> "DocumentUpdate":
        reject_explicit_nulls(self, ("title", "filename", "status"))
        return self


class Document(DocumentBase, TimestampMixin):
    id: str
    owner_id: str
    total_pages: int = 1
    status: DocumentStatus = DocumentStatus.DRAFT
