# backend/pagecraft/schemas/page.py
from typing import Any, Optional

from pydantic import Field, StrictInt, field_validator, model_validator

from .base import BaseSchema, TimestampMixin, reject_explicit_nulls


class DocumentPageBase(BaseSchema):
    page_number: StrictInt = Field(..., ge=1)
    content: Any = Field(..., description="Opaque page payload, stored as JSON")

    @field_validator("content")
    @classmethod
    def content_not_null(cls, content: Any) -> Any:
        if content is None:
            raise ValueError("content may not be null")
        return content


class PageCreateRequest(DocumentPageBase):
    """Body of POST /api/documents/{id}/pages; the document comes from the path"""
    pass


class DocumentPageCreate(DocumentPageBase):
    document_id: str


class DocumentPageUpdate(BaseSchema):
    page_number: Optional[StrictInt] = Field(None, ge=1)
    content: Any = None

    @model_validator(mode="after")
    def no_nulls(self) -> "DocumentPageUpdate":
        reject_explicit_nulls(self, ("page_number", "content"))
        return self


class DocumentPage(DocumentPageBase, TimestampMixin):
    id: str
    document_id: str
