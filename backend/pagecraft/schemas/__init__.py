# backend/pagecraft/schemas/__init__.py
from .user import User, UserCreate
from .document import Document, DocumentCreate, DocumentUpdate
from .page import DocumentPage, DocumentPageCreate, DocumentPageUpdate, PageCreateRequest
from .paragraph import Paragraph, ParagraphCreate, ParagraphUpdate

__all__ = [
    "User", "UserCreate",
    "Document", "DocumentCreate", "DocumentUpdate",
    "DocumentPage", "DocumentPageCreate", "DocumentPageUpdate", "PageCreateRequest",
    "Paragraph", "ParagraphCreate", "ParagraphUpdate"
]
