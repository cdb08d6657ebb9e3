# backend/pagecraft/models/__init__.py
from ..database import Base
from .user import User
from .document import Document, DocumentStatus
from .page import DocumentPage
from .paragraph import Paragraph

__all__ = [
    "Base",
    "User",
    "Document",
    "DocumentStatus",
    "DocumentPage",
    "Paragraph"
]
