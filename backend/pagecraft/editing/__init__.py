# backend/pagecraft/editing/__init__.py
from .session import EditState, Editing, ParagraphEditor, Viewing
from .viewer import DocumentView

__all__ = ["EditState", "Editing", "ParagraphEditor", "Viewing", "DocumentView"]
