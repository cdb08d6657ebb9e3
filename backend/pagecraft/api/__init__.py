# backend/pagecraft/api/__init__.py
from .documents import router as documents_router
from .pages import router as pages_router
from .paragraphs import router as paragraphs_router

__all__ = ["documents_router", "pages_router", "paragraphs_router"]
