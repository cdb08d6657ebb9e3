# backend/pagecraft/services/__init__.py
from .export import ExportError, ExportService, export_service

__all__ = ["ExportError", "ExportService", "export_service"]
