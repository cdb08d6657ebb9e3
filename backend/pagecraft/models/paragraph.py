# backend/pagecraft/models/paragraph.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.types import JSON

from ..database import Base
from .base import new_id, utcnow


class Paragraph(Base):
    __tablename__ = "paragraphs"

    id = Column(String(36), primary_key=True, default=new_id)
    page_id = Column(String(36), ForeignKey("document_pages.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    order_index = Column(Integer, nullable=False)
    is_editing = Column(Boolean, nullable=False, default=False)
    formatting = Column(JSON, nullable=True)  # bold, italic, underline, ...
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    page = relationship("DocumentPage", back_populates="paragraphs")
