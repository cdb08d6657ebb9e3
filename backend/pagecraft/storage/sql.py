"""
SQLAlchemy storage backend for Pagecraft.
One session per operation, taken from an injected sessionmaker.
"""
import enum
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, sessionmaker

from .. import models
from ..models.base import utcnow
from ..schemas import (
    Document,
    DocumentCreate,
    DocumentPage,
    DocumentPageCreate,
    Paragraph,
    ParagraphCreate,
    User,
    UserCreate,
)
from ..utils.logging import store_logger

IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}


def _apply_updates(row, updates: Dict[str, Any]) -> None:
    """Shallow-merge known columns onto an ORM row and bump updated_at"""
    columns = set(row.__table__.columns.keys())
    for field, value in updates.items():
        if field not in columns or field in IMMUTABLE_FIELDS:
            store_logger.debug(f"Ignoring non-updatable field {field}", extra={
                "table": row.__tablename__
            })
            continue
        if isinstance(value, enum.Enum):
            value = value.value
        setattr(row, field, value)
    row.updated_at = utcnow()


class SqlStore:
    """DocumentStore over the SQLAlchemy models"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    # ========== Users ==========

    def get_user(self, user_id: str) -> Optional[User]:
        with self._session() as db:
            user = db.get(models.User, user_id)
            return User.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._session() as db:
            user = db.query(models.User).filter(models.User.username == username).first()
            return User.model_validate(user) if user else None

    def create_user(self, data: UserCreate) -> User:
        with self._session() as db:
            user = models.User(username=data.username)
            db.add(user)
            db.commit()
            db.refresh(user)
            store_logger.info("Created user", extra={"user_id": user.id})
            return User.model_validate(user)

    # ========== Documents ==========

    def list_documents(self) -> List[Document]:
        with self._session() as db:
            rows = db.query(models.Document).order_by(models.Document.created_at).all()
            return [Document.model_validate(row) for row in rows]

    def get_document(self, document_id: str) -> Optional[Document]:
        with self._session() as db:
            document = db.get(models.Document, document_id)
            return Document.model_validate(document) if document else None

    def get_documents_by_owner(self, owner_id: str) -> List[Document]:
        with self._session() as db:
            rows = db.query(models.Document) \
                .filter(models.Document.owner_id == owner_id) \
                .order_by(models.Document.created_at) \
                .all()
            return [Document.model_validate(row) for row in rows]

    def create_document(self, data: DocumentCreate) -> Document:
        with self._session() as db:
            document = models.Document(
                title=data.title,
                filename=data.filename,
                owner_id=data.owner_id,
                total_pages=1,
                status=models.DocumentStatus.DRAFT.value
            )
            db.add(document)
            db.commit()
            db.refresh(document)
            store_logger.info("Created document", extra={"document_id": document.id})
            return Document.model_validate(document)

    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Document]:
        with self._session() as db:
            document = db.get(models.Document, document_id)
            if not document:
                return None
            _apply_updates(document, updates)
            db.commit()
            db.refresh(document)
            return Document.model_validate(document)

    def delete_document(self, document_id: str) -> bool:
        with self._session() as db:
            document = db.get(models.Document, document_id)
            if not document:
                return False
            # ORM cascade removes pages and their paragraphs
            db.delete(document)
            db.commit()
            store_logger.info("Deleted document", extra={"document_id": document_id})
            return True

    # ========== Pages ==========

    def get_document_pages(self, document_id: str) -> List[DocumentPage]:
        with self._session() as db:
            rows = db.query(models.DocumentPage) \
                .filter(models.DocumentPage.document_id == document_id) \
                .order_by(models.DocumentPage.page_number, models.DocumentPage.created_at) \
                .all()
            return [DocumentPage.model_validate(row) for row in rows]

    def get_document_page(self, page_id: str) -> Optional[DocumentPage]:
        with self._session() as db:
            page = db.get(models.DocumentPage, page_id)
            return DocumentPage.model_validate(page) if page else None

    def create_document_page(self, data: DocumentPageCreate) -> DocumentPage:
        with self._session() as db:
            page = models.DocumentPage(
                document_id=data.document_id,
                page_number=data.page_number,
                content=data.content
            )
            db.add(page)

            document = db.get(models.Document, data.document_id)
            if document:
                _apply_updates(document, {
                    "total_pages": max(document.total_pages, data.page_number)
                })

            db.commit()
            db.refresh(page)
            store_logger.info("Created page", extra={
                "page_id": page.id,
                "document_id": page.document_id,
                "page_number": page.page_number
            })
            return DocumentPage.model_validate(page)

    def update_document_page(self, page_id: str, updates: Dict[str, Any]) -> Optional[DocumentPage]:
        with self._session() as db:
            page = db.get(models.DocumentPage, page_id)
            if not page:
                return None
            _apply_updates(page, updates)
            db.commit()
            db.refresh(page)
            return DocumentPage.model_validate(page)

    def delete_document_page(self, page_id: str) -> bool:
        with self._session() as db:
            page = db.get(models.DocumentPage, page_id)
            if not page:
                return False
            deleted_paragraphs = len(page.paragraphs)
            db.delete(page)
            db.commit()
            store_logger.info("Deleted page", extra={
                "page_id": page_id,
                "deleted_paragraphs": deleted_paragraphs
            })
            return True

    # ========== Paragraphs ==========

    def get_paragraphs_by_document(self, document_id: str) -> List[Paragraph]:
        with self._session() as db:
            rows = db.query(models.Paragraph) \
                .join(models.DocumentPage, models.Paragraph.page_id == models.DocumentPage.id) \
                .filter(models.DocumentPage.document_id == document_id) \
                .order_by(
                    models.DocumentPage.page_number,
                    models.DocumentPage.created_at,
                    models.Paragraph.order_index
                ) \
                .all()
            return [Paragraph.model_validate(row) for row in rows]

    def get_paragraphs_by_page(self, page_id: str) -> List[Paragraph]:
        with self._session() as db:
            rows = db.query(models.Paragraph) \
                .filter(models.Paragraph.page_id == page_id) \
                .order_by(models.Paragraph.order_index) \
                .all()
            return [Paragraph.model_validate(row) for row in rows]

    def get_paragraph(self, paragraph_id: str) -> Optional[Paragraph]:
        with self._session() as db:
            paragraph = db.get(models.Paragraph, paragraph_id)
            return Paragraph.model_validate(paragraph) if paragraph else None

    def create_paragraph(self, data: ParagraphCreate) -> Paragraph:
        with self._session() as db:
            paragraph = models.Paragraph(
                page_id=data.page_id,
                content=data.content,
                order_index=data.order_index,
                formatting=data.formatting,
                is_editing=False
            )
            db.add(paragraph)
            db.commit()
            db.refresh(paragraph)
            return Paragraph.model_validate(paragraph)

    def update_paragraph(self, paragraph_id: str, updates: Dict[str, Any]) -> Optional[Paragraph]:
        with self._session() as db:
            paragraph = db.get(models.Paragraph, paragraph_id)
            if not paragraph:
                return None
            _apply_updates(paragraph, updates)
            db.commit()
            db.refresh(paragraph)
            return Paragraph.model_validate(paragraph)

    def delete_paragraph(self, paragraph_id: str) -> bool:
        with self._session() as db:
            paragraph = db.get(models.Paragraph, paragraph_id)
            if not paragraph:
                return False
            db.delete(paragraph)
            db.commit()
            return True
