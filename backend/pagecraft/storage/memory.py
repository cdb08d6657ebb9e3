"""
In-memory storage backend for Pagecraft.
Plain dicts keyed by id; suitable for demos and tests.
No locking: concurrent writers are last-write-wins.
"""
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..models.base import new_id, utcnow
from ..models.document import DocumentStatus
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

RecordT = TypeVar("RecordT", bound=BaseModel)

# Never touched by a partial update
IMMUTABLE_FIELDS = {"id", "created_at", "updated_at"}


def merge_updates(record: RecordT, updates: Dict[str, Any]) -> RecordT:
    """Shallow-merge known fields into a copy of `record` and bump updated_at"""
    model: Type[BaseModel] = type(record)
    accepted = {
        key: value for key, value in updates.items()
        if key in model.model_fields and key not in IMMUTABLE_FIELDS
    }
    ignored = set(updates) - set(accepted)
    if ignored:
        store_logger.debug("Ignoring non-updatable fields", extra={
            "record_type": model.__name__,
            "fields": sorted(ignored)
        })
    accepted["updated_at"] = utcnow()
    return record.model_copy(update=accepted, deep=True)


class MemoryStore:
    """Dict-backed DocumentStore. Returned records are copies."""

    def __init__(self):
        self.users: Dict[str, User] = {}
        self.documents: Dict[str, Document] = {}
        self.document_pages: Dict[str, DocumentPage] = {}
        self.paragraphs: Dict[str, Paragraph] = {}

    @staticmethod
    def _copy(record: Optional[RecordT]) -> Optional[RecordT]:
        return record.model_copy(deep=True) if record is not None else None

    # ========== Users ==========

    def get_user(self, user_id: str) -> Optional[User]:
        return self._copy(self.users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[User]:
        user = next((u for u in self.users.values() if u.username == username), None)
        return self._copy(user)

    def create_user(self, data: UserCreate) -> User:
        user = User(id=new_id(), username=data.username)
        self.users[user.id] = user
        store_logger.info("Created user", extra={"user_id": user.id})
        return self._copy(user)

    # ========== Documents ==========

    def list_documents(self) -> List[Document]:
        return [self._copy(doc) for doc in self.documents.values()]

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._copy(self.documents.get(document_id))

    def get_documents_by_owner(self, owner_id: str) -> List[Document]:
        return [self._copy(doc) for doc in self.documents.values() if doc.owner_id == owner_id]

    def create_document(self, data: DocumentCreate) -> Document:
        now = utcnow()
        document = Document(
            id=new_id(),
            title=data.title,
            filename=data.filename,
            owner_id=data.owner_id,
            total_pages=1,
            status=DocumentStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
        self.documents[document.id] = document
        store_logger.info("Created document", extra={"document_id": document.id})
        return self._copy(document)

    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Document]:
        document = self.documents.get(document_id)
        if document is None:
            return None
        updated = merge_updates(document, updates)
        self.documents[document_id] = updated
        return self._copy(updated)

    def delete_document(self, document_id: str) -> bool:
        if document_id not in self.documents:
            return False
        for page in [p for p in self.document_pages.values() if p.document_id == document_id]:
            self.delete_document_page(page.id)
        del self.documents[document_id]
        store_logger.info("Deleted document", extra={"document_id": document_id})
        return True

    # ========== Pages ==========

    def _sorted_pages(self, document_id: str) -> List[DocumentPage]:
        pages = [p for p in self.document_pages.values() if p.document_id == document_id]
        return sorted(pages, key=lambda p: p.page_number)

    def get_document_pages(self, document_id: str) -> List[DocumentPage]:
        return [self._copy(page) for page in self._sorted_pages(document_id)]

    def get_document_page(self, page_id: str) -> Optional[DocumentPage]:
        return self._copy(self.document_pages.get(page_id))

    def create_document_page(self, data: DocumentPageCreate) -> DocumentPage:
        now = utcnow()
        page = DocumentPage(
            id=new_id(),
            document_id=data.document_id,
            page_number=data.page_number,
            content=data.content,
            created_at=now,
            updated_at=now,
        )
        self.document_pages[page.id] = page

        document = self.documents.get(data.document_id)
        if document is not None:
            self.update_document(document.id, {
                "total_pages": max(document.total_pages, data.page_number)
            })

        store_logger.info("Created page", extra={
            "page_id": page.id,
            "document_id": page.document_id,
            "page_number": page.page_number
        })
        return self._copy(page)

    def update_document_page(self, page_id: str, updates: Dict[str, Any]) -> Optional[DocumentPage]:
        page = self.document_pages.get(page_id)
        if page is None:
            return None
        updated = merge_updates(page, updates)
        self.document_pages[page_id] = updated
        return self._copy(updated)

    def delete_document_page(self, page_id: str) -> bool:
        if page_id not in self.document_pages:
            return False

        orphaned = [p.id for p in self.paragraphs.values() if p.page_id == page_id]
        for paragraph_id in orphaned:
            del self.paragraphs[paragraph_id]
        del self.document_pages[page_id]

        store_logger.info("Deleted page", extra={
            "page_id": page_id,
            "deleted_paragraphs": len(orphaned)
        })
        return True

    # ========== Paragraphs ==========

    def get_paragraphs_by_document(self, document_id: str) -> List[Paragraph]:
        page_rank = {page.id: rank for rank, page in enumerate(self._sorted_pages(document_id))}
        paragraphs = [p for p in self.paragraphs.values() if p.page_id in page_rank]
        paragraphs.sort(key=lambda p: (page_rank[p.page_id], p.order_index))
        return [self._copy(p) for p in paragraphs]

    def get_paragraphs_by_page(self, page_id: str) -> List[Paragraph]:
        paragraphs = [p for p in self.paragraphs.values() if p.page_id == page_id]
        return [self._copy(p) for p in sorted(paragraphs, key=lambda p: p.order_index)]

    def get_paragraph(self, paragraph_id: str) -> Optional[Paragraph]:
        return self._copy(self.paragraphs.get(paragraph_id))

    def create_paragraph(self, data: ParagraphCreate) -> Paragraph:
        now = utcnow()
        paragraph = Paragraph(
            id=new_id(),
            page_id=data.page_id,
            content=data.content,
            order_index=data.order_index,
            formatting=data.formatting,
            is_editing=False,
            created_at=now,
            updated_at=now,
        )
        self.paragraphs[paragraph.id] = paragraph
        return self._copy(paragraph)

    def update_paragraph(self, paragraph_id: str, updates: Dict[str, Any]) -> Optional[Paragraph]:
        paragraph = self.paragraphs.get(paragraph_id)
        if paragraph is None:
            return None
        updated = merge_updates(paragraph, updates)
        self.paragraphs[paragraph_id] = updated
        return self._copy(updated)

    def delete_paragraph(self, paragraph_id: str) -> bool:
        return self.paragraphs.pop(paragraph_id, None) is not None
