"""
Repository interface for Pagecraft.
Defines the contract every storage backend (in-memory, SQL, ...) implements,
so routes and editing services never depend on a concrete backend.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

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


@runtime_checkable
class DocumentStore(Protocol):
    """
    CRUD contract over users, documents, pages and paragraphs.

    Conventions shared by all implementations:
    - getters and updaters return None for an unknown id
    - deleters return False for an unknown id
    - updates are a shallow merge of the given keys and bump `updated_at`
    - parent references are not checked
    """

    # ========== Users ==========

    def get_user(self, user_id: str) -> Optional[User]:
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    def create_user(self, data: UserCreate) -> User:
        ...

    # ========== Documents ==========

    def list_documents(self) -> List[Document]:
        """All documents in creation order."""
        ...

    def get_document(self, document_id: str) -> Optional[Document]:
        ...

    def get_documents_by_owner(self, owner_id: str) -> List[Document]:
        ...

    def create_document(self, data: DocumentCreate) -> Document:
        """New document with total_pages=1 and status draft."""
        ...

    def update_document(self, document_id: str, updates: Dict[str, Any]) -> Optional[Document]:
        ...

    def delete_document(self, document_id: str) -> bool:
        """Remove a document together with its pages and their paragraphs."""
        ...

    # ========== Pages ==========

    def get_document_pages(self, document_id: str) -> List[DocumentPage]:
        """Pages of a document sorted by page_number."""
        ...

    def get_document_page(self, page_id: str) -> Optional[DocumentPage]:
        ...

    def create_document_page(self, data: DocumentPageCreate) -> DocumentPage:
        """
        Insert a page. When the parent document exists its total_pages becomes
        max(total_pages, page_number).
        """
        ...

    def update_document_page(self, page_id: str, updates: Dict[str, Any]) -> Optional[DocumentPage]:
        ...

    def delete_document_page(self, page_id: str) -> bool:
        """Remove a page and every paragraph whose page_id matches it."""
        ...

    # ========== Paragraphs ==========

    def get_paragraphs_by_document(self, document_id: str) -> List[Paragraph]:
        """Paragraphs of all pages, ordered by page number then order_index."""
        ...

    def get_paragraphs_by_page(self, page_id: str) -> List[Paragraph]:
        ...

    def get_paragraph(self, paragraph_id: str) -> Optional[Paragraph]:
        ...

    def create_paragraph(self, data: ParagraphCreate) -> Paragraph:
        ...

    def update_paragraph(self, paragraph_id: str, updates: Dict[str, Any]) -> Optional[Paragraph]:
        ...

    def delete_paragraph(self, paragraph_id: str) -> bool:
        ...
