# backend/pagecraft/storage/seed.py
from ..schemas import (
    Document,
    DocumentCreate,
    DocumentPageCreate,
    ParagraphCreate,
    UserCreate,
)
from ..utils.logging import store_logger
from .base import DocumentStore

SAMPLE_USERNAME = "demo_user"
SAMPLE_TITLE = "Service Agreement Contract"
SAMPLE_FILENAME = "Contract_Agreement_v3.pdf"

# One list of paragraph bodies per page
SAMPLE_PAGES = [
    [
        "<strong>1. PARTIES</strong><br><br>This Agreement is entered into between the Service Provider and the Client as identified in the signature section below.",
        "<strong>1.1 SERVICE PROVIDER</strong><br><br>The Service Provider agrees to perform the services outlined in this agreement with professional competence and in accordance with the highest standards of the industry.",
    ],
    [
        "<strong>2. SCOPE OF SERVICES</strong><br><br>This Agreement outlines the professional services to be provided by the Service Provider to the Client. The services include but are not limited to consulting, implementation, and ongoing support for digital transformation initiatives.",
        "The Service Provider agrees to maintain the highest standards of professional conduct and confidentiality throughout the duration of this agreement. All work performed shall be completed in accordance with industry best practices and applicable regulatory requirements.",
        "<strong>3. PAYMENT TERMS</strong><br><br>Payment for services rendered under this Agreement shall be made according to the schedule outlined in Exhibit B. All invoices are due within thirty (30) days of receipt unless otherwise specified.",
    ],
    [
        "<strong>4. INTELLECTUAL PROPERTY</strong><br><br>All intellectual property rights in any work product created or developed by the Service Provider in the course of providing services under this Agreement shall remain the exclusive property of the Client, unless otherwise specified in writing.",
        "<strong>5. TERMINATION</strong><br><br>Either party may terminate this Agreement with thirty (30) days written notice to the other party. Upon termination, all work product and materials shall be delivered to the Client.",
    ],
]


def seed_sample_data(store: DocumentStore) -> Document:
    """Load the demo user and the sample contract; reuses the user when already present"""
    user = store.get_user_by_username(SAMPLE_USERNAME) or store.create_user(
        UserCreate(username=SAMPLE_USERNAME)
    )
    document = store.create_document(DocumentCreate(
        title=SAMPLE_TITLE,
        filename=SAMPLE_FILENAME,
        owner_id=user.id
    ))

    for page_number, paragraphs in enumerate(SAMPLE_PAGES, start=1):
        page = store.create_document_page(DocumentPageCreate(
            document_id=document.id,
            page_number=page_number,
            content=[]
        ))
        for order_index, content in enumerate(paragraphs):
            store.create_paragraph(ParagraphCreate(
                page_id=page.id,
                content=content,
                order_index=order_index
            ))

    store_logger.info("Seeded sample document", extra={
        "document_id": document.id,
        "page_count": len(SAMPLE_PAGES)
    })
    return store.get_document(document.id)
