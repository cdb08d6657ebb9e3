# backend/pagecraft/api/documents.py
import time
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..schemas import Document, DocumentCreate, DocumentUpdate, Paragraph
from ..services.export import ExportError, export_service
from ..storage import DocumentStore, get_store
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.get("", response_model=Document)
async def get_sample_document(store: DocumentStore = Depends(get_store)):
    """The first stored document; the editor opens it by default"""
    api_logger.info("Retrieving default document")

    try:
        documents = store.list_documents()
        if not documents:
            api_logger.warning("No documents found")
            raise HTTPException(status_code=404, detail="No documents found")
        return documents[0]

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Error retrieving default document", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("", response_model=Document, status_code=status.HTTP_201_CREATED)
async def create_document(document: DocumentCreate, store: DocumentStore = Depends(get_store)):
    api_logger.info("Creating new document", extra={
        "title": document.title,
        "owner_id": document.owner_id
    })

    try:
        start_time = time.time()
        created = store.create_document(document)

        execution_time = time.time() - start_time
        api_logger.info("Successfully created document", extra={
            "document_id": created.id,
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return created

    except Exception as e:
        api_logger.error("Error creating document", extra={
            "title": document.title,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{document_id}", response_model=Document)
async def get_document(document_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info("Retrieving document", extra={"document_id": document_id})

    try:
        start_time = time.time()
        document = store.get_document(document_id)
        if not document:
            api_logger.warning("Document not found", extra={"document_id": document_id})
            raise HTTPException(status_code=404, detail="Document not found")

        execution_time = time.time() - start_time
        api_logger.info("Successfully retrieved document", extra={
            "document_id": document_id,
            "total_pages": document.total_pages,
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return document

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Error retrieving document", extra={
            "document_id": document_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.patch("/{document_id}", response_model=Document)
async def update_document(
        document_id: str,
        document: DocumentUpdate,
        store: DocumentStore = Depends(get_store)
):
    updates = document.model_dump(exclude_unset=True)
    api_logger.info("Updating document", extra={
        "document_id": document_id,
        "update_fields": list(updates.keys())
    })

    try:
        updated = store.update_document(document_id, updates)
        if not updated:
            api_logger.warning("Document not found for update", extra={"document_id": document_id})
            raise HTTPException(status_code=404, detail="Document not found")

        api_logger.info("Successfully updated document", extra={"document_id": document_id})
        return updated

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Error updating document", extra={
            "document_id": document_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{document_id}/paragraphs", response_model=List[Paragraph])
async def list_document_paragraphs(document_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info("Listing document paragraphs", extra={"document_id": document_id})

    try:
        start_time = time.time()
        paragraphs = store.get_paragraphs_by_document(document_id)

        execution_time = time.time() - start_time
        api_logger.info("Successfully listed document paragraphs", extra={
            "document_id": document_id,
            "paragraph_count": len(paragraphs),
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return paragraphs

    except Exception as e:
        api_logger.error("Error listing document paragraphs", extra={
            "document_id": document_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{document_id}/export")
async def export_document(
        document_id: str,
        format: Literal["pdf", "docx"] = "pdf",
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Starting document export", extra={
        "document_id": document_id,
        "format": format
    })

    try:
        document = store.get_document(document_id)
        if not document:
            api_logger.warning("Document not found", extra={"document_id": document_id})
            raise HTTPException(status_code=404, detail="Document not found")

        paragraphs = store.get_paragraphs_by_document(document_id)
        if not paragraphs:
            api_logger.warning("Document has no paragraphs", extra={"document_id": document_id})
            raise HTTPException(status_code=400, detail="Document has no content")

        content, media_type = export_service.render(document, paragraphs, format)
        disposition = export_service.content_disposition(document, format)

        api_logger.info("Document export successful", extra={
            "document_id": document_id,
            "format": format,
            "paragraph_count": len(paragraphs),
            "size_bytes": len(content)
        })
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": disposition}
        )

    except HTTPException:
        raise
    except ExportError as e:
        api_logger.error("Export rendering failed", extra={
            "document_id": document_id,
            "format": format,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail=f"Export failed: {str(e)}")
    except Exception as e:
        api_logger.error("Unexpected error during export", extra={
            "document_id": document_id,
            "format": format,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")
