# backend/pagecraft/api/pages.py
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..schemas import (
    DocumentPage,
    DocumentPageCreate,
    DocumentPageUpdate,
    PageCreateRequest,
    Paragraph,
)
from ..storage import DocumentStore, get_store
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["pages"])


def _page_in_document(store: DocumentStore, document_id: str, page_id: str) -> DocumentPage:
    page = store.get_document_page(page_id)
    if not page or page.document_id != document_id:
        api_logger.warning(f"Page {page_id} not found", extra={
            "page_id": page_id,
            "document_id": document_id
        })
        raise HTTPException(status_code=404, detail="Page not found")
    return page


@router.get("/documents/{document_id}/pages", response_model=List[DocumentPage])
async def list_document_pages(document_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info("Listing document pages", extra={"document_id": document_id})

    try:
        start_time = time.time()
        pages = store.get_document_pages(document_id)

        execution_time = time.time() - start_time
        api_logger.info("Successfully listed document pages", extra={
            "document_id": document_id,
            "page_count": len(pages),
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return pages

    except Exception as e:
        api_logger.error("Error listing document pages", extra={
            "document_id": document_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/documents/{document_id}/pages",
    response_model=DocumentPage,
    status_code=status.HTTP_201_CREATED
)
async def create_document_page(
        document_id: str,
        page: PageCreateRequest,
        store: DocumentStore = Depends(get_store)
):
    api_logger.info(f"Creating page {page.page_number} for document {document_id}", extra={
        "document_id": document_id,
        "page_number": page.page_number
    })

    try:
        start_time = time.time()
        created = store.create_document_page(DocumentPageCreate(
            document_id=document_id,
            page_number=page.page_number,
            content=page.content
        ))

        execution_time = time.time() - start_time
        api_logger.info(f"Page {created.id} created successfully", extra={
            "page_id": created.id,
            "document_id": document_id,
            "page_number": created.page_number,
            "execution_time_ms": round(execution_time * 1000, 2)
        })
        return created

    except Exception as e:
        api_logger.error("Error creating page", extra={
            "document_id": document_id,
            "error_type": type(e).__name__,
            "error_message": str(e)
        }, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.patch("/documents/{document_id}/pages/{page_id}", response_model=DocumentPage)
async def update_document_page(
        document_id: str,
        page_id: str,
        page_update: DocumentPageUpdate,
        store: DocumentStore = Depends(get_store)
):
    updates = page_update.model_dump(exclude_unset=True)
    api_logger.info(f"Updating page {page_id}", extra={
        "page_id": page_id,
        "update_fields": list(updates.keys())
    })

    try:
        _page_in_document(store, document_id, page_id)
        updated = store.update_document_page(page_id, updates)
        if not updated:
            raise HTTPException(status_code=404, detail="Page not found")

        api_logger.info(f"Successfully updated page {page_id}", extra={"page_id": page_id})
        return updated

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error(f"Failed to update page: {str(e)}", extra={"page_id": page_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/documents/{document_id}/pages/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document_page(
        document_id: str,
        page_id: str,
        store: DocumentStore = Depends(get_store)
):
    api_logger.info(f"Deleting page {page_id}", extra={
        "page_id": page_id,
        "document_id": document_id
    })

    try:
        _page_in_document(store, document_id, page_id)
        if not store.delete_document_page(page_id):
            raise HTTPException(status_code=404, detail="Page not found")

        api_logger.info(f"Successfully deleted page {page_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error(f"Failed to delete page: {str(e)}", extra={"page_id": page_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/pages/{page_id}/paragraphs", response_model=List[Paragraph])
async def list_page_paragraphs(page_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.debug(f"Listing paragraphs of page {page_id}", extra={"page_id": page_id})

    try:
        if not store.get_document_page(page_id):
            api_logger.warning(f"Page {page_id} not found", extra={"page_id": page_id})
            raise HTTPException(status_code=404, detail="Page not found")
        return store.get_paragraphs_by_page(page_id)

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error("Error listing page paragraphs", extra={
            "page_id": page_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")
