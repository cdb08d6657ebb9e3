# backend/pagecraft/api/paragraphs.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..schemas import Paragraph, ParagraphCreate, ParagraphUpdate
from ..storage import DocumentStore, get_store
from ..utils.logging import api_logger

router = APIRouter(prefix="/api/paragraphs", tags=["paragraphs"])


@router.post("", response_model=Paragraph, status_code=status.HTTP_201_CREATED)
async def create_paragraph(paragraph: ParagraphCreate, store: DocumentStore = Depends(get_store)):
    api_logger.info("Creating paragraph", extra={
        "page_id": paragraph.page_id,
        "order_index": paragraph.order_index
    })

    try:
        created = store.create_paragraph(paragraph)
        api_logger.info("Successfully created paragraph", extra={
            "paragraph_id": created.id,
            "page_id": created.page_id
        })
        return created

    except Exception as e:
        api_logger.error("Error creating paragraph", extra={
            "page_id": paragraph.page_id,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{paragraph_id}", response_model=Paragraph)
async def get_paragraph(paragraph_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.debug(f"Fetching paragraph {paragraph_id}", extra={"paragraph_id": paragraph_id})

    try:
        paragraph = store.get_paragraph(paragraph_id)
        if not paragraph:
            api_logger.warning(f"Paragraph {paragraph_id} not found", extra={"paragraph_id": paragraph_id})
            raise HTTPException(status_code=404, detail="Paragraph not found")
        return paragraph

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error(f"Failed to fetch paragraph: {str(e)}", extra={"paragraph_id": paragraph_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.patch("/{paragraph_id}", response_model=Paragraph)
async def update_paragraph(
        paragraph_id: str,
        paragraph_update: ParagraphUpdate,
        store: DocumentStore = Depends(get_store)
):
    updates = paragraph_update.model_dump(exclude_unset=True)
    api_logger.info(f"Updating paragraph {paragraph_id}", extra={
        "paragraph_id": paragraph_id,
        "update_fields": list(updates.keys())
    })

    try:
        updated = store.update_paragraph(paragraph_id, updates)
        if not updated:
            api_logger.warning(
                f"Paragraph {paragraph_id} not found for update",
                extra={"paragraph_id": paragraph_id}
            )
            raise HTTPException(status_code=404, detail="Paragraph not found")

        api_logger.info(f"Successfully updated paragraph {paragraph_id}", extra={
            "paragraph_id": paragraph_id,
            "updated_fields": list(updates.keys())
        })
        return updated

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error(f"Failed to update paragraph: {str(e)}", extra={"paragraph_id": paragraph_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{paragraph_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_paragraph(paragraph_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info(f"Deleting paragraph {paragraph_id}", extra={"paragraph_id": paragraph_id})

    try:
        if not store.delete_paragraph(paragraph_id):
            api_logger.warning(f"Paragraph {paragraph_id} not found for deletion")
            raise HTTPException(status_code=404, detail="Paragraph not found")

        api_logger.info(f"Successfully deleted paragraph {paragraph_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        api_logger.error(f"Failed to delete paragraph: {str(e)}", extra={"paragraph_id": paragraph_id})
        raise HTTPException(status_code=500, detail="Internal server error")
