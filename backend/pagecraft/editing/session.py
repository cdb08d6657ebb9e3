# backend/pagecraft/editing/session.py
from dataclasses import dataclass
from typing import Optional, Union

from ..schemas import Paragraph
from ..storage.base import DocumentStore
from ..utils.logging import service_logger


@dataclass(frozen=True)
class Viewing:
    """No paragraph is being edited"""


@dataclass(frozen=True)
class Editing:
    paragraph_id: str
    draft: str
    original: str  # last saved content, restored on cancel

    @property
    def is_dirty(self) -> bool:
        return self.draft != self.original


EditState = Union[Viewing, Editing]


class ParagraphEditor:
    """
    Inline editing for the paragraphs of one document view.

    At most one paragraph is in the editing state; saving writes the draft
    through the store, cancelling drops it.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.state: EditState = Viewing()

    @property
    def editing_id(self) -> Optional[str]:
        return self.state.paragraph_id if isinstance(self.state, Editing) else None

    def is_editing(self, paragraph_id: str) -> bool:
        return self.editing_id == paragraph_id

    def start_edit(self, paragraph_id: str) -> Editing:
        """Enter editing for `paragraph_id`; an unsaved draft of another paragraph is dropped"""
        paragraph = self.store.get_paragraph(paragraph_id)
        if paragraph is None:
            raise KeyError(f"Paragraph not found: {paragraph_id}")

        if isinstance(self.state, Editing) and self.state.paragraph_id != paragraph_id:
            service_logger.info("Switching edited paragraph, dropping draft", extra={
                "previous_paragraph_id": self.state.paragraph_id,
                "paragraph_id": paragraph_id,
                "discarded_changes": self.state.is_dirty
            })

        self.state = Editing(paragraph_id=paragraph_id, draft=paragraph.content, original=paragraph.content)
        return self.state

    def _require_editing(self) -> Editing:
        if not isinstance(self.state, Editing):
            raise RuntimeError("No paragraph is being edited")
        return self.state

    def update_draft(self, content: str) -> Editing:
        state = self._require_editing()
        self.state = Editing(paragraph_id=state.paragraph_id, draft=content, original=state.original)
        return self.state

    def save(self) -> Paragraph:
        """Persist the draft and return to viewing; on failure the draft is kept"""
        state = self._require_editing()
        updated = self.store.update_paragraph(state.paragraph_id, {"content": state.draft})
        if updated is None:
            service_logger.warning("Paragraph disappeared while editing", extra={
                "paragraph_id": state.paragraph_id
            })
            raise KeyError(f"Paragraph not found: {state.paragraph_id}")

        service_logger.info("Saved paragraph", extra={"paragraph_id": state.paragraph_id})
        self.state = Viewing()
        return updated

    def cancel(self) -> str:
        """Leave editing without saving; returns the content that stays in place"""
        state = self._require_editing()
        self.state = Viewing()
        return state.original
