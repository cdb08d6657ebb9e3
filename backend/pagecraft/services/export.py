# backend/pagecraft/services/export.py
import io
import re
import unicodedata
from typing import List, Literal, Tuple
from urllib.parse import quote

from docx import Document as DocxDocument
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Paragraph as PdfParagraph, Spacer

from ..schemas import Document, Paragraph
from ..utils.html import to_plain_text, to_reportlab_markup
from ..utils.logging import service_logger

ExportFormat = Literal["pdf", "docx"]

MEDIA_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


# Characters kept out of the quoted ASCII filename parameter
UNSAFE_HEADER_CHARS = re.compile(r'[^A-Za-z0-9._\- ]')


class ExportError(Exception):
    """Rendering a document into a download format failed"""


class ExportService:
    """Renders a stored document's paragraphs to PDF or DOCX bytes"""

    def render(self, document: Document, paragraphs: List[Paragraph], fmt: ExportFormat) -> Tuple[bytes, str]:
        service_logger.info("Rendering document export", extra={
            "document_id": document.id,
            "format": fmt,
            "paragraph_count": len(paragraphs)
        })
        try:
            if fmt == "pdf":
                content = self.render_pdf(document, paragraphs)
            elif fmt == "docx":
                content = self.render_docx(document, paragraphs)
            else:
                raise ExportError(f"Unsupported export format: {fmt}")
        except ExportError:
            raise
        except Exception as e:
            service_logger.error(f"{fmt.upper()} generation failed", extra={
                "document_id": document.id,
                "error": str(e)
            })
            raise ExportError(f"{fmt.upper()} generation failed: {str(e)}") from e
        return content, MEDIA_TYPES[fmt]

    @staticmethod
    def render_pdf(document: Document, paragraphs: List[Paragraph]) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            rightMargin=72,
            leftMargin=72,
            topMargin=72,
            bottomMargin=72,
            title=document.title
        )

        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            'DocumentTitle',
            parent=styles['Heading1'],
            fontSize=18,
            spaceAfter=30
        )

        content = [PdfParagraph(document.title, title_style)]
        for paragraph in paragraphs:
            content.append(PdfParagraph(to_reportlab_markup(paragraph.content), styles['Normal']))
            content.append(Spacer(1, 12))

        doc.build(content)
        return buffer.getvalue()

    @staticmethod
    def render_docx(document: Document, paragraphs: List[Paragraph]) -> bytes:
        doc = DocxDocument()
        doc.add_heading(document.title, 0)
        for paragraph in paragraphs:
            doc.add_paragraph(to_plain_text(paragraph.content))

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def download_name(document: Document, fmt: ExportFormat) -> str:
        stem = document.filename.rsplit(".", 1)[0] if "." in document.filename else document.filename
        stem = re.sub(r'["\\/]', "_", stem) or "document"
        return f"{stem}.{fmt}"

    @classmethod
    def content_disposition(cls, document: Document, fmt: ExportFormat) -> str:
        """Attachment header with an ASCII fallback name and the UTF-8 name per RFC 6266"""
        filename = cls.download_name(document, fmt)
        stem = filename[: -(len(fmt) + 1)]
        ascii_stem = unicodedata.normalize("NFKD", stem).encode("ascii", "ignore").decode("ascii")
        ascii_stem = UNSAFE_HEADER_CHARS.sub("_", ascii_stem).strip("_ ") or "document"
        return (
            f'attachment; filename="{ascii_stem}.{fmt}"; '
            f"filename*=UTF-8''{quote(filename, safe='')}"
        )


export_service = ExportService()
