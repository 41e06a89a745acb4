"""
Text extraction from generated documents.

Helper functions:
    page_count: Quick PDF page count without full extraction.
    pdf_text: Text lines per page (pdfplumber).
    docx_text: Paragraph texts in document order (python-docx).

Inputs may be raw bytes or a path to the file.
"""

from io import BytesIO
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

import pdfplumber
from docx import Document
from PyPDF2 import PdfReader

DocumentSource = Union[bytes, str, Path]


def _open(source: DocumentSource) -> Union[BinaryIO, str]:
    if isinstance(source, (bytes, bytearray)):
        return BytesIO(source)
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")
    return str(path)


def page_count(pdf: DocumentSource) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(_open(pdf))
        return len(reader.pages)
    except Exception:
        return None


def pdf_text(pdf: DocumentSource) -> List[List[str]]:
    """
    Extract text lines from every page of a PDF.

    Returns:
        One list of text lines per page, top-to-bottom
    """
    pages = []
    with pdfplumber.open(_open(pdf)) as document:
        for page in document.pages:
            text = page.extract_text() or ""
            pages.append(text.splitlines())
    return pages


def docx_text(docx: DocumentSource) -> List[str]:
    """
    Extract paragraph texts from a DOCX document.

    Table cell paragraphs come first (the resume header is the only table and
    sits at the top of the body), then body paragraphs in order.
    """
    document = Document(_open(docx))

    lines = []
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                lines.extend(paragraph.text for paragraph in cell.paragraphs)
    lines.extend(paragraph.text for paragraph in document.paragraphs)
    return lines
