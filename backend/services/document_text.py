"""Plain text from uploaded resume documents (PDF, DOCX)."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

from config import settings

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx")


class DocumentError(ValueError):
    """Base class for documents that can't be turned into resume text."""


class DocumentTooLargeError(DocumentError):
    pass


class UnsupportedDocumentError(DocumentError):
    pass


class DocumentParseError(DocumentError):
    pass


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_resume_text(filename: str, content: bytes) -> str:
    """Validate an uploaded resume and return its text.

    Raises DocumentTooLargeError past the configured upload size,
    UnsupportedDocumentError for anything but PDF or DOCX, and
    DocumentParseError when the file can't be read.
    """
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise DocumentTooLargeError(f"File too large. Max size: {settings.max_upload_size_mb}MB")

    extension = PurePath(filename or "").suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedDocumentError("Only PDF and DOCX files are accepted")

    try:
        if extension == ".pdf":
            text = extract_text(content)
        else:
            text = extract_text_docx(content)
    except Exception as e:
        logger.warning("Could not parse %s: %s", filename, e)
        raise DocumentParseError(f"Could not parse {extension[1:].upper()} file") from e

    logger.debug("Extracted %d characters from %s", len(text), filename)
    return text
