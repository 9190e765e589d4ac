"""
Text extraction from uploaded resume documents.

Main function:
    decode_document: bytes + MIME type -> plain text

Helper functions:
    check_upload: Reject unsupported types and oversized files up front.
    pdf_text: Text of the first pages of a PDF (pdfplumber).
    docx_text: Paragraph text of a DOCX file (python-docx).
"""

from io import BytesIO

import pdfplumber
from docx import Document
from loguru import logger

from atsresume.contexts.intake.exceptions import DocumentDecodeError, UnsupportedFormatError

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"

SUPPORTED_MIME_TYPES = (PDF_MIME, DOCX_MIME, TEXT_MIME)

MAX_FILE_SIZE = 10 * 1024 * 1024
MAX_PDF_PAGES = 10

# Extension -> MIME type, for callers that only know the file name
MIME_BY_SUFFIX = {
    ".pdf": PDF_MIME,
    ".docx": DOCX_MIME,
    ".txt": TEXT_MIME,
}


def check_upload(data: bytes, mime_type: str, file_name: str = None) -> None:
    """
    Raise UnsupportedFormatError for uploads that cannot be parsed at all.

    Raises:
        UnsupportedFormatError: Type not PDF/DOCX/plain text, or over 10MB
    """
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise UnsupportedFormatError(mime_type, file_name)
    if len(data) > MAX_FILE_SIZE:
        raise UnsupportedFormatError(mime_type, file_name, reason="File size must be less than 10MB.")


def pdf_text(data: bytes, max_pages: int = MAX_PDF_PAGES) -> str:
    """Text of the first `max_pages` pages, one page per block."""
    with pdfplumber.open(BytesIO(data)) as pdf:
        pages = pdf.pages[:max_pages]
        return "\n".join(page.extract_text() or "" for page in pages)


def docx_text(data: bytes) -> str:
    """Non-blank paragraph text, one paragraph per line."""
    doc = Document(BytesIO(data))
    return "\n".join(para.text for para in doc.paragraphs if para.text.strip())


def decode_document(data: bytes, mime_type: str, file_name: str = None) -> str:
    """
    Extract plain text from an uploaded document.

    Args:
        data: Raw file bytes
        mime_type: Declared MIME type
        file_name: Original file name (for messages only)

    Returns:
        Extracted text (may be empty for image-only PDFs)

    Raises:
        UnsupportedFormatError: See check_upload()
        DocumentDecodeError: The document library could not read the file
    """
    check_upload(data, mime_type, file_name)

    try:
        if mime_type == PDF_MIME:
            text = pdf_text(data)
        elif mime_type == DOCX_MIME:
            text = docx_text(data)
        else:
            text = data.decode("utf-8", errors="replace")
    except Exception as e:
        raise DocumentDecodeError("Failed to extract text from document", file_name, original_error=e) from e

    logger.debug(f"Decoded {len(data)} bytes of {mime_type} into {len(text)} chars")
    return text
