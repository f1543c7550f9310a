"""
Module: extractor.decoders

Purpose:
    Pluggable binary decoders behind the extractor's decoder seam. A
    decoder turns raw file bytes into text and may raise freely: the
    extractor treats every decoder failure as soft and falls back to
    synthetic text.

Key Functions:
    - decode_docx(): Paragraph text via python-docx
    - decode_pdf(): Page text via PyMuPDF (opt-in)
    - default_decoders(): Registry used by the Engine

Dependencies:
    - docx (python-docx): DOCX paragraph extraction
    - fitz (PyMuPDF): PDF text extraction

Used By:
    - extractor.extractor: Decoder lookup by format
    - engine: Builds the registry during load_resources()
"""

from __future__ import annotations

import io
import logging
from typing import Callable, Dict

import docx
import fitz

from mindloop.core.models.documents import DocumentFormat

logger = logging.getLogger(__name__)

# bytes -> text; may raise
Decoder = Callable[[bytes], str]


def decode_docx(data: bytes) -> str:
    """
    Extract paragraph text from a DOCX file.

    Args:
        data: Raw .docx bytes

    Returns:
        Paragraph texts joined by newlines (may be empty)
    """
    document = docx.Document(io.BytesIO(data))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def decode_pdf(data: bytes) -> str:
    """
    Extract plain text from every page of a PDF.

    Args:
        data: Raw .pdf bytes

    Returns:
        Page texts joined by blank lines (may be empty for scanned PDFs)
    """
    with fitz.open(stream=data, filetype="pdf") as doc:
        pages = [page.get_text("text").strip() for page in doc]
    logger.debug(f"Decoded {len(pages)} PDF pages")
    return "\n\n".join(page for page in pages if page)


def default_decoders(*, pdf: bool = False) -> Dict[DocumentFormat, Decoder]:
    """
    Build the decoder registry.

    DOCX always gets a real decoder. PDF gets one only when requested;
    otherwise PDF and PPTX uploads use synthetic text.

    Args:
        pdf: Register the PyMuPDF decoder for .pdf

    Returns:
        Mapping of format to decoder
    """
    decoders: Dict[DocumentFormat, Decoder] = {DocumentFormat.DOCX: decode_docx}
    if pdf:
        decoders[DocumentFormat.PDF] = decode_pdf
    return decoders
