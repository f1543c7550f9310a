"""
Module: extractor

Purpose:
    Text extraction for uploaded documents. Plain text is read directly;
    pdf/docx/pptx use a pluggable decoder with a deterministic synthetic
    fallback.

Key Classes:
    - TextExtractor: Format dispatch and fallback

Key Functions:
    - default_decoders(): Decoder registry (python-docx, optional PyMuPDF)
    - generate_synthetic_text(): Placeholder text from a file name
"""

from .decoders import Decoder, decode_docx, decode_pdf, default_decoders
from .extractor import TextExtractor
from .synthetic import generate_synthetic_text, topic_from_filename

__all__ = [
    "Decoder",
    "TextExtractor",
    "decode_docx",
    "decode_pdf",
    "default_decoders",
    "generate_synthetic_text",
    "topic_from_filename",
]
