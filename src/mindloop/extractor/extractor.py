"""
Module: extractor.extractor

Purpose:
    Turns an uploaded document into raw text. Plain text is decoded
    directly; every other format goes through an optional decoder and
    falls back to deterministic synthetic text on any failure.

Key Classes:
    - TextExtractor: Format dispatch with soft-fail fallback

Failure Contract:
    - Unsupported extension -> UnsupportedFormatError (hard)
    - Undecodable or empty .txt -> ExtractionError (hard)
    - Missing/failing/empty decoder for pdf/docx/pptx -> synthetic text (soft)

Dependencies:
    - extractor.decoders: Decoder type
    - extractor.synthetic: Fallback generator

Used By:
    - engine: Extraction stage
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from mindloop.config import ExtractionConfig
from mindloop.core.errors import ExtractionError
from mindloop.core.models.documents import Document, DocumentFormat

from .decoders import Decoder
from .synthetic import generate_synthetic_text

logger = logging.getLogger(__name__)


class TextExtractor:
    """
    Extracts text from document bytes.

    Holds no per-run state, so one instance can serve concurrent runs.

    Example:
        >>> extractor = TextExtractor()
        >>> doc = Document.from_name("notes.txt", 11)
        >>> extractor.extract(doc, b"hello world")
        'hello world'
    """

    def __init__(
        self,
        decoders: Optional[Mapping[DocumentFormat, Decoder]] = None,
        config: Optional[ExtractionConfig] = None,
    ) -> None:
        self._decoders = dict(decoders or {})
        self.config = config or ExtractionConfig()

    @property
    def decoder_formats(self) -> tuple[DocumentFormat, ...]:
        """Formats with a registered decoder."""
        return tuple(self._decoders)

    def extract(self, document: Document, data: bytes) -> str:
        """
        Extract raw text from a document.

        Args:
            document: Document metadata (name, declared extension)
            data: Complete file content

        Returns:
            Non-empty text

        Raises:
            UnsupportedFormatError: If the declared extension is unsupported
            ExtractionError: If plain-text content cannot be decoded
        """
        fmt = document.resolve_format()
        logger.debug(f"Extracting {document.name} as {fmt.label}")

        if fmt is DocumentFormat.TXT:
            return self._extract_plain_text(document, data)
        return self._extract_with_fallback(document, fmt, data)

    def _extract_plain_text(self, document: Document, data: bytes) -> str:
        try:
            text = data.decode(self.config.text_encoding)
        except UnicodeDecodeError as e:
            raise ExtractionError(f"Failed to read text file {document.name}: {e}") from e
        if not text.strip():
            raise ExtractionError(f"Text file {document.name} is empty")
        return text

    def _extract_with_fallback(
        self,
        document: Document,
        fmt: DocumentFormat,
        data: bytes,
    ) -> str:
        decoder = self._decoders.get(fmt)
        if decoder is not None:
            try:
                text = decoder(data)
            except Exception as e:
                logger.warning(
                    f"{fmt.label} decoder failed for {document.name}, using synthetic text: {e}",
                    extra={"document": document.name, "format": fmt.label, "error": str(e)},
                )
            else:
                if text and text.strip():
                    logger.info(f"Decoded {document.name} with {fmt.label} decoder")
                    return text
                logger.warning(
                    f"{fmt.label} decoder returned no text for {document.name}, "
                    "using synthetic text"
                )

        logger.info(f"Using synthetic {fmt.label} text for {document.name}")
        return generate_synthetic_text(document.name, fmt)
