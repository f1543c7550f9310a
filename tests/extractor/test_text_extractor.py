"""
Unit Tests for TextExtractor

Tests for format dispatch, plain-text decoding and the soft decoder
fallback, using stub decoders.
"""

import logging

import pytest

from mindloop.config import ExtractionConfig
from mindloop.core.errors import ExtractionError, UnsupportedFormatError
from mindloop.core.models import Document, DocumentFormat
from mindloop.extractor import TextExtractor, generate_synthetic_text


def _doc(name: str, data: bytes) -> Document:
    return Document.from_name(name, len(data))


class TestPlainText:
    """Tests for .txt extraction."""

    def test_extract_when_utf8_then_returns_text(self):
        """Plain text is decoded as UTF-8 and returned verbatim."""
        data = "Osmosis moves water across membranes (café).".encode("utf-8")
        assert TextExtractor().extract(_doc("notes.txt", data), data) == data.decode("utf-8")

    def test_extract_when_invalid_utf8_then_raises(self):
        """Undecodable bytes are a hard failure."""
        data = b"\xff\xfe\xfa bad"
        with pytest.raises(ExtractionError, match="Failed to read text file notes.txt"):
            TextExtractor().extract(_doc("notes.txt", data), data)

    def test_extract_when_empty_then_raises(self):
        """Whitespace-only text is a hard failure."""
        data = b"  \n\n "
        with pytest.raises(ExtractionError, match="is empty"):
            TextExtractor().extract(_doc("notes.txt", data), data)

    def test_extract_when_custom_encoding_then_used(self):
        """The configured encoding is used for plain text."""
        data = "café notes".encode("latin-1")
        extractor = TextExtractor(config=ExtractionConfig(text_encoding="latin-1"))

        assert extractor.extract(_doc("notes.txt", data), data) == "café notes"


class TestFormatDispatch:
    """Tests for extension handling and decoder fallback."""

    def test_extract_when_unsupported_extension_then_raises(self):
        """.csv is outside the supported set."""
        with pytest.raises(UnsupportedFormatError):
            TextExtractor().extract(_doc("data.csv", b"a,b"), b"a,b")

    def test_extract_when_no_decoder_then_synthetic(self):
        """Formats without a decoder use synthetic text."""
        text = TextExtractor().extract(_doc("Cell_Biology.pptx", b"PK"), b"PK")
        assert text == generate_synthetic_text("Cell_Biology.pptx", DocumentFormat.PPTX)

    def test_extract_when_decoder_succeeds_then_returns_decoded(self):
        """A decoder's non-empty output wins over synthetic text."""
        extractor = TextExtractor({DocumentFormat.PDF: lambda data: "Decoded body"})
        assert extractor.extract(_doc("a.pdf", b"%PDF"), b"%PDF") == "Decoded body"

    def test_extract_when_decoder_raises_then_falls_back_and_warns(self, caplog):
        """Decoder exceptions are soft: logged, then synthetic text."""
        # Arrange
        def broken(data: bytes) -> str:
            raise RuntimeError("corrupt stream")

        extractor = TextExtractor({DocumentFormat.DOCX: broken})

        # Act
        with caplog.at_level(logging.WARNING, logger="mindloop.extractor.extractor"):
            text = extractor.extract(_doc("essay.docx", b"PK"), b"PK")

        # Assert
        assert text == generate_synthetic_text("essay.docx", DocumentFormat.DOCX)
        assert "corrupt stream" in caplog.text

    def test_extract_when_decoder_returns_blank_then_falls_back(self):
        """Blank decoder output is treated like a failure."""
        extractor = TextExtractor({DocumentFormat.PDF: lambda data: "   "})
        text = extractor.extract(_doc("scan.pdf", b"%PDF"), b"%PDF")

        assert text.startswith("# SCAN - COMPREHENSIVE GUIDE")

    def test_decoder_formats_when_registered_then_listed(self):
        """decoder_formats reports registered formats."""
        extractor = TextExtractor({DocumentFormat.DOCX: lambda data: "x"})
        assert extractor.decoder_formats == (DocumentFormat.DOCX,)
