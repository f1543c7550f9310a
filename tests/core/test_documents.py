"""
Unit Tests for Document Model

Tests for Document metadata and DocumentFormat resolution.
"""

import pytest

from mindloop.core.errors import UnsupportedFormatError
from mindloop.core.models import Document, DocumentFormat


class TestDocumentFormat:
    """Tests for DocumentFormat resolution."""

    def test_from_extension_when_upper_case_then_normalizes(self):
        """Extensions should resolve regardless of case."""
        assert DocumentFormat.from_extension(".DOCX") is DocumentFormat.DOCX

    def test_from_extension_when_missing_dot_then_resolves(self):
        """A bare extension should be accepted."""
        assert DocumentFormat.from_extension("pdf") is DocumentFormat.PDF

    def test_from_extension_when_unsupported_then_raises(self):
        """Unknown extensions should raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError, match=r"Unsupported file type: \.csv"):
            DocumentFormat.from_extension(".csv")

    def test_from_extension_when_empty_then_raises(self):
        """A missing extension is unsupported."""
        with pytest.raises(UnsupportedFormatError, match="<none>"):
            DocumentFormat.from_extension("")

    def test_supported_extensions_when_called_then_lists_four_formats(self):
        """The supported set is pdf, docx, txt, pptx."""
        assert set(DocumentFormat.supported_extensions()) == {".pdf", ".docx", ".txt", ".pptx"}

    def test_label_when_called_then_drops_dot(self):
        """label should be the extension without the dot."""
        assert DocumentFormat.PPTX.label == "pptx"


class TestDocument:
    """Tests for Document dataclass."""

    def test_from_name_when_mixed_case_extension_then_lower_cases(self):
        """from_name() should infer a lower-case extension."""
        doc = Document.from_name("Cell_Biology.PDF", 2048)

        assert doc.declared_extension == ".pdf"
        assert doc.byte_size == 2048
        assert doc.resolve_format() is DocumentFormat.PDF

    def test_from_name_when_no_extension_then_empty(self):
        """Names without a suffix have an empty extension."""
        doc = Document.from_name("README", 10)

        assert doc.declared_extension == ""
        with pytest.raises(UnsupportedFormatError):
            doc.resolve_format()

    def test_init_when_negative_size_then_raises(self):
        """Negative sizes should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            Document("a.txt", -1, ".txt")

    def test_init_when_empty_name_then_raises(self):
        """Empty names should raise ValueError."""
        with pytest.raises(ValueError, match="must not be empty"):
            Document("", 0, "")

    def test_to_dict_when_called_then_has_name_size_extension(self):
        """to_dict() should expose name, size and extension."""
        doc = Document.from_name("photosynthesis.txt", 300)

        assert doc.to_dict() == {"name": "photosynthesis.txt", "size": 300, "extension": ".txt"}
