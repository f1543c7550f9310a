"""
Module: documents

Purpose:
    Provides the Document dataclass describing one uploaded file and the
    DocumentFormat enum - the closed set of formats the extractor handles.

Key Functions:
    - Document.from_name(name, byte_size): Infer extension from file name
    - DocumentFormat.from_extension(ext): Resolve extension or fail

Dependencies:
    - dataclasses (std)
    - enum (std)
    - core.errors.UnsupportedFormatError

Used By:
    - extractor.extractor: Format dispatch
    - engine: Pipeline input and result metadata
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath

from ..errors import UnsupportedFormatError


class DocumentFormat(Enum):
    """
    Supported document formats, keyed by their file extension.

    Example:
        >>> DocumentFormat.from_extension(".DOCX")
        <DocumentFormat.DOCX: '.docx'>
    """

    PDF = ".pdf"
    DOCX = ".docx"
    TXT = ".txt"
    PPTX = ".pptx"

    @property
    def label(self) -> str:
        """Extension without the dot, e.g. "pdf"."""
        return self.value[1:]

    @classmethod
    def supported_extensions(cls) -> tuple[str, ...]:
        return tuple(fmt.value for fmt in cls)

    @classmethod
    def from_extension(cls, extension: str) -> DocumentFormat:
        """
        Resolve a declared extension to a format.

        Args:
            extension: Extension with or without leading dot, any case

        Returns:
            Matching DocumentFormat

        Raises:
            UnsupportedFormatError: If the extension is not supported
        """
        normalized = extension.strip().lower()
        if normalized and not normalized.startswith("."):
            normalized = f".{normalized}"
        for fmt in cls:
            if fmt.value == normalized:
                return fmt
        raise UnsupportedFormatError(normalized, cls.supported_extensions())


@dataclass(frozen=True)
class Document:
    """
    An uploaded document (immutable, ephemeral).

    Exists only for the duration of one pipeline run. The raw bytes are
    passed alongside, never stored here.

    Attributes:
        name: Original file name like "photosynthesis.txt"
        byte_size: Size of the content in bytes
        declared_extension: Lower-case extension with leading dot, may be
            empty when the name has none

    Invariants:
        - byte_size >= 0
        - name is not empty
    """

    name: str
    byte_size: int
    declared_extension: str

    def __post_init__(self) -> None:
        """Validate document on construction."""
        if not self.name:
            raise ValueError("Document name must not be empty")
        if self.byte_size < 0:
            raise ValueError(f"byte_size cannot be negative: {self.byte_size}")

    @classmethod
    def from_name(cls, name: str, byte_size: int) -> Document:
        """
        Build a document, inferring the extension from its name.

        Example:
            >>> Document.from_name("Cell_Biology.PDF", 2048).declared_extension
            '.pdf'
        """
        return cls(
            name=name,
            byte_size=byte_size,
            declared_extension=PurePath(name).suffix.lower(),
        )

    def resolve_format(self) -> DocumentFormat:
        """Resolve the declared extension, raising for unsupported types."""
        return DocumentFormat.from_extension(self.declared_extension)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "size": self.byte_size,
            "extension": self.declared_extension,
        }
