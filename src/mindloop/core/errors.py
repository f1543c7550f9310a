"""
Module: core.errors

Purpose:
    Exception hierarchy shared by every pipeline stage. Hard failures are
    surfaced to the caller; soft decoder failures never reach this layer.

Key Classes:
    - MindloopError: Base class for all toolkit errors
    - UnsupportedFormatError: Declared extension outside the supported set
    - ExtractionError: Plain-text content could not be read
    - NotInitializedError: Engine used before resources were loaded
    - ProcessingError: Wraps an unexpected failure inside a stage

Used By:
    - extractor.extractor, engine, cli
"""

from __future__ import annotations

from typing import Optional


class MindloopError(Exception):
    """Base class for toolkit errors."""
    pass


class UnsupportedFormatError(MindloopError):
    """Raised when a document's extension is not one we can extract."""

    def __init__(self, extension: str, supported: tuple[str, ...] = ()):
        shown = extension or "<none>"
        message = f"Unsupported file type: {shown}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)
        self.extension = extension
        self.supported = supported


class ExtractionError(MindloopError):
    """Raised when plain-text content cannot be decoded."""
    pass


class NotInitializedError(MindloopError):
    """Raised when the engine is asked to process before it is ready."""
    pass


class ProcessingError(MindloopError):
    """
    Unexpected failure inside a pipeline stage.

    The message always carries the original cause so callers can show
    it without digging through ``__cause__``.

    Attributes:
        stage: Name of the stage that failed (e.g. "analysis")
        cause: The original exception
    """

    def __init__(self, stage: str, cause: Optional[BaseException] = None):
        detail = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        super().__init__(f"Processing failed during {stage}: {detail}")
        self.stage = stage
        self.cause = cause
