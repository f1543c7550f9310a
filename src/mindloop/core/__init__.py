"""Core models and errors for the MindLoop pipeline."""

from .errors import (
    ExtractionError,
    MindloopError,
    NotInitializedError,
    ProcessingError,
    UnsupportedFormatError,
)

__all__ = [
    "ExtractionError",
    "MindloopError",
    "NotInitializedError",
    "ProcessingError",
    "UnsupportedFormatError",
]
