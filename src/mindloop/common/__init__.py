"""Shared constants: scoring thresholds and fixed vocabularies."""

from .thresholds import (
    CONFIDENCE_THRESHOLDS,
    DIFFICULTY_THRESHOLDS,
    READABILITY_THRESHOLDS,
    ConfidenceThresholds,
    DifficultyThresholds,
    ReadabilityThresholds,
)
from .vocabulary import (
    CONCEPT_MARKERS,
    FALLBACK_LEVEL_TOPIC,
    FALLBACK_QUESTION_TOPIC,
    TECHNICAL_TERMS,
    TOPIC_VOCABULARY,
)

__all__ = [
    "CONCEPT_MARKERS",
    "CONFIDENCE_THRESHOLDS",
    "ConfidenceThresholds",
    "DIFFICULTY_THRESHOLDS",
    "DifficultyThresholds",
    "FALLBACK_LEVEL_TOPIC",
    "FALLBACK_QUESTION_TOPIC",
    "READABILITY_THRESHOLDS",
    "ReadabilityThresholds",
    "TECHNICAL_TERMS",
    "TOPIC_VOCABULARY",
]
