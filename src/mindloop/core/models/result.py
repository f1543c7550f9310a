"""
Module: result

Purpose:
    Provides PipelineResult - the sole externally visible artifact of a
    pipeline run. Question totals are calculated from the levels, never
    stored.

Key Classes:
    - PipelineResult: Aggregated output of one run (immutable)

Dependencies:
    - dataclasses (std)
    - functools (std)

Used By:
    - engine: Builds the result
    - storage.snapshot: Records results
    - cli: Prints summaries
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from .documents import Document
from .levels import Level
from .profile import AnalysisProfile, DifficultyBand, ReadingLevel


MAX_OVERALL_CONFIDENCE = 0.98


@dataclass(frozen=True)
class PipelineResult:
    """
    Complete pipeline result (immutable).

    Attributes:
        success: Always True for a returned result; failures raise
        document: Metadata of the processed document
        elapsed_seconds: Wall-clock duration of the run
        overall_confidence: Profile-derived confidence in [0, 0.98]
        levels: Ordered curriculum levels with questions
        profile: Analysis profile the curriculum was built from

    Invariants:
        - 0 <= overall_confidence <= 0.98
        - level orders are strictly increasing

    Example:
        >>> result = engine.process(document, data)
        >>> result.total_question_count
        28
        >>> result.elapsed_time_label
        '0.1s'
    """

    success: bool
    document: Document
    elapsed_seconds: float
    overall_confidence: float
    levels: tuple[Level, ...]
    profile: AnalysisProfile

    def __post_init__(self) -> None:
        """Validate result on construction."""
        if not (0.0 <= self.overall_confidence <= MAX_OVERALL_CONFIDENCE):
            raise ValueError(f"overall_confidence out of range: {self.overall_confidence}")
        if self.elapsed_seconds < 0:
            raise ValueError(f"elapsed_seconds cannot be negative: {self.elapsed_seconds}")
        orders = [level.order for level in self.levels]
        if any(b <= a for a, b in zip(orders, orders[1:])):
            raise ValueError(f"Level orders must be strictly increasing: {orders}")

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def total_question_count(self) -> int:
        """Sum of per-level question counts."""
        return sum(level.question_count for level in self.levels)

    @property
    def elapsed_time_label(self) -> str:
        return f"{self.elapsed_seconds:.1f}s"

    # Flattened profile accessors

    @property
    def word_count(self) -> int:
        return self.profile.word_count

    @property
    def key_terms(self) -> tuple[str, ...]:
        return self.profile.key_terms

    @property
    def topics(self) -> tuple[str, ...]:
        return self.profile.topics

    @property
    def difficulty(self) -> DifficultyBand:
        return self.profile.difficulty

    @property
    def reading_level(self) -> ReadingLevel:
        return self.profile.reading_level

    @property
    def summary(self) -> str:
        return self.profile.summary

    def to_dict(self) -> dict:
        """
        Serialize to the JSON shape consumed by the UI layer.

        Returns:
            Dict representation with levels and flattened profile fields
        """
        return {
            "success": self.success,
            "file_name": self.document.name,
            "file_size": self.document.byte_size,
            "processing_time": self.elapsed_time_label,
            "confidence": self.overall_confidence,
            "levels": [level.to_dict() for level in self.levels],
            "total_questions": self.total_question_count,
            "key_terms": list(self.key_terms),
            "difficulty": self.difficulty.value,
            "summary": self.summary,
            "metadata": {
                "word_count": self.word_count,
                "reading_level": self.reading_level.value,
                "topics": list(self.topics),
                "structure": self.profile.structure.to_dict(),
                "concepts": list(self.profile.concepts),
            },
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"PipelineResult({self.document.name!r}, levels={len(self.levels)}, "
            f"questions={self.total_question_count}, confidence={self.overall_confidence})"
        )
