"""
Module: profile

Purpose:
    Provides the AnalysisProfile dataclass - the immutable result of the
    content analysis stage - together with its enums and structure flags.

Key Classes:
    - DifficultyBand: beginner / intermediate / advanced
    - ReadingLevel: Six ordered Flesch labels
    - StructureFlags: Heading, bullet and numbered-list markers
    - AnalysisProfile: Complete profile of one document

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - analysis.analyzer: Produces profiles
    - builder.curriculum, builder.questions: Consume profiles
    - core.models.result: Flattened into PipelineResult
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DifficultyBand(Enum):
    """Estimated difficulty of a document."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ReadingLevel(Enum):
    """Flesch reading-ease labels, ordered from easiest to hardest."""

    VERY_EASY = "Very Easy"
    EASY = "Easy"
    FAIRLY_EASY = "Fairly Easy"
    STANDARD = "Standard"
    FAIRLY_DIFFICULT = "Fairly Difficult"
    DIFFICULT = "Difficult"


@dataclass(frozen=True)
class StructureFlags:
    """
    Structural markers detected at the start of a document.

    Attributes:
        has_headings: Text opens with "#" or "**"
        has_bullet_points: Text opens with "-", "*" or "•"
        has_numbered_lists: Text opens with a numeral followed by "."
        paragraph_count: Number of blank-line separated blocks
    """

    has_headings: bool = False
    has_bullet_points: bool = False
    has_numbered_lists: bool = False
    paragraph_count: int = 0

    def __post_init__(self) -> None:
        if self.paragraph_count < 0:
            raise ValueError(f"paragraph_count cannot be negative: {self.paragraph_count}")

    def to_dict(self) -> dict:
        return {
            "has_headings": self.has_headings,
            "has_bullet_points": self.has_bullet_points,
            "has_numbered_lists": self.has_numbered_lists,
            "paragraph_count": self.paragraph_count,
        }


@dataclass(frozen=True)
class AnalysisProfile:
    """
    Textual profile of one document (immutable).

    Created once per pipeline run and owned by that run.

    Attributes:
        word_count: Whitespace-delimited token count
        key_terms: Content words ranked by descending frequency
        topics: Tags drawn from the fixed topic vocabulary
        difficulty: Estimated difficulty band
        reading_level: Flesch reading-ease label
        summary: Up to three leading sentences
        structure: Structural markers
        concepts: Definition-like lines

    Invariants:
        - word_count >= 0
        - len(key_terms) <= 15
        - len(concepts) <= 10
    """

    word_count: int
    key_terms: tuple[str, ...]
    topics: tuple[str, ...]
    difficulty: DifficultyBand
    reading_level: ReadingLevel
    summary: str
    structure: StructureFlags
    concepts: tuple[str, ...] = ()

    MAX_KEY_TERMS = 15
    MAX_CONCEPTS = 10

    def __post_init__(self) -> None:
        """Validate profile on construction."""
        if self.word_count < 0:
            raise ValueError(f"word_count cannot be negative: {self.word_count}")
        if len(self.key_terms) > self.MAX_KEY_TERMS:
            raise ValueError(
                f"key_terms exceeds {self.MAX_KEY_TERMS} entries: {len(self.key_terms)}"
            )
        if len(self.concepts) > self.MAX_CONCEPTS:
            raise ValueError(
                f"concepts exceeds {self.MAX_CONCEPTS} entries: {len(self.concepts)}"
            )

    @property
    def primary_term(self) -> str | None:
        """Most frequent key term, if any."""
        return self.key_terms[0] if self.key_terms else None

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "key_terms": list(self.key_terms),
            "topics": list(self.topics),
            "difficulty": self.difficulty.value,
            "reading_level": self.reading_level.value,
            "summary": self.summary,
            "structure": self.structure.to_dict(),
            "concepts": list(self.concepts),
        }
