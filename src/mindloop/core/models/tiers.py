"""
Module: tiers

Purpose:
    Closed enums for curriculum tiers and question archetypes, plus the
    fixed per-tier tables (archetype pool, question count, point value).

Key Classes:
    - LevelTier: explorer / challenger / masters
    - QuestionArchetype: The five structural kinds of question

Used By:
    - core.models.questions, core.models.levels: Invariant checks
    - builder.questions: Archetype selection and scoring
"""

from __future__ import annotations

from enum import Enum


class QuestionArchetype(Enum):
    """Structural kind of a generated question."""

    MULTIPLE_CHOICE = "multiple-choice"
    TRUE_FALSE = "true-false"
    FILL_BLANK = "fill-blank"
    SHORT_ANSWER = "short-answer"
    ESSAY = "essay"


class LevelTier(Enum):
    """
    Difficulty tier of a curriculum level.

    Each tier fixes which archetypes may appear, how many questions a
    level holds and how many points each question is worth.

    Example:
        >>> LevelTier.CHALLENGER.question_count
        12
        >>> QuestionArchetype.ESSAY in LevelTier.EXPLORER.archetypes
        False
    """

    EXPLORER = "explorer"
    CHALLENGER = "challenger"
    MASTERS = "masters"

    @property
    def archetypes(self) -> tuple[QuestionArchetype, ...]:
        """Allowed archetypes, in draw order."""
        return _ARCHETYPES[self]

    @property
    def question_count(self) -> int:
        return _QUESTION_COUNTS[self]

    @property
    def question_points(self) -> int:
        return _QUESTION_POINTS[self]

    def allows(self, archetype: QuestionArchetype) -> bool:
        return archetype in _ARCHETYPES[self]


_ARCHETYPES = {
    LevelTier.EXPLORER: (
        QuestionArchetype.MULTIPLE_CHOICE,
        QuestionArchetype.TRUE_FALSE,
        QuestionArchetype.FILL_BLANK,
    ),
    LevelTier.CHALLENGER: (
        QuestionArchetype.MULTIPLE_CHOICE,
        QuestionArchetype.SHORT_ANSWER,
        QuestionArchetype.FILL_BLANK,
    ),
    LevelTier.MASTERS: (
        QuestionArchetype.ESSAY,
        QuestionArchetype.SHORT_ANSWER,
        QuestionArchetype.MULTIPLE_CHOICE,
    ),
}

_QUESTION_COUNTS = {
    LevelTier.EXPLORER: 8,
    LevelTier.CHALLENGER: 12,
    LevelTier.MASTERS: 6,
}

_QUESTION_POINTS = {
    LevelTier.EXPLORER: 10,
    LevelTier.CHALLENGER: 20,
    LevelTier.MASTERS: 30,
}
