"""
Module: questions

Purpose:
    Provides the Question dataclass and its archetype-specific answer
    payloads. Answers form a closed tagged union: the payload type is
    fixed by the question archetype and checked on construction.

Key Classes:
    - ChoiceAnswer: Options plus index of the correct one
    - TextAnswer: Canonical or sample answer text
    - EssayAnswer: Minimum word count for a free response
    - Question: One generated quiz question

Dependencies:
    - dataclasses (std)
    - .tiers: LevelTier, QuestionArchetype

Used By:
    - builder.questions: Creates questions from templates
    - core.models.levels: Levels own ordered questions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .tiers import LevelTier, QuestionArchetype


MIN_CONFIDENCE = 0.80
MAX_CONFIDENCE = 1.00


@dataclass(frozen=True)
class ChoiceAnswer:
    """
    Answer for multiple-choice and true/false questions.

    Attributes:
        options: Ordered answer options shown to the learner
        correct_index: Index into options of the correct one
    """

    options: tuple[str, ...]
    correct_index: int = 0

    def __post_init__(self) -> None:
        if len(self.options) < 2:
            raise ValueError(f"ChoiceAnswer needs at least 2 options: {len(self.options)}")
        if not (0 <= self.correct_index < len(self.options)):
            raise ValueError(f"correct_index out of range: {self.correct_index}")

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]

    def to_dict(self) -> dict:
        return {
            "kind": "choice",
            "options": list(self.options),
            "correct_index": self.correct_index,
        }


@dataclass(frozen=True)
class TextAnswer:
    """Canonical answer (fill-blank) or sample answer (short-answer)."""

    text: str

    def __post_init__(self) -> None:
        if not self.text.strip():
            raise ValueError("TextAnswer text must not be empty")

    def to_dict(self) -> dict:
        return {"kind": "text", "text": self.text}


@dataclass(frozen=True)
class EssayAnswer:
    """Free response graded against a minimum length."""

    min_words: int

    def __post_init__(self) -> None:
        if self.min_words <= 0:
            raise ValueError(f"min_words must be positive: {self.min_words}")

    def to_dict(self) -> dict:
        return {"kind": "essay", "min_words": self.min_words}


Answer = Union[ChoiceAnswer, TextAnswer, EssayAnswer]

_ANSWER_TYPES = {
    QuestionArchetype.MULTIPLE_CHOICE: ChoiceAnswer,
    QuestionArchetype.TRUE_FALSE: ChoiceAnswer,
    QuestionArchetype.FILL_BLANK: TextAnswer,
    QuestionArchetype.SHORT_ANSWER: TextAnswer,
    QuestionArchetype.ESSAY: EssayAnswer,
}


@dataclass(frozen=True)
class Question:
    """
    A generated quiz question (immutable).

    Attributes:
        id: Unique identifier like "explorer_3fa2_1_q4"
        archetype: Structural kind of the question
        prompt: Question text shown to the learner
        answer: Archetype-specific answer payload
        explanation: Feedback shown after answering
        point_value: Points awarded for a correct answer
        topic: Key term the question is about
        tier: Tier of the owning level
        confidence: Generation confidence in [0.80, 1.00], 2 decimals

    Invariants:
        - answer type matches archetype
        - tier allows archetype
        - MIN_CONFIDENCE <= confidence <= MAX_CONFIDENCE
    """

    id: str
    archetype: QuestionArchetype
    prompt: str
    answer: Answer
    explanation: str
    point_value: int
    topic: str
    tier: LevelTier
    confidence: float

    def __post_init__(self) -> None:
        """Validate question on construction."""
        expected = _ANSWER_TYPES[self.archetype]
        if not isinstance(self.answer, expected):
            raise ValueError(
                f"{self.archetype.value} question requires {expected.__name__}, "
                f"got {type(self.answer).__name__}"
            )
        if not self.tier.allows(self.archetype):
            raise ValueError(
                f"Archetype {self.archetype.value} not allowed for tier {self.tier.value}"
            )
        if not (MIN_CONFIDENCE <= self.confidence <= MAX_CONFIDENCE):
            raise ValueError(f"confidence out of range: {self.confidence}")
        if self.point_value <= 0:
            raise ValueError(f"point_value must be positive: {self.point_value}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.archetype.value,
            "question": self.prompt,
            "answer": self.answer.to_dict(),
            "explanation": self.explanation,
            "points": self.point_value,
            "topic": self.topic,
            "difficulty": self.tier.value,
            "confidence": self.confidence,
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Question({self.id!r}, {self.archetype.value}, topic={self.topic!r})"
