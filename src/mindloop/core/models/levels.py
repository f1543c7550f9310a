"""
Module: levels

Purpose:
    Provides the Level dataclass - one named, ordered unit of curriculum
    holding a batch of questions.

Key Classes:
    - LockState: unlocked / locked
    - Level: Curriculum level (immutable)

Dependencies:
    - dataclasses (std)
    - .questions.Question
    - .tiers.LevelTier

Used By:
    - builder.curriculum: Builds the level skeleton
    - engine: Attaches generated questions with dataclasses.replace
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .questions import Question
from .tiers import LevelTier


class LockState(Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"


@dataclass(frozen=True)
class Level:
    """
    Curriculum level (immutable).

    Levels are created without questions by the curriculum builder and
    replaced with a populated copy once questions are synthesized.

    Attributes:
        id: Unique identifier like "challenger_3fa2c1_1"
        name: Display name like "osmosis - Applications"
        description: One-line learning goal
        tier: Difficulty tier
        lock_state: Whether the learner can start this level
        estimated_minutes: Expected time to complete
        point_value: Points for completing the level
        order: 1-based position within the curriculum
        questions: Ordered questions

    Invariants:
        - order >= 1
        - every question archetype is allowed for tier
        - explorer levels are never locked
    """

    id: str
    name: str
    description: str
    tier: LevelTier
    lock_state: LockState
    estimated_minutes: int
    point_value: int
    order: int
    questions: tuple[Question, ...] = ()

    def __post_init__(self) -> None:
        """Validate level on construction."""
        if self.order < 1:
            raise ValueError(f"order must be >= 1: {self.order}")
        if self.estimated_minutes <= 0:
            raise ValueError(f"estimated_minutes must be positive: {self.estimated_minutes}")
        if self.tier is LevelTier.EXPLORER and self.lock_state is LockState.LOCKED:
            raise ValueError(f"Explorer level {self.id!r} cannot be locked")
        for question in self.questions:
            if not self.tier.allows(question.archetype):
                raise ValueError(
                    f"Question {question.id!r} has archetype {question.archetype.value} "
                    f"not allowed for tier {self.tier.value}"
                )

    @property
    def is_locked(self) -> bool:
        return self.lock_state is LockState.LOCKED

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def estimated_time_label(self) -> str:
        """Display label like "15 min"."""
        return f"{self.estimated_minutes} min"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "difficulty": self.tier.value,
            "status": self.lock_state.value,
            "estimated_time": self.estimated_time_label,
            "points": self.point_value,
            "order": self.order,
            "questions": [q.to_dict() for q in self.questions],
        }

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Level({self.id!r}, {self.tier.value}, order={self.order}, "
            f"questions={self.question_count})"
        )
