"""
Core Models Package

Immutable, validated data models shared by every pipeline stage.

All models are frozen dataclasses. This ensures:
1. No accidental mutation between stages
2. Safe to hand the same result to several callers or threads
3. Invariants are checked once, on construction
"""

from .documents import Document, DocumentFormat
from .levels import Level, LockState
from .profile import AnalysisProfile, DifficultyBand, ReadingLevel, StructureFlags
from .questions import Answer, ChoiceAnswer, EssayAnswer, Question, TextAnswer
from .result import PipelineResult
from .tiers import LevelTier, QuestionArchetype

__all__ = [
    "AnalysisProfile",
    "Answer",
    "ChoiceAnswer",
    "DifficultyBand",
    "Document",
    "DocumentFormat",
    "EssayAnswer",
    "Level",
    "LevelTier",
    "LockState",
    "PipelineResult",
    "Question",
    "QuestionArchetype",
    "ReadingLevel",
    "StructureFlags",
    "TextAnswer",
]
