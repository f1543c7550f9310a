"""
Module: analysis

Purpose:
    Content analysis: lexical statistics, key terms, difficulty band and
    readability for raw document text.

Key Classes:
    - ContentAnalyzer: Produces AnalysisProfile objects

Key Functions:
    - count_syllables(), count_words(): Lexical helpers
"""

from .analyzer import ContentAnalyzer
from .scoring import (
    assess_difficulty,
    calculate_reading_level,
    classify_difficulty,
    classify_reading_level,
    difficulty_score,
    flesch_reading_ease,
)
from .text import (
    average_sentence_length,
    count_syllables,
    count_words,
    split_sentences,
    tokenize_terms,
)

__all__ = [
    "ContentAnalyzer",
    "assess_difficulty",
    "average_sentence_length",
    "calculate_reading_level",
    "classify_difficulty",
    "classify_reading_level",
    "count_syllables",
    "count_words",
    "difficulty_score",
    "flesch_reading_ease",
    "split_sentences",
    "tokenize_terms",
]
