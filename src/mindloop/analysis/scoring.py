"""
Module: analysis.scoring

Purpose:
    Difficulty and readability classification. Each classifier is split
    into a score function and a band/label mapping so the thresholds can
    be tested independently of text.

Key Functions:
    - difficulty_score(): Weighted composite of sentence length,
      complex words and technical term hits
    - classify_difficulty(): Score -> DifficultyBand
    - flesch_reading_ease(): Approximate Flesch score
    - classify_reading_level(): Score -> ReadingLevel

Dependencies:
    - mindloop.common.thresholds: Weights and cut-offs
    - mindloop.common.vocabulary: Technical term list
"""

from __future__ import annotations

from mindloop.common.thresholds import (
    DIFFICULTY_THRESHOLDS,
    READABILITY_THRESHOLDS,
    DifficultyThresholds,
    ReadabilityThresholds,
)
from mindloop.common.vocabulary import TECHNICAL_TERMS
from mindloop.core.models.profile import DifficultyBand, ReadingLevel

from .text import (
    average_sentence_length,
    average_syllables_per_word,
    count_complex_words,
    count_term_hits,
)


def difficulty_score(
    avg_sentence_length: float,
    complex_word_count: int,
    technical_term_hits: int,
    thresholds: DifficultyThresholds = DIFFICULTY_THRESHOLDS,
) -> float:
    """
    Weighted composite difficulty score.

    Monotonically non-decreasing in every input.

    Example:
        >>> difficulty_score(10.0, 20, 0)
        11.0
    """
    return (
        avg_sentence_length * thresholds.sentence_length_weight
        + complex_word_count * thresholds.complex_word_weight
        + technical_term_hits * thresholds.technical_term_weight
    )


def classify_difficulty(
    score: float,
    thresholds: DifficultyThresholds = DIFFICULTY_THRESHOLDS,
) -> DifficultyBand:
    """Map a composite score onto a difficulty band."""
    if score < thresholds.beginner_below:
        return DifficultyBand.BEGINNER
    if score < thresholds.intermediate_below:
        return DifficultyBand.INTERMEDIATE
    return DifficultyBand.ADVANCED


def assess_difficulty(
    text: str,
    thresholds: DifficultyThresholds = DIFFICULTY_THRESHOLDS,
) -> DifficultyBand:
    """Classify the difficulty of raw text."""
    score = difficulty_score(
        average_sentence_length(text),
        count_complex_words(text, thresholds.complex_word_min_length),
        count_term_hits(text, TECHNICAL_TERMS),
        thresholds,
    )
    return classify_difficulty(score, thresholds)


def flesch_reading_ease(
    avg_sentence_length: float,
    avg_syllables: float,
    thresholds: ReadabilityThresholds = READABILITY_THRESHOLDS,
) -> float:
    """Approximate Flesch reading-ease score (higher is easier)."""
    return (
        thresholds.base
        - thresholds.sentence_length_factor * avg_sentence_length
        - thresholds.syllable_factor * avg_syllables
    )


def classify_reading_level(
    score: float,
    thresholds: ReadabilityThresholds = READABILITY_THRESHOLDS,
) -> ReadingLevel:
    """Map a Flesch score onto one of the six ordered labels."""
    if score >= thresholds.very_easy_min:
        return ReadingLevel.VERY_EASY
    if score >= thresholds.easy_min:
        return ReadingLevel.EASY
    if score >= thresholds.fairly_easy_min:
        return ReadingLevel.FAIRLY_EASY
    if score >= thresholds.standard_min:
        return ReadingLevel.STANDARD
    if score >= thresholds.fairly_difficult_min:
        return ReadingLevel.FAIRLY_DIFFICULT
    return ReadingLevel.DIFFICULT


def calculate_reading_level(
    text: str,
    thresholds: ReadabilityThresholds = READABILITY_THRESHOLDS,
) -> ReadingLevel:
    """Classify the readability of raw text."""
    score = flesch_reading_ease(
        average_sentence_length(text),
        average_syllables_per_word(text, thresholds.short_word_max_length),
        thresholds,
    )
    return classify_reading_level(score, thresholds)
