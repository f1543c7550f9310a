"""Centralized threshold and magic number configuration.

This module contains the fixed weights, cut-offs and bonuses used by
content analysis and result scoring. Having these in one place keeps
the scoring formulas readable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DifficultyThresholds:
    """Weights and band cut-offs for the composite difficulty score."""

    sentence_length_weight: float = 0.3
    complex_word_weight: float = 0.4
    technical_term_weight: float = 0.3

    complex_word_min_length: int = 7  # Tokens longer than 6 chars are "complex"

    beginner_below: float = 15.0  # score < 15 -> beginner
    intermediate_below: float = 25.0  # 15 <= score < 25 -> intermediate, else advanced


@dataclass(frozen=True)
class ReadabilityThresholds:
    """Flesch reading-ease formula constants and label cut-offs."""

    base: float = 206.835
    sentence_length_factor: float = 1.015
    syllable_factor: float = 84.6

    short_word_max_length: int = 3  # Words this short count as one syllable

    very_easy_min: float = 90.0
    easy_min: float = 80.0
    fairly_easy_min: float = 70.0
    standard_min: float = 60.0
    fairly_difficult_min: float = 50.0


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Bonuses that raise the overall confidence of a result."""

    base: float = 0.85
    cap: float = 0.98

    long_document_words: int = 1000  # word_count above this earns the bonus
    long_document_bonus: float = 0.05
    rich_vocabulary_terms: int = 10  # key term count above this earns the bonus
    rich_vocabulary_bonus: float = 0.03
    headings_bonus: float = 0.02
    many_topics: int = 3  # topic count above this earns the bonus
    many_topics_bonus: float = 0.02


# Global instances for easy import
DIFFICULTY_THRESHOLDS = DifficultyThresholds()
READABILITY_THRESHOLDS = ReadabilityThresholds()
CONFIDENCE_THRESHOLDS = ConfidenceThresholds()
