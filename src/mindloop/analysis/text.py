"""
Module: analysis.text

Purpose:
    Lexical helpers shared by the analyzer: word and sentence splitting,
    syllable counting and term tokenization. All functions are pure.

Key Functions:
    - count_words(): Whitespace token count
    - split_sentences(): Split on runs of . ! ?
    - average_sentence_length(): Words per sentence
    - count_syllables(): Vowel-group syllable heuristic
    - tokenize_terms(): Lower-cased content tokens for key terms
"""

from __future__ import annotations

import re
from typing import Iterable, List

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y_RE = re.compile(r"^y")
_VOWEL_GROUP_RE = re.compile(r"[aeiouy]{1,2}")


def count_words(text: str) -> int:
    """
    Count whitespace-delimited tokens.

    Example:
        >>> count_words("  Cells divide.\\n\\nThen grow. ")
        4
    """
    return len(text.split())


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of sentence terminators.

    Pieces that are blank after trimming are dropped; kept pieces are
    returned untrimmed.

    Example:
        >>> split_sentences("One. Two!! Three?")
        ['One', ' Two', ' Three']
    """
    return [piece for piece in _SENTENCE_SPLIT_RE.split(text) if piece.strip()]


def average_sentence_length(text: str) -> float:
    """
    Average words per sentence.

    Text without any sentence counts as a single sentence so the result
    stays finite.
    """
    sentences = split_sentences(text)
    return count_words(text) / max(1, len(sentences))


def count_complex_words(text: str, min_length: int = 7) -> int:
    """Count whitespace tokens with at least ``min_length`` characters."""
    return sum(1 for token in text.split() if len(token) >= min_length)


def count_term_hits(text: str, terms: Iterable[str]) -> int:
    """Count how many of ``terms`` occur as substrings, case-insensitive."""
    lowered = text.lower()
    return sum(1 for term in terms if term.lower() in lowered)


def count_syllables(word: str, short_word_max_length: int = 3) -> int:
    """
    Estimate syllables in a word.

    Words of ``short_word_max_length`` characters or fewer count as one
    syllable (including the empty string). Longer words lose a trailing
    silent "e"/"ed"/"es" and a leading "y", then each group of one or
    two vowels counts once. The result is never below 1.

    Example:
        >>> count_syllables("a")
        1
        >>> count_syllables("photosynthesis")
        5
    """
    word = word.lower()
    if len(word) <= short_word_max_length:
        return 1
    word = _SILENT_SUFFIX_RE.sub("", word, count=1)
    word = _LEADING_Y_RE.sub("", word, count=1)
    groups = _VOWEL_GROUP_RE.findall(word)
    return len(groups) or 1


def average_syllables_per_word(text: str, short_word_max_length: int = 3) -> float:
    """Mean syllable count over whitespace tokens (0.0 for empty text)."""
    words = text.split()
    if not words:
        return 0.0
    return sum(count_syllables(word, short_word_max_length) for word in words) / len(words)


def tokenize_terms(text: str, min_length: int = 4) -> List[str]:
    """
    Tokenize text into lower-cased content terms.

    Non-word characters become whitespace; tokens shorter than
    ``min_length`` are dropped.

    Example:
        >>> tokenize_terms("The cell's membrane: a barrier.")
        ['cell', 'membrane', 'barrier']
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= min_length]
