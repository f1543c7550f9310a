"""
Module: analysis.analyzer

Purpose:
    Builds an AnalysisProfile from raw document text: word count, ranked
    key terms, topic tags, difficulty band, reading level, extractive
    summary, structure flags and concept lines.

Key Classes:
    - ContentAnalyzer: Configurable analyzer (stateless between calls)

Determinism:
    Every field is a pure function of the text except ``topics``, which
    is drawn from the injected ``random.Random``. Passing an RNG with a
    fixed seed makes the whole profile reproducible.

Dependencies:
    - analysis.text, analysis.scoring: Lexical statistics
    - mindloop.common.vocabulary: Topic and concept vocabularies

Used By:
    - engine: Analysis stage
"""

from __future__ import annotations

import logging
import random
import re
from typing import Dict, List, Optional

from mindloop.common.vocabulary import CONCEPT_MARKERS, TOPIC_VOCABULARY
from mindloop.config import AnalyzerConfig
from mindloop.core.models.profile import AnalysisProfile, StructureFlags

from .scoring import assess_difficulty, calculate_reading_level
from .text import count_words, split_sentences, tokenize_terms

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"#|\*\*")
_BULLET_RE = re.compile(r"[-*•]")
_NUMBERED_RE = re.compile(r"\d+\.")
_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


class ContentAnalyzer:
    """
    Computes textual profiles for documents.

    Example:
        >>> analyzer = ContentAnalyzer()
        >>> profile = analyzer.analyze(text, rng=random.Random(3))
        >>> profile.difficulty
        <DifficultyBand.BEGINNER: 'beginner'>
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None) -> None:
        self.config = config or AnalyzerConfig()

    def analyze(self, text: str, rng: Optional[random.Random] = None) -> AnalysisProfile:
        """
        Analyze text into a profile.

        Args:
            text: Raw document text
            rng: Randomness for topic selection (fresh RNG if None)

        Returns:
            Immutable AnalysisProfile
        """
        rng = rng or random.Random()
        profile = AnalysisProfile(
            word_count=count_words(text),
            key_terms=tuple(self.extract_key_terms(text)),
            topics=tuple(self.select_topics(rng)),
            difficulty=assess_difficulty(text),
            reading_level=calculate_reading_level(text),
            summary=self.summarize(text),
            structure=self.analyze_structure(text),
            concepts=tuple(self.extract_concepts(text)),
        )
        logger.debug(
            f"Analyzed {profile.word_count} words: difficulty={profile.difficulty.value}, "
            f"reading_level={profile.reading_level.value}, key_terms={len(profile.key_terms)}"
        )
        return profile

    # ─────────────────────────────────────────────────────────────────────────
    # Individual signals
    # ─────────────────────────────────────────────────────────────────────────

    def extract_key_terms(self, text: str) -> List[str]:
        """
        Rank content terms by frequency.

        Ties keep first-seen order (dicts preserve insertion order and
        sorted() is stable).
        """
        frequency: Dict[str, int] = {}
        for term in tokenize_terms(text, self.config.min_term_length):
            frequency[term] = frequency.get(term, 0) + 1

        ranked = sorted(frequency.items(), key=lambda item: -item[1])
        return [term for term, _ in ranked[: self.config.max_key_terms]]

    def select_topics(self, rng: random.Random) -> List[str]:
        """Include each vocabulary topic independently, capped at max_topics."""
        probability = self.config.topic_inclusion_probability
        chosen = [topic for topic in TOPIC_VOCABULARY if rng.random() < probability]
        return chosen[: self.config.max_topics]

    def summarize(self, text: str) -> str:
        """
        Extractive summary from the leading substantial sentences.

        Returns:
            Sentences joined with ". " plus a trailing period, or "" when
            no sentence is long enough
        """
        sentences: List[str] = []
        for piece in split_sentences(text):
            trimmed = piece.strip()
            if len(trimmed) >= self.config.min_summary_sentence_length:
                sentences.append(trimmed)
                if len(sentences) == self.config.summary_sentences:
                    break
        if not sentences:
            return ""
        return ". ".join(sentences) + "."

    def analyze_structure(self, text: str) -> StructureFlags:
        """Detect markers at the very start of the text and count paragraphs."""
        return StructureFlags(
            has_headings=bool(_HEADING_RE.match(text)),
            has_bullet_points=bool(_BULLET_RE.match(text)),
            has_numbered_lists=bool(_NUMBERED_RE.match(text)),
            paragraph_count=len(_PARAGRAPH_BREAK_RE.split(text)) if text else 0,
        )

    def extract_concepts(self, text: str) -> List[str]:
        """Lines containing a colon, "Definition" or "Key", trimmed."""
        concepts: List[str] = []
        for line in text.split("\n"):
            if any(marker in line for marker in CONCEPT_MARKERS):
                concepts.append(line.strip())
                if len(concepts) == self.config.max_concepts:
                    break
        return concepts

