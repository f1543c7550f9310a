"""
Module: config

Purpose:
    Configuration dataclasses for the pipeline. Immutable settings with
    validation on construction.

Key Classes:
    - ExtractionConfig: Settings for the text extractor
    - AnalyzerConfig: Limits and probabilities for content analysis
    - EngineConfig: Top-level configuration for the Engine

Dependencies:
    - dataclasses (std)

Used By:
    - extractor.extractor: ExtractionConfig
    - analysis.analyzer: AnalyzerConfig
    - engine: EngineConfig
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for text extraction.

    Attributes:
        text_encoding: Codec used to decode plain-text uploads (default utf-8)
    """

    text_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.text_encoding)
        except LookupError as e:
            raise ValueError(f"text_encoding is not a known codec: {self.text_encoding!r}") from e


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Configuration for content analysis.

    Attributes:
        max_key_terms: Number of ranked key terms kept (default 15, max 15)
        min_term_length: Shortest token counted as a key term (default 4)
        max_topics: Cap on selected topic tags (default 5)
        topic_inclusion_probability: Chance each vocabulary topic is picked
        max_concepts: Number of concept lines kept (default 10, max 10)
        summary_sentences: Sentences kept in the summary (default 3)
        min_summary_sentence_length: Shortest trimmed sentence accepted
            into the summary (default 21, i.e. "longer than 20")

    Invariants:
        - 0 <= topic_inclusion_probability <= 1
        - 1 <= max_key_terms <= 15
        - 0 <= max_concepts <= 10
    """

    max_key_terms: int = 15
    min_term_length: int = 4
    max_topics: int = 5
    topic_inclusion_probability: float = 0.4
    max_concepts: int = 10
    summary_sentences: int = 3
    min_summary_sentence_length: int = 21

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not (1 <= self.max_key_terms <= 15):
            raise ValueError(f"max_key_terms must be 1-15: {self.max_key_terms}")
        if self.min_term_length < 1:
            raise ValueError(f"min_term_length must be positive: {self.min_term_length}")
        if self.max_topics < 0:
            raise ValueError(f"max_topics must be non-negative: {self.max_topics}")
        if not (0.0 <= self.topic_inclusion_probability <= 1.0):
            raise ValueError(
                f"topic_inclusion_probability must be 0-1: {self.topic_inclusion_probability}"
            )
        if not (0 <= self.max_concepts <= 10):
            raise ValueError(f"max_concepts must be 0-10: {self.max_concepts}")
        if self.summary_sentences < 1:
            raise ValueError(f"summary_sentences must be positive: {self.summary_sentences}")
        if self.min_summary_sentence_length < 0:
            raise ValueError(
                f"min_summary_sentence_length must be non-negative: "
                f"{self.min_summary_sentence_length}"
            )


@dataclass(frozen=True)
class EngineConfig:
    """
    Top-level configuration for the pipeline engine.

    Attributes:
        seed: Random seed for reproducible runs (None = fresh entropy per run)
        extraction: Extractor settings
        analyzer: Analyzer settings
        enable_pdf_decoder: Register the PyMuPDF decoder for .pdf uploads
            instead of always using synthetic text (default False)

    Example:
        >>> config = EngineConfig(seed=7)
        >>> config.analyzer.max_key_terms
        15
    """

    seed: Optional[int] = None
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    enable_pdf_decoder: bool = False
