"""
Module: engine

Purpose:
    Orchestrate the complete document-to-curriculum pipeline.
    Extract → Analyze → Build levels → Generate questions → Finalize

Key Classes:
    - Engine: Pipeline orchestrator with a create → load_resources → ready
      lifecycle
    - PipelineStage: Stage names, progress labels and checkpoints
    - Capabilities: Supported formats and feature flags

Key Functions:
    - calculate_confidence(): Profile -> overall confidence
    - make_run_id(): Per-document run token for level ids

Failure Contract:
    - process() before load_resources() -> NotInitializedError
    - UnsupportedFormatError / ExtractionError propagate unchanged
    - Any other stage exception -> ProcessingError (chained)
    - No partial result is ever returned

Dependencies:
    - mindloop.extractor, mindloop.analysis, mindloop.builder
    - mindloop.timing: Stage timing and elapsed time

Used By:
    - mindloop.cli
    - UI layers that upload documents and render results
"""

from __future__ import annotations

import logging
import random
import threading
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from mindloop import __version__
from mindloop.analysis import ContentAnalyzer
from mindloop.builder import build_levels, generate_questions
from mindloop.common.thresholds import CONFIDENCE_THRESHOLDS, ConfidenceThresholds
from mindloop.config import EngineConfig
from mindloop.core.errors import (
    ExtractionError,
    NotInitializedError,
    ProcessingError,
    UnsupportedFormatError,
)
from mindloop.core.models import AnalysisProfile, Document, DocumentFormat, Level, PipelineResult
from mindloop.extractor import Decoder, TextExtractor, default_decoders
from mindloop.timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (label, percent) -> None
ProgressCallback = Callable[[str, int], None]


class EngineState(Enum):
    """Readiness lifecycle. Transitions once, CREATED -> READY."""

    CREATED = "created"
    READY = "ready"


class PipelineStage(Enum):
    """
    Pipeline stages with their progress label and checkpoint percent.

    Checkpoints are strictly increasing in declaration order.
    """

    EXTRACTION = ("extraction", "Extracting text content...", 10)
    ANALYSIS = ("analysis", "Analyzing document structure...", 30)
    CURRICULUM = ("curriculum", "Generating learning levels...", 60)
    QUESTIONS = ("questions", "Creating intelligent questions...", 80)
    FINALIZE = ("finalize", "Finalizing processing...", 95)
    COMPLETE = ("complete", "Complete!", 100)

    def __init__(self, key: str, label: str, percent: int) -> None:
        self.key = key
        self.label = label
        self.percent = percent


@dataclass(frozen=True)
class Capabilities:
    """
    What the engine can do, for gating uploads and rendering badges.

    Attributes:
        supported_formats: Extensions accepted by process()
        features: Feature flag name -> enabled
    """

    supported_formats: tuple[str, ...]
    features: Dict[str, bool] = field(default_factory=dict)

    def supports(self, extension: str) -> bool:
        return extension.lower() in self.supported_formats

    def to_dict(self) -> dict:
        return {
            "supported_formats": list(self.supported_formats),
            "features": dict(self.features),
        }


def calculate_confidence(
    profile: AnalysisProfile,
    thresholds: ConfidenceThresholds = CONFIDENCE_THRESHOLDS,
) -> float:
    """
    Overall confidence of a result, derived from its profile.

    Starts at the base value and adds a bonus for long documents, rich
    vocabularies, headings and many topics; capped and rounded to 2 dp.

    Example:
        >>> calculate_confidence(short_plain_profile)
        0.85
    """
    confidence = thresholds.base
    if profile.word_count > thresholds.long_document_words:
        confidence += thresholds.long_document_bonus
    if len(profile.key_terms) > thresholds.rich_vocabulary_terms:
        confidence += thresholds.rich_vocabulary_bonus
    if profile.structure.has_headings:
        confidence += thresholds.headings_bonus
    if len(profile.topics) > thresholds.many_topics:
        confidence += thresholds.many_topics_bonus
    return round(min(confidence, thresholds.cap), 2)


def make_run_id(document: Document, rng: random.Random) -> str:
    """
    Token that makes level and question ids unique per run.

    Mixes the document name into bits drawn from the run's RNG, so a
    seeded engine stays reproducible for one document while different
    documents never share ids. Always 12 hex characters.
    """
    token = uuid.uuid5(uuid.NAMESPACE_URL, f"{rng.getrandbits(64):016x}/{document.name}")
    return token.hex[:12]


class Engine:
    """
    Document-to-curriculum pipeline engine.

    Each engine owns its readiness state, so several independent engines
    can coexist (e.g. in tests). Runs share no mutable state: every
    process() call builds its own RNG, timing log and result.

    Example:
        >>> engine = Engine.create(EngineConfig(seed=42))
        >>> doc = Document.from_name("photosynthesis.txt", len(data))
        >>> result = engine.process(doc, data, on_progress=print)
        >>> result.total_question_count
        28
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        decoders: Optional[Mapping[DocumentFormat, Decoder]] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._decoder_override = dict(decoders) if decoders is not None else None
        self._state = EngineState.CREATED
        self._lock = threading.Lock()
        self._extractor: Optional[TextExtractor] = None
        self._analyzer: Optional[ContentAnalyzer] = None

    @classmethod
    def create(
        cls,
        config: Optional[EngineConfig] = None,
        decoders: Optional[Mapping[DocumentFormat, Decoder]] = None,
    ) -> Engine:
        """Construct an engine and load its resources."""
        engine = cls(config, decoders)
        engine.load_resources()
        return engine

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def load_resources(self) -> None:
        """
        Build the extractor and analyzer and mark the engine ready.

        Safe to call repeatedly and from several threads; only the first
        call does any work.
        """
        with self._lock:
            if self._state is EngineState.READY:
                return
            decoders = (
                self._decoder_override
                if self._decoder_override is not None
                else default_decoders(pdf=self.config.enable_pdf_decoder)
            )
            self._extractor = TextExtractor(decoders, self.config.extraction)
            self._analyzer = ContentAnalyzer(self.config.analyzer)
            self._state = EngineState.READY

        logger.info(
            f"Engine ready (decoders: {', '.join(f.label for f in decoders) or 'none'})"
        )

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is EngineState.READY

    def capabilities(self) -> Capabilities:
        """Supported formats and feature flags."""
        if self._extractor is not None:
            decoded = set(self._extractor.decoder_formats)
        elif self._decoder_override is not None:
            decoded = set(self._decoder_override)
        else:
            decoded = set(default_decoders(pdf=self.config.enable_pdf_decoder))

        return Capabilities(
            supported_formats=DocumentFormat.supported_extensions(),
            features={
                "text_extraction": True,
                "multiple_formats": True,
                "docx_decoding": DocumentFormat.DOCX in decoded,
                "pdf_decoding": DocumentFormat.PDF in decoded,
                "question_generation": True,
                "difficulty_assessment": True,
                "key_term_extraction": True,
                "topic_identification": True,
                "reading_level_analysis": True,
                "structure_analysis": True,
                "offline_processing": True,
            },
        )

    def status(self) -> Dict[str, Any]:
        """Current readiness and configuration snapshot."""
        decoders: List[str] = []
        if self._extractor is not None:
            decoders = [fmt.label for fmt in self._extractor.decoder_formats]
        return {
            "state": self._state.value,
            "ready": self.is_ready,
            "decoders": decoders,
            "seeded": self.config.seed is not None,
            "version": __version__,
        }

    # ─────────────────────────────────────────────────────────────────────────
    # Processing
    # ─────────────────────────────────────────────────────────────────────────

    def process(
        self,
        document: Document,
        data: bytes,
        on_progress: Optional[ProgressCallback] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> PipelineResult:
        """
        Run the full pipeline for one document.

        Args:
            document: Document metadata
            data: Complete file content
            on_progress: Optional callback receiving (label, percent)
            rng: Randomness for topics, archetypes and confidences
                (defaults to a new Random seeded from config.seed)

        Returns:
            Immutable PipelineResult

        Raises:
            NotInitializedError: If load_resources() has not completed
            UnsupportedFormatError: If the extension is not supported
            ExtractionError: If plain-text content is unreadable
            ProcessingError: If any other stage fails
        """
        if not self.is_ready:
            raise NotInitializedError("Engine not initialized; call load_resources() first")
        assert self._extractor is not None and self._analyzer is not None

        rng = rng or random.Random(self.config.seed)
        run_id = make_run_id(document, rng)
        timing = TimingLog()
        timing.start()
        logger.info(
            f"Processing document: {document.name}",
            extra={"document": document.name, "size": document.byte_size, "run_id": run_id},
        )

        self._notify(on_progress, PipelineStage.EXTRACTION)
        with timed_phase(timing, PipelineStage.EXTRACTION.key):
            text = self._run_stage(
                PipelineStage.EXTRACTION, self._extractor.extract, document, data
            )

        self._notify(on_progress, PipelineStage.ANALYSIS)
        with timed_phase(timing, PipelineStage.ANALYSIS.key):
            profile = self._run_stage(PipelineStage.ANALYSIS, self._analyzer.analyze, text, rng)

        self._notify(on_progress, PipelineStage.CURRICULUM)
        with timed_phase(timing, PipelineStage.CURRICULUM.key):
            levels = self._run_stage(PipelineStage.CURRICULUM, build_levels, profile, run_id)

        self._notify(on_progress, PipelineStage.QUESTIONS)
        with timed_phase(timing, PipelineStage.QUESTIONS.key):
            levels = self._run_stage(
                PipelineStage.QUESTIONS, _populate_levels, levels, profile, rng
            )

        self._notify(on_progress, PipelineStage.FINALIZE)
        with timed_phase(timing, PipelineStage.FINALIZE.key):
            confidence = self._run_stage(PipelineStage.FINALIZE, calculate_confidence, profile)
        elapsed = timing.stop()
        result = self._run_stage(
            PipelineStage.FINALIZE,
            PipelineResult,
            True,
            document,
            elapsed,
            confidence,
            tuple(levels),
            profile,
        )

        self._notify(on_progress, PipelineStage.COMPLETE)
        logger.info(
            f"Completed {document.name}: {len(result.levels)} levels, "
            f"{result.total_question_count} questions in {result.elapsed_time_label}",
            extra={
                "document": document.name,
                "run_id": run_id,
                "level_count": len(result.levels),
                "question_count": result.total_question_count,
            },
        )
        logger.debug(timing.summary())
        return result

    def process_file(
        self,
        path: Path,
        on_progress: Optional[ProgressCallback] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> PipelineResult:
        """
        Read a file from disk and process it.

        Raises:
            FileNotFoundError: If path doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        data = path.read_bytes()
        document = Document.from_name(path.name, len(data))
        return self.process(document, data, on_progress, rng=rng)

    @staticmethod
    def _run_stage(stage: PipelineStage, func: Callable[..., T], *args: Any) -> T:
        try:
            return func(*args)
        except (UnsupportedFormatError, ExtractionError):
            raise
        except Exception as e:
            logger.error(f"Stage {stage.key} failed: {e}", extra={"stage": stage.key})
            raise ProcessingError(stage.key, e) from e

    @staticmethod
    def _notify(on_progress: Optional[ProgressCallback], stage: PipelineStage) -> None:
        if on_progress is None:
            return
        try:
            on_progress(stage.label, stage.percent)
        except Exception as e:
            logger.warning(f"Progress callback failed at {stage.key}: {e}", exc_info=True)


def _populate_levels(
    levels: List[Level],
    profile: AnalysisProfile,
    rng: random.Random,
) -> List[Level]:
    """Attach a generated question batch to each level."""
    return [
        replace(level, questions=tuple(generate_questions(level, profile, rng)))
        for level in levels
    ]
