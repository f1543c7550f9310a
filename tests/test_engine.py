"""
Pipeline Tests for Engine

End-to-end runs through extraction, analysis, curriculum and question
synthesis, plus lifecycle, progress and error contracts.
"""

import logging
import random
from unittest import mock

import pytest

from mindloop.common.thresholds import ConfidenceThresholds
from mindloop.config import EngineConfig
from mindloop.core.errors import (
    ExtractionError,
    NotInitializedError,
    ProcessingError,
    UnsupportedFormatError,
)
from mindloop.core.models import (
    DifficultyBand,
    Document,
    DocumentFormat,
    LevelTier,
    StructureFlags,
)
from mindloop.engine import Engine, EngineState, PipelineStage, calculate_confidence


def _txt(name: str, text: str):
    data = text.encode("utf-8")
    return Document.from_name(name, len(data)), data


class TestLifecycle:
    """Tests for readiness and capabilities."""

    def test_process_when_not_loaded_then_raises_not_initialized(self, photosynthesis_text):
        """An engine must load resources before processing."""
        engine = Engine()
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)

        assert engine.state is EngineState.CREATED
        with pytest.raises(NotInitializedError):
            engine.process(doc, data)

    def test_load_resources_when_called_twice_then_idempotent(self):
        """Loading is idempotent."""
        engine = Engine()
        engine.load_resources()
        extractor = engine._extractor
        engine.load_resources()

        assert engine.is_ready
        assert engine._extractor is extractor

    def test_create_when_called_then_ready(self):
        """create() returns a ready engine."""
        assert Engine.create().is_ready

    def test_capabilities_when_default_then_pdf_decoding_off(self):
        """Capabilities report formats and decoder flags."""
        caps = Engine.create().capabilities()

        assert set(caps.supported_formats) == {".pdf", ".docx", ".txt", ".pptx"}
        assert caps.supports(".DOCX")
        assert not caps.supports(".csv")
        assert caps.features["docx_decoding"] is True
        assert caps.features["pdf_decoding"] is False

    def test_capabilities_when_pdf_enabled_then_flag_set(self):
        """Enabling the PDF decoder is reflected before and after loading."""
        engine = Engine(EngineConfig(enable_pdf_decoder=True))
        assert engine.capabilities().features["pdf_decoding"] is True

        engine.load_resources()
        assert engine.capabilities().features["pdf_decoding"] is True

    def test_status_when_ready_then_lists_decoders(self):
        """status() reports state and registered decoders."""
        status = Engine.create(EngineConfig(seed=1)).status()

        assert status["state"] == "ready"
        assert status["ready"] is True
        assert status["decoders"] == ["docx"]
        assert status["seeded"] is True


class TestEndToEnd:
    """Tests for full pipeline runs."""

    def test_process_when_photosynthesis_txt_then_three_levels_28_questions(
        self, engine, photosynthesis_text
    ):
        """A 50-word plain paragraph yields the three core levels."""
        # Arrange
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)

        # Act
        result = engine.process(doc, data)

        # Assert
        assert result.success
        assert result.word_count == 50
        assert result.profile.structure.has_headings is False
        assert result.difficulty is not DifficultyBand.ADVANCED
        assert len(result.levels) == 3
        assert [level.question_count for level in result.levels] == [8, 8, 12]
        assert result.total_question_count == 28
        assert result.levels[0].name == "leaves - Fundamentals"

    def test_process_when_complete_then_invariants_hold(self, engine, photosynthesis_text):
        """Ids are unique, orders increase and archetypes fit tiers."""
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)
        result = engine.process(doc, data)

        level_ids = [level.id for level in result.levels]
        question_ids = [q.id for level in result.levels for q in level.questions]
        assert len(set(level_ids)) == len(level_ids)
        assert len(set(question_ids)) == len(question_ids)
        assert [level.order for level in result.levels] == [1, 2, 3]
        for level in result.levels:
            assert all(level.tier.allows(q.archetype) for q in level.questions)
            assert all(q.point_value == level.tier.question_points for q in level.questions)

    def test_process_when_advanced_text_then_masters_level(self, engine):
        """Advanced documents get a fourth, masters level."""
        text = " ".join(["comprehensive"] * 20 + ["systematic"] * 20 + ["cat"] * 20) + "."
        doc, data = _txt("dense.txt", text)

        result = engine.process(doc, data)

        assert result.difficulty is DifficultyBand.ADVANCED
        assert [level.tier for level in result.levels][-1] is LevelTier.MASTERS
        assert result.total_question_count == 8 + 8 + 12 + 6

    def test_process_when_pptx_then_synthetic_text_analyzed(self, engine):
        """Formats without a decoder are analyzed from synthetic text."""
        doc = Document.from_name("cell-biology.pptx", 4)
        result = engine.process(doc, b"PK\x03\x04")

        assert result.word_count > 0
        assert result.levels
        assert result.document.resolve_format() is DocumentFormat.PPTX

    def test_process_when_same_seed_then_identical_output(self, photosynthesis_text):
        """Equal seeds give identical results apart from elapsed time."""
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)
        first = Engine.create(EngineConfig(seed=21)).process(doc, data)
        second = Engine.create(EngineConfig(seed=21)).process(doc, data)

        assert first.levels == second.levels
        assert first.profile == second.profile
        assert first.overall_confidence == second.overall_confidence

    def test_process_when_same_seed_different_documents_then_level_ids_differ(self, photosynthesis_text):
        """Documents processed under one seed never share level ids."""
        # Arrange
        doc_a, data = _txt("a.txt", photosynthesis_text)
        doc_b, _ = _txt("b.txt", photosynthesis_text)

        # Act
        first = Engine.create(EngineConfig(seed=5)).process(doc_a, data)
        second = Engine.create(EngineConfig(seed=5)).process(doc_b, data)

        # Assert
        first_ids = {level.id for level in first.levels}
        second_ids = {level.id for level in second.levels}
        assert first_ids.isdisjoint(second_ids)

    def test_process_when_rng_injected_then_used(self, engine, photosynthesis_text):
        """An injected RNG overrides the configured seed."""
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)
        first = engine.process(doc, data, rng=random.Random(5))
        second = engine.process(doc, data, rng=random.Random(5))

        assert first.levels == second.levels

    def test_process_when_complete_then_confidence_from_profile(self, engine, photosynthesis_text):
        """Overall confidence is derived from the profile and capped."""
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)
        result = engine.process(doc, data)

        assert result.overall_confidence == calculate_confidence(result.profile)
        assert 0.85 <= result.overall_confidence <= 0.98
        assert result.elapsed_seconds >= 0.0

    def test_process_file_when_path_then_reads_and_processes(self, engine, tmp_path, photosynthesis_text):
        """process_file() builds the document from the path."""
        path = tmp_path / "photosynthesis.txt"
        path.write_text(photosynthesis_text, encoding="utf-8")

        result = engine.process_file(path)

        assert result.document.name == "photosynthesis.txt"
        assert result.document.byte_size == len(photosynthesis_text.encode("utf-8"))

    def test_process_file_when_missing_then_raises(self, engine, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Document not found"):
            engine.process_file(tmp_path / "missing.txt")


class TestProgress:
    """Tests for progress reporting."""

    def test_process_when_callback_then_strictly_increasing_to_100(self, engine, photosynthesis_text):
        """Progress checkpoints increase and end at 100."""
        # Arrange
        updates = []
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)

        # Act
        engine.process(doc, data, on_progress=lambda label, pct: updates.append((label, pct)))

        # Assert
        percents = [pct for _, pct in updates]
        assert percents == [stage.percent for stage in PipelineStage]
        assert all(b > a for a, b in zip(percents, percents[1:]))
        assert updates[0] == ("Extracting text content...", 10)
        assert updates[-1] == ("Complete!", 100)

    def test_process_when_callback_raises_then_run_completes(self, engine, photosynthesis_text, caplog):
        """A failing progress callback never aborts the run."""
        def broken(label, pct):
            raise RuntimeError("display gone")

        doc, data = _txt("photosynthesis.txt", photosynthesis_text)
        with caplog.at_level(logging.WARNING, logger="mindloop.engine"):
            result = engine.process(doc, data, on_progress=broken)

        assert result.total_question_count == 28
        assert "display gone" in caplog.text


class TestErrors:
    """Tests for the failure contract."""

    def test_process_when_csv_then_unsupported_and_no_progress_past_extraction(self, engine):
        """Unsupported formats raise and produce no result."""
        updates = []
        doc = Document.from_name("grades.csv", 3)

        with pytest.raises(UnsupportedFormatError, match=r"\.csv"):
            engine.process(doc, b"a,b", on_progress=lambda label, pct: updates.append(pct))

        assert updates == [10]

    def test_process_when_txt_undecodable_then_extraction_error(self, engine):
        """Bad plain text propagates ExtractionError unchanged."""
        doc = Document.from_name("notes.txt", 3)
        with pytest.raises(ExtractionError):
            engine.process(doc, b"\xff\xfe\xfa")

    def test_process_when_stage_fails_then_processing_error_with_cause(self, engine, photosynthesis_text):
        """Unexpected stage failures are wrapped with the stage name."""
        doc, data = _txt("photosynthesis.txt", photosynthesis_text)

        with mock.patch("mindloop.engine.build_levels", side_effect=KeyError("slot")):
            with pytest.raises(ProcessingError, match="during curriculum: KeyError") as excinfo:
                engine.process(doc, data)

        assert excinfo.value.stage == "curriculum"
        assert isinstance(excinfo.value.__cause__, KeyError)


class TestCalculateConfidence:
    """Tests for calculate_confidence()."""

    def test_confidence_when_plain_short_profile_then_base(self, make_profile):
        """No bonus applies to a short plain profile."""
        assert calculate_confidence(make_profile()) == 0.85

    def test_confidence_when_all_bonuses_then_summed(self, make_profile):
        """Every bonus applies to a long, rich, structured profile."""
        profile = make_profile(
            word_count=5000,
            key_terms=tuple(f"term{i}" for i in range(12)),
            topics=("fundamentals", "methodology", "analysis", "evaluation"),
            structure=StructureFlags(has_headings=True, paragraph_count=4),
        )
        assert calculate_confidence(profile) == 0.97

    def test_confidence_when_above_cap_then_capped(self, make_profile):
        """Confidence never exceeds the cap."""
        profile = make_profile(word_count=5000)
        assert calculate_confidence(profile, ConfidenceThresholds(base=0.96)) == 0.98

    def test_confidence_when_headings_only_then_small_bonus(self, make_profile):
        """Headings add 0.02."""
        profile = make_profile(structure=StructureFlags(has_headings=True, paragraph_count=1))
        assert calculate_confidence(profile) == 0.87
