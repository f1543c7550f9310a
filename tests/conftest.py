import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import mindloop
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mindloop.config import EngineConfig  # noqa: E402
from mindloop.core.models import (  # noqa: E402
    AnalysisProfile,
    DifficultyBand,
    ReadingLevel,
    StructureFlags,
)
from mindloop.engine import Engine  # noqa: E402


# Five sentences, 50 words, no headings or list markers
PHOTOSYNTHESIS_TEXT = (
    "Plants use sunlight to make their own food every day. "
    "This process is called photosynthesis and it happens in leaves. "
    "Leaves hold a green pigment named chlorophyll that absorbs light. "
    "Water comes from the roots and air enters the leaves. "
    "Plants turn water and carbon dioxide into sugar and oxygen."
)


# Common test fixtures
@pytest.fixture
def photosynthesis_text() -> str:
    """Return the 50-word plain paragraph used by end-to-end tests."""
    return PHOTOSYNTHESIS_TEXT


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded RNG."""
    return random.Random(1234)


@pytest.fixture
def engine() -> Engine:
    """Return a ready, seeded engine without the PDF decoder."""
    return Engine.create(EngineConfig(seed=7))


@pytest.fixture
def make_profile():
    """Factory for AnalysisProfile with sensible defaults."""

    def _make(**overrides) -> AnalysisProfile:
        values = dict(
            word_count=120,
            key_terms=("osmosis", "membrane", "water"),
            topics=("fundamentals",),
            difficulty=DifficultyBand.BEGINNER,
            reading_level=ReadingLevel.STANDARD,
            summary="Osmosis moves water across a membrane.",
            structure=StructureFlags(paragraph_count=1),
            concepts=(),
        )
        values.update(overrides)
        return AnalysisProfile(**values)

    return _make
