"""
Module: builder.curriculum

Purpose:
    Turns an AnalysisProfile into the ordered level skeleton of a
    curriculum. Slots are fixed; only the presence of the masters slot
    depends on the profile (advanced difficulty).

Key Functions:
    - build_levels(): Profile -> ordered Levels without questions

Used By:
    - engine: Curriculum stage
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from mindloop.common.vocabulary import FALLBACK_LEVEL_TOPIC
from mindloop.core.models.levels import Level, LockState
from mindloop.core.models.profile import AnalysisProfile, DifficultyBand
from mindloop.core.models.tiers import LevelTier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelSlot:
    """Fixed template for one curriculum position."""

    tier: LevelTier
    title: str
    description: str
    lock_state: LockState
    estimated_minutes: int
    point_value: int


CORE_SLOTS: tuple[LevelSlot, ...] = (
    LevelSlot(
        tier=LevelTier.EXPLORER,
        title="Fundamentals",
        description="Master the basic concepts and key terminology",
        lock_state=LockState.UNLOCKED,
        estimated_minutes=15,
        point_value=100,
    ),
    LevelSlot(
        tier=LevelTier.EXPLORER,
        title="Key Concepts",
        description="Understand important ideas and relationships",
        lock_state=LockState.UNLOCKED,
        estimated_minutes=20,
        point_value=150,
    ),
    LevelSlot(
        tier=LevelTier.CHALLENGER,
        title="Applications",
        description="Apply knowledge in practical scenarios",
        lock_state=LockState.LOCKED,
        estimated_minutes=25,
        point_value=200,
    ),
)

MASTERS_SLOT = LevelSlot(
    tier=LevelTier.MASTERS,
    title="Mastery Challenge",
    description="Demonstrate complete understanding and expertise",
    lock_state=LockState.LOCKED,
    estimated_minutes=35,
    point_value=300,
)


def slots_for(profile: AnalysisProfile) -> tuple[LevelSlot, ...]:
    """Slots used for a profile: the three core slots, plus masters when advanced."""
    if profile.difficulty is DifficultyBand.ADVANCED:
        return CORE_SLOTS + (MASTERS_SLOT,)
    return CORE_SLOTS


def build_levels(
    profile: AnalysisProfile,
    run_id: Optional[str] = None,
) -> List[Level]:
    """
    Build the ordered level skeleton for a profile.

    Args:
        profile: Analysis of the source document
        run_id: Token making level ids unique across runs (random if None)

    Returns:
        Levels with order 1..N and no questions

    Example:
        >>> levels = build_levels(profile, run_id="abc")
        >>> [level.id for level in levels]
        ['explorer_abc_1', 'explorer_abc_2', 'challenger_abc_1']
    """
    run_id = run_id or uuid.uuid4().hex[:12]
    topic = profile.primary_term or FALLBACK_LEVEL_TOPIC

    levels: List[Level] = []
    tier_counts: dict[LevelTier, int] = {}
    for order, slot in enumerate(slots_for(profile), start=1):
        tier_counts[slot.tier] = tier_counts.get(slot.tier, 0) + 1
        levels.append(
            Level(
                id=f"{slot.tier.value}_{run_id}_{tier_counts[slot.tier]}",
                name=f"{topic} - {slot.title}",
                description=slot.description,
                tier=slot.tier,
                lock_state=slot.lock_state,
                estimated_minutes=slot.estimated_minutes,
                point_value=slot.point_value,
                order=order,
            )
        )

    logger.debug(f"Built {len(levels)} levels for topic {topic!r}")
    return levels
