"""
Module: builder.questions

Purpose:
    Synthesizes a fixed-size batch of questions for a level. Each
    question is about one key term and uses an archetype drawn from the
    level tier's pool; prompts and answers come from fixed templates
    parameterized only by the term.

Key Functions:
    - question_count_for(): Batch size per tier
    - archetypes_for(): Allowed archetype pool per tier
    - render_question_template(): Prompt/answer/explanation for a term
    - generate_questions(): Level + profile -> ordered Questions

Randomness:
    Archetype selection and confidence scores use the injected
    ``random.Random``; everything else is deterministic.

Used By:
    - engine: Question stage
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from mindloop.common.vocabulary import FALLBACK_QUESTION_TOPIC
from mindloop.core.models.levels import Level
from mindloop.core.models.profile import AnalysisProfile
from mindloop.core.models.questions import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    Answer,
    ChoiceAnswer,
    EssayAnswer,
    Question,
    TextAnswer,
)
from mindloop.core.models.tiers import LevelTier, QuestionArchetype

logger = logging.getLogger(__name__)

ESSAY_MIN_WORDS = 150


def question_count_for(tier: LevelTier) -> int:
    """Number of questions generated for a level of this tier (8/12/6)."""
    return tier.question_count


def archetypes_for(tier: LevelTier) -> tuple[QuestionArchetype, ...]:
    """Archetypes a level of this tier may contain."""
    return tier.archetypes


@dataclass(frozen=True)
class RenderedTemplate:
    """Term-specific content of one question."""

    prompt: str
    answer: Answer
    explanation: str


def _multiple_choice(term: str) -> RenderedTemplate:
    return RenderedTemplate(
        prompt=f"Which of the following best describes {term}?",
        answer=ChoiceAnswer(
            options=(
                f"The primary definition of {term}",
                f"An alternative interpretation of {term}",
                "A related but different concept",
                "An opposite or contrasting idea",
            ),
            correct_index=0,
        ),
        explanation=(
            f"{term} is a key concept that plays an important role in "
            "understanding the subject matter."
        ),
    )


def _true_false(term: str) -> RenderedTemplate:
    return RenderedTemplate(
        prompt=f"True or False: {term} is fundamental to this topic.",
        answer=ChoiceAnswer(options=("True", "False"), correct_index=0),
        explanation=f"{term} is indeed a fundamental concept in this area of study.",
    )


def _fill_blank(term: str) -> RenderedTemplate:
    return RenderedTemplate(
        prompt=f"Complete the statement: The main purpose of {term} is to _______.",
        answer=TextAnswer("provide essential functionality and understanding"),
        explanation=f"{term} serves a crucial role in the overall framework.",
    )


def _short_answer(term: str) -> RenderedTemplate:
    return RenderedTemplate(
        prompt=f"Explain the significance of {term} in practical applications.",
        answer=TextAnswer(
            f"{term} is significant because it provides the foundation for "
            "understanding and implementing key concepts in real-world scenarios."
        ),
        explanation=(
            "This question tests your ability to connect theoretical concepts "
            "with practical applications."
        ),
    )


def _essay(term: str) -> RenderedTemplate:
    return RenderedTemplate(
        prompt=f"Analyze the role of {term} and its impact on the broader subject area.",
        answer=EssayAnswer(min_words=ESSAY_MIN_WORDS),
        explanation=(
            "This essay question evaluates your comprehensive understanding "
            "and analytical thinking skills."
        ),
    )


_TEMPLATES: Dict[QuestionArchetype, Callable[[str], RenderedTemplate]] = {
    QuestionArchetype.MULTIPLE_CHOICE: _multiple_choice,
    QuestionArchetype.TRUE_FALSE: _true_false,
    QuestionArchetype.FILL_BLANK: _fill_blank,
    QuestionArchetype.SHORT_ANSWER: _short_answer,
    QuestionArchetype.ESSAY: _essay,
}


def render_question_template(archetype: QuestionArchetype, term: str) -> RenderedTemplate:
    """
    Render the fixed template of an archetype for a term.

    Example:
        >>> render_question_template(QuestionArchetype.TRUE_FALSE, "osmosis").prompt
        'True or False: osmosis is fundamental to this topic.'
    """
    return _TEMPLATES[archetype](term)


def generate_confidence(rng: random.Random) -> float:
    """Random confidence in [0.80, 1.00], rounded to 2 decimals."""
    return round(rng.uniform(MIN_CONFIDENCE, MAX_CONFIDENCE), 2)


def generate_questions(
    level: Level,
    profile: AnalysisProfile,
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Generate the question batch for a level.

    For index i the topic is ``key_terms[i % len(key_terms)]`` (or
    "concept" without key terms) and the archetype is drawn uniformly
    from the tier pool.

    Args:
        level: Level the questions belong to
        profile: Analysis supplying key terms
        rng: Randomness for archetype and confidence (fresh RNG if None)

    Returns:
        Exactly question_count_for(level.tier) questions

    Invariants:
        - every archetype is in archetypes_for(level.tier)
        - every point_value equals level.tier.question_points
    """
    rng = rng or random.Random()
    pool = archetypes_for(level.tier)
    terms = profile.key_terms

    questions: List[Question] = []
    for index in range(question_count_for(level.tier)):
        term = terms[index % len(terms)] if terms else FALLBACK_QUESTION_TOPIC
        archetype = rng.choice(pool)
        rendered = render_question_template(archetype, term)
        questions.append(
            Question(
                id=f"{level.id}_q{index + 1}",
                archetype=archetype,
                prompt=rendered.prompt,
                answer=rendered.answer,
                explanation=rendered.explanation,
                point_value=level.tier.question_points,
                topic=term,
                tier=level.tier,
                confidence=generate_confidence(rng),
            )
        )

    logger.debug(f"Generated {len(questions)} questions for {level.id}")
    return questions
