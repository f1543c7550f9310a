"""
Module: builder

Purpose:
    Curriculum synthesis: the level skeleton derived from a profile and
    the question batches that populate each level.

Key Functions:
    - build_levels(): Profile -> ordered Levels
    - generate_questions(): Level + profile -> Questions
    - question_count_for(), archetypes_for(): Per-tier tables
"""

from .curriculum import build_levels
from .questions import (
    archetypes_for,
    generate_questions,
    question_count_for,
    render_question_template,
)

__all__ = [
    "archetypes_for",
    "build_levels",
    "generate_questions",
    "question_count_for",
    "render_question_template",
]
