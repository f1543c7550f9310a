"""Fixed vocabularies used by content analysis."""

from __future__ import annotations

# Topic tags a profile may carry, in selection order
TOPIC_VOCABULARY: tuple[str, ...] = (
    "fundamentals",
    "methodology",
    "applications",
    "best practices",
    "analysis",
    "implementation",
    "evaluation",
    "optimization",
)

# Substrings whose presence marks a document as technical
TECHNICAL_TERMS: tuple[str, ...] = (
    "methodology",
    "framework",
    "implementation",
    "optimization",
    "analysis",
    "evaluation",
    "systematic",
    "comprehensive",
)

# Literal markers that flag a line as a concept
CONCEPT_MARKERS: tuple[str, ...] = (":", "Definition", "Key")

# Fallbacks when a profile has no key terms
FALLBACK_LEVEL_TOPIC = "Document Content"
FALLBACK_QUESTION_TOPIC = "concept"
