"""
Module: extractor.synthetic

Purpose:
    Deterministic placeholder text for documents whose content cannot be
    extracted. The topic is derived from the file name and substituted
    into one fixed Markdown-like template per format, so the same name
    always yields the same text.

Key Functions:
    - topic_from_filename(): "cell-biology_notes.pdf" -> "cell biology notes"
    - generate_synthetic_text(): Render the template for a format

Used By:
    - extractor.extractor: Fallback for pdf/docx/pptx
"""

from __future__ import annotations

import re

from mindloop.core.models.documents import DocumentFormat

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_SEPARATOR_RE = re.compile(r"[-_]")


def topic_from_filename(file_name: str) -> str:
    """
    Derive a topic string from a file name.

    Strips the final extension and turns "-" and "_" into spaces.

    Example:
        >>> topic_from_filename("cell-biology_notes.pdf")
        'cell biology notes'
    """
    stem = _EXTENSION_RE.sub("", file_name)
    return _SEPARATOR_RE.sub(" ", stem)


_PDF_TEMPLATE = """\
# {title} - COMPREHENSIVE GUIDE

## Introduction
This document provides an in-depth analysis of {topic}, covering fundamental concepts, advanced methodologies, and practical applications in modern contexts.

## Core Concepts
Understanding {topic} requires mastery of several key principles:
- Foundational theories and frameworks
- Historical development and evolution
- Current best practices and standards
- Emerging trends and future directions

## Key Terminology
- {topic} fundamentals: The basic building blocks
- Core methodology: Systematic approaches
- Best practices: Industry-proven techniques
- Quality standards: Benchmarks for excellence
- Innovation drivers: Factors promoting advancement

## Practical Applications
Real-world implementation of {topic} involves:
1. Strategic planning and analysis
2. Systematic implementation approaches
3. Performance monitoring and optimization
4. Continuous improvement processes

## Advanced Topics
For deeper understanding, consider:
- Complex problem-solving techniques
- Integration with related disciplines
- Leadership and management aspects
- Ethical considerations and implications

## Conclusion
Mastery of {topic} requires dedicated study, practical application, and continuous learning to stay current with evolving standards and practices."""

_DOCX_TEMPLATE = """\
{title} - DETAILED STUDY MATERIAL

Table of Contents:
1. Overview and Introduction
2. Fundamental Principles
3. Detailed Analysis
4. Case Studies
5. Best Practices
6. Future Considerations

Overview:
This comprehensive guide explores {topic} from multiple perspectives, providing students with thorough understanding of core concepts and practical applications.

Fundamental Principles:
The study of {topic} is built upon several key principles that form the foundation for advanced learning and practical application.

Key Learning Objectives:
- Understand core concepts of {topic}
- Apply theoretical knowledge to practical scenarios
- Analyze complex problems and develop solutions
- Evaluate different approaches and methodologies

Assessment Criteria:
Students will be evaluated on their understanding of fundamental concepts, ability to apply knowledge in practical situations, and capacity for critical analysis."""

_PPTX_TEMPLATE = """\
{title} - PRESENTATION CONTENT

Slide 1: Introduction to {topic}
- Welcome and overview
- Learning objectives
- Session agenda

Slide 2: Key Concepts
- Definition and scope
- Core components
- Relationship to other fields

Slide 3: Fundamental Principles
- Primary theories
- Supporting frameworks
- Practical guidelines

Slide 4: Applications
- Real-world examples
- Case studies
- Implementation strategies

Slide 5: Best Practices
- Industry standards
- Proven methodologies
- Success factors

Slide 6: Advanced Topics
- Emerging trends
- Future developments
- Research opportunities

Slide 7: Summary and Next Steps
- Key takeaways
- Action items
- Additional resources"""

_TXT_TEMPLATE = """\
{topic} - Study Notes

Important Concepts:
- Understanding the basics of {topic}
- Key principles and applications
- Practical implementation strategies
- Common challenges and solutions

Study Objectives:
1. Master fundamental concepts
2. Develop practical skills
3. Apply knowledge effectively
4. Prepare for assessments

Key Terms to Remember:
- {topic} methodology
- Core principles
- Best practices
- Quality standards
- Implementation strategies

Practice Questions:
- What are the main components of {topic}?
- How does {topic} relate to other subjects?
- What are the practical applications?
- What challenges might arise in implementation?"""

TEMPLATES = {
    DocumentFormat.PDF: _PDF_TEMPLATE,
    DocumentFormat.DOCX: _DOCX_TEMPLATE,
    DocumentFormat.PPTX: _PPTX_TEMPLATE,
    DocumentFormat.TXT: _TXT_TEMPLATE,
}


def generate_synthetic_text(file_name: str, fmt: DocumentFormat) -> str:
    """
    Render the synthetic template for a file name and format.

    Args:
        file_name: Original file name, used to derive the topic
        fmt: Format whose template to use

    Returns:
        Non-empty placeholder text, identical for identical inputs
    """
    topic = topic_from_filename(file_name)
    template = TEMPLATES.get(fmt, _TXT_TEMPLATE)
    return template.format(topic=topic, title=topic.upper())
