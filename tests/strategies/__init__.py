"""Hypothesis strategies for pluralkeys property-based testing.

Usage:
    from tests.strategies import language_tags, counts
    from tests.strategies.language_tags import known_base_languages

Event-Emitting Strategies (HypoFuzz-Optimized):
    - language_tags: Emits tag_shape=bare|posix|bcp47|empty|unknown
"""

from .language_tags import (
    KNOWN_BASE_LANGUAGES,
    case_variants,
    counts,
    known_base_languages,
    language_tags,
    region_subtags,
    unknown_base_languages,
)

__all__ = [
    "KNOWN_BASE_LANGUAGES",
    "case_variants",
    "counts",
    "known_base_languages",
    "language_tags",
    "region_subtags",
    "unknown_base_languages",
]
