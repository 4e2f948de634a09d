"""Enumerations for pluralkeys type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a category concatenates
directly onto a message-key prefix.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """Grammatical plural-form category selected for a count.

    StrEnum provides automatic string conversion: str(PluralCategory.FEW) == "few"

    Every rule family uses a subset of these members and always includes
    PLURAL as its catch-all.
    """

    ZERO = "zero"
    """Exactly zero items (Arabic)."""

    SINGULAR = "singular"
    """One item."""

    DUAL = "dual"
    """Exactly two items (Arabic, Celtic)."""

    FEW = "few"
    """Small-number form (Slavic 2-4 endings, Celtic 3-6, Arabic 3-10)."""

    MANY = "many"
    """Larger-number form (Celtic 7-10, Arabic 11-99)."""

    PLURAL = "plural"
    """Catch-all form, defined by every rule family."""


class SlavicVariant(StrEnum):
    """Sub-variant of the Slavic three-form rule family.

    StrEnum provides automatic string conversion: str(SlavicVariant.POLISH) == "polish"
    """

    RUSSIAN = "russian"
    """Ends in 1 (not 11) is singular: 1, 21, 31, 101 (Russian, Ukrainian)."""

    POLISH = "polish"
    """Only exactly 1 is singular; 2-4 endings (not 12-14) are few."""

    CZECH_SLOVAK = "czech_slovak"
    """Exactly 1 is singular, exactly 2-4 are few, no modular endings."""


__all__ = [
    "PluralCategory",
    "SlavicVariant",
]
