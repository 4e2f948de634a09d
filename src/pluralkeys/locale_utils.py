"""Locale utilities for language-tag normalization.

Centralizes tag handling used throughout the codebase:
- normalize_locale: BCP-47 to POSIX conversion for Babel
- base_language: base subtag used for rule-family dispatch
- get_babel_locale: cached Babel Locale parsing (CLDR cross-check only)

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from pluralkeys.constants import LANGUAGE_TAG_SEPARATORS, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "base_language",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def base_language(language_tag: str) -> str:
    """Extract the case-folded base language subtag from a tag.

    Splits on the first ``_`` or ``-`` and lowercases the left portion.
    A tag without a separator is its own base subtag. Never raises for
    string input; malformed tags simply produce a base that no rule
    table knows about.

    Args:
        language_tag: Raw tag (e.g., "ru_RU", "pt-BR", "EN", "")

    Returns:
        Lowercase base subtag (e.g., "ru", "pt", "en", "")

    Example:
        >>> base_language("ru_RU")
        'ru'
        >>> base_language("zh-Hans-CN")
        'zh'
        >>> base_language("")
        ''
    """
    cut = len(language_tag)
    for separator in LANGUAGE_TAG_SEPARATORS:
        index = language_tag.find(separator)
        if index != -1 and index < cut:
            cut = index
    return language_tag[:cut].lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.
    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
