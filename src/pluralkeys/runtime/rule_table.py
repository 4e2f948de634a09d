"""Language to rule-family dispatch table.

Maps a normalized base language subtag ("ru", "pt") to its RuleFamily.
Languages without an entry use the two-form default rule. Adding a
language is an edit to ``_DEFAULT_ENTRIES``, not new code.

The table is immutable after construction: entries are validated once and
exposed through a read-only MappingProxyType, so a single instance can be
shared by any number of threads without synchronization.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from pluralkeys.errors import RuleTableError
from pluralkeys.locale_utils import base_language
from pluralkeys.runtime.rule_families import (
    ARABIC6,
    CELTIC5,
    DEFAULT2,
    INVARIANT1,
    SLAVIC3_CZECH_SLOVAK,
    SLAVIC3_POLISH,
    SLAVIC3_RUSSIAN,
    RuleFamily,
)

__all__ = ["DEFAULT_RULE_TABLE", "LanguageRuleTable"]

logger = logging.getLogger(__name__)


class LanguageRuleTable(Mapping[str, RuleFamily]):
    """Immutable mapping from base language subtag to RuleFamily.

    Keys must be non-empty lowercase ASCII letters (the form produced by
    ``base_language``). Invalid entries raise RuleTableError at construction.

    Args:
        entries: Base subtag to family mapping
        fallback: Family used for languages not in entries (default: DEFAULT2)

    Example:
        >>> table = LanguageRuleTable({"ru": SLAVIC3_RUSSIAN})
        >>> table.family_for("ru_RU").label
        'slavic3(russian)'
        >>> table.family_for("xx").label
        'default2'
    """

    __slots__ = ("_entries", "_fallback")

    def __init__(
        self,
        entries: Mapping[str, RuleFamily],
        *,
        fallback: RuleFamily = DEFAULT2,
    ) -> None:
        if not isinstance(fallback, RuleFamily):
            msg = f"Fallback must be a RuleFamily, got {type(fallback).__name__}"
            raise RuleTableError(msg)

        validated: dict[str, RuleFamily] = {}
        for language, family in entries.items():
            if not (
                isinstance(language, str)
                and language.isascii()
                and language.isalpha()
                and language.islower()
            ):
                msg = f"Invalid base language subtag: {language!r}"
                raise RuleTableError(msg)
            if not isinstance(family, RuleFamily):
                msg = (
                    f"Entry for '{language}' must be a RuleFamily, "
                    f"got {type(family).__name__}"
                )
                raise RuleTableError(msg)
            validated[language] = family

        self._entries: Mapping[str, RuleFamily] = MappingProxyType(validated)
        self._fallback = fallback
        logger.debug(
            "LanguageRuleTable built: %d languages, fallback %s",
            len(validated),
            fallback.label,
        )

    def __getitem__(self, language: str) -> RuleFamily:
        return self._entries[language]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LanguageRuleTable({len(self._entries)} languages, fallback={self._fallback.label})"

    @property
    def fallback(self) -> RuleFamily:
        """Family used for unknown, empty or malformed language tags."""
        return self._fallback

    def family_for(self, language_tag: str) -> RuleFamily:
        """Look up the rule family for a raw language tag.

        Normalizes the tag to its base subtag first. Never raises for
        string input: unknown tags resolve to the fallback family.

        Args:
            language_tag: Raw tag (e.g., "ru_RU", "PT-br", "")

        Returns:
            The matching RuleFamily, or the fallback
        """
        family = self._entries.get(base_language(language_tag))
        if family is None:
            logger.debug(
                "No plural rule for language tag %r, using %s",
                language_tag,
                self._fallback.label,
            )
            return self._fallback
        return family

    def languages_for(self, family: RuleFamily) -> tuple[str, ...]:
        """Return the sorted base subtags explicitly mapped to family."""
        return tuple(sorted(lang for lang, fam in self._entries.items() if fam == family))

    def with_entries(self, entries: Mapping[str, RuleFamily]) -> LanguageRuleTable:
        """Return a new table with entries added or replaced.

        The receiver is left untouched.

        Example:
            >>> table = DEFAULT_RULE_TABLE.with_entries({"be": SLAVIC3_RUSSIAN})
            >>> table.family_for("be").label
            'slavic3(russian)'
            >>> "be" in DEFAULT_RULE_TABLE
            False
        """
        return LanguageRuleTable({**self._entries, **entries}, fallback=self._fallback)


_DEFAULT_ENTRIES: dict[str, RuleFamily] = {
    # Two-form
    "en": DEFAULT2,
    "de": DEFAULT2,
    "fr": DEFAULT2,
    "pt": DEFAULT2,
    "es": DEFAULT2,
    # Slavic three-form
    "ru": SLAVIC3_RUSSIAN,
    "uk": SLAVIC3_RUSSIAN,
    "pl": SLAVIC3_POLISH,
    "cs": SLAVIC3_CZECH_SLOVAK,
    "sk": SLAVIC3_CZECH_SLOVAK,
    # Celtic five-form
    "ga": CELTIC5,
    "gd": CELTIC5,
    # Arabic six-form
    "ar": ARABIC6,
    # No grammatical number
    "ja": INVARIANT1,
    "zh": INVARIANT1,
    "ko": INVARIANT1,
    "vi": INVARIANT1,
    "th": INVARIANT1,
    "hi": INVARIANT1,
}

DEFAULT_RULE_TABLE: LanguageRuleTable = LanguageRuleTable(_DEFAULT_ENTRIES)
"""Process-wide read-only table, built once at import."""
