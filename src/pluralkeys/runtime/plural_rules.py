"""Plural category selection.

Resolves ``(language_tag, count)`` to a PluralCategory in three steps:
tag normalization (base subtag, lowercased), rule-family lookup in a
LanguageRuleTable, and rule evaluation.

The function is total. Empty, unknown or malformed tags fall back to the
two-form default rule instead of raising, so callers never need an error
path. It is pure and keeps no state, so it is safe to call from any
number of threads.

Counts should be non-negative; results for negative counts are unspecified.

Python 3.13+. Zero external dependencies.
"""

from pluralkeys.enums import PluralCategory
from pluralkeys.runtime.rule_table import DEFAULT_RULE_TABLE, LanguageRuleTable

__all__ = ["resolve_category"]


def resolve_category(
    language_tag: str,
    count: int,
    *,
    table: LanguageRuleTable = DEFAULT_RULE_TABLE,
) -> PluralCategory:
    """Select the plural category for count in the given language.

    Args:
        language_tag: Raw tag, POSIX or BCP-47 (e.g., "ru_RU", "pt-BR", "ar")
        count: Non-negative number being pluralized
        table: Dispatch table (default: DEFAULT_RULE_TABLE)

    Returns:
        One of the categories the selected family defines

    Examples:
        >>> resolve_category("en_US", 1)
        <PluralCategory.SINGULAR: 'singular'>
        >>> resolve_category("ru", 22)
        <PluralCategory.FEW: 'few'>
        >>> resolve_category("ar", 100)
        <PluralCategory.PLURAL: 'plural'>
        >>> resolve_category("xx", 2)  # Unknown tag: two-form default
        <PluralCategory.PLURAL: 'plural'>
    """
    return table.family_for(language_tag).select(count)
