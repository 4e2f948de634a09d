"""Cross-check rule families against Unicode CLDR plural rules.

The built-in rule families are simplified, integer-only rules with their
own category names. This module maps those names onto CLDR's
(singular -> one, dual -> two, plural -> other) and compares them with
Babel's CLDR data, so maintainers can see where a family deliberately
(or accidentally) departs from CLDR.

Diagnostic only: nothing here changes what resolve_category() returns.

Python 3.13+. Uses Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from babel.core import UnknownLocaleError

from pluralkeys.constants import CLDR_CHECK_RANGE_END
from pluralkeys.enums import PluralCategory
from pluralkeys.errors import LocaleDataError
from pluralkeys.locale_utils import get_babel_locale
from pluralkeys.runtime.rule_table import DEFAULT_RULE_TABLE, LanguageRuleTable

__all__ = [
    "CldrDivergence",
    "cldr_category",
    "find_cldr_divergences",
    "to_cldr_category",
]

_CLDR_NAMES = MappingProxyType({
    PluralCategory.ZERO: "zero",
    PluralCategory.SINGULAR: "one",
    PluralCategory.DUAL: "two",
    PluralCategory.FEW: "few",
    PluralCategory.MANY: "many",
    PluralCategory.PLURAL: "other",
})


@dataclass(frozen=True, slots=True)
class CldrDivergence:
    """A count where a rule family and CLDR disagree.

    Attributes:
        count: The count being pluralized
        category: Category chosen by the rule family
        cldr: Category chosen by CLDR ("zero", "one", "two", "few", "many", "other")
    """

    count: int
    category: PluralCategory
    cldr: str

    @property
    def expected_cldr(self) -> str:
        """CLDR name of the family's category."""
        return to_cldr_category(self.category)


def to_cldr_category(category: PluralCategory) -> str:
    """Map a PluralCategory to its CLDR category name.

    Example:
        >>> to_cldr_category(PluralCategory.DUAL)
        'two'
    """
    return _CLDR_NAMES[category]


def cldr_category(language_tag: str, count: int) -> str:
    """Select the CLDR plural category using Babel's data.

    Args:
        language_tag: Locale code (e.g., "ru_RU", "ar-SA")
        count: Number to categorize

    Returns:
        "zero", "one", "two", "few", "many" or "other"

    Raises:
        LocaleDataError: If Babel does not know the locale or it is malformed

    Example:
        >>> cldr_category("ru", 5)
        'many'
    """
    try:
        locale_obj = get_babel_locale(language_tag)
    except (UnknownLocaleError, ValueError) as e:
        raise LocaleDataError(language_tag, str(e)) from e
    return locale_obj.plural_form(count)


def find_cldr_divergences(
    language_tag: str,
    counts: Iterable[int] = range(CLDR_CHECK_RANGE_END),
    *,
    table: LanguageRuleTable = DEFAULT_RULE_TABLE,
) -> tuple[CldrDivergence, ...]:
    """List counts where the language's rule family departs from CLDR.

    Args:
        language_tag: Locale code Babel understands
        counts: Counts to compare (default: 0..200)
        table: Dispatch table (default: DEFAULT_RULE_TABLE)

    Returns:
        Divergences in the order counts were given; empty if none

    Raises:
        LocaleDataError: If Babel has no data for language_tag

    Examples:
        >>> find_cldr_divergences("ar")
        ()
        >>> find_cldr_divergences("ru", [5])
        (CldrDivergence(count=5, category=<PluralCategory.PLURAL: 'plural'>, cldr='many'),)
    """
    family = table.family_for(language_tag)
    divergences: list[CldrDivergence] = []
    for count in counts:
        category = family.select(count)
        cldr = cldr_category(language_tag, count)
        if to_cldr_category(category) != cldr:
            divergences.append(CldrDivergence(count=count, category=category, cldr=cldr))
    return tuple(divergences)
