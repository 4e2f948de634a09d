"""Plural rule runtime package.

Provides rule families, the language dispatch table and category
selection. Depends only on enums, errors and locale_utils.

Python 3.13+.
"""

from .plural_rules import resolve_category
from .rule_families import (
    ALL_FAMILIES,
    ARABIC6,
    CELTIC5,
    DEFAULT2,
    INVARIANT1,
    SLAVIC3_CZECH_SLOVAK,
    SLAVIC3_POLISH,
    SLAVIC3_RUSSIAN,
    Arabic6,
    Celtic5,
    Default2,
    Invariant1,
    RuleFamily,
    Slavic3,
)
from .rule_table import DEFAULT_RULE_TABLE, LanguageRuleTable

__all__ = [
    "ALL_FAMILIES",
    "ARABIC6",
    "CELTIC5",
    "DEFAULT2",
    "DEFAULT_RULE_TABLE",
    "INVARIANT1",
    "SLAVIC3_CZECH_SLOVAK",
    "SLAVIC3_POLISH",
    "SLAVIC3_RUSSIAN",
    "Arabic6",
    "Celtic5",
    "Default2",
    "Invariant1",
    "LanguageRuleTable",
    "RuleFamily",
    "Slavic3",
    "resolve_category",
]
