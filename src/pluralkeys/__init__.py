"""pluralkeys - Grammatical plural-form keys for localized messages.

Selects the plural category ("singular", "few", "dual", ...) for a count in
a given language, and turns it into a translation key such as
"message.joincounter.welcome.few". Supports two-form, Slavic three-form,
Celtic five-form, Arabic six-form and invariant languages; unknown
languages fall back to the two-form rule.

Public API:
    resolve_category - Plural category for (language tag, count); never raises
    PluralCategory - Category enumeration (StrEnum)
    LanguageRuleTable - Immutable language -> rule family dispatch table
    plural_message_key - "<prefix>.<category>" for a count
    required_message_keys - Every key a language's translation must define
    JoinTracker - Per-player join counting with welcome message keys

Exceptions:
    PluralKeysError - Base exception class
    RuleTableError - Invalid custom rule table entry
    MessageKeyError - Empty message key prefix
    JoinCountError - Corrupt stored join count
    LocaleDataError - Babel has no CLDR data for a tag

Submodules:
    pluralkeys.runtime - Rule families and dispatch
    pluralkeys.introspection - CLDR cross-check via Babel
"""

from .enums import PluralCategory, SlavicVariant
from .errors import (
    JoinCountError,
    LocaleDataError,
    MessageKeyError,
    PluralKeysError,
    RuleTableError,
)
from .messages import plural_message_key, required_message_keys
from .runtime import DEFAULT_RULE_TABLE, LanguageRuleTable, RuleFamily, resolve_category
from .tracker import InMemoryJoinCountStore, JoinCountStore, JoinTracker, WelcomeMessage

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralkeys")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_RULE_TABLE",
    "InMemoryJoinCountStore",
    "JoinCountError",
    "JoinCountStore",
    "JoinTracker",
    "LanguageRuleTable",
    "LocaleDataError",
    "MessageKeyError",
    "PluralCategory",
    "PluralKeysError",
    "RuleFamily",
    "RuleTableError",
    "SlavicVariant",
    "WelcomeMessage",
    "__version__",
    "plural_message_key",
    "required_message_keys",
    "resolve_category",
]
