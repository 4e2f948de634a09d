"""pluralkeys exception hierarchy.

The plural engine itself never raises: unknown language tags degrade to
the two-form default rule. These exceptions cover the surrounding
integration layers (custom rule tables, message keys, join tracking and
the CLDR cross-check).

Each concrete error also inherits the builtin it specializes, so callers
may catch either ``PluralKeysError`` or the builtin.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "JoinCountError",
    "LocaleDataError",
    "MessageKeyError",
    "PluralKeysError",
    "RuleTableError",
]


class PluralKeysError(Exception):
    """Base exception for all pluralkeys errors."""


class RuleTableError(PluralKeysError, ValueError):
    """Invalid entry passed to a LanguageRuleTable.

    Raised at construction time, so a table that exists is always valid.
    """


class MessageKeyError(PluralKeysError, ValueError):
    """Message key cannot be assembled (e.g., empty prefix)."""


class JoinCountError(PluralKeysError, ValueError):
    """Stored join count is not a non-negative integer.

    Indicates a corrupt count store. The tracker refuses to overwrite
    the stored value so the corruption stays visible.

    Attributes:
        player_id: Player whose stored count is invalid
        stored_value: The value read from the store
    """

    def __init__(self, player_id: str, stored_value: object) -> None:
        """Initialize JoinCountError.

        Args:
            player_id: Player whose stored count is invalid
            stored_value: The value read from the store
        """
        super().__init__(
            f"Invalid stored join count for player '{player_id}': {stored_value!r}"
        )
        self.player_id = player_id
        self.stored_value = stored_value


class LocaleDataError(PluralKeysError, LookupError):
    """Babel has no CLDR plural data for a language tag.

    Only raised by the CLDR cross-check; never by resolve_category().

    Attributes:
        language_tag: The tag that could not be resolved
    """

    def __init__(self, language_tag: str, reason: str) -> None:
        """Initialize LocaleDataError.

        Args:
            language_tag: The tag that could not be resolved
            reason: Underlying Babel error text
        """
        super().__init__(f"No CLDR plural data for '{language_tag}': {reason}")
        self.language_tag = language_tag
