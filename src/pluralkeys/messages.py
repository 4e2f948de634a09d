"""Plural message-key assembly.

Builds translation keys of the form ``<prefix>.<category>`` so a caller
can resolve the correctly pluralized template from its own translation
store. Template interpolation and translation loading belong to the
caller.

Python 3.13+. Zero external dependencies.
"""

from pluralkeys.constants import MESSAGE_KEY_SEPARATOR
from pluralkeys.errors import MessageKeyError
from pluralkeys.runtime.rule_table import DEFAULT_RULE_TABLE, LanguageRuleTable

__all__ = ["check_key_prefix", "plural_message_key", "required_message_keys"]


def check_key_prefix(prefix: str) -> str:
    """Return prefix without trailing separators.

    Raises:
        MessageKeyError: If nothing but separators (or nothing) remains
    """
    stripped = prefix.rstrip(MESSAGE_KEY_SEPARATOR)
    if not stripped:
        msg = f"Message key prefix must not be empty, got {prefix!r}"
        raise MessageKeyError(msg)
    return stripped


def plural_message_key(
    prefix: str,
    language_tag: str,
    count: int,
    *,
    table: LanguageRuleTable = DEFAULT_RULE_TABLE,
) -> str:
    """Return the translation key for count in the given language.

    A trailing separator on prefix is tolerated ("a.b." and "a.b" are equivalent).

    Args:
        prefix: Message key prefix (e.g., "message.joincounter.welcome")
        language_tag: Raw language tag
        count: Non-negative count
        table: Dispatch table (default: DEFAULT_RULE_TABLE)

    Returns:
        Full key, e.g. "message.joincounter.welcome.few"

    Raises:
        MessageKeyError: If prefix is empty

    Example:
        >>> plural_message_key("item.count", "ru_RU", 3)
        'item.count.few'
    """
    base = check_key_prefix(prefix)
    category = table.family_for(language_tag).select(count)
    return f"{base}{MESSAGE_KEY_SEPARATOR}{category}"


def required_message_keys(
    prefix: str,
    language_tag: str,
    *,
    table: LanguageRuleTable = DEFAULT_RULE_TABLE,
) -> tuple[str, ...]:
    """List every key a translation file must define for this language.

    One key per category of the language's rule family, in family order.
    A translation that defines all of them never misses a key at runtime.

    Example:
        >>> required_message_keys("item.count", "ja_JP")
        ('item.count.plural',)
        >>> required_message_keys("item.count", "pl")
        ('item.count.singular', 'item.count.few', 'item.count.plural')
    """
    base = check_key_prefix(prefix)
    family = table.family_for(language_tag)
    return tuple(f"{base}{MESSAGE_KEY_SEPARATOR}{category}" for category in family.categories)
