"""Shared constants for pluralkeys.

Centralized configuration used across the runtime, message-key and
tracking modules. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Language tags: Fallback tag and recognized subtag separators
- Message keys: Welcome key prefix and key separator
- Cache limits: Memory bounds for Babel locale parsing
- CLDR cross-check: Default count range

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Language tags
    "DEFAULT_LANGUAGE_TAG",
    "LANGUAGE_TAG_SEPARATORS",
    # Message keys
    "WELCOME_KEY_PREFIX",
    "MESSAGE_KEY_SEPARATOR",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # CLDR cross-check
    "CLDR_CHECK_RANGE_END",
]

# ============================================================================
# LANGUAGE TAGS
# ============================================================================

# Tag assumed when a player's client language is unknown.
DEFAULT_LANGUAGE_TAG: str = "en_US"

# POSIX ("ru_RU") and BCP-47 ("pt-BR") separators. Only the first
# occurrence matters: everything left of it is the base language subtag.
LANGUAGE_TAG_SEPARATORS: tuple[str, ...] = ("_", "-")

# ============================================================================
# MESSAGE KEYS
# ============================================================================

# Prefix of the welcome message family, e.g. "message.joincounter.welcome.few"
WELCOME_KEY_PREFIX: str = "message.joincounter.welcome"

MESSAGE_KEY_SEPARATOR: str = "."

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed Babel Locale objects kept by get_babel_locale().
# Only the CLDR cross-check parses locales; the plural engine never does.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CLDR CROSS-CHECK
# ============================================================================

# Exclusive upper bound of the default count range (0..200 inclusive).
CLDR_CHECK_RANGE_END: int = 201
