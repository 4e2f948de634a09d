"""Per-player join counting with pluralized welcome messages.

JoinTracker reads a player's stored join count, increments it, writes it
back and returns the welcome message key for the new count in the
player's language. Storage is pluggable through the JoinCountStore
protocol; InMemoryJoinCountStore is provided for single-process hosts
and tests. Persisting counts to disk is the host's concern.

Thread Safety:
    InMemoryJoinCountStore guards its dict with a Lock. JoinTracker
    serializes each read-increment-write so concurrent joins of the same
    player never lose an increment (when all writes go through the tracker).

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

from pluralkeys.constants import (
    DEFAULT_LANGUAGE_TAG,
    WELCOME_KEY_PREFIX,
)
from pluralkeys.enums import PluralCategory
from pluralkeys.errors import JoinCountError
from pluralkeys.messages import check_key_prefix, plural_message_key
from pluralkeys.runtime.rule_table import DEFAULT_RULE_TABLE, LanguageRuleTable

__all__ = [
    "InMemoryJoinCountStore",
    "JoinCountStore",
    "JoinTracker",
    "WelcomeMessage",
]

logger = logging.getLogger(__name__)


class JoinCountStore(Protocol):
    """Protocol for persistent per-player join counts.

    ``get_count`` returns None for players never seen before.
    """

    def get_count(self, player_id: str) -> int | None: ...

    def set_count(self, player_id: str, count: int) -> None: ...


class InMemoryJoinCountStore:
    """Process-local JoinCountStore backed by a dict.

    Example:
        >>> store = InMemoryJoinCountStore()
        >>> store.get_count("steve") is None
        True
        >>> store.set_count("steve", 3)
        >>> store.get_count("steve")
        3
    """

    __slots__ = ("_counts", "_lock")

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def get_count(self, player_id: str) -> int | None:
        with self._lock:
            return self._counts.get(player_id)

    def set_count(self, player_id: str, count: int) -> None:
        with self._lock:
            self._counts[player_id] = count

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


@dataclass(frozen=True, slots=True)
class WelcomeMessage:
    """Welcome message to deliver after a join.

    The host resolves ``key`` against the player's translation file and
    substitutes ``substitutions`` into the template.

    Attributes:
        player_id: Player who joined
        language_tag: Tag the category was selected for
        count: Join count after this join (1 on first join)
        category: Plural category selected for count
        key: Full translation key, e.g. "message.joincounter.welcome.singular"
    """

    player_id: str
    language_tag: str
    count: int
    category: PluralCategory
    key: str

    @property
    def substitutions(self) -> tuple[int]:
        """Positional template arguments (the join count)."""
        return (self.count,)


class JoinTracker:
    """Counts player joins and builds pluralized welcome messages.

    Args:
        store: Where join counts live
        key_prefix: Welcome message key prefix (default: WELCOME_KEY_PREFIX)
        table: Dispatch table (default: DEFAULT_RULE_TABLE)

    Raises:
        MessageKeyError: If key_prefix is empty

    Example:
        >>> tracker = JoinTracker(InMemoryJoinCountStore())
        >>> tracker.record_join("steve", "ru_RU").key
        'message.joincounter.welcome.singular'
        >>> tracker.record_join("steve", "ru_RU").key
        'message.joincounter.welcome.few'
    """

    __slots__ = ("_key_prefix", "_lock", "_store", "_table")

    def __init__(
        self,
        store: JoinCountStore,
        *,
        key_prefix: str = WELCOME_KEY_PREFIX,
        table: LanguageRuleTable = DEFAULT_RULE_TABLE,
    ) -> None:
        self._store = store
        self._key_prefix = check_key_prefix(key_prefix)
        self._table = table
        self._lock = threading.Lock()

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    def record_join(
        self,
        player_id: str,
        language_tag: str | None = None,
    ) -> WelcomeMessage:
        """Increment the player's join count and build the welcome message.

        A player with no stored count is treated as having joined zero
        times. A None language tag (client language unknown) uses
        DEFAULT_LANGUAGE_TAG.

        Args:
            player_id: Stable player identifier
            language_tag: Player's client language, if known

        Returns:
            WelcomeMessage for the incremented count

        Raises:
            JoinCountError: If the store holds something other than a
                non-negative int for this player. The store is not modified.
        """
        tag = language_tag if language_tag is not None else DEFAULT_LANGUAGE_TAG

        with self._lock:
            stored = self._store.get_count(player_id)
            previous = self._validated_count(player_id, stored)
            count = previous + 1
            self._store.set_count(player_id, count)

        category = self._table.family_for(tag).select(count)
        key = plural_message_key(self._key_prefix, tag, count, table=self._table)
        logger.info("Player %s joined (count=%d, key=%s)", player_id, count, key)
        return WelcomeMessage(
            player_id=player_id,
            language_tag=tag,
            count=count,
            category=category,
            key=key,
        )

    @staticmethod
    def _validated_count(player_id: str, stored: object) -> int:
        if stored is None:
            return 0
        # bool is an int subclass but never a valid count
        if isinstance(stored, bool) or not isinstance(stored, int) or stored < 0:
            logger.warning(
                "Corrupt join count for player %s: %r", player_id, stored
            )
            raise JoinCountError(player_id, stored)
        return stored
