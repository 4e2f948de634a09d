"""Quickstart example for pluralkeys.

Shows plural category selection, message-key assembly, join tracking
and the CLDR cross-check. Translation lookup and template substitution
are left to the host; a plain dict stands in for a translation file.
"""

import logging

from pluralkeys import (
    InMemoryJoinCountStore,
    JoinTracker,
    plural_message_key,
    required_message_keys,
    resolve_category,
)
from pluralkeys.introspection import find_cldr_divergences

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# Example 1: Plural categories
print("=" * 50)
print("Example 1: Plural Categories")
print("=" * 50)

for tag in ("en_US", "ru_RU", "pl", "ga", "ar", "ja_JP", "xx"):
    row = ", ".join(f"{n}={resolve_category(tag, n)}" for n in (0, 1, 2, 5, 11, 21, 101))
    print(f"{tag:6} {row}")

# Example 2: Message keys
print("\n" + "=" * 50)
print("Example 2: Message Keys")
print("=" * 50)

print(plural_message_key("item.count", "ru_RU", 3))
# Output: item.count.few
print(required_message_keys("item.count", "ar"))
# Output: ('item.count.zero', 'item.count.singular', ..., 'item.count.plural')

# Example 3: Join tracking
print("\n" + "=" * 50)
print("Example 3: Join Tracking")
print("=" * 50)

russian = {
    "message.joincounter.welcome.singular": "Вы зашли %d раз",
    "message.joincounter.welcome.few": "Вы зашли %d раза",
    "message.joincounter.welcome.plural": "Вы зашли %d раз",
}

store = InMemoryJoinCountStore()
store.set_count("ivan", 19)
tracker = JoinTracker(store)
for _ in range(3):
    message = tracker.record_join("ivan", "ru_RU")
    print(russian[message.key] % message.substitutions)
# Output: Вы зашли 20 раз / Вы зашли 21 раз / Вы зашли 22 раза

# Example 4: CLDR cross-check
print("\n" + "=" * 50)
print("Example 4: CLDR Cross-Check")
print("=" * 50)

for tag in ("ar", "ga", "pl"):
    divergences = find_cldr_divergences(tag)
    print(f"{tag}: {len(divergences)} divergences from CLDR in 0..200")
