"""Tests for LanguageRuleTable construction, lookup and immutability."""

import pytest

from pluralkeys import DEFAULT_RULE_TABLE, LanguageRuleTable, RuleTableError
from pluralkeys.runtime.rule_families import (
    ARABIC6,
    CELTIC5,
    DEFAULT2,
    INVARIANT1,
    SLAVIC3_CZECH_SLOVAK,
    SLAVIC3_POLISH,
    SLAVIC3_RUSSIAN,
)


class TestDefaultTable:

    @pytest.mark.parametrize(
        ("language", "family"),
        [
            ("en", DEFAULT2),
            ("de", DEFAULT2),
            ("fr", DEFAULT2),
            ("pt", DEFAULT2),
            ("es", DEFAULT2),
            ("ru", SLAVIC3_RUSSIAN),
            ("uk", SLAVIC3_RUSSIAN),
            ("pl", SLAVIC3_POLISH),
            ("cs", SLAVIC3_CZECH_SLOVAK),
            ("sk", SLAVIC3_CZECH_SLOVAK),
            ("ga", CELTIC5),
            ("gd", CELTIC5),
            ("ar", ARABIC6),
            ("ja", INVARIANT1),
            ("zh", INVARIANT1),
            ("ko", INVARIANT1),
            ("vi", INVARIANT1),
            ("th", INVARIANT1),
            ("hi", INVARIANT1),
        ],
    )
    def test_required_coverage(self, language: str, family: object) -> None:
        assert DEFAULT_RULE_TABLE[language] == family

    def test_size(self) -> None:
        assert len(DEFAULT_RULE_TABLE) == 19

    def test_languages_for(self) -> None:
        assert DEFAULT_RULE_TABLE.languages_for(CELTIC5) == ("ga", "gd")
        assert DEFAULT_RULE_TABLE.languages_for(INVARIANT1) == ("hi", "ja", "ko", "th", "vi", "zh")

    def test_fallback_not_listed_as_entry(self) -> None:
        assert "xx" not in DEFAULT_RULE_TABLE
        assert DEFAULT_RULE_TABLE.family_for("xx") is DEFAULT_RULE_TABLE.fallback

    def test_repr(self) -> None:
        assert repr(DEFAULT_RULE_TABLE) == "LanguageRuleTable(19 languages, fallback=default2)"


class TestImmutability:

    def test_no_item_assignment(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_RULE_TABLE["xx"] = ARABIC6  # type: ignore[index]

    def test_no_new_attributes(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_RULE_TABLE.extra = 1  # type: ignore[attr-defined]

    def test_source_mapping_is_copied(self) -> None:
        source = {"ar": ARABIC6}
        table = LanguageRuleTable(source)
        source["ru"] = SLAVIC3_RUSSIAN
        assert "ru" not in table

    def test_with_entries_returns_new_table(self) -> None:
        extended = DEFAULT_RULE_TABLE.with_entries({"be": SLAVIC3_RUSSIAN, "en": INVARIANT1})
        assert extended.family_for("be_BY") == SLAVIC3_RUSSIAN
        assert extended["en"] == INVARIANT1
        assert "be" not in DEFAULT_RULE_TABLE
        assert DEFAULT_RULE_TABLE["en"] == DEFAULT2
        assert extended.fallback == DEFAULT_RULE_TABLE.fallback


class TestValidation:

    @pytest.mark.parametrize("key", ["", "RU", "ru_RU", "ru-RU", "r1", "ру", " en"])
    def test_invalid_keys_rejected(self, key: str) -> None:
        with pytest.raises(RuleTableError, match="Invalid base language subtag"):
            LanguageRuleTable({key: DEFAULT2})

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(RuleTableError):
            LanguageRuleTable({1: DEFAULT2})  # type: ignore[dict-item]

    def test_non_family_value_rejected(self) -> None:
        with pytest.raises(RuleTableError, match="must be a RuleFamily"):
            LanguageRuleTable({"en": "default2"})  # type: ignore[dict-item]

    def test_non_family_fallback_rejected(self) -> None:
        with pytest.raises(RuleTableError, match="Fallback"):
            LanguageRuleTable({}, fallback=None)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            LanguageRuleTable({"EN": DEFAULT2})


class TestCustomFallback:

    def test_custom_fallback_used_for_unknown(self) -> None:
        table = LanguageRuleTable({"en": DEFAULT2}, fallback=INVARIANT1)
        assert table.family_for("xx") == INVARIANT1
        assert table.family_for("") == INVARIANT1
        assert table.family_for("EN_us") == DEFAULT2

    def test_empty_table(self) -> None:
        table = LanguageRuleTable({})
        assert len(table) == 0
        assert table.family_for("ru") == DEFAULT2
