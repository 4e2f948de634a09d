"""Tests for RuleFamily variants evaluated directly, without dispatch."""

import dataclasses

import pytest

from pluralkeys import PluralCategory, SlavicVariant
from pluralkeys.runtime.rule_families import (
    ALL_FAMILIES,
    ARABIC6,
    CELTIC5,
    DEFAULT2,
    INVARIANT1,
    SLAVIC3_CZECH_SLOVAK,
    SLAVIC3_POLISH,
    SLAVIC3_RUSSIAN,
    Arabic6,
    RuleFamily,
    Slavic3,
)


class TestFamilyMetadata:

    @pytest.mark.parametrize("family", ALL_FAMILIES, ids=lambda f: f.label)
    def test_plural_is_always_a_category(self, family: RuleFamily) -> None:
        """PLURAL is every family's catch-all."""
        assert PluralCategory.PLURAL in family.categories

    @pytest.mark.parametrize("family", ALL_FAMILIES, ids=lambda f: f.label)
    def test_every_category_is_reachable(self, family: RuleFamily) -> None:
        """Each declared category is produced by some count in 0..200."""
        produced = {family.select(n) for n in range(201)}
        assert produced == set(family.categories)

    @pytest.mark.parametrize(
        ("family", "size"),
        [
            (DEFAULT2, 2),
            (SLAVIC3_RUSSIAN, 3),
            (SLAVIC3_POLISH, 3),
            (SLAVIC3_CZECH_SLOVAK, 3),
            (CELTIC5, 5),
            (ARABIC6, 6),
            (INVARIANT1, 1),
        ],
    )
    def test_category_counts(self, family: RuleFamily, size: int) -> None:
        assert len(family.categories) == size
        assert len(set(family.categories)) == size

    def test_labels(self) -> None:
        assert [f.label for f in ALL_FAMILIES] == [
            "default2",
            "slavic3(russian)",
            "slavic3(polish)",
            "slavic3(czech_slovak)",
            "celtic5",
            "arabic6",
            "invariant1",
        ]

    def test_slavic_variants_share_name(self) -> None:
        assert SLAVIC3_RUSSIAN.name == SLAVIC3_POLISH.name == SLAVIC3_CZECH_SLOVAK.name == "slavic3"

    def test_base_class_select_is_abstract(self) -> None:
        with pytest.raises(NotImplementedError):
            RuleFamily().select(1)


class TestFamilyValueSemantics:
    """Families are immutable values."""

    def test_equal_by_value(self) -> None:
        assert Slavic3(SlavicVariant.POLISH) == SLAVIC3_POLISH
        assert Arabic6() == ARABIC6
        assert SLAVIC3_POLISH != SLAVIC3_RUSSIAN

    def test_different_families_never_equal(self) -> None:
        assert DEFAULT2 != INVARIANT1
        assert CELTIC5 != ARABIC6

    def test_hashable(self) -> None:
        assert len(set(ALL_FAMILIES)) == len(ALL_FAMILIES)
        assert {Slavic3(SlavicVariant.RUSSIAN): "x"}[SLAVIC3_RUSSIAN] == "x"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SLAVIC3_RUSSIAN.variant = SlavicVariant.POLISH  # type: ignore[misc]

    def test_default_slavic_variant_is_russian(self) -> None:
        assert Slavic3() == SLAVIC3_RUSSIAN


class TestSlavicVariantsDiffer:
    """The three Slavic variants disagree on endings in 1 and on 22."""

    @pytest.mark.parametrize(
        ("count", "russian", "polish", "czech"),
        [
            (1, "singular", "singular", "singular"),
            (2, "few", "few", "few"),
            (5, "plural", "plural", "plural"),
            (11, "plural", "plural", "plural"),
            (12, "plural", "plural", "plural"),
            (21, "singular", "plural", "plural"),
            (22, "few", "few", "plural"),
            (101, "singular", "plural", "plural"),
            (104, "few", "few", "plural"),
            (111, "plural", "plural", "plural"),
        ],
    )
    def test_variant_table(self, count: int, russian: str, polish: str, czech: str) -> None:
        assert SLAVIC3_RUSSIAN.select(count) == russian
        assert SLAVIC3_POLISH.select(count) == polish
        assert SLAVIC3_CZECH_SLOVAK.select(count) == czech


class TestNegativeCounts:
    """Negative counts are accepted; only the absence of errors is checked."""

    @pytest.mark.parametrize("family", ALL_FAMILIES, ids=lambda f: f.label)
    @pytest.mark.parametrize("count", [-1, -2, -11, -101])
    def test_no_exception(self, family: RuleFamily, count: int) -> None:
        assert family.select(count) in family.categories
