"""Plural rule families.

Each family is an immutable policy mapping a count to a PluralCategory.
Families are modelled as a small tagged variant: one frozen dataclass per
family, parameterized where sub-variants exist (Slavic3).

Families:
    Default2: singular / plural (English, German, French, ...)
    Slavic3: singular / few / plural, in Russian, Polish or Czech-Slovak flavour
    Celtic5: singular / dual / few / many / plural (Irish, Scottish Gaelic)
    Arabic6: zero / singular / dual / few / many / plural
    Invariant1: plural only (Japanese, Chinese, Korean, ...)

Every family's rule is total: its last branch returns PLURAL.

Counts are expected to be non-negative. Negative counts are accepted and
evaluated with Python's modulo semantics; their categories are not part of
any family's contract.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pluralkeys.enums import PluralCategory, SlavicVariant

__all__ = [
    "ALL_FAMILIES",
    "ARABIC6",
    "CELTIC5",
    "DEFAULT2",
    "INVARIANT1",
    "SLAVIC3_CZECH_SLOVAK",
    "SLAVIC3_POLISH",
    "SLAVIC3_RUSSIAN",
    "Arabic6",
    "Celtic5",
    "Default2",
    "Invariant1",
    "RuleFamily",
    "Slavic3",
]


@dataclass(frozen=True, slots=True)
class RuleFamily:
    """Base class for plural rule families.

    Subclasses set ``name`` and ``categories`` and implement ``select``.
    ``categories`` lists every category the family can return, in the
    order translators usually write them.
    """

    name: ClassVar[str] = ""
    categories: ClassVar[tuple[PluralCategory, ...]] = ()

    @property
    def label(self) -> str:
        """Human-readable identifier, e.g. 'arabic6' or 'slavic3(polish)'."""
        return self.name

    def select(self, count: int) -> PluralCategory:
        """Select the plural category for count."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Default2(RuleFamily):
    """Two-form rule: exactly 1 is singular, everything else plural."""

    name: ClassVar[str] = "default2"
    categories: ClassVar[tuple[PluralCategory, ...]] = (
        PluralCategory.SINGULAR,
        PluralCategory.PLURAL,
    )

    def select(self, count: int) -> PluralCategory:
        if count == 1:
            return PluralCategory.SINGULAR
        return PluralCategory.PLURAL


@dataclass(frozen=True, slots=True)
class Slavic3(RuleFamily):
    """Three-form Slavic rule (singular / few / plural).

    Variants differ in how "one" is detected and whether modular endings apply:

    - RUSSIAN: ``n % 10 == 1 and n % 100 != 11`` is singular (1, 21, 101);
      ``n % 10 in 2..4 and n % 100 not in 12..14`` is few (2, 23, 104).
    - POLISH: only ``n == 1`` is singular (21 is plural); few as RUSSIAN.
    - CZECH_SLOVAK: ``n == 1`` is singular, ``n in 2..4`` is few, nothing modular.

    Attributes:
        variant: Which of the three sub-rules to apply
    """

    name: ClassVar[str] = "slavic3"
    categories: ClassVar[tuple[PluralCategory, ...]] = (
        PluralCategory.SINGULAR,
        PluralCategory.FEW,
        PluralCategory.PLURAL,
    )

    variant: SlavicVariant = SlavicVariant.RUSSIAN

    @property
    def label(self) -> str:
        return f"{self.name}({self.variant})"

    def select(self, count: int) -> PluralCategory:
        r10 = count % 10
        r100 = count % 100
        few_ending = 2 <= r10 <= 4 and not 12 <= r100 <= 14

        match self.variant:
            case SlavicVariant.RUSSIAN:
                if r10 == 1 and r100 != 11:
                    return PluralCategory.SINGULAR
                if few_ending:
                    return PluralCategory.FEW
            case SlavicVariant.POLISH:
                if count == 1:
                    return PluralCategory.SINGULAR
                if few_ending:
                    return PluralCategory.FEW
            case SlavicVariant.CZECH_SLOVAK:
                if count == 1:
                    return PluralCategory.SINGULAR
                if 2 <= count <= 4:
                    return PluralCategory.FEW
        return PluralCategory.PLURAL


@dataclass(frozen=True, slots=True)
class Celtic5(RuleFamily):
    """Five-form Celtic rule.

    1 singular, 2 dual, 3-6 few, 7-10 many, everything else (0, 11+) plural.
    No modular endings: 21 is plural.
    """

    name: ClassVar[str] = "celtic5"
    categories: ClassVar[tuple[PluralCategory, ...]] = (
        PluralCategory.SINGULAR,
        PluralCategory.DUAL,
        PluralCategory.FEW,
        PluralCategory.MANY,
        PluralCategory.PLURAL,
    )

    def select(self, count: int) -> PluralCategory:
        if count == 1:
            return PluralCategory.SINGULAR
        if count == 2:
            return PluralCategory.DUAL
        if 3 <= count <= 6:
            return PluralCategory.FEW
        if 7 <= count <= 10:
            return PluralCategory.MANY
        return PluralCategory.PLURAL


@dataclass(frozen=True, slots=True)
class Arabic6(RuleFamily):
    """Six-form Arabic rule.

    0 zero, 1 singular, 2 dual; then by ``n % 100``: 3-10 few, 11-99 many.
    Remaining values (100, 101, 102, 200, ...) are plural.
    """

    name: ClassVar[str] = "arabic6"
    categories: ClassVar[tuple[PluralCategory, ...]] = (
        PluralCategory.ZERO,
        PluralCategory.SINGULAR,
        PluralCategory.DUAL,
        PluralCategory.FEW,
        PluralCategory.MANY,
        PluralCategory.PLURAL,
    )

    def select(self, count: int) -> PluralCategory:
        if count == 0:
            return PluralCategory.ZERO
        if count == 1:
            return PluralCategory.SINGULAR
        if count == 2:
            return PluralCategory.DUAL
        r100 = count % 100
        if 3 <= r100 <= 10:
            return PluralCategory.FEW
        if 11 <= r100 <= 99:
            return PluralCategory.MANY
        return PluralCategory.PLURAL


@dataclass(frozen=True, slots=True)
class Invariant1(RuleFamily):
    """Single-form rule for languages without grammatical number."""

    name: ClassVar[str] = "invariant1"
    categories: ClassVar[tuple[PluralCategory, ...]] = (PluralCategory.PLURAL,)

    def select(self, count: int) -> PluralCategory:  # noqa: ARG002
        return PluralCategory.PLURAL


DEFAULT2 = Default2()
SLAVIC3_RUSSIAN = Slavic3(SlavicVariant.RUSSIAN)
SLAVIC3_POLISH = Slavic3(SlavicVariant.POLISH)
SLAVIC3_CZECH_SLOVAK = Slavic3(SlavicVariant.CZECH_SLOVAK)
CELTIC5 = Celtic5()
ARABIC6 = Arabic6()
INVARIANT1 = Invariant1()

ALL_FAMILIES: tuple[RuleFamily, ...] = (
    DEFAULT2,
    SLAVIC3_RUSSIAN,
    SLAVIC3_POLISH,
    SLAVIC3_CZECH_SLOVAK,
    CELTIC5,
    ARABIC6,
    INVARIANT1,
)
