"""Rule-family introspection.

Compares the built-in rule families with Unicode CLDR via Babel.

Python 3.13+.
"""

from .cldr import CldrDivergence, cldr_category, find_cldr_divergences, to_cldr_category

__all__ = [
    "CldrDivergence",
    "cldr_category",
    "find_cldr_divergences",
    "to_cldr_category",
]
