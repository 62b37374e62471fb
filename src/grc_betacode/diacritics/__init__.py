"""
Diacritic ordering submodule.

Basic usage:
    >>> from grc_betacode.diacritics import reorder_diacritics
    >>> reorder_diacritics("/)")
    ')/'

    >>> from grc_betacode.diacritics import fix_diacritic_order
    >>> fix_diacritic_order("a/)ndra")
    'a)/ndra'
"""

from grc_betacode.diacritics._order import (
    fix_diacritic_order,
    is_canonical,
    order_class,
    reorder_diacritics,
)

__all__ = [
    "fix_diacritic_order",
    "is_canonical",
    "order_class",
    "reorder_diacritics",
]
