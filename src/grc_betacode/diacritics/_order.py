"""
Canonical diacritic ordering for Betacode.

Betacode writes diacritics after the letter in the order
LENGTH + BREATHING/DIAIRESIS + ACCENT + SUBSCRIPT IOTA. Texts in the wild often
deviate ("a/)" instead of "a)/"); these helpers restore the canonical
order without touching anything else.
"""

from __future__ import annotations

from typing import Sequence, Union

from grc_betacode._scanner import Cluster, scan
from grc_betacode._table import DIACRITICS

__all__ = ["order_class", "is_canonical", "reorder_diacritics", "fix_diacritic_order"]


def order_class(marker: str) -> int:
    """
    Return the order class of a diacritic marker.

    0 = length mark; 1 = breathing or diairesis; 2 = accent; 3 = subscript iota.

    Raises:
        ValueError: If marker is not a Betacode diacritic
    """
    mark = DIACRITICS.get(marker)
    if mark is None:
        raise ValueError(f"Not a Betacode diacritic marker: {marker!r}")
    return mark.order_class


def is_canonical(markers: Sequence[str]) -> bool:
    """Check that markers are in class order with at most one per class."""
    classes = [order_class(m) for m in markers]
    return all(a < b for a, b in zip(classes, classes[1:]))


def reorder_diacritics(
    markers: Union[str, Sequence[str]],
) -> Union[str, tuple[str, ...]]:
    """
    Reorder diacritic markers into canonical class order.

    The sort is stable: two markers of the same class (which is itself
    malformed) keep their relative order, first seen first.

    Args:
        markers: Diacritic markers as a string ("/)") or a sequence

    Returns:
        The reordered markers, as a string if a string was given,
        otherwise as a tuple

    Example:
        >>> reorder_diacritics("|/)")
        ')/|'
        >>> reorder_diacritics(("/", "+"))
        ('+', '/')
    """
    ordered = sorted(markers, key=order_class)
    if isinstance(markers, str):
        return "".join(ordered)
    return tuple(ordered)


def _fix_cluster(cluster: Cluster) -> str:
    ordered = "".join(reorder_diacritics(cluster.diacritics))
    letter = "".join(
        c for c in cluster.raw if c != "*" and c not in DIACRITICS
    )
    if cluster.leading_diacritics:
        return "*" + ordered + letter
    return ("*" if cluster.capitalized else "") + letter + ordered


def fix_diacritic_order(text: str) -> str:
    """
    Rewrite every cluster of a Betacode string with canonical diacritic order.

    Letters, case and everything outside the diacritic runs are preserved.

    Args:
        text: Betacode text (possibly with misordered diacritics)

    Returns:
        Betacode text with every diacritic run in canonical order

    Example:
        >>> fix_diacritic_order("A/)")
        'A)/'
        >>> fix_diacritic_order("h\\\\( a/)ndra")
        'h(\\\\ a)/ndra'
    """
    out = []
    for token in scan(text):
        if isinstance(token, Cluster):
            if is_canonical(token.diacritics):
                out.append(token.raw)
            else:
                out.append(_fix_cluster(token))
        else:
            out.append(token)
    return "".join(out)
