"""
Static Betacode → Greek Unicode mapping table.

Provides:
- LETTERS: letter codes and their lowercase/uppercase Greek forms
- DIACRITICS: diacritic markers with their order class and combining mark
- PUNCTUATION: Betacode punctuation codes with a Greek rendering
- MAPPING: read-only table keyed by (base, capitalized, diacritics)
- lookup(): single-entry access used by the converter

The table is built once at import time by composing every letter with
every canonically ordered diacritic combination (at most one marker per
order class) and NFC-normalizing the result, so precomposed code points
are used wherever Unicode has one.
"""

from __future__ import annotations

import itertools
import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Sequence

__all__ = [
    "DiacriticMark",
    "MappingKey",
    "LETTERS",
    "DIACRITICS",
    "PUNCTUATION",
    "LITERALS",
    "CAPITAL_MARKER",
    "MAPPING",
    "lookup",
    "letter_code_at",
    "is_diacritic",
    "is_literal",
]

# =============================================================================
# Letters
# =============================================================================

CAPITAL_MARKER = "*"

# Betacode letter code → (lowercase, uppercase)
LETTERS: Mapping[str, tuple[str, str]] = MappingProxyType(
    {
        "a": ("α", "Α"),  # alpha
        "b": ("β", "Β"),  # beta
        "g": ("γ", "Γ"),  # gamma
        "d": ("δ", "Δ"),  # delta
        "e": ("ε", "Ε"),  # epsilon
        "z": ("ζ", "Ζ"),  # zeta
        "h": ("η", "Η"),  # eta
        "q": ("θ", "Θ"),  # theta
        "i": ("ι", "Ι"),  # iota
        "k": ("κ", "Κ"),  # kappa
        "l": ("λ", "Λ"),  # lambda
        "m": ("μ", "Μ"),  # mu
        "n": ("ν", "Ν"),  # nu
        "c": ("ξ", "Ξ"),  # xi
        "o": ("ο", "Ο"),  # omicron
        "p": ("π", "Π"),  # pi
        "r": ("ρ", "Ρ"),  # rho
        "s": ("σ", "Σ"),  # sigma (medial/final resolved by converter)
        "t": ("τ", "Τ"),  # tau
        "u": ("υ", "Υ"),  # upsilon
        "f": ("φ", "Φ"),  # phi
        "x": ("χ", "Χ"),  # chi
        "y": ("ψ", "Ψ"),  # psi
        "w": ("ω", "Ω"),  # omega
        "v": ("ϝ", "Ϝ"),  # digamma
        # Sigma variants, TLG convention. Some encoders use s1 for final sigma
        "s1": ("σ", "Σ"),  # forced medial
        "s2": ("ς", "Σ"),  # forced final
        "s3": ("ϲ", "Ϲ"),  # lunate
        # Archaic letters
        "#1": ("ϟ", "Ϟ"),  # koppa
        "#2": ("ϛ", "Ϛ"),  # stigma
        "#3": ("ϙ", "Ϙ"),  # archaic koppa
        "#5": ("ϡ", "Ϡ"),  # sampi
    }
)

# Letter codes that are followed by a digit (s1, #3, ...)
_DIGIT_CODE_PREFIXES = frozenset(code[0] for code in LETTERS if len(code) == 2)

# =============================================================================
# Diacritics
# =============================================================================


@dataclass(frozen=True)
class DiacriticMark:
    """A single Betacode diacritic marker."""

    marker: str
    name: str
    order_class: int  # 0 = length, 1 = breathing/diairesis, 2 = accent, 3 = iota
    combining: str  # Unicode combining mark


DIACRITICS: Mapping[str, DiacriticMark] = MappingProxyType(
    {
        m.marker: m
        for m in (
            DiacriticMark("_", "long_mark", 0, "\u0304"),
            DiacriticMark("^", "short_mark", 0, "\u0306"),
            DiacriticMark(")", "smooth_breathing", 1, "\u0313"),
            DiacriticMark("(", "rough_breathing", 1, "\u0314"),
            DiacriticMark("+", "diairesis", 1, "\u0308"),
            DiacriticMark("/", "acute_accent", 2, "\u0301"),
            DiacriticMark("\\", "grave_accent", 2, "\u0300"),
            DiacriticMark("=", "circumflex_accent", 2, "\u0342"),
            DiacriticMark("|", "subscript_iota", 3, "\u0345"),
        )
    }
)

# =============================================================================
# Punctuation and literals
# =============================================================================

# Betacode punctuation with a dedicated Greek code point (NFC-normalized below)
PUNCTUATION: Mapping[str, str] = MappingProxyType(
    {
        code: unicodedata.normalize("NFC", greek)
        for code, greek in {
            ":": "\u0387",  # ano teleia
            ";": "\u037e",  # Greek question mark
            "#": "\u0374",  # numeral sign
        }.items()
    }
)

# Characters copied verbatim into the output
LITERALS = frozenset(" \t\r\n.,'-")

# =============================================================================
# Mapping table
# =============================================================================


class MappingKey(NamedTuple):
    """Composite key of the mapping table."""

    base: str
    capitalized: bool
    diacritics: tuple[str, ...]


def _canonical_combinations() -> list[tuple[str, ...]]:
    """All diacritic tuples with at most one marker per class, in class order."""
    by_class: dict[int, list[Optional[str]]] = {}
    for mark in DIACRITICS.values():
        by_class.setdefault(mark.order_class, [None]).append(mark.marker)

    combos = []
    for picks in itertools.product(*(by_class[c] for c in sorted(by_class))):
        combos.append(tuple(p for p in picks if p is not None))
    return combos


def _build_mapping() -> Mapping[MappingKey, str]:
    table: dict[MappingKey, str] = {}
    combos = _canonical_combinations()
    for code, forms in LETTERS.items():
        for capitalized, letter in ((False, forms[0]), (True, forms[1])):
            for combo in combos:
                marks = "".join(DIACRITICS[m].combining for m in combo)
                key = MappingKey(code, capitalized, combo)
                table[key] = unicodedata.normalize("NFC", letter + marks)
    return MappingProxyType(table)


MAPPING: Mapping[MappingKey, str] = _build_mapping()


def lookup(
    base: str, capitalized: bool = False, diacritics: Sequence[str] = ()
) -> Optional[str]:
    """
    Look up the Greek grapheme for a letter cluster.

    Args:
        base: Betacode letter code (case-insensitive), e.g. "a" or "s3"
        capitalized: Whether the letter carries the capital marker
        diacritics: Diacritic markers in canonical order

    Returns:
        The NFC grapheme, or None if the combination has no entry

    Example:
        >>> lookup("a", False, (")", "/"))
        'ἄ'
    """
    return MAPPING.get(MappingKey(base.lower(), capitalized, tuple(diacritics)))


# =============================================================================
# Character classification
# =============================================================================


def letter_code_at(text: str, idx: int = 0) -> Optional[str]:
    """
    Return the letter code starting at position idx, or None.

    Two-character codes (s1, s2, s3, #1, #2, #3, #5) take precedence over
    the single letter. The returned code is lowercased.
    """
    if idx >= len(text) or not text[idx].isascii():
        return None
    char = text[idx].lower()
    if char in _DIGIT_CODE_PREFIXES:
        pair = text[idx : idx + 2].lower()
        if pair in LETTERS:
            return pair
    if char in LETTERS:
        return char
    return None


def is_diacritic(char: str) -> bool:
    """Check if character is a Betacode diacritic marker."""
    return char in DIACRITICS


def is_literal(char: str) -> bool:
    """Check if character is punctuation or whitespace Betacode recognizes."""
    return char in LITERALS or char in PUNCTUATION
