"""
Betacode → Greek Unicode converter.

The converter is deliberately tolerant: it normalizes diacritic order
before every lookup, and a cluster with no table entry is copied through
unchanged instead of failing the whole call. Callers that need strict
input must run the validator first.

Example:
    >>> from grc_betacode.converter import convert
    >>> convert("mh=nin a)/eide qea\\\\")
    'μῆνιν ἄειδε θεὰ'

    >>> from grc_betacode.converter import revert
    >>> revert("θεὰ")
    'qea\\\\'
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Optional

from grc_betacode._scanner import Cluster, Token, scan
from grc_betacode._table import DIACRITICS, LETTERS, PUNCTUATION, lookup
from grc_betacode.diacritics._order import order_class, reorder_diacritics

__all__ = [
    "BetacodeConverter",
    "ConversionResult",
    "Passthrough",
    "convert",
    "convert_detailed",
    "revert",
]

logger = logging.getLogger(__name__)

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Passthrough:
    """Record of a cluster copied through without conversion."""

    position: int
    original: str
    reason: str


@dataclass
class ConversionResult:
    """Detailed result from conversion."""

    original: str
    converted: str
    passthroughs: list[Passthrough] = field(default_factory=list)

    @property
    def lossless(self) -> bool:
        """True if every cluster was found in the mapping table."""
        return not self.passthroughs


# =============================================================================
# Main Converter Class
# =============================================================================


class BetacodeConverter:
    """
    Converts Betacode to precomposed (NFC) Greek Unicode.

    Pipeline per cluster: reorder diacritics → resolve sigma form →
    table lookup. Literal characters are copied verbatim, except the
    Betacode punctuation codes (":" → "·").

    Example:
        >>> converter = BetacodeConverter()
        >>> converter.convert("*a)xilh=os")
        'Ἀχιλῆος'
    """

    def convert(self, text: str) -> str:
        """
        Convert Betacode text to Greek Unicode.

        Args:
            text: Betacode text

        Returns:
            Greek text; unconvertible clusters are left as written
        """
        return self.convert_detailed(text).converted

    def convert_cluster(self, cluster: Cluster, final: bool = False) -> Optional[str]:
        """
        Convert a single cluster, or return None if it has no table entry.

        Args:
            cluster: Cluster produced by the scanner
            final: Whether the cluster ends a word (selects final sigma)
        """
        base = cluster.base
        if base == "s" and final and not cluster.capitalized:
            base = "s2"
        return lookup(base, cluster.capitalized, reorder_diacritics(cluster.diacritics))

    def convert_detailed(self, text: str) -> ConversionResult:
        """
        Convert with a record of every cluster that was passed through.

        Args:
            text: Betacode text

        Returns:
            ConversionResult with original, converted and passthroughs

        Example:
            >>> result = BetacodeConverter().convert_detailed("a)(")
            >>> result.converted
            'a)('
            >>> result.passthroughs[0].reason
            'unmapped_diacritics'
        """
        if not text:
            return ConversionResult(original=text, converted=text)

        tokens: list[Token] = list(scan(text))
        out = []
        passthroughs = []

        for i, token in enumerate(tokens):
            if not isinstance(token, Cluster):
                out.append(PUNCTUATION.get(token, token))
                continue

            following = tokens[i + 1] if i + 1 < len(tokens) else None
            grapheme = self.convert_cluster(
                token, final=not isinstance(following, Cluster)
            )
            if grapheme is None:
                logger.debug(
                    "Passing through unmapped cluster %r at %d",
                    token.raw,
                    token.position,
                )
                passthroughs.append(
                    Passthrough(
                        position=token.position,
                        original=token.raw,
                        reason="unmapped_diacritics",
                    )
                )
                out.append(token.raw)
            else:
                out.append(grapheme)

        return ConversionResult(
            original=text, converted="".join(out), passthroughs=passthroughs
        )


# =============================================================================
# Unicode → Betacode
# =============================================================================


def _build_reverse_letters() -> dict[str, tuple[str, bool]]:
    reverse: dict[str, tuple[str, bool]] = {}
    for code, (lower, upper) in LETTERS.items():
        # s1/s2 share glyphs with s; final sigma is handled in revert()
        if code in ("s1", "s2"):
            continue
        reverse[lower] = (code, False)
        reverse[upper] = (code, True)
    return reverse


_REVERSE_LETTERS = _build_reverse_letters()
_REVERSE_DIACRITICS = {m.combining: m.marker for m in DIACRITICS.values()}
_REVERSE_PUNCTUATION = {
    unicodedata.normalize("NFD", greek): code
    for code, greek in PUNCTUATION.items()
    if greek != code
}
_FINAL_SIGMA = "ς"


def revert(text: str) -> str:
    """
    Convert Greek Unicode back to Betacode.

    Capitals are written "*" + letter + diacritics, diacritics in canonical
    order. Sigma forms that differ from what the converter would infer are
    written with their explicit code (s1, s2); lunate sigma is s3.
    Characters with no Betacode equivalent pass through unchanged.

    Args:
        text: Greek text in any normalization form

    Returns:
        Betacode text

    Example:
        >>> revert("Ἀχιλῆος")
        '*a)xilh=os'
    """
    decomposed = unicodedata.normalize("NFD", text)
    out = []
    i = 0
    while i < len(decomposed):
        char = decomposed[i]

        if char == _FINAL_SIGMA:
            code, capitalized = "s", False
        elif char in _REVERSE_LETTERS:
            code, capitalized = _REVERSE_LETTERS[char]
        else:
            out.append(_REVERSE_PUNCTUATION.get(char, char))
            i += 1
            continue

        end = i + 1
        while end < len(decomposed) and decomposed[end] in _REVERSE_DIACRITICS:
            end += 1
        markers = sorted(
            (_REVERSE_DIACRITICS[c] for c in decomposed[i + 1 : end]),
            key=order_class,
        )

        if code == "s" and not capitalized:
            word_continues = end < len(decomposed) and (
                decomposed[end] in _REVERSE_LETTERS or decomposed[end] == _FINAL_SIGMA
            )
            if char == _FINAL_SIGMA and word_continues:
                code = "s2"
            elif char != _FINAL_SIGMA and not word_continues:
                code = "s1"

        out.append(("*" if capitalized else "") + code + "".join(markers))
        i = end

    return "".join(out)


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_converter: Optional[BetacodeConverter] = None


def _get_default_converter() -> BetacodeConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = BetacodeConverter()
    return _default_converter


def convert(text: str) -> str:
    """
    Convert Betacode text to Greek Unicode.

    Convenience function that uses a shared converter instance. Never
    raises: clusters with no table entry are copied through unchanged.

    Args:
        text: Betacode text

    Returns:
        NFC Greek text

    Example:
        >>> convert("*phlhi+a/dew")
        'Πηληϊάδεω'
    """
    return _get_default_converter().convert(text)


def convert_detailed(text: str) -> ConversionResult:
    """Convert Betacode text and report every cluster passed through."""
    return _get_default_converter().convert_detailed(text)
