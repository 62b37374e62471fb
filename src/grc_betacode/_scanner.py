"""
Betacode scanner.

Splits a raw Betacode string into letter clusters (one base letter, its
capital marker and its diacritics, in the order written) and single
literal characters. The scanner never validates or reorders anything;
the converter and the validator apply their own policies to its tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from grc_betacode._table import CAPITAL_MARKER, is_diacritic, letter_code_at

__all__ = ["Cluster", "Scanner", "Token", "scan"]


@dataclass(frozen=True)
class Cluster:
    """A base letter with its capital marker and diacritics as scanned."""

    base: str  # lowercased letter code, e.g. "a", "s3", "#1"
    capitalized: bool = False
    diacritics: tuple[str, ...] = ()
    position: int = 0
    raw: str = ""

    @property
    def leading_diacritics(self) -> bool:
        """True if diacritics were written between '*' and the letter (*)a)."""
        return self.capitalized and len(self.raw) > 1 and is_diacritic(self.raw[1])


# A token is either a Cluster or a single pass-through character
Token = Union[Cluster, str]


def _take_diacritics(text: str, idx: int) -> int:
    """Return the index just past the diacritic run starting at idx."""
    while idx < len(text) and is_diacritic(text[idx]):
        idx += 1
    return idx


class Scanner:
    """
    Restartable iterable of tokens over a Betacode string.

    Each iteration rescans the text from the beginning, so the same
    Scanner can be consumed any number of times.

    Example:
        >>> [t.raw if isinstance(t, Cluster) else t for t in Scanner("*a)xi")]
        ['*a)', 'x', 'i']
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        text = self.text
        i = 0
        while i < len(text):
            char = text[i]

            if char == CAPITAL_MARKER:
                # TLG style puts the diacritics between '*' and the letter
                start = _take_diacritics(text, i + 1)
                code = letter_code_at(text, start)
                if code is None:
                    # Dangling capital marker
                    yield char
                    i += 1
                    continue
                end = _take_diacritics(text, start + len(code))
                yield Cluster(
                    base=code,
                    capitalized=True,
                    diacritics=tuple(text[i + 1 : start])
                    + tuple(text[start + len(code) : end]),
                    position=i,
                    raw=text[i:end],
                )
                i = end
                continue

            code = letter_code_at(text, i)
            if code is not None:
                end = _take_diacritics(text, i + len(code))
                yield Cluster(
                    base=code,
                    diacritics=tuple(text[i + len(code) : end]),
                    position=i,
                    raw=text[i:end],
                )
                i = end
                continue

            yield char
            i += 1

    def __repr__(self) -> str:
        return f"Scanner({self.text!r})"


def scan(text: str) -> Scanner:
    """
    Scan Betacode text into clusters and literal characters.

    Args:
        text: Betacode string

    Returns:
        A restartable iterable of Cluster objects and single characters
    """
    return Scanner(text)
