"""
Strict Betacode validation.

Three independent checks run over the raw input and each collects every
offending unit in order of appearance (duplicates included):

- NotASCII: characters with a code point >= 128
- InvalidChars: ASCII characters that cannot start or extend a cluster
  and are not recognized punctuation (digits, lone diacritics, a '*'
  with no letter, ...)
- InvalidDiacriticOrder: the markers of a cluster that break the order
  LENGTH + BREATHING/DIAIRESIS + ACCENT + SUBSCRIPT IOTA, including two
  marks of the same class (")|/" reports "|/")

find_violations() reports all three; validate() reports a single error
chosen by fixed precedence: NotASCII, then InvalidDiacriticOrder, then
InvalidChars.

Example:
    >>> validate("mh=nin a)/eide") is None
    True
    >>> validate("h\\\\( a/)ndra")
    InvalidDiacriticOrder(['\\\\(', '/)'])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from grc_betacode._scanner import Cluster, Token, scan
from grc_betacode._table import is_literal
from grc_betacode.diacritics._order import order_class

__all__ = [
    "ValidationError",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "ValidationReport",
    "find_violations",
    "validate",
    "is_valid",
    "check",
]

# =============================================================================
# Error Types
# =============================================================================


class ValidationError(ValueError):
    """
    Base class for Betacode validation defects.

    Instances are returned by validate() and may also be raised (see
    check()). The offending units are in ``items``.
    """

    label = "Invalid Betacode"

    def __init__(self, items: Iterable[str]) -> None:
        self.items: list[str] = list(items)
        super().__init__(self.items)

    def __str__(self) -> str:
        return f"{self.label}: {self.items!r}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.items)))


class NotASCII(ValidationError):
    """Input contains non-ASCII characters."""

    label = "Non ASCII chars"


class InvalidChars(ValidationError):
    """Input contains ASCII characters Betacode does not define here."""

    label = "Invalid characters"


class InvalidDiacriticOrder(ValidationError):
    """Input contains diacritic runs out of canonical order."""

    label = "Invalid diacritic order"


# =============================================================================
# Checks
# =============================================================================


def _non_ascii(text: str) -> list[str]:
    return [c for c in text if ord(c) >= 128]


def _invalid_chars(tokens: list[Token]) -> list[str]:
    return [
        t
        for t in tokens
        if not isinstance(t, Cluster) and t.isascii() and not is_literal(t)
    ]


def _disorder_spans(markers: tuple[str, ...]) -> list[str]:
    """Maximal runs of adjacent markers whose classes do not increase."""
    classes = [order_class(m) for m in markers]
    spans = []
    start = end = None
    for j in range(len(markers) - 1):
        if classes[j] >= classes[j + 1]:
            if start is None:
                start = j
            end = j + 2
        elif start is not None:
            spans.append("".join(markers[start:end]))
            start = None
    if start is not None:
        spans.append("".join(markers[start:end]))
    return spans


def _misordered(tokens: list[Token]) -> list[str]:
    return [
        span
        for t in tokens
        if isinstance(t, Cluster)
        for span in _disorder_spans(t.diacritics)
    ]


@dataclass
class ValidationReport:
    """All violations found in a text, per category."""

    text: str
    not_ascii: list[str] = field(default_factory=list)
    invalid_chars: list[str] = field(default_factory=list)
    invalid_diacritic_order: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationError]:
        """Errors in reporting precedence, one per violated category."""
        errors: list[ValidationError] = []
        if self.not_ascii:
            errors.append(NotASCII(self.not_ascii))
        if self.invalid_diacritic_order:
            errors.append(InvalidDiacriticOrder(self.invalid_diacritic_order))
        if self.invalid_chars:
            errors.append(InvalidChars(self.invalid_chars))
        return errors

    @property
    def error(self) -> Optional[ValidationError]:
        """The highest-precedence error, or None."""
        errors = self.errors
        return errors[0] if errors else None

    @property
    def ok(self) -> bool:
        return not (self.not_ascii or self.invalid_chars or self.invalid_diacritic_order)


# =============================================================================
# Public API
# =============================================================================


def find_violations(text: str) -> ValidationReport:
    """
    Run all three checks and collect every violation.

    Args:
        text: Betacode text

    Returns:
        ValidationReport listing offending units per category
    """
    tokens = list(scan(text))
    return ValidationReport(
        text=text,
        not_ascii=_non_ascii(text),
        invalid_chars=_invalid_chars(tokens),
        invalid_diacritic_order=_misordered(tokens),
    )


def validate(text: str) -> Optional[ValidationError]:
    """
    Validate whether text is strict Betacode.

    Args:
        text: Betacode text

    Returns:
        None if the text is valid, otherwise the highest-precedence
        ValidationError (NotASCII, InvalidDiacriticOrder, InvalidChars)

    Example:
        >>> validate("9")
        InvalidChars(['9'])
    """
    return find_violations(text).error


def is_valid(text: str) -> bool:
    """Check whether text is strict Betacode."""
    return find_violations(text).ok


def check(text: str) -> None:
    """
    Raise the highest-precedence ValidationError if text is not strict Betacode.

    Raises:
        ValidationError: One of NotASCII, InvalidDiacriticOrder, InvalidChars
    """
    error = validate(text)
    if error is not None:
        raise error
