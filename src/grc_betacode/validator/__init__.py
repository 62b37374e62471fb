"""
Betacode validation submodule.

Basic usage:
    >>> from grc_betacode.validator import validate, find_violations
    >>> validate("a)/") is None
    True
    >>> find_violations("a/) 9").invalid_chars
    ['9']
"""

from grc_betacode.validator._checks import (
    InvalidChars,
    InvalidDiacriticOrder,
    NotASCII,
    ValidationError,
    ValidationReport,
    check,
    find_violations,
    is_valid,
    validate,
)

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
