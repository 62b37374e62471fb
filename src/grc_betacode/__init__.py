"""
grc-betacode: Betacode → Greek Unicode conversion and validation.

Converts the ASCII Betacode encoding of ancient Greek to precomposed
(NFC) Greek Unicode, and validates that a text is strict Betacode before
the conversion is trusted to be lossless.

Basic usage:
    >>> from grc_betacode import convert
    >>> convert("mh=nin a)/eide qea\\\\ *phlhi+a/dew *a)xilh=os")
    'μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος'

Validation:
    >>> from grc_betacode import validate
    >>> validate("9")
    InvalidChars(['9'])

Recovering misordered diacritics:
    >>> from grc_betacode import fix_diacritic_order
    >>> fix_diacritic_order("a/)ndra")
    'a)/ndra'
"""

from grc_betacode._scanner import Cluster, Scanner, scan
from grc_betacode._table import MAPPING, MappingKey, lookup
from grc_betacode.converter import (
    BetacodeConverter,
    ConversionResult,
    Passthrough,
    convert,
    convert_detailed,
    revert,
)
from grc_betacode.diacritics import (
    fix_diacritic_order,
    is_canonical,
    order_class,
    reorder_diacritics,
)
from grc_betacode.validator import (
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

__version__ = "0.1.0"
__all__ = [
    "convert",
    "convert_detailed",
    "revert",
    "BetacodeConverter",
    "ConversionResult",
    "Passthrough",
    "validate",
    "find_violations",
    "is_valid",
    "check",
    "ValidationError",
    "NotASCII",
    "InvalidChars",
    "InvalidDiacriticOrder",
    "ValidationReport",
    "reorder_diacritics",
    "fix_diacritic_order",
    "is_canonical",
    "order_class",
    "scan",
    "Scanner",
    "Cluster",
    "lookup",
    "MappingKey",
    "MAPPING",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name in ("BetacodeConverterComponent", "BetacodeTokenizer"):
        try:
            from grc_betacode import spacy
            return getattr(spacy, name)
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install grc-betacode[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
