"""
Betacode conversion submodule.

Re-exports the converter, its result types and the reverse conversion.
"""

from grc_betacode.converter._rules import (
    BetacodeConverter,
    ConversionResult,
    Passthrough,
    convert,
    convert_detailed,
    revert,
)

__all__ = [
    "BetacodeConverter",
    "ConversionResult",
    "Passthrough",
    "convert",
    "convert_detailed",
    "revert",
]
