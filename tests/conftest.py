"""Shared fixtures for grc-betacode tests."""

import unicodedata

import pytest

from grc_betacode.converter import BetacodeConverter

# Iliad 1.1 in Betacode and Greek
ILIAD_BETACODE = "mh=nin a)/eide qea\\ *phlhi+a/dew *a)xilh=os"
ILIAD_GREEK = "μῆνιν ἄειδε θεὰ Πηληϊάδεω Ἀχιλῆος"


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


@pytest.fixture
def converter() -> BetacodeConverter:
    """Return a fresh converter instance."""
    return BetacodeConverter()


@pytest.fixture
def iliad_betacode() -> str:
    return ILIAD_BETACODE


@pytest.fixture
def iliad_greek() -> str:
    """Expected conversion of the Iliad fixture, NFC-normalized."""
    return nfc(ILIAD_GREEK)
