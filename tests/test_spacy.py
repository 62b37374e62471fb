"""Tests for the spaCy pipeline component."""

import unicodedata

import pytest

spacy = pytest.importorskip("spacy")

import grc_betacode.spacy  # noqa: E402,F401  registers the factory
from grc_betacode import InvalidChars  # noqa: E402
from grc_betacode.spacy import BetacodeTokenizer, get_converter_pipe  # noqa: E402

BETACODE_CONFIG = {"nlp": {"tokenizer": {"@tokenizers": "betacode_tokenizer"}}}


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    for ext in ["greek", "betacode_errors"]:
        if Doc.has_extension(ext):
            Doc.remove_extension(ext)

    for ext in ["greek", "betacode_valid"]:
        if Token.has_extension(ext):
            Token.remove_extension(ext)


@pytest.fixture
def nlp():
    nlp = spacy.blank("xx", config=BETACODE_CONFIG)
    nlp.add_pipe("betacode_converter")
    return nlp


class TestBetacodeConverterComponent:
    def test_factory_registered(self, nlp):
        assert "betacode_converter" in nlp.pipe_names

    def test_doc_conversion(self, nlp, iliad_betacode, iliad_greek):
        doc = nlp(iliad_betacode)
        assert doc._.greek == iliad_greek

    def test_token_conversion(self, nlp):
        doc = nlp("logos kai")
        assert doc[0]._.greek == "λογος"
        assert doc[1]._.greek == "και"

    def test_token_text_unchanged(self, nlp):
        doc = nlp("logos")
        assert doc[0].text == "logos"

    def test_doc_errors(self, nlp):
        doc = nlp("logos 9")
        assert doc._.betacode_errors == [InvalidChars(["9"])]

    def test_doc_errors_empty_when_valid(self, nlp, iliad_betacode):
        doc = nlp(iliad_betacode)
        assert doc._.betacode_errors == []

    def test_diacritics_stay_in_word(self, nlp):
        doc = nlp("o( lo/gos a)/eide qea\\")
        assert [t.text for t in doc] == ["o(", "lo/gos", "a)/eide", "qea\\"]
        assert [t._.greek for t in doc] == [
            nfc(w) for w in ["ὁ", "λόγος", "ἄειδε", "θεὰ"]
        ]
        assert all(t._.betacode_valid for t in doc)

    def test_final_sigma_per_word(self, nlp):
        doc = nlp("lo/gos kai\\ lo/gos")
        assert doc[0]._.greek == nfc("λόγος")
        assert doc[2]._.greek == nfc("λόγος")

    def test_invalid_token_isolated(self, nlp):
        doc = nlp("lo/gos 9 a/)")
        assert [t._.betacode_valid for t in doc] == [True, False, False]

    def test_token_validity(self, nlp):
        doc = nlp("logos 9")
        assert doc[0]._.betacode_valid is True
        assert doc[1]._.betacode_valid is False

    def test_disable_validation(self):
        nlp = spacy.blank("xx", config=BETACODE_CONFIG)
        nlp.add_pipe("betacode_converter", config={"validation": False})
        doc = nlp("logos 9")
        assert doc._.greek == "λογος 9"
        assert doc._.betacode_errors is None
        assert doc[0]._.betacode_valid is None

    def test_output_is_nfc(self, nlp):
        doc = nlp("a)/eide")
        assert unicodedata.is_normalized("NFC", doc._.greek)

    def test_serialization_roundtrip(self, nlp):
        pipe = nlp.get_pipe("betacode_converter")
        data = pipe.to_bytes()
        assert pipe.from_bytes(data) is pipe

    def test_get_converter_pipe(self, nlp):
        assert get_converter_pipe(nlp) is nlp.get_pipe("betacode_converter")
        assert get_converter_pipe(spacy.blank("xx")) is None


class TestBetacodeTokenizer:
    @pytest.fixture
    def tokenizer(self):
        return BetacodeTokenizer(spacy.blank("xx").vocab)

    def test_clusters_kept_together(self, tokenizer):
        doc = tokenizer("*a)xilh=os lo/gos")
        assert [t.text for t in doc] == ["*a)xilh=os", "lo/gos"]

    def test_punctuation_split(self, tokenizer):
        doc = tokenizer("qea\\, d' a)/eide:")
        assert [t.text for t in doc] == ["qea\\", ",", "d", "'", "a)/eide", ":"]

    def test_text_preserved(self, tokenizer):
        text = "  mh=nin\n\na)/eide  qea\\ "
        assert tokenizer(text).text == text

    def test_empty(self, tokenizer):
        assert len(tokenizer("")) == 0

    def test_pipeline_tokenizer(self, nlp):
        assert isinstance(nlp.tokenizer, BetacodeTokenizer)


class TestLazyImport:
    def test_top_level_access(self):
        from grc_betacode import BetacodeConverterComponent
        from grc_betacode.spacy import BetacodeConverterComponent as direct

        assert BetacodeConverterComponent is direct
