"""
spaCy integration for grc-betacode.

Provides a tokenizer that keeps Betacode letter clusters together and a
pipeline component that converts Betacode documents to Greek Unicode and
optionally records validation errors.

spaCy's default tokenizers treat the diacritic markers ")", "(" and "/"
as punctuation and split words on them, so pipelines built for Betacode
should use the "betacode_tokenizer".

Example:
    >>> import spacy
    >>> nlp = spacy.blank(
    ...     "xx", config={"nlp": {"tokenizer": {"@tokenizers": "betacode_tokenizer"}}}
    ... )
    >>> nlp.add_pipe("betacode_converter")
    >>> doc = nlp("mh=nin a)/eide")
    >>> doc._.greek
    'μῆνιν ἄειδε'
    >>> [t._.greek for t in doc]
    ['μῆνιν', 'ἄειδε']
"""

from typing import Callable, Iterator, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token
from spacy.util import registry
from spacy.vocab import Vocab

from grc_betacode._scanner import Cluster, scan
from grc_betacode.converter._rules import BetacodeConverter
from grc_betacode.validator._checks import find_violations

__all__ = [
    "BetacodeTokenizer",
    "BetacodeConverterComponent",
    "create_betacode_tokenizer",
    "create_betacode_converter",
    "get_converter_pipe",
]

# =============================================================================
# Tokenizer
# =============================================================================


def _word_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of each word: a run of clusters, or one other char."""
    start = end = None
    idx = 0
    for unit in scan(text):
        if isinstance(unit, Cluster):
            if end != unit.position:
                if start is not None:
                    yield start, end
                start = unit.position
            idx = end = unit.position + len(unit.raw)
            continue
        if start is not None:
            yield start, end
            start = end = None
        if not unit.isspace():
            yield idx, idx + 1
        idx += 1
    if start is not None:
        yield start, end


class BetacodeTokenizer:
    """
    Whitespace and punctuation tokenizer for Betacode.

    A run of letter clusters ("lo/gos", "*a)xilh=os") is one token; every
    other non-space character is a token of its own. Whitespace follows
    spaCy's convention: one trailing space is attached to the preceding
    token, anything else becomes a whitespace token.

    Example:
        >>> [t.text for t in BetacodeTokenizer(Vocab())("o( lo/gos, d'")]
        ['o(', 'lo/gos', ',', 'd', "'"]
    """

    def __init__(self, vocab: Vocab) -> None:
        self.vocab = vocab

    def __call__(self, text: str) -> Doc:
        words: list[str] = []
        spaces: list[bool] = []
        pos = 0
        for start, end in _word_spans(text):
            self._add_gap(text[pos:start], words, spaces)
            words.append(text[start:end])
            spaces.append(False)
            pos = end
        self._add_gap(text[pos:], words, spaces)
        return Doc(self.vocab, words=words, spaces=spaces)

    @staticmethod
    def _add_gap(gap: str, words: list[str], spaces: list[bool]) -> None:
        if words and gap.startswith(" ") and not words[-1].isspace():
            spaces[-1] = True
            gap = gap[1:]
        if gap:
            words.append(gap)
            spaces.append(False)

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTokenizer":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeTokenizer":
        return self


@registry.tokenizers("betacode_tokenizer")
def create_betacode_tokenizer() -> Callable[[Language], BetacodeTokenizer]:
    """Create the Betacode tokenizer for a pipeline config."""

    def create_tokenizer(nlp: Language) -> BetacodeTokenizer:
        return BetacodeTokenizer(nlp.vocab)

    return create_tokenizer


# =============================================================================
# Converter component
# =============================================================================

@Language.factory(
    "betacode_converter",
    default_config={"validation": True},
    assigns=[
        "doc._.greek",
        "doc._.betacode_errors",
        "token._.greek",
        "token._.betacode_valid",
    ],
)
def create_betacode_converter(
    nlp: Language,
    name: str,
    validation: bool = True,
) -> "BetacodeConverterComponent":
    """Create a Betacode converter pipeline component."""
    return BetacodeConverterComponent(nlp, name, validation=validation)


class BetacodeConverterComponent:
    """
    spaCy pipeline component for Betacode → Greek Unicode conversion.

    Extensions:
        - Doc._.greek: Converted document text.
        - Doc._.betacode_errors: ValidationErrors for the document text
          (None when validation=False).
        - Token._.greek: Converted token text.
        - Token._.betacode_valid: Whether the token is strict Betacode
          (None when validation=False).

    Note: token.text is never modified. Token values are computed per token,
    so they are only meaningful when the tokenizer keeps clusters together
    (see BetacodeTokenizer).
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        validation: bool = True,
    ) -> None:
        self.name = name
        self.validation = validation
        self._converter = BetacodeConverter()

        if not Doc.has_extension("greek"):
            Doc.set_extension("greek", default=None)
        if not Doc.has_extension("betacode_errors"):
            Doc.set_extension("betacode_errors", default=None)
        if not Token.has_extension("greek"):
            Token.set_extension("greek", default=None)
        if not Token.has_extension("betacode_valid"):
            Token.set_extension("betacode_valid", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.greek = self._converter.convert(doc.text)
        if self.validation:
            doc._.betacode_errors = find_violations(doc.text).errors

        for token in doc:
            token._.greek = self._converter.convert(token.text)
            if self.validation:
                token._.betacode_valid = find_violations(token.text).ok

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "BetacodeConverterComponent":
        return self


def get_converter_pipe(nlp: Language) -> Optional[BetacodeConverterComponent]:
    """Get the Betacode converter component from a pipeline."""
    if "betacode_converter" in nlp.pipe_names:
        return nlp.get_pipe("betacode_converter")
    return None
