"""
spaCy integration for greek-syllables.

Provides a pipeline component that attaches syllables to every token.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("grc")
    >>> nlp.add_pipe("greek_syllabifier")
    >>> doc = nlp("ὁ λόγος")
    >>> doc[1]._.syllables
    ['λό', 'γος']
    >>> doc._.hyphenated
    'ὁ λό-γος'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greek_syllables.syllables._rules import GreekSyllabifier

__all__ = [
    "GreekSyllabifierComponent",
    "create_greek_syllabifier",
]


@Language.factory(
    "greek_syllabifier",
    default_config={"hyphen": "-"},
    assigns=["doc._.hyphenated", "token._.syllables", "token._.hyphenated"],
)
def create_greek_syllabifier(
    nlp: Language,
    name: str,
    hyphen: str = "-",
) -> "GreekSyllabifierComponent":
    """Create a Greek syllabifier pipeline component."""
    return GreekSyllabifierComponent(nlp, name, hyphen=hyphen)


class GreekSyllabifierComponent:
    """
    spaCy pipeline component for Greek syllabification.

    Extensions:
        - Doc._.hyphenated: Full text with Greek words hyphenated.
        - Token._.syllables: List of syllables of the token text.
        - Token._.hyphenated: Token text with Greek syllables joined by `hyphen`.

    Tokens that are not Greek (punctuation, numbers, Latin words) get one
    syllable per grapheme, as the syllabifier isolates unknown graphemes,
    but their hyphenated text is left unchanged.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        hyphen: str = "-",
    ) -> None:
        self.name = name
        self.hyphen = hyphen

        if not hyphen:
            raise ValueError("hyphen must be a non-empty string")

        self._syllabifier = GreekSyllabifier()

        if not Doc.has_extension("hyphenated"):
            Doc.set_extension("hyphenated", default=None)
        if not Token.has_extension("syllables"):
            Token.set_extension("syllables", default=None)
        if not Token.has_extension("hyphenated"):
            Token.set_extension("hyphenated", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.hyphenated = self._syllabifier.hyphenate(doc.text, hyphen=self.hyphen)

        for token in doc:
            token._.syllables = self._syllabifier.syllabify(token.text)
            token._.hyphenated = self._syllabifier.hyphenate(
                token.text, hyphen=self.hyphen
            )

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "GreekSyllabifierComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "GreekSyllabifierComponent":
        return self


# =============================================================================
# Utility Functions
# =============================================================================


def get_syllabifier_pipe(nlp: Language) -> Optional[GreekSyllabifierComponent]:
    """Get the Greek syllabifier component from a pipeline."""
    if "greek_syllabifier" in nlp.pipe_names:
        return nlp.get_pipe("greek_syllabifier")
    return None
