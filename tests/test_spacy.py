"""Tests for the spaCy pipeline component."""

import pytest
import spacy

import greek_syllables
from greek_syllables.spacy import GreekSyllabifierComponent, get_syllabifier_pipe


@pytest.fixture(autouse=True)
def _clean_extensions():
    """Remove custom extensions between tests to avoid conflicts."""
    from spacy.tokens import Doc, Token

    yield

    if Doc.has_extension("hyphenated"):
        Doc.remove_extension("hyphenated")

    for ext in ["syllables", "hyphenated"]:
        if Token.has_extension(ext):
            Token.remove_extension(ext)


class TestGreekSyllabifierComponent:
    def test_factory_registered(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        assert "greek_syllabifier" in nlp.pipe_names

    def test_token_syllables(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        doc = nlp("ὁ λόγος")
        assert doc[0]._.syllables == ["ὁ"]
        assert doc[1]._.syllables == ["λό", "γος"]

    def test_token_hyphenated(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        doc = nlp("ἄνθρωπος")
        assert doc[0]._.hyphenated == "ἄν-θρω-πος"

    def test_doc_hyphenated(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        doc = nlp("ἐν ἀρχῇ ἦν ὁ λόγος")
        assert doc._.hyphenated == "ἐν ἀρ-χῇ ἦν ὁ λό-γος"

    def test_non_greek_tokens_not_hyphenated(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        doc = nlp("arma 123 λόγος")
        assert [t._.hyphenated for t in doc] == ["arma", "123", "λό-γος"]
        assert doc._.hyphenated == "arma 123 λό-γος"

    def test_custom_hyphen(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier", config={"hyphen": "·"})
        doc = nlp("λόγος")
        assert doc._.hyphenated == "λό·γος"
        assert doc[0]._.hyphenated == "λό·γος"

    def test_empty_hyphen_rejected(self):
        nlp = spacy.blank("grc")
        with pytest.raises(ValueError, match="hyphen"):
            GreekSyllabifierComponent(nlp, "greek_syllabifier", hyphen="")

    def test_get_pipe(self):
        nlp = spacy.blank("grc")
        assert get_syllabifier_pipe(nlp) is None
        nlp.add_pipe("greek_syllabifier")
        assert isinstance(get_syllabifier_pipe(nlp), GreekSyllabifierComponent)

    def test_serialization_roundtrip(self):
        nlp = spacy.blank("grc")
        nlp.add_pipe("greek_syllabifier")
        pipe = nlp.get_pipe("greek_syllabifier")
        data = pipe.to_bytes()
        pipe.from_bytes(data)


class TestLazyAttribute:
    def test_component_via_package(self):
        assert greek_syllables.GreekSyllabifierComponent is GreekSyllabifierComponent

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError):
            greek_syllables.does_not_exist
