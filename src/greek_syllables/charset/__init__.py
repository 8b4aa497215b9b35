"""
Grapheme classification submodule.

Maps one Greek grapheme cluster, in any Unicode spelling, to a normalized
descriptor: base letter, transliteration, vowel flag, breathing, accent
and diaeresis.

Basic usage:
    >>> from greek_syllables.charset import classify
    >>> classify("ἄ").letter
    'α'

    >>> from greek_syllables.charset import transliterate
    >>> transliterate("λόγος")
    'logos'
"""

from greek_syllables.charset._table import (
    Accent,
    Breathing,
    CONSONANTS,
    GREEK_LETTERS,
    GraphemeInfo,
    NOT_GREEK,
    VOWELS,
    base_letter,
    classify,
    transliterate,
)

__all__ = [
    "Accent",
    "Breathing",
    "CONSONANTS",
    "GREEK_LETTERS",
    "GraphemeInfo",
    "NOT_GREEK",
    "VOWELS",
    "base_letter",
    "classify",
    "transliterate",
]
