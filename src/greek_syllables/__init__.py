"""
greek-syllables: syllabification of polytonic Greek.

Splits Greek words into syllables following the Greek diphthong and
consonant-cluster rules, and accepts precomposed (NFC) and decomposed
(NFD) spellings of accented letters interchangeably.

Basic usage:
    >>> from greek_syllables import syllables
    >>> syllables("στρατιοτης")
    ['στρα', 'τι', 'ο', 'της']

Grapheme classification:
    >>> from greek_syllables import classify
    >>> classify("ἅ").breathing
    <Breathing.ROUGH: 'rough'>

Running text:
    >>> from greek_syllables import hyphenate
    >>> hyphenate("ὁ λόγος")
    'ὁ λό-γος'
"""

from greek_syllables._graphemes import graphemes
from greek_syllables.charset import (
    Accent,
    Breathing,
    GraphemeInfo,
    NOT_GREEK,
    base_letter,
    classify,
    transliterate,
)
from greek_syllables.syllables import (
    GreekSyllabifier,
    Syllable,
    SyllabificationResult,
    hyphenate,
    syllabify_detailed,
    syllables,
)

__version__ = "0.1.0"
__all__ = [
    "syllables",
    "syllabify_detailed",
    "hyphenate",
    "GreekSyllabifier",
    "Syllable",
    "SyllabificationResult",
    "classify",
    "base_letter",
    "transliterate",
    "graphemes",
    "GraphemeInfo",
    "NOT_GREEK",
    "Accent",
    "Breathing",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "GreekSyllabifierComponent":
        try:
            from greek_syllables.spacy import GreekSyllabifierComponent
            return GreekSyllabifierComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-syllables[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
