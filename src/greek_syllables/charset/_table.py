"""
Grapheme classification for polytonic Greek.

Provides:
- GraphemeInfo: phonetic descriptor for one grapheme cluster
- classify(): grapheme cluster → GraphemeInfo (total, never raises)
- transliterate(): ASCII rendering of a word from the same table
- Breathing / Accent enumerations and the combining-mark constants

The table is generated once at import time. Every vowel is combined with
every accent and breathing it can carry, and each combination is stored
under all of its spellings: base letter plus combining marks in every
order, and the precomposed (NFC) form where Unicode has one. Lookups that
miss fall back to the NFD form of the input, which catches the remaining
canonically equivalent code points (oxia vs tonos, capital tonos forms).
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from itertools import permutations
from types import MappingProxyType
from typing import Iterator, Optional

from greek_syllables._graphemes import graphemes

__all__ = [
    "Accent",
    "Breathing",
    "GraphemeInfo",
    "NOT_GREEK",
    "GREEK_LETTERS",
    "VOWELS",
    "CONSONANTS",
    "classify",
    "base_letter",
    "transliterate",
]


class Breathing(Enum):
    """Aspiration mark written over an initial vowel (or rho)."""

    NONE = "none"
    SMOOTH = "smooth"
    ROUGH = "rough"


class Accent(Enum):
    """Pitch accent mark."""

    UNACCENTED = "unaccented"
    ACUTE = "acute"
    GRAVE = "grave"
    CIRCUMFLEX = "circumflex"


@dataclass(frozen=True)
class GraphemeInfo:
    """Normalized description of one Greek grapheme cluster."""

    letter: Optional[str]  # lowercase unaccented base letter, None if not Greek
    transliteration: str
    is_vowel: bool
    breathing: Breathing = Breathing.NONE
    accent: Accent = Accent.UNACCENTED
    has_diaeresis: bool = False
    has_iota_subscript: bool = False

    @property
    def is_greek(self) -> bool:
        return self.letter is not None


NOT_GREEK = GraphemeInfo(letter=None, transliteration="", is_vowel=False)

# The 24 letters of the Greek alphabet (final sigma folds into σ)
GREEK_LETTERS = tuple("αβγδεζηθικλμνξοπρστυφχψω")

VOWELS = {
    "α": "a",
    "ε": "e",
    "η": "e",
    "ι": "i",
    "ο": "o",
    "υ": "u",
    "ω": "o",
}

CONSONANTS = {
    "β": "b",
    "γ": "g",
    "δ": "d",
    "ζ": "z",
    "θ": "th",
    "κ": "k",
    "λ": "l",
    "μ": "m",
    "ν": "n",
    "ξ": "x",
    "π": "p",
    "ρ": "r",
    "σ": "s",
    "τ": "t",
    "φ": "f",
    "χ": "ch",
    "ψ": "ps",
}

# Unicode combining marks used in Greek polytonic
GRAVE = "\u0300"  # combining grave accent
ACUTE = "\u0301"  # combining acute accent
DIAERESIS = "\u0308"  # combining diaeresis
SMOOTH = "\u0313"  # combining comma above (smooth breathing)
ROUGH = "\u0314"  # combining reversed comma above (rough breathing)
CIRCUMFLEX = "\u0342"  # combining Greek perispomeni
IOTA_SUBSCRIPT = "\u0345"  # combining Greek ypogegrammeni

_BREATHING_MARKS = {
    Breathing.NONE: "",
    Breathing.SMOOTH: SMOOTH,
    Breathing.ROUGH: ROUGH,
}

_ACCENT_MARKS = {
    Accent.UNACCENTED: "",
    Accent.ACUTE: ACUTE,
    Accent.GRAVE: GRAVE,
    Accent.CIRCUMFLEX: CIRCUMFLEX,
}

# ε and ο are always short and never take a circumflex
_CIRCUMFLEX_VOWELS = frozenset("αηιυω")
_DIAERESIS_VOWELS = frozenset("ιυ")
_IOTA_SUBSCRIPT_VOWELS = frozenset("αηω")

# Spellings beyond the plain lower/upper pair
_LETTER_FORMS = {
    "σ": ("σ", "ς", "Σ"),
}

# ὁ has always rendered as "i" in this table. Probably a slip for "o";
# kept until someone confirms which one callers rely on.
_TRANSLITERATION_OVERRIDES = {
    ("ο", Breathing.ROUGH, Accent.UNACCENTED): "i",
}


# =============================================================================
# Table Construction
# =============================================================================


def _spellings(base: str, marks: list[str]) -> set[str]:
    """All encodings of base + marks: every mark order, decomposed and NFC."""
    spellings = set()
    for order in permutations(marks):
        decomposed = base + "".join(order)
        spellings.add(decomposed)
        spellings.add(unicodedata.normalize("NFC", decomposed))
    return spellings


def _forms(letter: str) -> tuple[str, ...]:
    return _LETTER_FORMS.get(letter, (letter, letter.upper()))


def _vowel_marks(letter: str) -> Iterator[tuple[Breathing, Accent, bool, bool]]:
    """Yield (breathing, accent, diaeresis, iota_subscript) a vowel can carry."""
    iota_options = (False, True) if letter in _IOTA_SUBSCRIPT_VOWELS else (False,)
    for accent in Accent:
        if accent is Accent.CIRCUMFLEX and letter not in _CIRCUMFLEX_VOWELS:
            continue
        for breathing in Breathing:
            for iota_subscript in iota_options:
                yield breathing, accent, False, iota_subscript
        # Diaeresis excludes a breathing; see _vowel_entries for written ones
        if letter in _DIAERESIS_VOWELS:
            yield Breathing.NONE, accent, True, False


def _vowel_entries() -> Iterator[tuple[str, GraphemeInfo]]:
    for letter, translit in VOWELS.items():
        for breathing, accent, diaeresis, iota_subscript in _vowel_marks(letter):
            info = GraphemeInfo(
                letter=letter,
                transliteration=_TRANSLITERATION_OVERRIDES.get(
                    (letter, breathing, accent), translit
                ),
                is_vowel=True,
                breathing=breathing,
                accent=accent,
                has_diaeresis=diaeresis,
                has_iota_subscript=iota_subscript,
            )
            marks = [
                _BREATHING_MARKS[breathing],
                _ACCENT_MARKS[accent],
                DIAERESIS if diaeresis else "",
                IOTA_SUBSCRIPT if iota_subscript else "",
            ]
            marks = [m for m in marks if m]
            # A breathing written next to a diaeresis is dropped, diaeresis wins
            variants = [marks]
            if diaeresis:
                variants += [marks + [SMOOTH], marks + [ROUGH]]
            for base in _forms(letter):
                for written in variants:
                    for spelling in _spellings(base, written):
                        yield spelling, info


def _consonant_entries() -> Iterator[tuple[str, GraphemeInfo]]:
    for letter, translit in CONSONANTS.items():
        info = GraphemeInfo(letter=letter, transliteration=translit, is_vowel=False)
        for base in _forms(letter):
            yield base, info

    # Initial rho is written with a breathing (ῥήτωρ, Ῥώμη, πῤῥ-)
    for breathing in (Breathing.SMOOTH, Breathing.ROUGH):
        info = GraphemeInfo(
            letter="ρ",
            transliteration=CONSONANTS["ρ"],
            is_vowel=False,
            breathing=breathing,
        )
        for base in _forms("ρ"):
            for spelling in _spellings(base, [_BREATHING_MARKS[breathing]]):
                yield spelling, info


def _build_table() -> MappingProxyType:
    table: dict[str, GraphemeInfo] = {}
    for spelling, info in _vowel_entries():
        table[spelling] = info
    for spelling, info in _consonant_entries():
        table[spelling] = info
    return MappingProxyType(table)


_TABLE = _build_table()


# =============================================================================
# Lookup
# =============================================================================


def classify(grapheme: str) -> GraphemeInfo:
    """
    Classify a single grapheme cluster.

    Upper and lower case classify identically, and so does every Unicode
    spelling of the same letter: precomposed, decomposed, or decomposed
    with its combining marks in any order.

    Args:
        grapheme: One extended grapheme cluster

    Returns:
        The descriptor for the cluster, or NOT_GREEK for anything the
        table does not know (Latin letters, punctuation, empty string)

    Example:
        >>> info = classify("ὔ")
        >>> info.letter, info.breathing, info.accent
        ('υ', <Breathing.SMOOTH: 'smooth'>, <Accent.ACUTE: 'acute'>)
    """
    info = _TABLE.get(grapheme)
    if info is None:
        info = _TABLE.get(unicodedata.normalize("NFD", grapheme), NOT_GREEK)
    return info


def base_letter(grapheme: str) -> Optional[str]:
    """Return the canonical lowercase letter of a grapheme, or None."""
    return classify(grapheme).letter


def transliterate(word: str) -> str:
    """
    Render Greek text in ASCII, one grapheme at a time.

    Graphemes that are not Greek pass through unchanged. Case, breathing
    and accents are not represented in the output.

    Example:
        >>> transliterate("χριστος")
        'christos'
    """
    result = []
    for cluster in graphemes(word):
        info = classify(cluster)
        result.append(info.transliteration if info.is_greek else cluster)
    return "".join(result)
