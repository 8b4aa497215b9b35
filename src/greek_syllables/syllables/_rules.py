"""
Rule-based syllabification for Ancient Greek.

Words are scanned right to left, one grapheme cluster at a time. Each
syllable is built backwards from its coda: trailing consonants are
consumed until a vowel nucleus is found, the nucleus absorbs a preceding
vowel when the two form a diphthong, and the onset absorbs as many
preceding consonants as may open a Greek syllable together. The next
grapheme that cannot join starts a new syllable.

Example:
    >>> from greek_syllables.syllables import syllables
    >>> syllables("χριστος")
    ['χρι', 'στος']

    >>> from greek_syllables.syllables import GreekSyllabifier
    >>> syllabifier = GreekSyllabifier()
    >>> syllabifier.hyphenate("ἐν ἀρχῇ ἦν ὁ λόγος")
    'ἐν ἀρ-χῇ ἦν ὁ λό-γος'
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import regex

from greek_syllables._graphemes import grapheme_spans
from greek_syllables.charset import classify

__all__ = [
    "GreekSyllabifier",
    "Syllable",
    "SyllabificationResult",
    "DIPHTHONGS",
    "JOINABLE_CLUSTERS",
    "syllables",
    "syllabify_detailed",
    "hyphenate",
]

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Syllable:
    """One syllable and its code-point offsets in the source word."""

    text: str
    start: int
    end: int


@dataclass
class SyllabificationResult:
    """Detailed result from syllabification."""

    original: str
    syllables: list[Syllable] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [s.text for s in self.syllables]

    @property
    def boundaries(self) -> list[int]:
        """Offsets where a syllable other than the first begins."""
        return [s.start for s in self.syllables[1:]]


# =============================================================================
# Rule Tables
# =============================================================================

# Keys are (current, previous) in scanning order, i.e. word order.
DIPHTHONGS = frozenset(
    {
        ("α", "ι"),
        ("ε", "ι"),
        ("ο", "ι"),
        ("υ", "ι"),
        ("α", "υ"),
        ("ε", "υ"),
        ("ο", "υ"),
        ("η", "υ"),
    }
)

# Consonant pairs that can open a syllable together
JOINABLE_CLUSTERS = frozenset(
    {
        ("β", "δ"),
        ("β", "λ"),
        ("β", "ρ"),
        ("γ", "λ"),
        ("γ", "ν"),
        ("γ", "ρ"),
        ("δ", "ρ"),
        ("θ", "λ"),
        ("θ", "ν"),
        ("θ", "ρ"),
        ("κ", "λ"),
        ("κ", "ν"),
        ("κ", "ρ"),
        ("κ", "τ"),
        ("μ", "ν"),
        ("π", "λ"),
        ("π", "ν"),
        ("π", "ρ"),
        ("π", "τ"),
        ("σ", "β"),
        ("σ", "θ"),
        ("σ", "κ"),
        ("σ", "μ"),
        ("σ", "π"),
        ("σ", "τ"),
        ("σ", "φ"),
        ("σ", "χ"),
        ("τ", "ρ"),
        ("φ", "θ"),
        ("φ", "λ"),
        ("φ", "ρ"),
        ("χ", "λ"),
        ("χ", "ρ"),
    }
)

# A Greek letter and its combining marks, repeated
_GREEK_WORD = regex.compile(r"(?:(?=\p{Greek})\p{L}\p{M}*)+")


# =============================================================================
# Scanner
# =============================================================================


class State(Enum):
    ENDING = "ending"  # consuming coda consonants, no nucleus yet
    STARTING = "starting"  # nucleus found
    RESTARTING = "restarting"  # one onset consonant consumed


class _Scanner:
    """Single-use backward scan over one word."""

    def __init__(self, word: str) -> None:
        self.word = word
        self.spans: list[tuple[int, int]] = []
        self.state = State.ENDING
        self.end = len(word)
        # Start offset of the grapheme handled in the previous step
        self.last = len(word)
        self.prev: Optional[str] = None
        self.prev_prev: Optional[str] = None
        self.prev_diaeresis = False

    def cut(self, at: int) -> None:
        """Close the pending syllable so that it starts at offset `at`."""
        if at < self.end:
            self.spans.append((at, self.end))
            self.end = at

    def step(self, start: int, cluster: str) -> None:
        info = classify(cluster)
        letter = info.letter

        if not info.is_greek:
            # Unknown graphemes stand alone and reset the machine
            self.cut(self.last)
            self.cut(start)
            self.state = State.ENDING
            self.prev = None
            self.prev_diaeresis = False
            self.last = start
            return

        if self.state is State.ENDING:
            if info.is_vowel:
                if info.has_diaeresis:
                    self.cut(start)
                self.state = State.STARTING

        elif self.state is State.STARTING:
            if self._is_diphthong(letter):
                pass
            elif info.is_vowel:
                self.cut(self.last)
            else:
                self.state = State.RESTARTING

        else:
            if info.is_vowel:
                self.cut(self.last)
                self.state = State.STARTING
            elif letter == "σ" and self.prev == "τ" and self.prev_prev == "ρ":
                # ...ρστ...: ρ closes the previous syllable, στ opens the next
                self.cut(start)
                self.state = State.ENDING
            elif (letter, self.prev) in JOINABLE_CLUSTERS:
                self.prev_prev = self.prev
            else:
                self.cut(self.last)
                self.state = State.ENDING

        self.prev = letter
        self.prev_diaeresis = info.has_diaeresis
        self.last = start

    def _is_diphthong(self, letter: Optional[str]) -> bool:
        # Diaeresis marks a vowel that does not join its neighbour
        if self.prev_diaeresis:
            return False
        return (letter, self.prev) in DIPHTHONGS

    def run(self) -> list[tuple[int, int]]:
        for start, _, cluster in reversed(list(grapheme_spans(self.word))):
            self.step(start, cluster)
        self.cut(0)
        self.spans.reverse()
        return self.spans


# =============================================================================
# Main Syllabifier Class
# =============================================================================


class GreekSyllabifier:
    """
    Rule-based syllabifier for polytonic Greek.

    Accepts precomposed and decomposed spellings alike. Graphemes that are
    not Greek letters are isolated as one-grapheme syllables, so mixed or
    noisy input degrades into fragments instead of failing.

    Example:
        >>> syllabifier = GreekSyllabifier()
        >>> syllabifier.syllabify("στρατιοτης")
        ['στρα', 'τι', 'ο', 'της']
    """

    def syllabify(self, word: str) -> list[str]:
        """
        Split a word into syllables.

        Args:
            word: A single word (no whitespace)

        Returns:
            Syllables in reading order; joined, they reproduce `word` exactly
        """
        if not word:
            return []
        return [word[start:end] for start, end in _Scanner(word).run()]

    def syllabify_detailed(self, word: str) -> SyllabificationResult:
        """
        Split a word into syllables, keeping their offsets.

        Example:
            >>> result = GreekSyllabifier().syllabify_detailed("λόγος")
            >>> result.texts
            ['λό', 'γος']
            >>> result.boundaries
            [2]
        """
        if not word:
            return SyllabificationResult(original=word, syllables=[])

        return SyllabificationResult(
            original=word,
            syllables=[
                Syllable(text=word[start:end], start=start, end=end)
                for start, end in _Scanner(word).run()
            ],
        )

    def hyphenate(self, text: str, hyphen: str = "-") -> str:
        """
        Insert `hyphen` between the syllables of every Greek word in text.

        Spaces, punctuation and non-Greek words are left as they are.

        Args:
            text: Running text
            hyphen: Separator placed between syllables

        Returns:
            The hyphenated text
        """
        if not text:
            return text
        return _GREEK_WORD.sub(
            lambda match: hyphen.join(self.syllabify(match.group())), text
        )


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_syllabifier: Optional[GreekSyllabifier] = None


def _get_default() -> GreekSyllabifier:
    global _default_syllabifier
    if _default_syllabifier is None:
        _default_syllabifier = GreekSyllabifier()
    return _default_syllabifier


def syllables(word: str) -> list[str]:
    """
    Split a Greek word into syllables.

    Convenience function that uses a shared syllabifier instance.

    Example:
        >>> syllables("μωϋσῆν")
        ['μω', 'ϋ', 'σῆν']
    """
    return _get_default().syllabify(word)


def syllabify_detailed(word: str) -> SyllabificationResult:
    """Split a Greek word into syllables, with offsets."""
    return _get_default().syllabify_detailed(word)


def hyphenate(text: str, hyphen: str = "-") -> str:
    """
    Hyphenate every Greek word in running text.

    Example:
        >>> hyphenate("ὁ λόγος.")
        'ὁ λό-γος.'
    """
    return _get_default().hyphenate(text, hyphen=hyphen)
