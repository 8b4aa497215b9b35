"""
Syllabification submodule.

Re-exports the backward-scanning syllabifier and its rule tables.
"""

from greek_syllables.syllables._rules import (
    DIPHTHONGS,
    JOINABLE_CLUSTERS,
    GreekSyllabifier,
    State,
    Syllable,
    SyllabificationResult,
    hyphenate,
    syllabify_detailed,
    syllables,
)

__all__ = [
    "DIPHTHONGS",
    "JOINABLE_CLUSTERS",
    "GreekSyllabifier",
    "State",
    "Syllable",
    "SyllabificationResult",
    "hyphenate",
    "syllabify_detailed",
    "syllables",
]
