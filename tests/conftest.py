"""Shared fixtures for greek-syllables tests."""

import pytest

from greek_syllables.syllables import GreekSyllabifier


@pytest.fixture
def syllabifier() -> GreekSyllabifier:
    """Return a fresh syllabifier instance."""
    return GreekSyllabifier()
