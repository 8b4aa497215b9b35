"""
Grapheme cluster utilities for Greek text.

Polytonic Greek letters may be written as one precomposed code point or
as a base letter followed by combining marks. Both spellings must be
scanned as a single unit, so all iteration goes through extended
grapheme clusters (Unicode text segmentation) rather than code points.
"""

from __future__ import annotations

from typing import Iterator

import regex

__all__ = ["graphemes", "grapheme_spans"]

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """
    Split text into extended grapheme clusters.

    Args:
        text: Any text

    Returns:
        List of grapheme clusters, in order

    Example:
        >>> graphemes("ἄε")
        ['ἄ', 'ε']
    """
    if not text:
        return []
    return _GRAPHEME.findall(text)


def grapheme_spans(text: str) -> Iterator[tuple[int, int, str]]:
    """Yield (start, end, cluster) for each grapheme cluster in text."""
    for match in _GRAPHEME.finditer(text):
        yield match.start(), match.end(), match.group()
