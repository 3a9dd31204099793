"""Heuristic romaji detection."""

import re
from typing import Optional

from .lexicon import DEFAULT_LEXICON, Lexicon

# Endings and syllables that rarely occur in English text
JAPANESE_PATTERNS = [
    re.compile(pattern) for pattern in (
        r"desu$", r"masu$", r"kudasai", r"arigatou", r"konnichiwa",
        r"shi(?!t|p)", r"chi", r"tsu", r"[^c]hu", r"[^s]ha",
    )
]


def is_likely_romaji(text: str, lexicon: Optional[Lexicon] = None) -> bool:
    """
    Estimate whether *text* is romanized Japanese rather than English.

    True when a typical romaji pattern occurs anywhere in the text, or when
    more than half of the whitespace-delimited words are known words or
    particles.
    """
    if not text:
        return False

    lexicon = lexicon or DEFAULT_LEXICON
    normalized = text.lower().strip()

    if any(pattern.search(normalized) for pattern in JAPANESE_PATTERNS):
        return True

    words = normalized.split()
    if not words:
        return False
    known = sum(1 for word in words if lexicon.is_known_word(word))
    return known > len(words) / 2
