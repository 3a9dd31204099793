"""Romaji text normalization utilities."""

import re

import jaconv

# Macron / circumflex vowels are spelled out as doubled vowels before
# tokenization so dictionary keys ("toukyou") still match "Tōkyō".
MACRON_EXPANSIONS = {
    'ā': 'aa', 'ī': 'ii', 'ū': 'uu', 'ē': 'ee', 'ō': 'ou',
    'â': 'aa', 'î': 'ii', 'û': 'uu', 'ê': 'ee', 'ô': 'ou',
}

_MACRON_RE = re.compile("[" + "".join(MACRON_EXPANSIONS) + "]")
_TITLE_SEPARATORS_RE = re.compile(r"[:\-_]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_romaji(text: str) -> str:
    """
    Normalize romaji for consistent processing.

    - Folds full-width ASCII (common in Japanese IME output) to half-width
    - Converts to lowercase and trims
    - Expands long-vowel marks into doubled vowels
    - Standardizes a few romanization variants ("tch", "mb"/"mp", "ou" + vowel)

    Args:
        text: Raw romaji text

    Returns:
        Normalized text, or an empty string for empty input
    """
    if not text:
        return ""

    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    text = text.lower().strip()
    text = _MACRON_RE.sub(lambda m: MACRON_EXPANSIONS[m.group(0)], text)

    text = text.replace("tch", "cch")          # "matcha" → "maccha"
    text = re.sub(r"m([bp])", r"n\1", text)    # "shimbun" → "shinbun"
    text = re.sub(r"ou(?=[aeiou])", "o", text)
    return text


def normalize_title(text: str) -> str:
    """Lowercase, trim and flatten separators so titles compare loosely."""
    if not text:
        return ""
    text = text.lower().strip()
    text = _TITLE_SEPARATORS_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
