"""Character-level romaji → hiragana conversion."""

from typing import List, Optional

from romakana.nlp.base import BaseConverter
from .lexicon import DEFAULT_LEXICON, Lexicon

SMALL_TSU = 'っ'
STANDALONE_N = 'ん'
MAX_CHUNK_LENGTH = 4

CONSONANTS = frozenset('bcdfghjklmnpqrstvwxyz')


def is_consonant(char: str) -> bool:
    return char in CONSONANTS


class RomajiConverter(BaseConverter):
    """Greedy longest-prefix converter for fragments with no dictionary entry.

    The cursor always advances, so conversion terminates for any input;
    characters that cannot be mapped are copied through unchanged.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or DEFAULT_LEXICON

    def convert(self, fragment: str) -> str:
        if not fragment:
            return ""

        text = fragment.lower()
        romaji_map = self.lexicon.romaji_map
        output: List[str] = []
        i = 0
        n = len(text)

        while i < n:
            # 1. Longest chunk in the romaji map (4 chars down to 1)
            for length in range(min(MAX_CHUNK_LENGTH, n - i), 0, -1):
                kana = romaji_map.get(text[i:i + length])
                if kana is not None:
                    output.append(kana)
                    i += length
                    break
            else:
                i += self._convert_unmatched(text, i, output)

        return "".join(output)

    def _convert_unmatched(self, text: str, i: int, output: List[str]) -> int:
        """Apply the fallback rules at *i*; return how many characters were consumed."""
        char = text[i]
        next_char = text[i + 1] if i + 1 < len(text) else ''

        # Double consonant → small tsu, second consonant is reprocessed ("kk" in "gakkou")
        if is_consonant(char) and char == next_char and char != 'n':
            output.append(SMALL_TSU)
            return 1

        # Standalone n: at the end, before a consonant other than y, or before ' / space
        if char == 'n':
            if (not next_char
                    or (is_consonant(next_char) and next_char != 'y')
                    or next_char in ("'", ' ')):
                output.append(STANDALONE_N)
                return 1

        long_vowel = self.lexicon.long_vowels.get(char)
        if long_vowel is not None:
            output.append(long_vowel)
            return 1

        sequence = self.lexicon.long_vowel_sequences.get(char + next_char)
        if next_char and sequence is not None:
            output.append(sequence)
            return 2

        # Punctuation, digits, anything else: keep as-is
        output.append(char)
        return 1
