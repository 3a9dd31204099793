"""Known title / proper name recognition."""

from typing import Optional

from romakana.logger import logger
from romakana.nlp.base import BaseTitleMatcher
from .lexicon import DEFAULT_LEXICON, KnownTitle, Lexicon
from .normalizer import normalize_title

# Substring matches below this length are too likely to be accidental
MIN_PARTIAL_MATCH_LENGTH = 5


class TitleMatcher(BaseTitleMatcher):
    """Recognizes anime/game titles and character names from the title table."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or DEFAULT_LEXICON

    def match(self, text: str) -> Optional[KnownTitle]:
        """
        Look up *text* in the known-title table.

        Tried in order, first hit wins:
        1. exact match of the normalized text
        2. exact match after dropping a standalone "no" particle
        3. substring containment in either direction, scanning the table in
           definition order; accepted only if the key or the input is longer
           than five characters

        Returns:
            The matching KnownTitle or None
        """
        normalized = normalize_title(text)
        if not normalized:
            return None

        titles = self.lexicon.titles

        title = titles.get(normalized)
        if title is not None:
            return title

        without_no = normalized.replace(" no ", " ")
        title = titles.get(without_no)
        if title is not None:
            return title

        for key, title in titles.items():
            if key in normalized or normalized in key:
                if len(key) > MIN_PARTIAL_MATCH_LENGTH or len(normalized) > MIN_PARTIAL_MATCH_LENGTH:
                    logger.debug(f"Partial title match: '{normalized}' ~ '{key}'")
                    return title

        return None
