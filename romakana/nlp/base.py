from abc import ABC, abstractmethod
from typing import List, Optional, Any

from romakana.schema import Token


class BaseConverter(ABC):
    """Abstract base class for character-level romaji conversion"""

    @abstractmethod
    def convert(self, fragment: str) -> str:
        """Convert a single romaji fragment (no spaces) to kana"""
        pass


class BaseTokenizer(ABC):
    """Abstract base class for romaji tokenization"""

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Split text into an ordered list of tokens"""
        pass

    def to_kana(self, text: str) -> str:
        """Join the kana of every token produced for *text*."""
        return "".join(token.kana for token in self.tokenize(text))


class BaseTitleMatcher(ABC):
    """Abstract base class for known title / proper name recognition"""

    @abstractmethod
    def match(self, text: str) -> Optional[Any]:
        """Return the matching title record or None"""
        pass
