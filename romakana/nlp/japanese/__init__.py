"""Japanese (romaji) language processing module."""

from .lexicon import DEFAULT_LEXICON, KnownTitle, Lexicon, Particle
from .normalizer import normalize_romaji, normalize_title
from .converter import RomajiConverter
from .tokenizer import RomajiTokenizer
from .titles import TitleMatcher
from .detector import is_likely_romaji

__all__ = [
    'DEFAULT_LEXICON',
    'KnownTitle',
    'Lexicon',
    'Particle',
    'normalize_romaji',
    'normalize_title',
    'RomajiConverter',
    'RomajiTokenizer',
    'TitleMatcher',
    'is_likely_romaji',
]
