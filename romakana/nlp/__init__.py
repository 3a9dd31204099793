"""Natural Language Processing module for romakana

This module provides the romaji processing pipeline: normalization,
kana conversion, tokenization and title recognition.
"""

from .base import BaseConverter, BaseTokenizer, BaseTitleMatcher


def get_converter(language: str = 'ja') -> BaseConverter:
    """Get a romaji-to-kana converter for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific converter instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.converter import RomajiConverter
        return RomajiConverter()
    else:
        raise ValueError(f"Unsupported language for conversion: {language}")


def get_tokenizer(language: str = 'ja') -> BaseTokenizer:
    """Get a romaji tokenizer for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific tokenizer instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.tokenizer import RomajiTokenizer
        return RomajiTokenizer()
    else:
        raise ValueError(f"Unsupported language for tokenization: {language}")


def get_title_matcher(language: str = 'ja') -> BaseTitleMatcher:
    """Get a known-title matcher for the specified language.

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.titles import TitleMatcher
        return TitleMatcher()
    else:
        raise ValueError(f"Unsupported language for title matching: {language}")


__all__ = [
    'BaseConverter',
    'BaseTokenizer',
    'BaseTitleMatcher',
    'get_converter',
    'get_tokenizer',
    'get_title_matcher',
]
