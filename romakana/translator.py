"""Romaji → hiragana → English translation pipeline.

Tokenization is synchronous and never touches the network; only gloss
resolution awaits remote lookups. Concurrent translations share one cache
without locking, so two misses on the same key may both query the gateway
(the last one to finish wins the cache slot).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from romakana import CACHE_MAX_SIZE
from romakana.cache import TranslationCache
from romakana.gateway import BaseLookupGateway, JishoGateway
from romakana.logger import logger
from romakana.nlp.japanese.detector import is_likely_romaji
from romakana.nlp.japanese.lexicon import DEFAULT_LEXICON, Lexicon
from romakana.nlp.japanese.titles import TitleMatcher
from romakana.nlp.japanese.tokenizer import RomajiTokenizer
from romakana.schema import (
    FormattedEntry,
    JishoEntry,
    TitleType,
    Token,
    TranslationResult,
    TranslationSource,
)

OFFLINE_CONFIDENCE = 0.85
COMMON_REMOTE_CONFIDENCE = 0.9
REMOTE_CONFIDENCE = 0.75
WORD_BY_WORD_CONFIDENCE = 0.5
PROPER_NAME_PENALTY = 0.7

MAX_REMOTE_ENTRIES = 3
MAX_SENSES_PER_ENTRY = 2

NO_TEXT_MESSAGE = "No text to translate"
FAILURE_MESSAGE = "Translation failed - please try again"
PROPER_NAME_NOTE = "This may be a proper name/title. Showing literal translation."


@dataclass
class Gloss:
    """English rendering of a kana string and where it came from."""
    translation: str
    source: TranslationSource
    confidence: float
    alternatives: List[str] = field(default_factory=list)
    is_common: bool = False
    parts_of_speech: List[str] = field(default_factory=list)


def _parse_entries(data: Sequence[Any]) -> List[JishoEntry]:
    entries = []
    for raw in data:
        try:
            entries.append(JishoEntry.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping malformed dictionary entry: {e.error_count()} error(s)")
    return entries


def format_results(data: Sequence[Any], max_entries: int = MAX_REMOTE_ENTRIES) -> List[FormattedEntry]:
    """
    Reduce raw remote entries to the meanings worth showing.

    Looks at the first *max_entries* entries and their first two senses,
    joining each sense's definitions with commas. A definition string
    already used by an earlier entry is not repeated, and entries left
    without meanings are dropped.
    """
    formatted: List[FormattedEntry] = []
    seen = set()

    for entry in _parse_entries(data[:max_entries]):
        meanings = []
        for sense in entry.senses[:MAX_SENSES_PER_ENTRY]:
            definitions = ", ".join(sense.english_definitions)
            if definitions and definitions not in seen:
                seen.add(definitions)
                meanings.append(definitions)

        if meanings:
            first = entry.japanese[0] if entry.japanese else None
            formatted.append(FormattedEntry(
                reading=(first.reading or "") if first else "",
                word=(first.word or "") if first else "",
                meanings=meanings,
                is_common=entry.is_common,
                jlpt=entry.jlpt,
                parts_of_speech=entry.senses[0].parts_of_speech if entry.senses else [],
            ))

    return formatted


def _first_definition(data: Sequence[Any]) -> Optional[str]:
    entries = _parse_entries(data[:1])
    if entries and entries[0].senses and entries[0].senses[0].english_definitions:
        return entries[0].senses[0].english_definitions[0]
    return None


class TranslationOrchestrator:
    """Resolves an English gloss through offline, cached and remote sources."""

    def __init__(self, lexicon: Lexicon, cache: TranslationCache, gateway: BaseLookupGateway):
        self.lexicon = lexicon
        self.cache = cache
        self.gateway = gateway

    async def lookup(self, query: str) -> Optional[List[Any]]:
        """Cached remote lookup; None when the gateway reports a failure."""
        key = query.strip().lower()
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for '{key}'")
            return cached

        try:
            response = await self.gateway.lookup(query)
        except Exception as e:
            logger.warning(f"Remote lookup for '{query}' raised: {e!r}")
            return None

        if not response.get("success"):
            logger.warning(f"Remote lookup for '{query}' failed: {response.get('error', 'unknown error')}")
            return None

        data = response.get("data") or []
        self.cache.put(key, data)
        return data

    async def resolve(self, kana: str, tokens: Sequence[Token] = ()) -> Gloss:
        """
        Find an English gloss for *kana*.

        Strategy:
        1. Offline phrase table
        2. Remote lookup of the whole phrase
        3. Word by word, when there is more than one token
        4. "Unable to translate" sentinel
        """
        offline = self.lexicon.lookup_offline(kana)
        if offline is not None:
            return Gloss(translation=offline, source=TranslationSource.offline, confidence=OFFLINE_CONFIDENCE)

        data = await self.lookup(kana)
        if data:
            formatted = format_results(data)
            if formatted:
                primary = formatted[0]
                return Gloss(
                    translation="; ".join(primary.meanings),
                    source=TranslationSource.remote,
                    confidence=COMMON_REMOTE_CONFIDENCE if primary.is_common else REMOTE_CONFIDENCE,
                    alternatives=["; ".join(entry.meanings) for entry in formatted[1:]],
                    is_common=primary.is_common,
                    parts_of_speech=primary.parts_of_speech,
                )

        if len(tokens) > 1:
            words = [await self._translate_token(token) for token in tokens]
            return Gloss(
                translation=" ".join(words),
                source=TranslationSource.remote_word_by_word,
                confidence=WORD_BY_WORD_CONFIDENCE,
            )

        return Gloss(translation=f"Unable to translate: {kana}", source=TranslationSource.none, confidence=0.0)

    async def _translate_token(self, token: Token) -> str:
        if token.is_particle:
            return f"[{token.particle_role or 'particle'}]"

        offline = self.lexicon.lookup_offline(token.kana)
        if offline is not None:
            return offline.split(";")[0].strip()

        data = await self.lookup(token.kana)
        if data:
            definition = _first_definition(data)
            if definition:
                return definition

        return f"[{token.romaji}?]"


class RomajiTranslator:
    """Entry point for translating selected romaji text.

    ``quick_hiragana`` and ``is_likely_romaji`` are synchronous and offline;
    ``translate`` additionally resolves an English gloss.
    """

    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        gateway: Optional[BaseLookupGateway] = None,
        cache: Optional[TranslationCache] = None,
        tokenizer: Optional[RomajiTokenizer] = None,
        title_matcher: Optional[TitleMatcher] = None,
    ):
        self.lexicon = lexicon if lexicon is not None else DEFAULT_LEXICON
        self.tokenizer = tokenizer if tokenizer is not None else RomajiTokenizer(self.lexicon)
        self.title_matcher = title_matcher if title_matcher is not None else TitleMatcher(self.lexicon)
        self.cache = cache if cache is not None else TranslationCache(CACHE_MAX_SIZE)
        self.gateway = gateway if gateway is not None else JishoGateway()
        self.orchestrator = TranslationOrchestrator(self.lexicon, self.cache, self.gateway)

    def quick_hiragana(self, text: str) -> str:
        """Kana transliteration only, no gloss and no network access."""
        return self.tokenizer.to_kana(text)

    def is_likely_romaji(self, text: str) -> bool:
        return is_likely_romaji(text, self.lexicon)

    async def translate(self, text: str) -> TranslationResult:
        if not text or not text.strip():
            return TranslationResult(
                romaji="",
                kana="",
                english=NO_TEXT_MESSAGE,
                tokens=[],
                confidence=0.0,
                source=TranslationSource.none,
            )

        romaji = text.strip()

        title = self.title_matcher.match(romaji)
        if title is not None:
            logger.debug(f"Known title: '{romaji}' → {title.english}")
            return TranslationResult(
                romaji=romaji,
                kana=title.japanese,
                english=title.english,
                tokens=[],
                confidence=1.0,
                source=TranslationSource.known_title,
                title_type=TitleType(title.type),
            )

        possible_name = self._looks_like_proper_name(romaji)
        tokens = self.tokenizer.tokenize(romaji)
        kana = "".join(token.kana for token in tokens)
        average = sum(token.confidence for token in tokens) / len(tokens) if tokens else 0.0

        fields: Dict[str, Any] = dict(
            romaji=romaji,
            kana=kana,
            tokens=tokens,
            possible_proper_name=possible_name,
        )

        try:
            gloss = await self.orchestrator.resolve(kana, tokens)
        except Exception:
            logger.exception(f"Translation of '{romaji}' failed")
            return TranslationResult(
                english=FAILURE_MESSAGE,
                confidence=0.0,
                source=TranslationSource.error,
                **fields,
            )

        confidence = min(average, gloss.confidence)
        if possible_name:
            confidence *= PROPER_NAME_PENALTY
            fields["note"] = PROPER_NAME_NOTE

        return TranslationResult(
            english=gloss.translation,
            confidence=confidence,
            source=gloss.source,
            alternatives=gloss.alternatives,
            parts_of_speech=gloss.parts_of_speech,
            **fields,
        )

    @staticmethod
    def _looks_like_proper_name(text: str) -> bool:
        """Capitalized words usually mean a name or title the table doesn't know."""
        return any(word[0].isupper() for word in text.split())

    async def close(self) -> None:
        await self.gateway.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
