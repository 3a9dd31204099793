"""Romaji tokenization (word boundary detection)."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from romakana.logger import logger
from romakana.nlp.base import BaseTokenizer
from romakana.schema import Token
from .converter import RomajiConverter
from .lexicon import DEFAULT_LEXICON, Lexicon, SegmentEntry
from .normalizer import normalize_romaji

# Confidence per token origin
PARTICLE_CONFIDENCE = 0.95
WORD_CONFIDENCE = 0.9
CONVERTED_CONFIDENCE = 0.7
UNKNOWN_SEGMENT_CONFIDENCE = 0.5
WHOLE_INPUT_CONFIDENCE = 0.3

# Segmentation scores
PARTICLE_BONUS = 2.0
WORD_WEIGHT = 1.5
UNKNOWN_WEIGHT = 0.5


@dataclass(frozen=True)
class _Path:
    """Best tokenization found so far that ends at a given position."""
    tokens: tuple
    score: float


class RomajiTokenizer(BaseTokenizer):
    """Dictionary-driven romaji tokenizer.

    Text that already contains whitespace is trusted as-is (spaced mode);
    anything else is segmented with a longest-match dynamic program over
    the word dictionary and particle table.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None, converter: Optional[RomajiConverter] = None):
        self.lexicon = lexicon or DEFAULT_LEXICON
        self.converter = converter or RomajiConverter(self.lexicon)

    def tokenize(self, text: str) -> List[Token]:
        normalized = normalize_romaji(text)
        if not normalized:
            return []

        if any(char.isspace() for char in normalized):
            return self.tokenize_spaced(normalized)
        return self.tokenize_unspaced(normalized)

    # ──────────────────────────────────────────────────────────────────────────
    # SPACED INPUT
    # ──────────────────────────────────────────────────────────────────────────
    def tokenize_spaced(self, text: str) -> List[Token]:
        """Tokenize whitespace-delimited text without re-splitting any segment.

        The first segment is never treated as a particle, so "wa" opening a
        sentence is read as a word.
        """
        tokens: List[Token] = []

        for index, segment in enumerate(text.split()):
            particle = self.lexicon.lookup_particle(segment)
            word = self.lexicon.lookup_word(segment)

            if particle is not None and index > 0:
                tokens.append(Token(
                    romaji=segment,
                    kana=particle.kana,
                    is_particle=True,
                    particle_role=particle.role,
                    confidence=PARTICLE_CONFIDENCE,
                ))
            elif word is not None:
                tokens.append(Token(romaji=segment, kana=word, confidence=WORD_CONFIDENCE))
            else:
                tokens.append(Token(
                    romaji=segment,
                    kana=self.converter.convert(segment),
                    confidence=CONVERTED_CONFIDENCE,
                ))

        return tokens

    # ──────────────────────────────────────────────────────────────────────────
    # UNSPACED INPUT
    # ──────────────────────────────────────────────────────────────────────────
    def tokenize_unspaced(self, text: str) -> List[Token]:
        """
        Segment text without spaces using dynamic programming.

        best[i] holds the highest scoring tokenization of text[:i]. Dictionary
        words score 1.5 per character and particles (outside the first
        position) a flat 2, so long words beat chains of short ones. Spans no
        entry covers become unknown segments scored at 0.5 per character,
        running up to the next position where some entry starts.

        Ties keep the first solution found. Scoring is greedy per position,
        so the result is locally rather than globally optimal.
        """
        n = len(text)
        if n == 0:
            return []

        entries = self.lexicon.segment_entries
        breakpoints = self._breakpoints(text, entries)

        best: List[Optional[_Path]] = [None] * (n + 1)
        best[0] = _Path(tokens=(), score=0.0)

        for i in range(n):
            current = best[i]
            if current is None:
                continue

            found_match = False
            for entry in entries:
                end = i + len(entry.romaji)
                if not text.startswith(entry.romaji, i):
                    continue
                found_match = True

                is_particle = entry.is_particle and i > 0
                score = current.score + (PARTICLE_BONUS if is_particle else len(entry.romaji) * WORD_WEIGHT)
                if best[end] is None or best[end].score < score:
                    token = Token(
                        romaji=entry.romaji,
                        kana=entry.kana,
                        is_particle=is_particle,
                        particle_role=self.lexicon.particles[entry.romaji].role if is_particle else None,
                        confidence=WORD_CONFIDENCE,
                    )
                    best[end] = _Path(tokens=current.tokens + (token,), score=score)

            following = best[i + 1]
            if not found_match or following is None or following.score < current.score - UNKNOWN_WEIGHT:
                end = i + 1
                while end < n and end not in breakpoints:
                    end += 1

                segment = text[i:end]
                score = current.score + len(segment) * UNKNOWN_WEIGHT
                if best[end] is None or best[end].score < score:
                    token = Token(
                        romaji=segment,
                        kana=self.converter.convert(segment),
                        confidence=UNKNOWN_SEGMENT_CONFIDENCE,
                    )
                    best[end] = _Path(tokens=current.tokens + (token,), score=score)

        if best[n] is not None:
            return list(best[n].tokens)

        logger.debug(f"No segmentation reached the end of '{text}', converting it whole")
        return [Token(romaji=text, kana=self.converter.convert(text), confidence=WHOLE_INPUT_CONFIDENCE)]

    @staticmethod
    def _breakpoints(text: str, entries: Tuple[SegmentEntry, ...]) -> FrozenSet[int]:
        """Positions where some word or particle starts (end of input included)."""
        positions = {len(text)}
        for pos in range(len(text)):
            if any(text.startswith(entry.romaji, pos) for entry in entries):
                positions.add(pos)
        return frozenset(positions)
