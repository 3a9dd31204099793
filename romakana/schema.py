from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class TranslationSource(str, Enum):
    offline = "offline"
    remote = "remote"
    remote_word_by_word = "remote-word-by-word"
    known_title = "known-title"
    none = "none"
    error = "error"


class TitleType(str, Enum):
    anime = "anime"
    name = "name"
    game = "game"


class Token(BaseModel):
    romaji: str
    kana: str
    is_particle: bool = False
    particle_role: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    model_config = ConfigDict(frozen=True)


class TranslationResult(BaseModel):
    romaji: str
    kana: str
    english: str
    tokens: List[Token] = Field(default_factory=list)
    confidence: float = Field(..., ge=0.0, le=1.0)
    source: TranslationSource
    alternatives: List[str] = Field(default_factory=list)
    title_type: Optional[TitleType] = None
    note: Optional[str] = None
    parts_of_speech: List[str] = Field(default_factory=list)
    possible_proper_name: bool = False


# ──────────────────────────────────────────────────────────────────────────────
# REMOTE LOOKUP PAYLOADS (Jisho word search)
# ──────────────────────────────────────────────────────────────────────────────
class JishoJapanese(BaseModel):
    reading: Optional[str] = None
    word: Optional[str] = None
    model_config = ConfigDict(extra="ignore")


class JishoSense(BaseModel):
    english_definitions: List[str] = Field(default_factory=list)
    parts_of_speech: List[str] = Field(default_factory=list)
    model_config = ConfigDict(extra="ignore")


class JishoEntry(BaseModel):
    japanese: List[JishoJapanese] = Field(default_factory=list)
    senses: List[JishoSense] = Field(default_factory=list)
    is_common: bool = False
    jlpt: List[str] = Field(default_factory=list)
    model_config = ConfigDict(extra="ignore")


class FormattedEntry(BaseModel):
    """One remote entry reduced to the meanings shown to the user."""
    reading: str = ""
    word: str = ""
    meanings: List[str]
    is_common: bool = False
    jlpt: List[str] = Field(default_factory=list)
    parts_of_speech: List[str] = Field(default_factory=list)
