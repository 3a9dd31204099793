"""Tests for pydantic models."""
import pytest
from pydantic import ValidationError

from romakana.schema import JishoEntry, Token, TranslationResult, TranslationSource


class TestToken:
    """Test Token validation."""

    @pytest.mark.parametrize("confidence", [-0.1, 1.5])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            Token(romaji="neko", kana="ねこ", confidence=confidence)

    def test_frozen(self):
        token = Token(romaji="neko", kana="ねこ", confidence=0.9)
        with pytest.raises(ValidationError):
            token.kana = "いぬ"

    def test_defaults(self):
        token = Token(romaji="neko", kana="ねこ", confidence=0.9)

        assert token.is_particle is False
        assert token.particle_role is None


class TestTranslationResult:
    """Test TranslationResult serialization."""

    def test_json_dump_uses_source_values(self):
        result = TranslationResult(
            romaji="neko ga",
            kana="ねこが",
            english="cat [subject]",
            confidence=0.5,
            source=TranslationSource.remote_word_by_word,
        )

        dumped = result.model_dump(mode="json")

        assert dumped["source"] == "remote-word-by-word"
        assert dumped["tokens"] == []
        assert dumped["alternatives"] == []
        assert dumped["title_type"] is None


class TestJishoEntry:
    """Test parsing of remote payload entries."""

    def test_unknown_fields_are_ignored(self):
        entry = JishoEntry.model_validate({
            "slug": "猫",
            "japanese": [{"word": "猫", "reading": "ねこ"}],
            "senses": [{"english_definitions": ["cat"], "parts_of_speech": ["Noun"], "links": []}],
            "attribution": {"jmdict": True},
        })

        assert entry.senses[0].english_definitions == ["cat"]
        assert entry.is_common is False
        assert entry.jlpt == []

    def test_reading_only_entry(self):
        entry = JishoEntry.model_validate({"japanese": [{"reading": "ねこ"}]})

        assert entry.japanese[0].word is None
