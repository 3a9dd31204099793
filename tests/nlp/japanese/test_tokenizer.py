"""Tests for romaji tokenization."""
import pytest
from romakana.nlp.japanese.tokenizer import (
    CONVERTED_CONFIDENCE,
    PARTICLE_CONFIDENCE,
    UNKNOWN_SEGMENT_CONFIDENCE,
    WORD_CONFIDENCE,
    RomajiTokenizer,
)


@pytest.fixture
def tokenizer():
    return RomajiTokenizer()


def romaji_of(tokens):
    return [token.romaji for token in tokens]


class TestSpacedTokenization:
    """Test tokenization of whitespace-delimited input."""

    def test_word_and_particle(self, tokenizer):
        tokens = tokenizer.tokenize("watashi wa")

        assert len(tokens) == 2
        assert tokens[0].romaji == "watashi"
        assert tokens[0].kana == "わたし"
        assert tokens[0].is_particle is False
        assert tokens[0].confidence == WORD_CONFIDENCE
        assert tokens[1].romaji == "wa"
        assert tokens[1].kana == "は"
        assert tokens[1].is_particle is True
        assert tokens[1].particle_role == "topic"
        assert tokens[1].confidence == PARTICLE_CONFIDENCE

    def test_first_segment_is_never_a_particle(self, tokenizer):
        tokens = tokenizer.tokenize("wa watashi")

        assert tokens[0].is_particle is False
        assert tokens[0].particle_role is None
        assert tokens[0].kana == "わ"
        assert tokens[0].confidence == CONVERTED_CONFIDENCE

    def test_first_segment_particle_that_is_also_a_word(self, tokenizer):
        tokens = tokenizer.tokenize("ni watashi")

        assert tokens[0].is_particle is False
        assert tokens[0].kana == "に"
        assert tokens[0].confidence == WORD_CONFIDENCE

    def test_unknown_segment_is_converted(self, tokenizer):
        tokens = tokenizer.tokenize("neko ga suki desu")

        assert romaji_of(tokens) == ["neko", "ga", "suki", "desu"]
        assert tokens[1].particle_role == "subject"
        assert tokens[2].kana == "すき"
        assert tokens[2].confidence == CONVERTED_CONFIDENCE
        assert "".join(token.kana for token in tokens) == "ねこがすきです"

    def test_segments_are_not_resplit(self, tokenizer):
        tokens = tokenizer.tokenize("watashiwa desu")
        assert romaji_of(tokens) == ["watashiwa", "desu"]

    def test_extra_whitespace(self, tokenizer):
        tokens = tokenizer.tokenize("  watashi   wa  ")
        assert romaji_of(tokens) == ["watashi", "wa"]


class TestUnspacedTokenization:
    """Test dictionary-driven segmentation of input without spaces."""

    def test_word_followed_by_particle(self, tokenizer):
        tokens = tokenizer.tokenize("watashiwa")

        assert romaji_of(tokens) == ["watashi", "wa"]
        assert tokens[1].is_particle is True
        assert tokens[1].particle_role == "topic"
        assert tokens[1].confidence == WORD_CONFIDENCE

    def test_long_word_wins_over_short_pieces(self, tokenizer):
        tokens = tokenizer.tokenize("konnichiwa")

        assert len(tokens) == 1
        assert tokens[0].kana == "こんにちは"

    def test_double_consonant_word(self, tokenizer):
        assert tokenizer.to_kana("gakkou") == "がっこう"

    def test_unknown_segments_run_to_next_entry(self, tokenizer):
        tokens = tokenizer.tokenize("nekogasuki")

        assert romaji_of(tokens) == ["neko", "ga", "su", "ki"]
        assert tokens[1].is_particle is True
        assert tokens[2].confidence == UNKNOWN_SEGMENT_CONFIDENCE
        assert "".join(token.kana for token in tokens) == "ねこがすき"

    def test_particle_at_start_is_a_word(self, tokenizer):
        tokens = tokenizer.tokenize("wa")

        assert len(tokens) == 1
        assert tokens[0].is_particle is False
        assert tokens[0].kana == "は"

    def test_no_dictionary_match(self, tokenizer):
        tokens = tokenizer.tokenize("xyz")

        assert len(tokens) == 1
        assert tokens[0].romaji == "xyz"
        assert tokens[0].kana == "xyz"
        assert tokens[0].confidence == UNKNOWN_SEGMENT_CONFIDENCE


class TestTokenizerInvariants:
    """Test properties that hold for any input."""

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_input(self, tokenizer, text):
        assert tokenizer.tokenize(text) == []

    @pytest.mark.parametrize("text", [
        "watashiwa", "nekogasuki", "kyouwaiitenkidesune", "watashi wa gakusei desu", "xyz",
    ])
    def test_deterministic(self, tokenizer, text):
        assert tokenizer.tokenize(text) == tokenizer.tokenize(text)

    @pytest.mark.parametrize("text", [
        "watashiwa", "nekogasuki", "kyouwaiitenkidesune", "anatanonamaewanandesuka",
    ])
    def test_tokens_cover_input(self, tokenizer, text):
        tokens = tokenizer.tokenize(text)

        assert "".join(romaji_of(tokens)) == text
        assert all(0.0 <= token.confidence <= 1.0 for token in tokens)
        assert all(token.is_particle == (token.particle_role is not None) for token in tokens)

    def test_macrons_are_normalized(self, tokenizer):
        assert tokenizer.to_kana("Tōkyō") == "とうきょう"

    def test_full_width_input(self, tokenizer):
        assert tokenizer.to_kana("ｎｅｋｏ") == "ねこ"
