"""Tests for character-level romaji conversion."""
import pytest
from romakana.nlp.japanese.converter import RomajiConverter, is_consonant
from romakana.nlp.japanese.lexicon import Lexicon


@pytest.fixture
def converter():
    return RomajiConverter()


class TestRomajiConverter:
    """Test greedy longest-prefix conversion with the default map."""

    @pytest.mark.parametrize("romaji,expected", [
        ("ka", "か"),
        ("kyo", "きょ"),
        ("kyou", "きょう"),
        ("shinbun", "しんぶん"),
        ("tsu", "つ"),
        ("kan'i", "かんい"),
    ])
    def test_basic_syllables(self, converter, romaji, expected):
        assert converter.convert(romaji) == expected

    def test_double_consonant_becomes_small_tsu(self, converter):
        assert converter.convert("gakkou") == "がっこう"
        assert converter.convert("matte") == "まって"

    def test_trailing_double_consonant(self, converter):
        """The second consonant has no syllable to join and is kept as-is."""
        assert converter.convert("kk") == "っk"

    def test_unmapped_characters_pass_through(self, converter):
        assert converter.convert("abc123!") == "あbc123!"

    def test_uppercase_input(self, converter):
        assert converter.convert("NEKO") == "ねこ"

    def test_long_vowel_marks(self, converter):
        assert converter.convert("ā") == "あ"
        assert converter.convert("ō") == "う"
        assert converter.convert("ē") == "い"
        assert converter.convert("û") == "う"

    def test_empty(self, converter):
        assert converter.convert("") == ""

    def test_never_shorter_than_mapped_input(self, converter):
        """Every character is either mapped or copied, nothing disappears."""
        assert converter.convert("xyz") == "xyz"


class TestFallbackRules:
    """Test the fallback rules with lexicons that leave gaps in the map."""

    def test_standalone_n(self):
        converter = RomajiConverter(Lexicon.build(romaji_map={'ka': 'か', 'pa': 'ぱ', 'i': 'い'}))
        assert converter.convert("kanpai") == "かんぱい"
        assert converter.convert("kan") == "かん"

    def test_n_before_y_is_not_standalone(self):
        converter = RomajiConverter(Lexicon.build(romaji_map={'ka': 'か'}))
        assert converter.convert("kanya") == "かnya"

    def test_n_before_apostrophe(self):
        converter = RomajiConverter(Lexicon.build(romaji_map={'ka': 'か', 'i': 'い'}))
        assert converter.convert("kan'i") == "かん'い"

    def test_vowel_sequence(self):
        converter = RomajiConverter(Lexicon.build(romaji_map={'ga': 'が'}))
        assert converter.convert("eiga") == "えいが"
        assert converter.convert("ou") == "おう"


class TestIsConsonant:
    """Test consonant classification."""

    @pytest.mark.parametrize("char", ["k", "n", "y", "z"])
    def test_consonants(self, char):
        assert is_consonant(char)

    @pytest.mark.parametrize("char", ["a", "o", "'", "1", "ā"])
    def test_non_consonants(self, char):
        assert not is_consonant(char)
