"""Tests for romaji detection."""
import pytest
from romakana.nlp.japanese.detector import is_likely_romaji


class TestIsLikelyRomaji:
    """Test is_likely_romaji heuristics."""

    @pytest.mark.parametrize("text", [
        "watashi wa gakusei desu",
        "tabemasu",
        "arigatou",
        "chotto ii",
        "neko inu",
    ])
    def test_romaji(self, text):
        assert is_likely_romaji(text) is True

    @pytest.mark.parametrize("text", [
        "hello world",
        "ship",
        "neko house",
        "",
    ])
    def test_not_romaji(self, text):
        assert is_likely_romaji(text) is False

    def test_case_insensitive(self):
        assert is_likely_romaji("ARIGATOU") is True
