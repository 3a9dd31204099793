"""Test configuration and fixtures."""
import pytest
import os
import sys
from typing import Any, Dict, List, Optional
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from romakana.cache import TranslationCache
from romakana.gateway import BaseLookupGateway
from romakana.nlp.japanese.lexicon import DEFAULT_LEXICON


class FakeGateway(BaseLookupGateway):
    """In-memory gateway: answers from a query → response table and records calls."""

    def __init__(self, responses: Optional[Dict[str, Dict[str, Any]]] = None,
                 default: Optional[Dict[str, Any]] = None):
        self.responses = responses or {}
        self.default = default if default is not None else {"success": True, "data": [], "meta": {"status": 200}}
        self.queries: List[str] = []
        self.closed = False

    async def lookup(self, query: str) -> Dict[str, Any]:
        self.queries.append(query)
        return self.responses.get(query, self.default)

    async def close(self) -> None:
        self.closed = True


def jisho_entry(word: str, reading: str, senses: List[List[str]], is_common: bool = True,
                pos: Optional[List[str]] = None) -> Dict[str, Any]:
    """Build a raw Jisho search entry."""
    return {
        "slug": word,
        "japanese": [{"word": word, "reading": reading}],
        "senses": [
            {"english_definitions": defs, "parts_of_speech": pos or ["Noun"], "tags": []}
            for defs in senses
        ],
        "is_common": is_common,
        "jlpt": ["jlpt-n5"] if is_common else [],
    }


def jisho_success(*entries: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "data": list(entries), "meta": {"status": 200}}


@pytest.fixture
def lexicon():
    return DEFAULT_LEXICON


@pytest.fixture
def cache():
    return TranslationCache(max_size=10)


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def gakkou_response():
    """Jisho answer for がっこう with a duplicated meaning across entries."""
    return jisho_success(
        jisho_entry("学校", "がっこう", [["school"], ["educational institution"]]),
        jisho_entry("学校", "がっこう", [["school"], ["academy"]], is_common=False),
        jisho_entry("学校", "がっこう", [["schoolhouse"]], is_common=False),
        jisho_entry("学校", "がっこう", [["ignored fourth entry"]], is_common=False),
    )
