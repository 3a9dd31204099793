import argparse
import asyncio
import json
import sys
from typing import List, Optional

from romakana import CACHE_MAX_SIZE, __version__
from romakana.cache import TranslationCache
from romakana.gateway import OfflineGateway
from romakana.logger import set_verbose
from romakana.schema import TranslationResult, TranslationSource
from romakana.translator import RomajiTranslator


async def _translate(translator: RomajiTranslator, text: str) -> TranslationResult:
    async with translator:
        return await translator.translate(text)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert romaji to hiragana and look up an English gloss."
    )
    parser.add_argument(
        "text",
        nargs="+",
        help="Romaji text to translate (multiple arguments are joined with spaces)",
    )
    parser.add_argument(
        "--kana-only",
        action="store_true",
        help="Only print the hiragana transliteration (no network access)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Never query the remote dictionary",
    )
    parser.add_argument(
        "--cache-size",
        type=int,
        default=CACHE_MAX_SIZE,
        help="Maximum number of cached remote lookups",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)
    if args.cache_size < 1:
        parser.error("--cache-size must be at least 1")

    set_verbose(args.verbose)
    text = " ".join(args.text)

    translator = RomajiTranslator(
        gateway=OfflineGateway() if args.offline else None,
        cache=TranslationCache(args.cache_size),
    )

    if args.kana_only:
        print(translator.quick_hiragana(text))
        return 0

    result = asyncio.run(_translate(translator, text))
    print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    return 1 if result.source is TranslationSource.error else 0


if __name__ == "__main__":
    sys.exit(main())
