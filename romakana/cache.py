from collections import OrderedDict
from typing import Any, List, Optional

from romakana.logger import logger


class TranslationCache:
    """Bounded in-memory cache of remote lookup payloads.

    Keys are normalized queries. When full, the entry inserted earliest is
    evicted; reads never change the eviction order. Nothing expires and
    nothing is persisted.
    """

    def __init__(self, max_size: int = 200):
        if max_size < 1:
            raise ValueError(f"Cache size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._entries: "OrderedDict[str, List[Any]]" = OrderedDict()

    def get(self, key: str) -> Optional[List[Any]]:
        return self._entries.get(key)

    def put(self, key: str, payload: List[Any]) -> None:
        if key in self._entries:
            # Overwrite in place, insertion position is unchanged
            self._entries[key] = payload
            return

        if len(self._entries) >= self.max_size:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Cache full ({self.max_size}), evicted '{evicted}'")
        self._entries[key] = payload

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> List[str]:
        """Keys in insertion order (oldest first)."""
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
