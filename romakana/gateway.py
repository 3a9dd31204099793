import asyncio
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp

from romakana import JISHO_API_URL, MIN_REQUEST_INTERVAL_MS, REQUEST_TIMEOUT_SEC
from romakana.logger import logger


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class LookupFailedError(Exception):
    """Raised when a remote dictionary lookup cannot produce a usable payload."""
    def __init__(self, query: str, reason: str):
        super().__init__(f"Lookup for '{query}' failed: {reason}")
        self.query = query
        self.reason = reason


class BaseLookupGateway(ABC):
    """Abstract interface for remote dictionary lookups.

    ``lookup`` never raises for remote problems; it answers with either
    ``{"success": True, "data": [...], "meta": {"status": int}}`` or
    ``{"success": False, "error": str}``.
    """

    @abstractmethod
    async def lookup(self, query: str) -> Dict[str, Any]:
        """Look up a single query string."""
        pass

    async def close(self) -> None:
        """Release network resources (no-op by default)."""
        pass

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


class OfflineGateway(BaseLookupGateway):
    """Gateway that never reaches the network; every lookup reports failure."""

    async def lookup(self, query: str) -> Dict[str, Any]:
        return {"success": False, "error": "Offline mode"}


class JishoGateway(BaseLookupGateway):
    """Jisho.org word search client with minimum spacing between requests."""

    def __init__(
        self,
        api_url: str = JISHO_API_URL,
        min_interval_ms: int = MIN_REQUEST_INTERVAL_MS,
        timeout_sec: float = REQUEST_TIMEOUT_SEC,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_url = api_url
        self.min_interval = min_interval_ms / 1000.0
        self.timeout_sec = timeout_sec
        self._session = session
        self._owns_session = session is None
        self._lock = asyncio.Lock()
        self._last_request: Optional[float] = None

    async def lookup(self, query: str) -> Dict[str, Any]:
        if not query or not query.strip():
            return {"success": False, "error": "Empty query"}

        await self._wait_turn()
        try:
            payload = await self._fetch(query.strip())
        except LookupFailedError as e:
            logger.warning(f"Jisho API error: {e}")
            return {"success": False, "error": e.reason}

        meta = payload.get("meta") or {}
        return {
            "success": True,
            "data": payload.get("data") or [],
            "meta": {"status": meta.get("status", 200)},
        }

    async def _wait_turn(self) -> None:
        """Sleep until at least ``min_interval`` has passed since the previous request."""
        async with self._lock:
            if self._last_request is not None:
                remaining = self.min_interval - (time.monotonic() - self._last_request)
                if remaining > 0:
                    logger.debug(f"Pacing Jisho request for {remaining * 1000:.0f}ms")
                    await asyncio.sleep(remaining)
            self._last_request = time.monotonic()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_sec)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def _fetch(self, query: str) -> Dict[str, Any]:
        session = await self._get_session()
        logger.debug(f"Querying Jisho for '{query}'")
        try:
            async with session.get(
                self.api_url,
                params={"keyword": query},
                headers={"Accept": "application/json"},
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise LookupFailedError(query, f"HTTP {resp.status}: {resp.reason}")
                payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Network failure for '{query}': {e!r}")
            raise LookupFailedError(query, "Network error - check your internet connection") from e
        except ValueError as e:
            raise LookupFailedError(query, f"Malformed response: {e}") from e

        if not isinstance(payload, dict):
            raise LookupFailedError(query, "Malformed response: expected a JSON object")
        return payload

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
