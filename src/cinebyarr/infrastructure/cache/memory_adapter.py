"""In-memory adapter - process-lifetime cache without eviction."""

from __future__ import annotations

from typing import Any, Optional

import structlog

log = structlog.get_logger(__name__)


class MemoryCacheAdapter:
    """Async facade over a plain dict.

    - Entries live until ``aclose()`` (i.e. process shutdown); no TTL, no eviction.
    - No locking: concurrent misses for the same key may both compute and
      both write. Values are idempotent, the last write wins.
    - Implements context manager (`async with`).
    """

    def __init__(self) -> None:
        self._store: dict[str, Any] | None = None
        log.info("memory_cache_adapter_init")

    # --- Context Manager ---
    async def __aenter__(self) -> MemoryCacheAdapter:
        if self._store is None:
            self._store = {}
            log.info("memory_cache_opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._store is not None:
            entries = len(self._store)
            self._store = None
            log.info("memory_cache_closed", entries=entries)

    def __len__(self) -> int:
        return len(self._store) if self._store is not None else 0

    # --- CachePort implementation ---
    async def get(self, key: str) -> Optional[Any]:
        if self._store is None:
            raise RuntimeError(
                "Cache not initialized. Use 'async with cache:' or await cache.__aenter__()"
            )

        value = self._store.get(key)
        log.debug("cache_get", key=key, hit=value is not None)
        return value

    async def set(self, key: str, value: Any) -> None:
        if self._store is None:
            raise RuntimeError("Cache not initialized.")

        self._store[key] = value
        log.debug("cache_set", key=key)

    async def delete(self, key: str) -> bool:
        """Delete key. True = successfully deleted."""
        if self._store is None:
            return False

        deleted = self._store.pop(key, None) is not None
        log.debug("cache_delete", key=key, deleted=deleted)
        return deleted

    async def exists(self, key: str) -> bool:
        if self._store is None:
            return False
        return key in self._store

    async def clear(self) -> None:
        """Delete ALL keys."""
        if self._store is None:
            return

        self._store.clear()
        log.warning("cache_cleared")
