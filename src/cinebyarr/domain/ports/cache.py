"""Cache Port - Interface for the process-lifetime resolution cache."""

from __future__ import annotations

from typing import Any, Literal, Protocol


class CachePort(Protocol):
    """Port for async key-value cache.

    Keys follow the ``<category>:<semantic key>`` schema, e.g.
    ``search:The Matrix``, ``movie:The Matrix``, ``series:Game of Thrones``.

    Implementations:
      - MemoryCacheAdapter (in-process dict, lives until shutdown)

    Each adapter MUST support async context-manager semantics:
        async with cache:
            await cache.set("key", value)
    """

    async def get(self, key: str) -> Any:
        """Retrieve value. None = not found."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store value until the process stops."""
        ...

    async def delete(self, key: str) -> bool:
        """Delete key. True = deleted, False = did not exist."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if key exists."""
        ...

    async def clear(self) -> None:
        """Delete ALL keys."""
        ...

    async def aclose(self) -> None:
        """Cleanup hook, drops all entries."""
        ...

    async def __aenter__(self) -> CachePort: ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None: ...


CacheCategory = Literal["search", "movie", "series", "tmdb"]


def cache_key(category: CacheCategory, key: str) -> str:
    """Build a ``<category>:<semantic key>`` cache key."""
    return f"{category}:{key}"
