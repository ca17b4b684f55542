"""Port for TMDB API operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cinebyarr.domain.entities.stremio import (
    ContentIdentifier,
    StremioContentType,
    StremioMetaPreview,
)


@runtime_checkable
class TmdbClientPort(Protocol):
    """Async interface for TMDB API lookups."""

    async def resolve_title(
        self,
        identifier: ContentIdentifier,
        *,
        content_type: StremioContentType | None = None,
    ) -> str | None:
        """Map an identifier to its movie title or series name.

        Returns None when the lookup fails for any reason.
        """
        ...

    async def poster_and_description(self, title: str) -> tuple[str | None, str]:
        """Poster URL and overview of the first movie search hit."""
        ...

    async def trending_movies(self, page: int = 1) -> list[StremioMetaPreview]:
        """Fetch trending movies."""
        ...

    async def trending_tv(self, page: int = 1) -> list[StremioMetaPreview]:
        """Fetch trending TV shows."""
        ...

    async def search_movies(
        self, query: str, page: int = 1
    ) -> list[StremioMetaPreview]:
        """Search movies by query."""
        ...

    async def search_tv(self, query: str, page: int = 1) -> list[StremioMetaPreview]:
        """Search TV shows by query."""
        ...
