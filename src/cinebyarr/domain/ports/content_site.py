"""Port for the streaming site scraper."""

from __future__ import annotations

from typing import Protocol

from cinebyarr.domain.entities.stremio import Episode, Stream


class ContentSitePort(Protocol):
    """Async interface for title-keyed stream discovery on the content site."""

    async def locate(self, title: str) -> str | None:
        """Content page URL for a title, or None."""
        ...

    async def movie_streams(self, title: str) -> list[Stream]:
        """Streams embedded on the title's page (never None)."""
        ...

    async def episodes(self, title: str) -> list[Episode]:
        """Per-episode streams in markup order (never None)."""
        ...
