"""Cineby scraper: cached stream discovery for movies and series.

Title -> content page (ContentLocator) -> page fetch -> markup extraction.
Results are memoized per title under ``movie:<title>`` and
``series:<title>`` for the lifetime of the process.
"""

from __future__ import annotations

import httpx
import structlog

from cinebyarr.domain.entities.stremio import Episode, Stream
from cinebyarr.domain.ports.cache import CachePort, cache_key
from cinebyarr.infrastructure.cineby.extractors import (
    extract_episodes,
    extract_movie_streams,
)
from cinebyarr.infrastructure.cineby.locator import ContentLocator
from cinebyarr.infrastructure.common.html_selectors import HtmlNode, parse_html

log = structlog.get_logger(__name__)


class CinebyScraper:
    """Implements ``ContentSitePort`` from domain.ports.content_site.

    Args:
        http_client: Shared httpx client.
        cache: Resolution cache (shared with the locator).
        base_url: Site origin, e.g. ``https://www.cineby.app``.
        user_agent: User-Agent sent with content page requests.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        cache: CachePort,
        base_url: str,
        user_agent: str,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._user_agent = user_agent
        self._locator = ContentLocator(
            http_client=http_client, cache=cache, base_url=base_url
        )

    async def _fetch_page(self, url: str) -> HtmlNode:
        resp = await self._http.get(url, headers={"User-Agent": self._user_agent})
        resp.raise_for_status()
        return parse_html(resp.text)

    async def locate(self, title: str) -> str | None:
        return await self._locator.locate(title)

    async def movie_streams(self, title: str) -> list[Stream]:
        """Streams for every player on the movie page. Empty on any failure."""
        key = cache_key("movie", title)
        cached = await self._cache.get(key)
        if cached is not None:
            return list(cached)

        page_url = await self._locator.locate(title)
        if not page_url:
            return []

        try:
            document = await self._fetch_page(page_url)
        except (httpx.HTTPError, httpx.InvalidURL):
            log.warning(
                "movie_scrape_failed", title=title, url=page_url, exc_info=True
            )
            return []

        streams = extract_movie_streams(document)
        await self._cache.set(key, streams)
        log.info("movie_streams_extracted", title=title, count=len(streams))
        return streams

    async def episodes(self, title: str) -> list[Episode]:
        """All episodes with streams on the series page. Empty on any failure."""
        key = cache_key("series", title)
        cached = await self._cache.get(key)
        if cached is not None:
            return list(cached)

        page_url = await self._locator.locate(title)
        if not page_url:
            return []

        try:
            document = await self._fetch_page(page_url)
        except (httpx.HTTPError, httpx.InvalidURL):
            log.warning(
                "series_scrape_failed", title=title, url=page_url, exc_info=True
            )
            return []

        episodes = extract_episodes(document)
        await self._cache.set(key, episodes)
        log.info("series_episodes_extracted", title=title, count=len(episodes))
        return episodes
