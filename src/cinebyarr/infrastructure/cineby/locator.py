"""Content locator: title to Cineby content page via site search."""

from __future__ import annotations

import httpx
import structlog

from cinebyarr.domain.exceptions import ContentNotFoundError
from cinebyarr.domain.policies import first_match, qualify_url
from cinebyarr.domain.ports.cache import CachePort, cache_key
from cinebyarr.infrastructure.common.html_selectors import parse_html

log = structlog.get_logger(__name__)

RESULT_LINK_SELECTOR = ".result a"


class ContentLocator:
    """Maps a title to a single content page URL.

    The raw title is the search term (no normalization) and the first
    result link wins unconditionally. Same-named titles are not
    disambiguated by year or kind.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        cache: CachePort,
        base_url: str,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._base_url = base_url.rstrip("/")

    async def _search(self, title: str) -> str:
        """Run the site search. Raises on any failure."""
        resp = await self._http.get(
            f"{self._base_url}/search", params={"query": title}
        )
        resp.raise_for_status()

        link = first_match(parse_html(resp.text).select(RESULT_LINK_SELECTOR))
        href = link.attr("href") if link is not None else None
        if not href:
            raise ContentNotFoundError(f"no search result for {title!r}")

        url = qualify_url(href, self._base_url)
        try:
            httpx.URL(url)
        except httpx.InvalidURL as exc:
            raise ContentNotFoundError(f"unusable result link {url!r}") from exc
        return url

    async def locate(self, title: str) -> str | None:
        """Content page URL for *title*, or None when nothing usable was found."""
        key = cache_key("search", title)
        cached = await self._cache.get(key)
        if cached is not None:
            return cached

        try:
            url = await self._search(title)
        except ContentNotFoundError:
            log.debug("cineby_search_no_result", title=title)
            return None
        except httpx.HTTPError:
            log.warning("cineby_search_failed", title=title, exc_info=True)
            return None

        await self._cache.set(key, url)
        log.info("cineby_content_located", title=title, url=url)
        return url
