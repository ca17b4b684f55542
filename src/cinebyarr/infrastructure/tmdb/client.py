"""TMDB API client: async httpx implementation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import structlog

from cinebyarr.domain.entities.stremio import (
    ContentIdentifier,
    StremioContentType,
    StremioMetaPreview,
)
from cinebyarr.domain.ports.cache import CachePort, cache_key

log = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.themoviedb.org/3"
_POSTER_BASE = "https://image.tmdb.org/t/p/w500"


class HttpxTmdbClient:
    """Async TMDB client using httpx.

    Implements ``TmdbClientPort`` from domain.ports.tmdb.

    Title lookups are not cached; catalog listings (trending/search) are
    memoized in the resolution cache under ``tmdb:`` keys.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        http_client: httpx.AsyncClient,
        cache: CachePort,
        base_url: str = DEFAULT_BASE_URL,
        language: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._http = http_client
        self._cache = cache
        self._base_url = base_url.rstrip("/")
        self._language = language

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _params(self, **extra: Any) -> dict[str, Any]:
        """Build query params with api_key and optional locale."""
        params: dict[str, Any] = {"api_key": self._api_key, **extra}
        if self._language:
            params["language"] = self._language
        return params

    async def _get(self, path: str, **extra: Any) -> dict[str, Any] | None:
        """GET request with error handling. Returns parsed JSON or None."""
        if not self._api_key:
            log.error("tmdb_api_key_missing", path=path)
            return None

        url = f"{self._base_url}{path}"
        try:
            resp = await self._http.get(url, params=self._params(**extra))
            if resp.status_code == 401:
                log.error("tmdb_api_key_invalid", status=401)
                return None
            if resp.status_code == 404:
                log.debug("tmdb_resource_not_found", path=path)
                return None
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError:
            log.warning("tmdb_http_error", path=path, exc_info=True)
            return None
        except httpx.HTTPError:
            log.warning("tmdb_network_error", path=path, exc_info=True)
            return None
        except ValueError:
            log.warning("tmdb_invalid_json", path=path)
            return None

        if not isinstance(data, dict):
            log.warning("tmdb_unexpected_payload", path=path)
            return None
        return data

    @staticmethod
    def _poster_url(poster_path: str | None) -> str:
        if not poster_path:
            return ""
        return f"{_POSTER_BASE}{poster_path}"

    @staticmethod
    def _name_of(item: dict[str, Any]) -> str | None:
        # Movies use "title", TV shows use "name"
        return item.get("title") or item.get("name") or None

    def _movie_to_preview(self, movie: dict[str, Any]) -> StremioMetaPreview:
        release_date = movie.get("release_date") or ""
        return StremioMetaPreview(
            id=f"tmdb:{movie.get('id', '')}",
            type="movie",
            name=movie.get("title", movie.get("original_title", "")),
            poster=self._poster_url(movie.get("poster_path")),
            description=movie.get("overview", ""),
            release_info=release_date[:4],
            imdb_rating=str(movie["vote_average"])
            if movie.get("vote_average")
            else "",
        )

    def _tv_to_preview(self, show: dict[str, Any]) -> StremioMetaPreview:
        first_air = show.get("first_air_date") or ""
        return StremioMetaPreview(
            id=f"tmdb:{show.get('id', '')}",
            type="series",
            name=show.get("name", show.get("original_name", "")),
            poster=self._poster_url(show.get("poster_path")),
            description=show.get("overview", ""),
            release_info=first_air[:4],
            imdb_rating=str(show["vote_average"]) if show.get("vote_average") else "",
        )

    async def _find_imdb(self, imdb_id: str, *, series: bool) -> dict[str, Any] | None:
        """Lookup an IMDb id via /find, preferring the requested kind."""
        data = await self._get(f"/find/{imdb_id}", external_source="imdb_id")
        if data is None:
            return None

        order = ["movie_results", "tv_results"]
        if series:
            order.reverse()
        for media_type in order:
            results = data.get(media_type) or []
            if results:
                return results[0]
        return None

    async def _cached_previews(
        self,
        key: str,
        path: str,
        convert: Callable[[dict[str, Any]], StremioMetaPreview],
        **extra: Any,
    ) -> list[StremioMetaPreview]:
        full_key = cache_key("tmdb", key)
        cached = await self._cache.get(full_key)
        if cached is not None:
            return cached

        data = await self._get(path, **extra)
        if data is None:
            return []

        previews = [convert(item) for item in data.get("results", [])]
        await self._cache.set(full_key, previews)
        return previews

    # ------------------------------------------------------------------
    # Public API (TmdbClientPort)
    # ------------------------------------------------------------------

    async def resolve_title(
        self,
        identifier: ContentIdentifier,
        *,
        content_type: StremioContentType | None = None,
    ) -> str | None:
        """Movie title or series name for *identifier*. None on any failure.

        The content kind follows the identifier's shape (season present ->
        TV); *content_type* overrides it for callers that know the type,
        such as the meta handler.
        """
        series = (
            content_type == "series"
            if content_type is not None
            else identifier.is_series_lookup
        )

        if identifier.provider == "imdb":
            item = await self._find_imdb(identifier.id, series=series)
        else:
            endpoint = "tv" if series else "movie"
            item = await self._get(f"/{endpoint}/{identifier.id}")

        title = self._name_of(item) if item is not None else None
        if not title:
            log.warning(
                "tmdb_title_unresolved",
                provider=identifier.provider,
                id=identifier.id,
                series=series,
            )
            return None
        return title

    async def poster_and_description(self, title: str) -> tuple[str | None, str]:
        """Poster URL and overview of the first movie search hit.

        ``(None, "")`` when nothing was found or the lookup failed.
        """
        data = await self._get("/search/movie", query=title)
        results = (data or {}).get("results") or []
        if not results:
            return None, ""

        first = results[0]
        poster = self._poster_url(first.get("poster_path")) or None
        return poster, first.get("overview") or ""

    async def trending_movies(self, page: int = 1) -> list[StremioMetaPreview]:
        return await self._cached_previews(
            f"trending:movie:{page}",
            "/trending/movie/week",
            self._movie_to_preview,
            page=page,
        )

    async def trending_tv(self, page: int = 1) -> list[StremioMetaPreview]:
        return await self._cached_previews(
            f"trending:tv:{page}",
            "/trending/tv/week",
            self._tv_to_preview,
            page=page,
        )

    async def search_movies(
        self, query: str, page: int = 1
    ) -> list[StremioMetaPreview]:
        return await self._cached_previews(
            f"search:movie:{query}:{page}",
            "/search/movie",
            self._movie_to_preview,
            query=query,
            page=page,
        )

    async def search_tv(self, query: str, page: int = 1) -> list[StremioMetaPreview]:
        return await self._cached_previews(
            f"search:tv:{query}:{page}",
            "/search/tv",
            self._tv_to_preview,
            query=query,
            page=page,
        )
