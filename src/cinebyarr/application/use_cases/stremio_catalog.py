"""Stremio catalog use case: TMDB-backed listings for the addon catalogs."""

from __future__ import annotations

import structlog

from cinebyarr.domain.entities.stremio import StremioContentType, StremioMetaPreview
from cinebyarr.domain.ports.tmdb import TmdbClientPort

log = structlog.get_logger(__name__)

MOVIE_CATALOG_ID = "cineby_movies"
SERIES_CATALOG_ID = "cineby_series"

CATALOG_TYPES: dict[str, StremioContentType] = {
    MOVIE_CATALOG_ID: "movie",
    SERIES_CATALOG_ID: "series",
}

# TMDB list endpoints return 20 items per page.
_TMDB_PAGE_SIZE = 20


def page_for_skip(skip: int) -> int:
    """Map Stremio's ``skip`` extra onto a 1-based TMDB page."""
    return max(skip, 0) // _TMDB_PAGE_SIZE + 1


class StremioCatalogUseCase:
    """Lists the ``cineby_movies`` / ``cineby_series`` catalogs.

    Without a search term the catalog shows TMDB's weekly trending list,
    with one it shows TMDB search results. Unknown catalogs, a type that
    does not match the catalog, blank searches and TMDB errors all yield
    an empty list.
    """

    def __init__(self, tmdb: TmdbClientPort) -> None:
        self._tmdb = tmdb

    async def execute(
        self,
        content_type: str,
        catalog_id: str,
        *,
        search: str | None = None,
        skip: int = 0,
    ) -> list[StremioMetaPreview]:
        if CATALOG_TYPES.get(catalog_id) != content_type:
            log.debug(
                "stremio_catalog_unknown",
                content_type=content_type,
                catalog_id=catalog_id,
            )
            return []

        page = page_for_skip(skip)
        series = content_type == "series"
        try:
            if search is None:
                if series:
                    return await self._tmdb.trending_tv(page=page)
                return await self._tmdb.trending_movies(page=page)

            if not search.strip():
                return []
            if series:
                return await self._tmdb.search_tv(query=search, page=page)
            return await self._tmdb.search_movies(query=search, page=page)
        except Exception:
            log.warning(
                "stremio_catalog_failed",
                catalog_id=catalog_id,
                search=search,
                page=page,
                exc_info=True,
            )
            return []
