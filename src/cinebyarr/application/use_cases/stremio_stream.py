"""Stremio stream resolution use case.

Identifier -> TMDB title -> Cineby page -> movie streams or the
matching episode's streams.
"""

from __future__ import annotations

import structlog

from cinebyarr.domain.entities.stremio import ContentIdentifier, Episode, Stream
from cinebyarr.domain.policies import loose_equals
from cinebyarr.domain.ports.content_site import ContentSitePort
from cinebyarr.domain.ports.tmdb import TmdbClientPort

log = structlog.get_logger(__name__)


def select_episode(
    episodes: list[Episode],
    season: str | int | None,
    episode: str | int | None,
) -> Episode | None:
    """First episode whose season and episode loosely equal the request."""
    for entry in episodes:
        if loose_equals(entry.season, season) and loose_equals(entry.episode, episode):
            return entry
    return None


class StremioStreamUseCase:
    """Resolves a content identifier to Stremio streams.

    Fail-soft: every failure along the chain ends in an empty list,
    never an exception for the caller.
    """

    def __init__(self, *, tmdb: TmdbClientPort, site: ContentSitePort) -> None:
        self._tmdb = tmdb
        self._site = site

    async def execute(self, identifier: ContentIdentifier) -> list[Stream]:
        try:
            return await self._resolve(identifier)
        except Exception:
            log.warning(
                "stremio_stream_resolution_failed",
                provider=identifier.provider,
                id=identifier.id,
                exc_info=True,
            )
            return []

    async def _resolve(self, identifier: ContentIdentifier) -> list[Stream]:
        title = await self._tmdb.resolve_title(identifier)
        if not title:
            return []

        if identifier.is_episode:
            episodes = await self._site.episodes(title)
            match = select_episode(episodes, identifier.season, identifier.episode)
            if match is None:
                log.info(
                    "stremio_episode_not_found",
                    title=title,
                    season=identifier.season,
                    episode=identifier.episode,
                    available=len(episodes),
                )
                return []
            return list(match.streams)

        return await self._site.movie_streams(title)
