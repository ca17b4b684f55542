"""Stremio meta use case: title plus TMDB poster/overview."""

from __future__ import annotations

import structlog

from cinebyarr.domain.entities.stremio import (
    ContentIdentifier,
    MetaRecord,
    StremioContentType,
)
from cinebyarr.domain.ports.tmdb import TmdbClientPort

log = structlog.get_logger(__name__)


class StremioMetaUseCase:
    """Builds the meta object for an identifier, None when the title is unknown."""

    def __init__(self, tmdb: TmdbClientPort) -> None:
        self._tmdb = tmdb

    async def execute(
        self,
        raw_id: str,
        identifier: ContentIdentifier,
        content_type: StremioContentType,
    ) -> MetaRecord | None:
        try:
            title = await self._tmdb.resolve_title(
                identifier, content_type=content_type
            )
            if not title:
                return None
            poster, description = await self._tmdb.poster_and_description(title)
        except Exception:
            log.warning("stremio_meta_failed", id=raw_id, exc_info=True)
            return None

        return MetaRecord(
            id=raw_id,
            type=content_type,
            name=title,
            poster=poster,
            description=description,
        )
