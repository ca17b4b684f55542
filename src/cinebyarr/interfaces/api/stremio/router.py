"""Stremio addon API endpoints (manifest, catalog, meta, stream)."""

from __future__ import annotations

from typing import Any, cast
from urllib.parse import parse_qsl

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from cinebyarr.application.use_cases.stremio_catalog import (
    MOVIE_CATALOG_ID,
    SERIES_CATALOG_ID,
)
from cinebyarr.domain.entities.stremio import (
    ContentIdentifier,
    StremioContentType,
    StremioMetaPreview,
)
from cinebyarr.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/stremio", tags=["stremio"])

ADDON_ID = "org.cineby"
ADDON_VERSION = "3.0.0"

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def build_manifest() -> dict[str, Any]:
    """Build the Stremio addon manifest."""
    search_extra = [
        {"name": "search", "isRequired": False},
        {"name": "skip", "isRequired": False},
    ]
    return {
        "id": ADDON_ID,
        "version": ADDON_VERSION,
        "name": "Cineby",
        "description": (
            "Stream movies & full series from Cineby.app with automatic "
            "episodes, multi-server, and subtitles"
        ),
        "resources": ["stream", "meta", "catalog"],
        "types": ["movie", "series"],
        "catalogs": [
            {
                "type": "movie",
                "id": MOVIE_CATALOG_ID,
                "name": "Cineby Movies",
                "extra": search_extra,
            },
            {
                "type": "series",
                "id": SERIES_CATALOG_ID,
                "name": "Cineby Series",
                "extra": search_extra,
            },
        ],
        "idPrefixes": ["tmdb", "tt"],
        "behaviorHints": {
            "adult": False,
            "configurable": False,
        },
    }


def parse_extra(raw: str) -> dict[str, str]:
    """Parse a Stremio extra path segment (``search=Matrix&skip=20``)."""
    return dict(parse_qsl(raw, keep_blank_values=True))


def _content_type(raw: str) -> StremioContentType | None:
    if raw not in ("movie", "series"):
        return None
    return cast(StremioContentType, raw)


def _format_preview(m: StremioMetaPreview) -> dict[str, Any]:
    return {
        "id": m.id,
        "type": m.type,
        "name": m.name,
        "poster": m.poster,
        "description": m.description,
        "releaseInfo": m.release_info,
        "imdbRating": m.imdb_rating,
        "genres": m.genres,
    }


def _json(content: dict[str, Any]) -> JSONResponse:
    return JSONResponse(content=content, headers=_CORS_HEADERS)


@router.get("/manifest.json")
async def stremio_manifest() -> JSONResponse:
    """Serve the Stremio addon manifest."""
    return _json(build_manifest())


async def _catalog(
    state: AppState,
    content_type: str,
    catalog_id: str,
    extra: dict[str, str],
) -> JSONResponse:
    try:
        skip = int(extra.get("skip", "0") or 0)
    except ValueError:
        skip = 0

    metas = await state.stremio_catalog_uc.execute(
        content_type, catalog_id, search=extra.get("search"), skip=skip
    )
    return _json({"metas": [_format_preview(m) for m in metas]})


@router.get("/catalog/{content_type}/{catalog_id}.json")
async def stremio_catalog(
    request: Request,
    content_type: str,
    catalog_id: str,
) -> JSONResponse:
    """Serve a catalog page (TMDB trending)."""
    state = cast(AppState, request.app.state)
    return await _catalog(state, content_type, catalog_id, {})


@router.get("/catalog/{content_type}/{catalog_id}/{extra}.json")
async def stremio_catalog_extra(
    request: Request,
    content_type: str,
    catalog_id: str,
    extra: str,
) -> JSONResponse:
    """Serve a catalog page with extras (``search=...``, ``skip=...``)."""
    state = cast(AppState, request.app.state)
    return await _catalog(state, content_type, catalog_id, parse_extra(extra))


@router.get("/meta/{content_type}/{meta_id:path}.json")
async def stremio_meta(
    request: Request,
    content_type: str,
    meta_id: str,
) -> JSONResponse:
    """Serve the meta object: title, poster and description."""
    state = cast(AppState, request.app.state)

    ct = _content_type(content_type)
    identifier = ContentIdentifier.parse(meta_id)
    if ct is None or identifier is None:
        return _json({"meta": {}})

    meta = await state.stremio_meta_uc.execute(meta_id, identifier, ct)
    if meta is None:
        log.info("stremio_meta_unresolved", id=meta_id)
        return _json({"meta": {}})
    return _json({"meta": meta.to_dict()})


@router.get("/stream/{content_type}/{stream_id:path}.json")
async def stremio_stream(
    request: Request,
    content_type: str,
    stream_id: str,
) -> JSONResponse:
    """Resolve streams for a movie or an episode.

    1. Parse the id (provider + id + optional season/episode).
    2. Resolve the title via TMDB.
    3. Locate the Cineby page and extract players (movie) or pick the
       requested episode (series).
    """
    state = cast(AppState, request.app.state)

    identifier = ContentIdentifier.parse(stream_id)
    if _content_type(content_type) is None or identifier is None:
        return _json({"streams": []})

    log.info(
        "stremio_stream_request",
        provider=identifier.provider,
        id=identifier.id,
        season=identifier.season,
        episode=identifier.episode,
    )

    streams = await state.stremio_stream_uc.execute(identifier)

    log.info(
        "stremio_stream_response",
        id=stream_id,
        streams_returned=len(streams),
    )
    return _json({"streams": [s.to_dict() for s in streams]})
