"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from cinebyarr.application.use_cases import (
    StremioCatalogUseCase,
    StremioMetaUseCase,
    StremioStreamUseCase,
)
from cinebyarr.infrastructure.cache import MemoryCacheAdapter
from cinebyarr.infrastructure.cineby.scraper import CinebyScraper
from cinebyarr.infrastructure.tmdb.client import HttpxTmdbClient
from cinebyarr.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. Resolution cache (shared by TMDB client and scraper)
        2. HTTP client
        3. TMDB client + Cineby scraper
        4. Stremio use cases
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) Cache lives exactly as long as the process serves requests
    cache = MemoryCacheAdapter()
    await cache.__aenter__()
    state.cache = cache
    log.info("cache_initialized", backend="memory")

    # 2) HTTP client (timeout=None unless configured)
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=config.http_follow_redirects,
    )
    log.info("http_client_initialized", timeout=config.http_timeout_seconds)

    # 3) Ports
    if not config.tmdb.api_key:
        log.warning("tmdb_api_key_missing", effect="all title lookups fail")
    state.tmdb_client = HttpxTmdbClient(
        api_key=config.tmdb.api_key,
        http_client=state.http_client,
        cache=state.cache,
        base_url=config.tmdb.base_url,
        language=config.tmdb.language,
    )
    state.content_site = CinebyScraper(
        http_client=state.http_client,
        cache=state.cache,
        base_url=config.cineby.base_url,
        user_agent=config.cineby.user_agent,
    )
    log.info("ports_initialized", cineby_base_url=config.cineby.base_url)

    # 4) Use cases
    state.stremio_stream_uc = StremioStreamUseCase(
        tmdb=state.tmdb_client, site=state.content_site
    )
    state.stremio_meta_uc = StremioMetaUseCase(tmdb=state.tmdb_client)
    state.stremio_catalog_uc = StremioCatalogUseCase(tmdb=state.tmdb_client)

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")

        await state.cache.aclose()
        log.info("cache_closed")

        log.info("app_shutdown_complete")
