"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from cinebyarr.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from cinebyarr.application.use_cases import (
        StremioCatalogUseCase,
        StremioMetaUseCase,
        StremioStreamUseCase,
    )
    from cinebyarr.domain.ports import CachePort, ContentSitePort, TmdbClientPort


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    cache: CachePort
    http_client: httpx.AsyncClient

    # Domain Ports
    tmdb_client: TmdbClientPort
    content_site: ContentSitePort

    # Application Services
    stremio_stream_uc: StremioStreamUseCase
    stremio_meta_uc: StremioMetaUseCase
    stremio_catalog_uc: StremioCatalogUseCase
