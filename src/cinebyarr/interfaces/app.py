"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from cinebyarr.infrastructure.config import AppConfig
from cinebyarr.interfaces.api.stremio.router import ADDON_VERSION
from cinebyarr.interfaces.api.stremio.router import router as stremio_router
from cinebyarr.interfaces.app_state import AppState
from cinebyarr.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """Create the FastAPI app. Configuration only, no resource initialization.

    Resources (HTTP client, cache, use cases) are created in lifespan().
    """
    app = FastAPI(
        title="Cinebyarr",
        description="Stremio addon resolving TMDB ids to Cineby streams",
        version=ADDON_VERSION,
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    app.include_router(stremio_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        """Liveness probe, 200 as long as the process is running."""
        return {"status": "ok"}

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - start) * 1000.0, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
