"""
FastAPI Application Factory & Configuration.

This module initializes the Corner HTTP API. It is responsible for:
1.  **Middleware Setup**: CORS so a static front-end page can call the API.
2.  **Exception Handling**: Global handlers so every error returns structured JSON.
3.  **Routing**: Mounting the countdown, note and widget routers.
4.  **Lifecycle**: Preparing the dashboard session (store + first full render)
    on startup.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`). Tests build a fresh
app per test and swap the dashboard session via dependency overrides.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from corner import __version__
from corner.api.deps import get_dashboard
from corner.api.routers import countdowns, notes, widgets
from corner.core.settings import get_logger, load_settings

logger = get_logger("corner.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    ASGI Lifespan context manager.

    - **Startup**: Build the dashboard session so the first request is not
      the one paying for the initial store read.
    - **Shutdown**: Nothing to release; the store writes synchronously.
    """
    logger.info("Starting up (data dir: %s)", load_settings().data_dir)
    if get_dashboard not in app.dependency_overrides:
        get_dashboard()
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    """
    Construct and configure the Corner FastAPI application.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    app = FastAPI(
        title="Corner API",
        description="Personal dashboard: clock, countdowns, notes, quotes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler: unhandled exceptions become structured JSON 500s."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(countdowns.router)
    app.include_router(notes.router)
    app.include_router(widgets.router)

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Simple liveness probe."""
        return {
            "status": "ok",
            "environment": load_settings().environment,
            "version": __version__,
        }

    return app


__all__ = ["create_app"]
