# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the TrainHub API.

Run with:
    uvicorn trainhub.api.app:create_app --factory
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from trainhub import __version__
from trainhub.api.routes import health
from trainhub.api.v1 import router as v1_router
from trainhub.core.config import Settings, get_settings
from trainhub.domains.auth import AuthService
from trainhub.domains.generation import GenerationGateway
from trainhub.domains.store import DomainStore, build_store
from trainhub.utils.logging import bind_context, clear_context, get_logger, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Configures logging on startup. The store, session and gateway are
    already attached to app.state by create_app and need no teardown.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings: Settings = app.state.settings
    setup_logging(settings)

    store: DomainStore = app.state.store
    logger.info(
        "Starting TrainHub API: environment=%s, users=%d, materials=%d, generation_configured=%s",
        settings.environment,
        len(store.users),
        len(store.materials),
        settings.llm.has_api_key,
    )

    yield

    logger.info("Shutting down TrainHub API")


def create_app(
    settings: Settings | None = None,
    store: DomainStore | None = None,
    gateway: GenerationGateway | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. Uses get_settings() if None.
        store: Domain store. Built from the seed file if None.
        gateway: Generation gateway. Built from the LLM settings if None.

    Returns:
        Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="TrainHub API",
        description="Training management backend with generated assessments",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    # =========================================================================
    # State
    # =========================================================================
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings.store)
    app.state.auth = AuthService(app.state.store, settings.auth)
    app.state.gateway = gateway or GenerationGateway(settings=settings.llm)

    # =========================================================================
    # Middleware
    # =========================================================================
    request_logger = get_logger("trainhub.api.requests")

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        bind_context(method=request.method, path=request.url.path)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            request_logger.debug(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            return response
        finally:
            clear_context()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    # =========================================================================
    # Routes
    # =========================================================================
    app.include_router(health.router, tags=["Health"])
    app.include_router(v1_router)

    return app
