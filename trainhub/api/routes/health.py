# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Health check endpoints.

This module provides health and readiness endpoints for the API.
"""

import time
import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from trainhub import __version__
from trainhub.api.dependencies import AppSettings, Store
from trainhub.utils.datetime import utc_now

logger = logging.getLogger(__name__)

router = APIRouter()

# Track server start time for uptime calculation
_server_start_time = time.time()


class ComponentHealth(BaseModel):
    """Individual component health status."""
    status: str = Field(description="Component status")
    message: str | None = Field(None, description="Additional status message")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(description="Current server timestamp")
    version: str = Field(description="API version")
    environment: str = Field(description="Deployment environment")
    uptime_seconds: int = Field(description="Server uptime in seconds")
    components: dict[str, ComponentHealth] = Field(default_factory=dict)


class ReadinessResponse(BaseModel):
    """Readiness check response model."""
    ready: bool = Field(description="Whether the service is ready")
    checks: dict[str, Any] = Field(description="Individual check results")


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings, store: Store) -> HealthResponse:
    """Check if the API is healthy with component details.

    The store is always in memory, so it is healthy whenever the process
    is up. Generation is reported as degraded when no API key is set,
    because every generate request would then fail.

    Returns:
        HealthResponse with detailed status.
    """
    components = {
        "store": ComponentHealth(
            status="healthy",
            message=f"{len(store.users)} users, {len(store.materials)} materials",
        ),
        "generation": ComponentHealth(
            status="configured" if settings.llm.has_api_key else "unconfigured",
            message=settings.llm.default_model,
        ),
    }

    overall_status = "healthy" if settings.llm.has_api_key else "degraded"

    return HealthResponse(
        status=overall_status,
        timestamp=utc_now(),
        version=__version__,
        environment=settings.environment,
        uptime_seconds=int(time.time() - _server_start_time),
        components=components,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(store: Store) -> ReadinessResponse:
    """Check if the API is ready to accept traffic.

    Returns:
        ReadinessResponse with individual check results.
    """
    checks: dict[str, Any] = {
        "store": {"status": "healthy", "users": len(store.users)},
    }
    return ReadinessResponse(ready=True, checks=checks)
