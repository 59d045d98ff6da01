# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection.

Every process-wide object lives on app.state and is handed to endpoints
through these dependencies. Nothing is reached through module globals.

Usage:
    @router.get("/materials")
    async def list_materials(store: Store) -> list[Material]:
        return store.materials
"""

from typing import Annotated

from fastapi import Depends, Request

from trainhub.core.config import Settings
from trainhub.domains.auth import AuthService
from trainhub.domains.generation import GenerationGateway
from trainhub.domains.store import DomainStore


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    return request.app.state.settings


def get_store(request: Request) -> DomainStore:
    """Get the domain store."""
    return request.app.state.store


def get_auth_service(request: Request) -> AuthService:
    """Get the login session service."""
    return request.app.state.auth


def get_gateway(request: Request) -> GenerationGateway:
    """Get the assessment generation gateway."""
    return request.app.state.gateway


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Store = Annotated[DomainStore, Depends(get_store)]
Auth = Annotated[AuthService, Depends(get_auth_service)]
Gateway = Annotated[GenerationGateway, Depends(get_gateway)]
