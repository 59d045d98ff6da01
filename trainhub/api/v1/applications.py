# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trainer application API endpoints.

This module provides endpoints for the trainer onboarding flow:
- GET / - List pending applications
- POST / - Submit an application
- POST /{application_id}/approve - Approve an application

Approval creates a TRAINER user with the default password and removes the
application.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from trainhub.api.dependencies import Store
from trainhub.models import ApplicationCreate, TrainerApplication, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[TrainerApplication],
    summary="List applications",
)
async def list_applications(store: Store) -> list[TrainerApplication]:
    return store.applications


@router.post(
    "",
    response_model=TrainerApplication,
    status_code=status.HTTP_201_CREATED,
    summary="Submit application",
)
async def submit_application(data: ApplicationCreate, store: Store) -> TrainerApplication:
    return await store.add_application(data)


@router.post(
    "/{application_id}/approve",
    response_model=UserResponse,
    summary="Approve application",
)
async def approve_application(application_id: str, store: Store) -> UserResponse:
    """Approve an application and create the trainer account.

    Args:
        application_id: Application to approve.
        store: Domain store.

    Returns:
        The new trainer.

    Raises:
        HTTPException: 404 if the application does not exist or was
            already approved.
    """
    trainer = store.approve_application(application_id)
    if trainer is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Application not found",
        )
    return UserResponse.from_user(trainer)
