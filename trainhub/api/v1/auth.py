# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication API endpoints.

This module provides endpoints for the single process-wide session:
- POST /login - Sign in with email and password
- POST /logout - End the session
- POST /switch - Impersonate another user
- GET /me - Get the signed-in user

There are no tokens. Whoever signs in last is the current user for every
client of this process.
"""

import logging

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from trainhub.api.dependencies import Auth
from trainhub.domains.auth import InvalidCredentialsError
from trainhub.models import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    """Login credentials."""

    email: str = Field(min_length=1)
    password: str


class SwitchUserRequest(BaseModel):
    """Target of an impersonation switch."""

    user_id: str = Field(min_length=1)


@router.post(
    "/login",
    response_model=UserResponse,
    summary="Login",
    description="Sign in with email and password.",
)
async def login(data: LoginRequest, auth: Auth) -> UserResponse:
    """Sign in.

    Args:
        data: Login credentials.
        auth: Session service.

    Returns:
        The signed-in user.

    Raises:
        HTTPException: 401 if the credentials do not match a user.
    """
    try:
        user = await auth.login(data.email, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    return UserResponse.from_user(user)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout",
)
async def logout(auth: Auth) -> None:
    """End the current session."""
    auth.logout()


@router.post(
    "/switch",
    response_model=UserResponse,
    summary="Switch user",
    description="Become another user without credentials.",
)
async def switch_user(data: SwitchUserRequest, auth: Auth) -> UserResponse:
    user = auth.switch_user(data.user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserResponse.from_user(user)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Current user",
)
async def get_me(auth: Auth) -> UserResponse:
    """Get the signed-in user.

    Raises:
        HTTPException: 401 if nobody is signed in.
    """
    user = auth.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return UserResponse.from_user(user)
