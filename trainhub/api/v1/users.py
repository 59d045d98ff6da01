# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User management API endpoints.

This module provides endpoints for users:
- GET / - List users, optionally by role
- POST / - Register a user
- GET /trainers - List trainers
- GET /students - List students
- GET /{user_id} - Get a user
- POST /{user_id}/materials - Assign materials to a student

Passwords are never returned.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from trainhub.api.dependencies import Store
from trainhub.models import Role, UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


class MaterialAssignmentRequest(BaseModel):
    """Materials to add to a student's assigned set."""

    material_ids: list[str] = Field(min_length=1)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(
    store: Store,
    role: Annotated[Role | None, Query(description="Filter by role")] = None,
) -> list[UserResponse]:
    users = store.users
    if role is not None:
        users = [u for u in users if u.role == role]
    return [UserResponse.from_user(u) for u in users]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Register a user. Students get empty assignment lists and their college is added if new.",
)
async def create_user(data: UserCreate, store: Store) -> UserResponse:
    return UserResponse.from_user(store.add_user(data))


@router.get(
    "/trainers",
    response_model=list[UserResponse],
    summary="List trainers",
)
async def list_trainers(store: Store) -> list[UserResponse]:
    return [UserResponse.from_user(u) for u in store.trainers]


@router.get(
    "/students",
    response_model=list[UserResponse],
    summary="List students",
)
async def list_students(
    store: Store,
    course: Annotated[str | None, Query(description="Filter by course")] = None,
) -> list[UserResponse]:
    students = store.students
    if course is not None:
        students = [s for s in students if s.course == course]
    return [UserResponse.from_user(s) for s in students]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(user_id: str, store: Store) -> UserResponse:
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return UserResponse.from_user(user)


@router.post(
    "/{user_id}/materials",
    response_model=UserResponse,
    summary="Assign materials",
    description="Add materials to a student's assigned set. Already assigned ids are ignored.",
)
async def assign_materials(
    user_id: str,
    data: MaterialAssignmentRequest,
    store: Store,
) -> UserResponse:
    """Assign materials to a student.

    Args:
        user_id: Student id.
        data: Material ids to add.
        store: Domain store.

    Returns:
        The updated student.

    Raises:
        HTTPException: 404 if no student has that id.
    """
    student = store.assign_materials_to_student(user_id, data.material_ids)
    if student is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )
    return UserResponse.from_user(student)
