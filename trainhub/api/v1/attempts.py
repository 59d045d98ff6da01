# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student attempt API endpoints.

- GET / - List attempts, optionally by course
- POST / - Record an attempt (timestamp is server-assigned)
- GET /leaderboard - Total score per student, highest first
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from trainhub.api.dependencies import Store
from trainhub.models import AttemptCreate, LeaderboardEntry, StudentAttempt

router = APIRouter()


@router.get(
    "",
    response_model=list[StudentAttempt],
    summary="List attempts",
)
async def list_attempts(
    store: Store,
    course: Annotated[str | None, Query(description="Filter by course")] = None,
) -> list[StudentAttempt]:
    attempts = store.student_attempts
    if course is not None:
        attempts = [a for a in attempts if a.course == course]
    return attempts


@router.post(
    "",
    response_model=StudentAttempt,
    status_code=status.HTTP_201_CREATED,
    summary="Record attempt",
)
async def create_attempt(data: AttemptCreate, store: Store) -> StudentAttempt:
    return store.add_student_attempt(data)


@router.get(
    "/leaderboard",
    response_model=list[LeaderboardEntry],
    summary="Leaderboard",
    description="Scores summed per student, highest total first.",
)
async def get_leaderboard(
    store: Store,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Maximum entries")] = None,
) -> list[LeaderboardEntry]:
    entries = store.leaderboard
    return entries[:limit] if limit is not None else entries
