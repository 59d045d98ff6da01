# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""College API endpoints.

- GET / - List colleges
- POST / - Add a college (409 if the name already exists)
"""

from fastapi import APIRouter, HTTPException, status

from trainhub.api.dependencies import Store
from trainhub.models import College, CollegeCreate

router = APIRouter()


@router.get(
    "",
    response_model=list[College],
    summary="List colleges",
)
async def list_colleges(store: Store) -> list[College]:
    return store.colleges


@router.post(
    "",
    response_model=College,
    status_code=status.HTTP_201_CREATED,
    summary="Add college",
    description="Add a college. Names are unique ignoring case and surrounding whitespace.",
)
async def create_college(data: CollegeCreate, store: Store) -> College:
    college = store.add_college(data)
    if college is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"College already exists: {data.name.strip()}",
        )
    return college
