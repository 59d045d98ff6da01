# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Schedule API endpoints.

- GET / - List schedules, optionally for one trainer
- POST / - Add a schedule (registers its college if new)
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from trainhub.api.dependencies import Store
from trainhub.models import Schedule, ScheduleCreate

router = APIRouter()


@router.get(
    "",
    response_model=list[Schedule],
    summary="List schedules",
)
async def list_schedules(
    store: Store,
    trainer_id: Annotated[str | None, Query(description="Filter by trainer")] = None,
) -> list[Schedule]:
    schedules = store.schedules
    if trainer_id is not None:
        schedules = [s for s in schedules if s.trainer_id == trainer_id]
    return schedules


@router.post(
    "",
    response_model=Schedule,
    status_code=status.HTTP_201_CREATED,
    summary="Add schedule",
)
async def create_schedule(data: ScheduleCreate, store: Store) -> Schedule:
    return store.add_schedule(data)
