# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assessment API endpoints.

This module provides endpoints for saved assessments:
- GET / - List assessments, optionally by course
- POST / - Save an assessment and assign it to its course
- GET /{assessment_id} - Get an assessment
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from trainhub.api.dependencies import Store
from trainhub.models import Assessment, AssessmentCreate

logger = logging.getLogger(__name__)

router = APIRouter()


class AssessmentSavedResponse(BaseModel):
    """Result of saving an assessment."""

    id: str = Field(description="New assessment id")
    assigned_students: int = Field(description="Students on the course who now have it assigned")


@router.get(
    "",
    response_model=list[Assessment],
    summary="List assessments",
)
async def list_assessments(
    store: Store,
    course: Annotated[str | None, Query(description="Filter by course")] = None,
) -> list[Assessment]:
    assessments = store.assessments
    if course is not None:
        assessments = [a for a in assessments if a.course == course]
    return assessments


@router.post(
    "",
    response_model=AssessmentSavedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save assessment",
    description="Save an assessment and assign it to every student on its course.",
)
async def create_assessment(data: AssessmentCreate, store: Store) -> AssessmentSavedResponse:
    """Save and fan out an assessment.

    Both store calls run back to back on the event loop, so no other
    mutation can land between them.

    Args:
        data: Assessment payload, typically a generated preview.
        store: Domain store.

    Returns:
        The new id and the number of students assigned.
    """
    assessment_id = store.add_assessment(data)
    assigned = store.assign_assessment_to_course(assessment_id, data.course)
    return AssessmentSavedResponse(id=assessment_id, assigned_students=assigned)


@router.get(
    "/{assessment_id}",
    response_model=Assessment,
    summary="Get assessment",
)
async def get_assessment(assessment_id: str, store: Store) -> Assessment:
    assessment = store.get_assessment(assessment_id)
    if assessment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found",
        )
    return assessment
