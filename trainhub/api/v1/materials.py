# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Material API endpoints.

This module provides endpoints for training materials:
- GET / - List materials, optionally by course
- POST / - Add a material
- GET /{material_id} - Get a material
- POST /{material_id}/generate - Generate an assessment preview

A generated assessment is not saved here. The caller reviews the preview
and saves it through POST /assessments, which also assigns it to every
student on the material's course.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from trainhub.api.dependencies import Gateway, Store
from trainhub.domains.generation import GenerationConfigError, GenerationError
from trainhub.models import AssessmentCreate, AssessmentType, Material, MaterialCreate

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateRequest(BaseModel):
    """Kind of assessment to generate."""

    type: AssessmentType


@router.get(
    "",
    response_model=list[Material],
    summary="List materials",
)
async def list_materials(
    store: Store,
    course: Annotated[str | None, Query(description="Filter by course")] = None,
) -> list[Material]:
    materials = store.materials
    if course is not None:
        materials = [m for m in materials if m.course == course]
    return materials


@router.post(
    "",
    response_model=Material,
    status_code=status.HTTP_201_CREATED,
    summary="Add material",
)
async def create_material(data: MaterialCreate, store: Store) -> Material:
    return store.add_material(data)


@router.get(
    "/{material_id}",
    response_model=Material,
    summary="Get material",
)
async def get_material(material_id: str, store: Store) -> Material:
    material = store.get_material(material_id)
    if material is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )
    return material


@router.post(
    "/{material_id}/generate",
    response_model=AssessmentCreate,
    summary="Generate assessment",
    description="Generate an unsaved test or assignment from a material's content.",
)
async def generate_assessment(
    material_id: str,
    data: GenerateRequest,
    store: Store,
    gateway: Gateway,
) -> AssessmentCreate:
    """Generate an assessment preview from a material.

    Tests are titled after the material. Assignment titles come from the
    generated payload.

    Args:
        material_id: Source material.
        data: Kind of assessment.
        store: Domain store.
        gateway: Generation gateway.

    Returns:
        An assessment payload ready to be saved.

    Raises:
        HTTPException: 404 if the material does not exist, 422 for video
            materials, 503 if generation is not configured, 502 if
            generation fails.
    """
    material = store.get_material(material_id)
    if material is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Material not found",
        )

    if material.is_video:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Assessments cannot be generated from video materials",
        )

    logger.info("Generating %s from material %s", data.type.value, material.id)

    try:
        if data.type == AssessmentType.TEST:
            questions = await gateway.generate_test(material.content)
            title = f"{material.title} Test"
        else:
            assignment = await gateway.generate_assignment(material.content)
            questions = [q.model_dump() for q in assignment.questions]
            title = assignment.title
    except GenerationConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    return AssessmentCreate(
        material_id=material.id,
        course=material.course,
        title=title,
        type=data.type,
        questions=questions,
    )
