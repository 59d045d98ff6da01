# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Material and schedule models."""

from datetime import date

from pydantic import BaseModel, Field, model_validator

from trainhub.models.common import EntityModel, MaterialType


class Material(EntityModel):
    """A unit of training content tied to a course.

    Content is opaque: document text for PDF/PPT/DOC, a URL for VIDEO.
    """

    id: str
    title: str
    course: str
    type: MaterialType
    content: str

    @property
    def is_video(self) -> bool:
        """Check if the material is a video reference."""
        return self.type == MaterialType.VIDEO


class MaterialCreate(BaseModel):
    """Payload for adding a material."""

    title: str = Field(min_length=1)
    course: str = Field(min_length=1)
    type: MaterialType = MaterialType.DOC
    content: str


class Schedule(EntityModel):
    """A trainer's assignment to teach a course at a college."""

    id: str
    trainer_id: str
    college: str
    course: str
    start_date: date
    end_date: date
    material_ids: tuple[str, ...] = ()


class ScheduleCreate(BaseModel):
    """Payload for adding a schedule."""

    trainer_id: str
    college: str = ""
    course: str
    start_date: date
    end_date: date
    material_ids: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_date_range(self) -> "ScheduleCreate":
        """Reject schedules that end before they start."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
