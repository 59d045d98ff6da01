# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Trainer application models."""

from pydantic import BaseModel, Field

from trainhub.models.common import ApplicationStatus, EntityModel


class TrainerApplication(EntityModel):
    """A pending request to join as a trainer."""

    id: str
    name: str
    email: str
    phone: str
    expertise: str
    experience: int
    id_proof: str = Field(description="Filename or path of the submitted ID proof")
    status: ApplicationStatus = ApplicationStatus.PENDING


class ApplicationCreate(BaseModel):
    """Payload for submitting a trainer application."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str
    expertise: str
    experience: int = Field(ge=0)
    id_proof: str
