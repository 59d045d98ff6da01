# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""College models."""

from pydantic import BaseModel, Field

from trainhub.models.common import EntityModel


class College(EntityModel):
    """A college. Names are unique ignoring case and surrounding whitespace."""

    id: str
    name: str
    address: str = ""
    contact_person: str = ""
    contact_email: str = ""
    contact_phone: str = ""


class CollegeCreate(BaseModel):
    """Payload for adding a college."""

    name: str = Field(min_length=1)
    address: str = ""
    contact_person: str = ""
    contact_email: str = ""
    contact_phone: str = ""
