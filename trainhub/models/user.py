# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""User models."""

from pydantic import BaseModel, Field

from trainhub.models.common import EntityModel, Role


class User(EntityModel):
    """A platform user.

    Trainers carry expertise, experience and phone. Students carry course,
    college and the ids of the materials and assessments assigned to them;
    the assigned-id lists are None for every other role.
    """

    id: str
    name: str
    email: str
    role: Role
    password: str | None = Field(default=None, repr=False)
    expertise: str | None = None
    experience: int | None = None
    phone: str | None = None
    course: str | None = None
    college: str | None = None
    assigned_material_ids: tuple[str, ...] | None = None
    assigned_assessment_ids: tuple[str, ...] | None = None

    @property
    def is_student(self) -> bool:
        """Check if the user has the STUDENT role."""
        return self.role == Role.STUDENT


class UserCreate(BaseModel):
    """Payload for registering a user."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    role: Role
    password: str | None = None
    expertise: str | None = None
    experience: int | None = Field(default=None, ge=0)
    phone: str | None = None
    course: str | None = None
    college: str | None = None


class UserResponse(BaseModel):
    """User as exposed over the API (password omitted)."""

    id: str
    name: str
    email: str
    role: Role
    expertise: str | None = None
    experience: int | None = None
    phone: str | None = None
    course: str | None = None
    college: str | None = None
    assigned_material_ids: list[str] | None = None
    assigned_assessment_ids: list[str] | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        """Build a response from a stored user."""
        return cls.model_validate(user.model_dump(exclude={"password"}))
