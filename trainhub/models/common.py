# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enumerations and base model configuration."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    """User role."""

    ADMIN = "ADMIN"
    TRAINER = "TRAINER"
    STUDENT = "STUDENT"


class MaterialType(str, Enum):
    """Kind of training material.

    VIDEO content is a URL; every other type carries document text.
    """

    PDF = "PDF"
    PPT = "PPT"
    DOC = "DOC"
    VIDEO = "VIDEO"


class AssessmentType(str, Enum):
    """Kind of generated assessment."""

    TEST = "TEST"
    ASSIGNMENT = "ASSIGNMENT"


class ApplicationStatus(str, Enum):
    """Trainer application review status."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class BillStatus(str, Enum):
    """Trainer bill payment status."""

    PENDING = "PENDING"
    PAID = "PAID"


class ExpenseType(str, Enum):
    """Expense category on a trainer bill."""

    TRAVEL = "Travel"
    ACCOMMODATION = "Accommodation"
    FOOD = "Food"
    MATERIALS = "Materials"
    OTHER = "Other"


class EntityModel(BaseModel):
    """Base class for stored entities.

    Entities are frozen and hold tuples rather than lists, so neither the
    entity nor its collections change in place; the domain store replaces
    them on update.
    """

    model_config = ConfigDict(frozen=True)
