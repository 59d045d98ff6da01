# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pydantic models for TrainHub entities and request payloads."""

from trainhub.models.application import ApplicationCreate, TrainerApplication
from trainhub.models.assessment import (
    Assessment,
    AssessmentCreate,
    AssessmentQuestion,
    AttemptCreate,
    LeaderboardEntry,
    StudentAttempt,
)
from trainhub.models.billing import BillCreate, BillStatusUpdate, Expense, TrainerBill
from trainhub.models.college import College, CollegeCreate
from trainhub.models.common import (
    ApplicationStatus,
    AssessmentType,
    BillStatus,
    ExpenseType,
    MaterialType,
    Role,
)
from trainhub.models.material import Material, MaterialCreate, Schedule, ScheduleCreate
from trainhub.models.user import User, UserCreate, UserResponse

__all__ = [
    # Enums
    "Role",
    "MaterialType",
    "AssessmentType",
    "ApplicationStatus",
    "BillStatus",
    "ExpenseType",
    # Entities
    "User",
    "Material",
    "Schedule",
    "TrainerApplication",
    "Assessment",
    "AssessmentQuestion",
    "StudentAttempt",
    "LeaderboardEntry",
    "Expense",
    "TrainerBill",
    "College",
    # Payloads
    "UserCreate",
    "UserResponse",
    "MaterialCreate",
    "ScheduleCreate",
    "ApplicationCreate",
    "AssessmentCreate",
    "AttemptCreate",
    "BillCreate",
    "BillStatusUpdate",
    "CollegeCreate",
]
