# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assessment, attempt and leaderboard models."""

from datetime import datetime

from pydantic import BaseModel, Field

from trainhub.models.common import AssessmentType, EntityModel


class AssessmentQuestion(EntityModel):
    """A single question.

    Options and correct_answer are only present on TEST questions.
    """

    question: str
    options: tuple[str, ...] | None = None
    correct_answer: str | None = None


class Assessment(EntityModel):
    """A generated test or assignment tied to a material and a course."""

    id: str
    material_id: str
    course: str
    title: str
    type: AssessmentType
    questions: tuple[AssessmentQuestion, ...]


class AssessmentCreate(BaseModel):
    """Payload for storing an assessment."""

    material_id: str
    course: str
    title: str = Field(min_length=1)
    type: AssessmentType
    questions: list[AssessmentQuestion]


class StudentAttempt(EntityModel):
    """One scored attempt. The attempt log is append-only."""

    student_name: str
    course: str
    score: float
    timestamp: datetime


class AttemptCreate(BaseModel):
    """Payload for recording an attempt; the timestamp is server-assigned."""

    student_name: str = Field(min_length=1)
    course: str
    score: float


class LeaderboardEntry(BaseModel):
    """Derived ranking row: the summed score of one student."""

    student_name: str
    total_score: float
