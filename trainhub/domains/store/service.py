# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""In-memory domain store.

This module provides the DomainStore class, the single owner of every
entity collection in a running TrainHub process:
- Users, materials, schedules, colleges
- Trainer applications and their approval
- Assessments and their fan-out to a course's students
- Student attempts and the derived leaderboard
- Trainer bills

Mutations are synchronous and never raise for business-rule misses: an
unknown id or a duplicate college name turns the call into a no-op. Read
views return fresh lists of frozen entities, and derived views (trainers,
students, leaderboard) are recomputed on every read.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from trainhub.core.config.settings import StoreSettings
from trainhub.domains.store.ids import IdGenerator
from trainhub.models import (
    ApplicationCreate,
    ApplicationStatus,
    Assessment,
    AssessmentCreate,
    AttemptCreate,
    BillCreate,
    BillStatus,
    College,
    CollegeCreate,
    LeaderboardEntry,
    Material,
    MaterialCreate,
    Role,
    Schedule,
    ScheduleCreate,
    StudentAttempt,
    TrainerApplication,
    TrainerBill,
    User,
    UserCreate,
)
from trainhub.utils.datetime import utc_now

if TYPE_CHECKING:
    from trainhub.domains.store.seed import SeedData

logger = logging.getLogger(__name__)


def _college_key(name: str) -> str:
    return name.strip().lower()


def _union(existing: Iterable[str] | None, added: Iterable[str]) -> tuple[str, ...]:
    """Ordered set union: keeps first occurrences, drops duplicates."""
    return tuple(dict.fromkeys([*(existing or ()), *added]))


class DomainStore:
    """Authoritative in-memory snapshot of all TrainHub entities.

    Construct one per process and hand it to every consumer. Consumers read
    through the view properties and write through the mutation methods only.

    Attributes:
        settings: Store configuration (delays, default password, invoice prefix).
        ids: Id generator used for every minted id.
    """

    def __init__(
        self,
        settings: StoreSettings | None = None,
        id_generator: IdGenerator | None = None,
        seed: SeedData | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            settings: Store settings. Defaults to StoreSettings().
            id_generator: Id generator. Defaults to a system-clock generator.
            seed: Optional initial data.
        """
        self.settings = settings or StoreSettings()
        self.ids = id_generator or IdGenerator()

        self._users: list[User] = []
        self._materials: list[Material] = []
        self._schedules: list[Schedule] = []
        self._applications: list[TrainerApplication] = []
        self._assessments: list[Assessment] = []
        self._attempts: list[StudentAttempt] = []
        self._bills: list[TrainerBill] = []
        self._colleges: list[College] = []

        if seed is not None:
            self._load_seed(seed)

    def _load_seed(self, seed: SeedData) -> None:
        self._users = list(seed.users)
        self._materials = list(seed.materials)
        self._schedules = list(seed.schedules)
        self._applications = list(seed.applications)
        self._assessments = list(seed.assessments)
        self._attempts = list(seed.student_attempts)
        self._bills = list(seed.bills)
        self._colleges = list(seed.colleges)
        logger.info(
            "Store seeded: users=%d, materials=%d, schedules=%d, bills=%d, colleges=%d",
            len(self._users),
            len(self._materials),
            len(self._schedules),
            len(self._bills),
            len(self._colleges),
        )

    # =========================================================================
    # Read views
    # =========================================================================

    @property
    def users(self) -> list[User]:
        return list(self._users)

    @property
    def materials(self) -> list[Material]:
        return list(self._materials)

    @property
    def schedules(self) -> list[Schedule]:
        return list(self._schedules)

    @property
    def applications(self) -> list[TrainerApplication]:
        return list(self._applications)

    @property
    def assessments(self) -> list[Assessment]:
        return list(self._assessments)

    @property
    def student_attempts(self) -> list[StudentAttempt]:
        return list(self._attempts)

    @property
    def bills(self) -> list[TrainerBill]:
        """Bills, newest first."""
        return list(self._bills)

    @property
    def colleges(self) -> list[College]:
        return list(self._colleges)

    @property
    def trainers(self) -> list[User]:
        """Users with the TRAINER role."""
        return [u for u in self._users if u.role == Role.TRAINER]

    @property
    def students(self) -> list[User]:
        """Users with the STUDENT role."""
        return [u for u in self._users if u.role == Role.STUDENT]

    @property
    def leaderboard(self) -> list[LeaderboardEntry]:
        """Attempt scores summed per student name, highest total first.

        Students with equal totals keep the order in which their first
        attempt was recorded.
        """
        totals: dict[str, float] = {}
        for attempt in self._attempts:
            totals[attempt.student_name] = totals.get(attempt.student_name, 0) + attempt.score

        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [
            LeaderboardEntry(student_name=name, total_score=total)
            for name, total in ranked
        ]

    def get_user(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def get_material(self, material_id: str) -> Material | None:
        return next((m for m in self._materials if m.id == material_id), None)

    def get_assessment(self, assessment_id: str) -> Assessment | None:
        return next((a for a in self._assessments if a.id == assessment_id), None)

    def find_college(self, name: str) -> College | None:
        """Find a college by name, ignoring case and surrounding whitespace."""
        key = _college_key(name)
        return next((c for c in self._colleges if _college_key(c.name) == key), None)

    # =========================================================================
    # Materials and schedules
    # =========================================================================

    def add_material(self, data: MaterialCreate) -> Material:
        """Add a material.

        Args:
            data: Material payload.

        Returns:
            The stored material.
        """
        material = Material(id=self.ids.next_id("mat"), **data.model_dump())
        self._materials.append(material)
        logger.info("Material added: id=%s, course=%s, type=%s", material.id, material.course, material.type.value)
        return material

    def add_schedule(self, data: ScheduleCreate) -> Schedule:
        """Add a schedule, registering its college if the name is new.

        Args:
            data: Schedule payload.

        Returns:
            The stored schedule.
        """
        schedule = Schedule(id=self.ids.next_id("sch"), **data.model_dump())
        self._schedules.append(schedule)
        logger.info("Schedule added: id=%s, trainer=%s, course=%s", schedule.id, schedule.trainer_id, schedule.course)

        if data.college.strip():
            self._ensure_college(data.college)
        return schedule

    # =========================================================================
    # Colleges
    # =========================================================================

    def add_college(self, data: CollegeCreate) -> College | None:
        """Add a college unless one with the same name already exists.

        Args:
            data: College payload.

        Returns:
            The new college, or None if the name was already taken.
        """
        if self.find_college(data.name) is not None:
            logger.debug("College already exists: %s", data.name)
            return None

        college = College(
            id=self.ids.next_id("col"),
            **data.model_dump(exclude={"name"}),
            name=data.name.strip(),
        )
        self._colleges.append(college)
        logger.info("College added: id=%s, name=%s", college.id, college.name)
        return college

    def _ensure_college(self, name: str) -> None:
        self.add_college(CollegeCreate(name=name.strip()))

    # =========================================================================
    # Users
    # =========================================================================

    def add_user(self, data: UserCreate) -> User:
        """Register a user.

        Students start with empty assignment lists, and a student's college
        is registered if the name is new.

        Args:
            data: User payload.

        Returns:
            The stored user.
        """
        is_student = data.role == Role.STUDENT
        user = User(
            id=self.ids.next_id(data.role.value.lower()),
            **data.model_dump(),
            assigned_material_ids=() if is_student else None,
            assigned_assessment_ids=() if is_student else None,
        )
        self._users.append(user)
        logger.info("User added: id=%s, role=%s", user.id, user.role.value)

        if is_student and data.college and data.college.strip():
            self._ensure_college(data.college)
        return user

    def assign_materials_to_student(
        self,
        student_id: str,
        material_ids: list[str],
    ) -> User | None:
        """Add materials to a student's assigned set.

        Args:
            student_id: Id of a STUDENT user.
            material_ids: Material ids to add; duplicates are ignored.

        Returns:
            The updated student, or None if no student has that id.
        """
        for index, user in enumerate(self._users):
            if user.id == student_id and user.is_student:
                updated = user.model_copy(
                    update={"assigned_material_ids": _union(user.assigned_material_ids, material_ids)}
                )
                self._users[index] = updated
                logger.info("Materials assigned: student=%s, count=%d", student_id, len(material_ids))
                return updated

        logger.debug("Material assignment skipped, no student %s", student_id)
        return None

    # =========================================================================
    # Trainer applications
    # =========================================================================

    async def add_application(self, data: ApplicationCreate) -> TrainerApplication:
        """Submit a trainer application.

        Simulates a network round-trip before the application is stored.
        Always succeeds.

        Args:
            data: Application payload.

        Returns:
            The stored application, status PENDING.
        """
        await asyncio.sleep(self.settings.application_submit_delay)

        application = TrainerApplication(
            id=self.ids.next_id("app"),
            status=ApplicationStatus.PENDING,
            **data.model_dump(),
        )
        self._applications.append(application)
        logger.info("Application submitted: id=%s, email=%s", application.id, application.email)
        return application

    def approve_application(self, application_id: str) -> User | None:
        """Convert a pending application into a trainer account.

        The new trainer gets the configured default password and the
        application is removed from the pending list. A second approval of
        the same id finds nothing and does nothing.

        Args:
            application_id: Application to approve.

        Returns:
            The new trainer, or None if the application does not exist.
        """
        application = next((a for a in self._applications if a.id == application_id), None)
        if application is None:
            logger.debug("Approval skipped, no application %s", application_id)
            return None

        trainer = User(
            id=self.ids.next_id("trainer"),
            name=application.name,
            email=application.email,
            password=self.settings.default_trainer_password.get_secret_value(),
            role=Role.TRAINER,
            expertise=application.expertise,
            experience=application.experience,
            phone=application.phone,
        )
        self._users.append(trainer)
        self._applications = [a for a in self._applications if a.id != application_id]

        logger.info("Application approved: application=%s, trainer=%s", application_id, trainer.id)
        return trainer

    # =========================================================================
    # Assessments and attempts
    # =========================================================================

    def add_assessment(self, data: AssessmentCreate) -> str:
        """Store an assessment.

        Args:
            data: Assessment payload.

        Returns:
            The new assessment id, for fan-out via assign_assessment_to_course.
        """
        assessment = Assessment(id=self.ids.next_id("asm"), **data.model_dump())
        self._assessments.append(assessment)
        logger.info(
            "Assessment added: id=%s, type=%s, course=%s, questions=%d",
            assessment.id,
            assessment.type.value,
            assessment.course,
            len(assessment.questions),
        )
        return assessment.id

    def assign_assessment_to_course(self, assessment_id: str, course: str) -> int:
        """Assign an assessment to every student enrolled in a course.

        Args:
            assessment_id: Assessment to assign.
            course: Course name, matched exactly.

        Returns:
            Number of students whose assignment list now includes the id.
        """
        assigned = 0
        for index, user in enumerate(self._users):
            if user.is_student and user.course == course:
                self._users[index] = user.model_copy(
                    update={"assigned_assessment_ids": _union(user.assigned_assessment_ids, [assessment_id])}
                )
                assigned += 1

        logger.info("Assessment assigned: id=%s, course=%s, students=%d", assessment_id, course, assigned)
        return assigned

    def add_student_attempt(self, data: AttemptCreate) -> StudentAttempt:
        """Record an attempt, stamped with the current time.

        Args:
            data: Attempt payload.

        Returns:
            The stored attempt.
        """
        attempt = StudentAttempt(timestamp=utc_now(), **data.model_dump())
        self._attempts.append(attempt)
        logger.debug("Attempt recorded: student=%s, score=%s", attempt.student_name, attempt.score)
        return attempt

    # =========================================================================
    # Bills
    # =========================================================================

    def add_bill(self, data: BillCreate) -> TrainerBill:
        """Submit a trainer bill.

        The amount is the sum of the expenses and the invoice number is the
        next in sequence. New bills are listed first.

        Args:
            data: Bill payload.

        Returns:
            The stored bill, status PENDING.
        """
        bill = TrainerBill(
            id=self.ids.next_id("bill"),
            trainer_id=data.trainer_id,
            amount=sum(expense.amount for expense in data.expenses),
            expenses=tuple(data.expenses),
            date=data.date,
            status=BillStatus.PENDING,
            invoice_number=f"{self.settings.invoice_prefix}-{len(self._bills) + 1:03d}",
        )
        self._bills.insert(0, bill)
        logger.info("Bill added: id=%s, invoice=%s, amount=%.2f", bill.id, bill.invoice_number, bill.amount)
        return bill

    def update_bill_status(self, bill_id: str, status: BillStatus) -> TrainerBill | None:
        """Change a bill's status.

        Args:
            bill_id: Bill to update.
            status: New status.

        Returns:
            The updated bill, or None if no bill has that id.
        """
        for index, bill in enumerate(self._bills):
            if bill.id == bill_id:
                updated = bill.model_copy(update={"status": status})
                self._bills[index] = updated
                logger.info("Bill status updated: id=%s, status=%s", bill_id, status.value)
                return updated

        logger.debug("Bill status update skipped, no bill %s", bill_id)
        return None
