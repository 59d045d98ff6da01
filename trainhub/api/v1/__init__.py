# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API v1 routes package.

This package contains all v1 API endpoint definitions.
Each module provides a FastAPI router for a specific domain.

Modules:
    auth: Session endpoints (login, logout, switch user, current user).
    users: User registration, role views and material assignment.
    materials: Material catalogue and assessment generation previews.
    assessments: Saved assessments and their fan-out to a course.
    schedules: Trainer teaching schedules.
    colleges: College directory.
    applications: Trainer applications and approval.
    attempts: Student attempts and the leaderboard.
    bills: Trainer expense bills.
"""

from fastapi import APIRouter

from trainhub.api.v1 import applications, assessments, attempts, auth, bills, colleges, materials, schedules, users

# Create the main v1 router
router = APIRouter(prefix="/api/v1")

# Include domain routers
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(materials.router, prefix="/materials", tags=["Materials"])
router.include_router(assessments.router, prefix="/assessments", tags=["Assessments"])
router.include_router(schedules.router, prefix="/schedules", tags=["Schedules"])
router.include_router(colleges.router, prefix="/colleges", tags=["Colleges"])
router.include_router(applications.router, prefix="/applications", tags=["Trainer Applications"])
router.include_router(attempts.router, prefix="/attempts", tags=["Attempts"])
router.include_router(bills.router, prefix="/bills", tags=["Billing"])

__all__ = ["router"]
