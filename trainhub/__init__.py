"""TrainHub Backend.

Role-based training management for administrators, trainers and students:
materials, schedules, AI-generated assessments, trainer applications,
billing and a leaderboard.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
