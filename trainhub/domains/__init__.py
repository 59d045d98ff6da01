# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for TrainHub.

Domains:
    store: In-memory domain store (users, materials, schedules, bills, ...).
    auth: Login session over the store's users.
    generation: LLM-backed test and assignment generation.

The store and the generation gateway do not import each other. Callers
sequence them: generate, then add_assessment, then assign_assessment_to_course.
"""
