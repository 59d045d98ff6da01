# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Assessment generation domain package.

Schema-constrained test and assignment generation from material content.
"""

from trainhub.domains.generation.schemas import (
    GeneratedAssignment,
    GeneratedAssignmentQuestion,
    GeneratedTest,
    GeneratedTestQuestion,
    GenerationFailure,
    GenerationSuccess,
    parse_assignment_response,
    parse_test_response,
)
from trainhub.domains.generation.service import (
    GenerationConfigError,
    GenerationError,
    GenerationGateway,
    GenerationServiceError,
)

__all__ = [
    "GenerationGateway",
    "GenerationServiceError",
    "GenerationConfigError",
    "GenerationError",
    "GeneratedTest",
    "GeneratedTestQuestion",
    "GeneratedAssignment",
    "GeneratedAssignmentQuestion",
    "GenerationSuccess",
    "GenerationFailure",
    "parse_test_response",
    "parse_assignment_response",
]
