# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication domain package.

Plaintext login, user switching and logout over the domain store's users.
"""

from trainhub.domains.auth.service import (
    AuthenticationError,
    AuthService,
    InvalidCredentialsError,
)

__all__ = [
    "AuthService",
    "AuthenticationError",
    "InvalidCredentialsError",
]
