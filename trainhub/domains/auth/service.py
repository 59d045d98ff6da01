# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Login session over the domain store's users.

TrainHub keeps a single current-user session per process. Credentials are
compared in plaintext against the stored users after a simulated network
delay; there is no hashing and no token.

Example:
    >>> auth = AuthService(store, AuthSettings(login_delay=0))
    >>> user = await auth.login("admin@trainhub.dev", "admin123")
    >>> auth.current_user.role
    <Role.ADMIN: 'ADMIN'>
"""

import asyncio
import logging

from trainhub.core.config.settings import AuthSettings
from trainhub.domains.store import DomainStore
from trainhub.models import User

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Base exception for authentication errors."""

    pass


class InvalidCredentialsError(AuthenticationError):
    """Raised when no user matches the email and password."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class AuthService:
    """Tracks which user is signed in.

    The current user is resolved against the store on every read, so
    updates to the user (new assignments, for instance) are always visible.

    Attributes:
        store: Domain store holding the users.
        settings: Login settings.
    """

    def __init__(self, store: DomainStore, settings: AuthSettings | None = None) -> None:
        """Initialize the auth service.

        Args:
            store: Domain store holding the users.
            settings: Login settings. Defaults to AuthSettings().
        """
        self.store = store
        self.settings = settings or AuthSettings()
        self._current_user_id: str | None = None

    @property
    def current_user_id(self) -> str | None:
        return self._current_user_id

    @property
    def current_user(self) -> User | None:
        """The signed-in user, or None."""
        if self._current_user_id is None:
            return None
        return self.store.get_user(self._current_user_id)

    async def login(self, email: str, password: str) -> User:
        """Sign in with email and password.

        Args:
            email: User email, matched exactly.
            password: Plaintext password, matched exactly.

        Returns:
            The signed-in user.

        Raises:
            InvalidCredentialsError: If no user matches both values.
        """
        await asyncio.sleep(self.settings.login_delay)

        user = next(
            (u for u in self.store.users if u.email == email and u.password == password),
            None,
        )
        if user is None:
            logger.info("Login failed: email=%s", email)
            raise InvalidCredentialsError()

        self._current_user_id = user.id
        logger.info("Login succeeded: user=%s, role=%s", user.id, user.role.value)
        return user

    def switch_user(self, user_id: str) -> User | None:
        """Impersonate another user without credentials.

        Args:
            user_id: User to switch to.

        Returns:
            The new current user, or None (session unchanged) if unknown.
        """
        user = self.store.get_user(user_id)
        if user is None:
            return None

        self._current_user_id = user.id
        logger.info("Switched user: user=%s", user.id)
        return user

    def logout(self) -> None:
        """End the current session."""
        self._current_user_id = None
