# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for AuthService."""

import pytest

from trainhub.core.config.settings import AuthSettings
from trainhub.domains.auth import AuthService, InvalidCredentialsError
from trainhub.domains.store import DomainStore
from trainhub.models import Role


@pytest.fixture
def auth(seeded_store: DomainStore, auth_settings: AuthSettings) -> AuthService:
    """Create an AuthService over the seeded store."""
    return AuthService(seeded_store, auth_settings)


class TestLogin:
    """Tests for login and logout."""

    @pytest.mark.asyncio
    async def test_login_with_valid_credentials(self, auth: AuthService) -> None:
        """Test that matching credentials sign the user in."""
        user = await auth.login("admin@trainhub.dev", "admin123")

        assert user.role == Role.ADMIN
        assert auth.current_user_id == user.id
        assert auth.current_user == user

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, auth: AuthService) -> None:
        """Test that a wrong password raises and leaves no session."""
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth.login("admin@trainhub.dev", "wrong")

        assert str(exc_info.value) == "Invalid credentials"
        assert auth.current_user is None

    @pytest.mark.asyncio
    async def test_login_with_unknown_email(self, auth: AuthService) -> None:
        """Test that an unknown email raises."""
        with pytest.raises(InvalidCredentialsError):
            await auth.login("nobody@trainhub.dev", "admin123")

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, auth: AuthService) -> None:
        """Test that logout forgets the current user."""
        await auth.login("admin@trainhub.dev", "admin123")

        auth.logout()

        assert auth.current_user_id is None
        assert auth.current_user is None


class TestSwitchUser:
    """Tests for user switching."""

    def test_switch_to_known_user(self, auth: AuthService) -> None:
        """Test that switching needs no credentials."""
        user = auth.switch_user("student-1")

        assert user is not None
        assert auth.current_user.name == "Kavya Nair"

    @pytest.mark.asyncio
    async def test_switch_to_unknown_user_keeps_session(self, auth: AuthService) -> None:
        """Test that an unknown id leaves the session unchanged."""
        await auth.login("admin@trainhub.dev", "admin123")

        assert auth.switch_user("student-missing") is None
        assert auth.current_user_id == "admin-1"

    def test_current_user_reflects_store_updates(
        self, auth: AuthService, seeded_store: DomainStore
    ) -> None:
        """Test that the session reads the latest version of the user."""
        auth.switch_user("student-2")

        seeded_store.assign_materials_to_student("student-2", ["mat-2"])

        assert auth.current_user.assigned_material_ids == ("mat-2",)
