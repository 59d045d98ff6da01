# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test types:
- Unit tests
- Integration tests
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from trainhub.core.config.settings import (
    AuthSettings,
    LLMSettings,
    Settings,
    StoreSettings,
)
from trainhub.core.intelligence.llm import LLMClient, LLMResponse
from trainhub.domains.store import DomainStore, IdGenerator, load_seed_file

SEED_FILE = Path(__file__).resolve().parents[1] / "config" / "seed.yaml"

FIXED_MILLIS = 1_720_000_000_000


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (in-process HTTP)"
    )


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def store_settings() -> StoreSettings:
    """Store settings with no simulated delay and no seeding."""
    return StoreSettings(
        seed_file=SEED_FILE,
        seed_on_startup=False,
        application_submit_delay=0,
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with no simulated delay."""
    return AuthSettings(login_delay=0)


@pytest.fixture
def llm_settings() -> LLMSettings:
    """LLM settings with a test API key."""
    return LLMSettings(google_api_key="test-key", default_model="gemini/test-model")


@pytest.fixture
def llm_settings_without_key() -> LLMSettings:
    """LLM settings with no API key configured."""
    return LLMSettings(google_api_key=None, default_model="gemini/test-model")


@pytest.fixture
def settings(
    store_settings: StoreSettings,
    auth_settings: AuthSettings,
    llm_settings: LLMSettings,
) -> Settings:
    """Application settings suitable for tests."""
    return Settings(
        environment="development",
        debug=True,
        log_level="DEBUG",
        store=store_settings,
        auth=auth_settings,
        llm=llm_settings,
    )


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """A millisecond clock that never advances."""
    return lambda: FIXED_MILLIS


@pytest.fixture
def store(store_settings: StoreSettings, fixed_clock: Callable[[], int]) -> DomainStore:
    """Empty store whose clock never advances."""
    return DomainStore(settings=store_settings, id_generator=IdGenerator(fixed_clock))


@pytest.fixture
def seeded_store(store_settings: StoreSettings, fixed_clock: Callable[[], int]) -> DomainStore:
    """Store loaded with the bundled seed data."""
    return DomainStore(
        settings=store_settings,
        id_generator=IdGenerator(fixed_clock),
        seed=load_seed_file(SEED_FILE),
    )


# =============================================================================
# LLM Fixtures
# =============================================================================


@pytest.fixture
def mock_llm_client() -> MagicMock:
    """LLM client whose complete() is an AsyncMock.

    Set ``mock_llm_client.complete.return_value`` (or use
    ``llm_reply``) to control the raw response text.
    """
    client = MagicMock(spec=LLMClient)
    client.complete = AsyncMock()
    return client


@pytest.fixture
def llm_reply() -> Callable[[str], LLMResponse]:
    """Build an LLMResponse carrying the given content."""

    def _reply(content: str) -> LLMResponse:
        return LLMResponse(content=content, model="gemini/test-model")

    return _reply
