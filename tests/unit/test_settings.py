# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for application settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from trainhub.core.config.settings import (
    APISettings,
    AuthSettings,
    CORSSettings,
    LLMSettings,
    Settings,
    StoreSettings,
    clear_settings_cache,
    get_settings,
)


class TestLLMSettings:
    """Tests for LLMSettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = LLMSettings()

        assert settings.google_api_key is None
        assert settings.default_model == "gemini/gemini-2.5-flash"
        assert settings.request_timeout == 60.0
        assert settings.max_retries == 2
        assert settings.has_api_key is False

    def test_google_api_key_from_environment(self) -> None:
        """Test that GOOGLE_API_KEY is read."""
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "g-key"}, clear=True):
            settings = LLMSettings()

        assert settings.google_api_key.get_secret_value() == "g-key"
        assert settings.has_api_key is True

    def test_api_key_fallback(self) -> None:
        """Test that API_KEY is used when GOOGLE_API_KEY is absent."""
        with patch.dict(os.environ, {"API_KEY": "fallback"}, clear=True):
            settings = LLMSettings()

        assert settings.google_api_key.get_secret_value() == "fallback"

    def test_google_api_key_takes_precedence(self) -> None:
        """Test that GOOGLE_API_KEY wins over API_KEY."""
        env = {"GOOGLE_API_KEY": "primary", "API_KEY": "fallback"}
        with patch.dict(os.environ, env, clear=True):
            settings = LLMSettings()

        assert settings.google_api_key.get_secret_value() == "primary"

    def test_default_model_from_environment(self) -> None:
        """Test that LLM_DEFAULT_MODEL overrides the model."""
        with patch.dict(os.environ, {"LLM_DEFAULT_MODEL": "openai/gpt-4o-mini"}, clear=True):
            settings = LLMSettings()

        assert settings.default_model == "openai/gpt-4o-mini"

    def test_blank_key_is_not_configured(self) -> None:
        """Test that a whitespace key does not count as configured."""
        settings = LLMSettings(google_api_key="  ")

        assert settings.has_api_key is False


class TestStoreSettings:
    """Tests for StoreSettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = StoreSettings()

        assert settings.seed_file == Path("config/seed.yaml")
        assert settings.seed_on_startup is True
        assert settings.application_submit_delay == 0.5
        assert settings.default_trainer_password.get_secret_value() == "password"
        assert settings.invoice_prefix == "INV-2024"

    def test_loads_from_environment(self) -> None:
        """Test that settings load from STORE_ variables."""
        env = {
            "STORE_SEED_ON_STARTUP": "false",
            "STORE_APPLICATION_SUBMIT_DELAY": "0",
            "STORE_INVOICE_PREFIX": "INV-2025",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = StoreSettings()

        assert settings.seed_on_startup is False
        assert settings.application_submit_delay == 0
        assert settings.invoice_prefix == "INV-2025"

    def test_negative_delay_rejected(self) -> None:
        """Test that a negative delay is invalid."""
        with pytest.raises(ValueError):
            StoreSettings(application_submit_delay=-1)


class TestAuthSettings:
    """Tests for AuthSettings."""

    def test_loads_from_environment(self) -> None:
        """Test that AUTH_LOGIN_DELAY is read."""
        with patch.dict(os.environ, {"AUTH_LOGIN_DELAY": "0.1"}, clear=True):
            settings = AuthSettings()

        assert settings.login_delay == 0.1


class TestCORSSettings:
    """Tests for CORSSettings."""

    def test_origins_list_parsing(self) -> None:
        """Test that origins string is parsed into a list."""
        settings = CORSSettings(origins="http://a.example, http://b.example,")

        assert settings.origins_list == ["http://a.example", "http://b.example"]


class TestAPISettings:
    """Tests for APISettings."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = APISettings()

        assert settings.port == 8000
        assert settings.reload is False


class TestSettings:
    """Tests for main Settings class."""

    def test_environment_properties(self) -> None:
        """Test is_development and is_production."""
        development = Settings(environment="development")
        production = Settings(environment="production", debug=False)

        assert development.is_development is True
        assert development.is_production is False
        assert production.is_production is True

    def test_production_rejects_debug(self) -> None:
        """Test that debug mode is refused in production."""
        with pytest.raises(ValueError) as exc_info:
            Settings(environment="production", debug=True)

        assert "Debug mode must be disabled in production" in str(exc_info.value)

    def test_subsettings_are_built(self) -> None:
        """Test that every subsetting is present."""
        settings = Settings()

        assert isinstance(settings.llm, LLMSettings)
        assert isinstance(settings.store, StoreSettings)
        assert isinstance(settings.auth, AuthSettings)
        assert isinstance(settings.cors, CORSSettings)
        assert isinstance(settings.api, APISettings)


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        """Test that get_settings returns the same object until cleared."""
        clear_settings_cache()
        try:
            first = get_settings()
            second = get_settings()
            assert first is second

            clear_settings_cache()
            assert get_settings() is not first
        finally:
            clear_settings_cache()
