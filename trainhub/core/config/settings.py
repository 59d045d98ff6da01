# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for TrainHub.
Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from trainhub.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Self

from pydantic import AliasChoices, Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """LLM provider configuration using LiteLLM.

    Assessment generation targets Google Gemini by default. LiteLLM routes
    the request based on the model prefix, so any provider LiteLLM supports
    can be configured through LLM_DEFAULT_MODEL.

    Attributes:
        google_api_key: API key for the generative-content service.
        default_model: Model identifier in LiteLLM format.
        request_timeout: Request timeout in seconds.
        max_retries: Maximum retry attempts.
        temperature: Sampling temperature for generation requests.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    google_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "API_KEY"),
    )
    default_model: str = Field(
        default="gemini/gemini-2.5-flash",
        validation_alias="LLM_DEFAULT_MODEL",
    )

    request_timeout: float = 60.0
    max_retries: int = 2
    temperature: float = 0.4

    @property
    def has_api_key(self) -> bool:
        """Check whether a non-blank API key is configured."""
        if self.google_api_key is None:
            return False
        return bool(self.google_api_key.get_secret_value().strip())


class StoreSettings(BaseSettings):
    """In-memory domain store configuration.

    Attributes:
        seed_file: YAML file with the mock data loaded at startup.
        seed_on_startup: Whether the API seeds the store when it starts.
        application_submit_delay: Simulated network delay for trainer
            application submission, in seconds.
        default_trainer_password: Password given to trainers created by
            application approval.
        invoice_prefix: Prefix of generated invoice numbers.
    """

    model_config = SettingsConfigDict(
        env_prefix="STORE_",
        extra="ignore",
    )

    seed_file: Path = Path("config/seed.yaml")
    seed_on_startup: bool = True
    application_submit_delay: float = Field(default=0.5, ge=0)
    default_trainer_password: SecretStr = SecretStr("password")
    invoice_prefix: str = "INV-2024"


class AuthSettings(BaseSettings):
    """Login configuration.

    Attributes:
        login_delay: Simulated network delay for login, in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        extra="ignore",
    )

    login_delay: float = Field(default=0.5, ge=0)


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        origins: Comma-separated list of allowed origins.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class APISettings(BaseSettings):
    """API server configuration.

    Attributes:
        host: Host to bind to.
        port: Port to listen on.
        reload: Whether to enable auto-reload.
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        llm: LLM provider settings.
        store: Domain store settings.
        auth: Login settings.
        cors: CORS settings.
        api: API server settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    # Subsettings - loaded with their own env prefixes
    llm: LLMSettings = Field(default_factory=LLMSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)
    api: APISettings = Field(default_factory=APISettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production with debug enabled.
        """
        if self.environment == "production" and self.debug:
            raise ValueError(
                "Debug mode must be disabled in production. Set DEBUG=false."
            )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
