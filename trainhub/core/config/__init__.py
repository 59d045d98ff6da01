# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for TrainHub.

Pydantic-based settings loaded from environment variables (and an optional
.env file), grouped by concern.

Example:
    >>> from trainhub.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.store.invoice_prefix)
    'INV-2024'
"""

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

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Subsettings
    "LLMSettings",
    "StoreSettings",
    "AuthSettings",
    "CORSSettings",
    "APISettings",
]
