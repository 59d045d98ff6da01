# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Core package for TrainHub.

This package contains cross-cutting infrastructure:
- config: Application configuration and settings
- intelligence: LLM access through LiteLLM
"""
