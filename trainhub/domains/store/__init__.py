# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain store package.

This package provides the in-memory store that owns every TrainHub entity:
- DomainStore: collections, mutations and derived views
- IdGenerator: per-prefix monotonic id minting
- Seed loading from YAML
"""

import logging

from trainhub.core.config.settings import StoreSettings
from trainhub.domains.store.ids import IdGenerator
from trainhub.domains.store.seed import SeedData, SeedLoadError, load_seed_file
from trainhub.domains.store.service import DomainStore

logger = logging.getLogger(__name__)


def build_store(settings: StoreSettings) -> DomainStore:
    """Create a store, seeded from the configured file when enabled.

    A missing or invalid seed file is logged and the store starts empty.

    Args:
        settings: Store settings.

    Returns:
        A ready DomainStore.
    """
    if not settings.seed_on_startup:
        return DomainStore(settings=settings)

    try:
        seed = load_seed_file(settings.seed_file)
    except SeedLoadError as e:
        logger.warning("Starting with an empty store: %s", str(e))
        return DomainStore(settings=settings)

    return DomainStore(settings=settings, seed=seed)


__all__ = [
    "DomainStore",
    "IdGenerator",
    "SeedData",
    "SeedLoadError",
    "build_store",
    "load_seed_file",
]
