# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Seed data loading for the domain store.

The mock data a fresh process starts with lives in a YAML file
(config/seed.yaml by default). The file is parsed with PyYAML and validated
into SeedData before it reaches the store.

Example:
    >>> from pathlib import Path
    >>> from trainhub.domains.store.seed import load_seed_file
    >>> seed = load_seed_file(Path("config/seed.yaml"))
    >>> len(seed.users)
    6
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from trainhub.models import (
    Assessment,
    College,
    Material,
    Schedule,
    StudentAttempt,
    TrainerApplication,
    TrainerBill,
    User,
)


class SeedLoadError(Exception):
    """Raised when a seed file cannot be loaded, parsed or validated."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize SeedLoadError.

        Args:
            path: Path to the seed file that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load seed file '{path}': {reason}")


class SeedData(BaseModel):
    """Initial contents of every store collection."""

    users: list[User] = Field(default_factory=list)
    materials: list[Material] = Field(default_factory=list)
    schedules: list[Schedule] = Field(default_factory=list)
    applications: list[TrainerApplication] = Field(default_factory=list)
    assessments: list[Assessment] = Field(default_factory=list)
    student_attempts: list[StudentAttempt] = Field(default_factory=list)
    bills: list[TrainerBill] = Field(default_factory=list)
    colleges: list[College] = Field(default_factory=list)


def load_seed_file(path: Path) -> SeedData:
    """Load and validate a seed file.

    Args:
        path: Path to the YAML seed file.

    Returns:
        Validated seed data. An empty file yields empty collections.

    Raises:
        SeedLoadError: If the file doesn't exist, cannot be read, contains
            invalid YAML, or does not match the entity schemas.
    """
    if not path.exists():
        raise SeedLoadError(path, "File does not exist")

    if not path.is_file():
        raise SeedLoadError(path, "Path is not a file")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedLoadError(path, f"Cannot read file: {e}") from e

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SeedLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return SeedData()

    if not isinstance(parsed, dict):
        raise SeedLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    try:
        return SeedData.model_validate(parsed)
    except ValidationError as e:
        raise SeedLoadError(path, f"Invalid seed data: {e}") from e
