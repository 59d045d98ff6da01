# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for TrainHub.

All Python datetimes produced by the application are timezone-aware UTC,
so attempt timestamps and generated ids never mix naive and aware values.

Usage:
------
    from trainhub.utils.datetime import utc_now

    # For Pydantic model defaults
    timestamp: datetime = Field(default_factory=utc_now)
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def epoch_millis(dt: datetime | None = None) -> int:
    """Milliseconds since the Unix epoch.

    Args:
        dt: Datetime to convert. Naive values are treated as UTC.
            Defaults to the current time.

    Returns:
        Integer millisecond timestamp.
    """
    if dt is None:
        dt = utc_now()
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)
