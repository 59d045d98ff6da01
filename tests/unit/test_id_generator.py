# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for entity id minting."""

from datetime import datetime, timezone

from trainhub.domains.store.ids import IdGenerator
from trainhub.utils.datetime import epoch_millis


class TestIdGenerator:
    """Tests for IdGenerator."""

    def test_id_shape(self) -> None:
        """Test that ids are the prefix joined to the clock value."""
        ids = IdGenerator(clock=lambda: 1234)

        assert ids.next_id("mat") == "mat-1234"

    def test_same_millisecond_ids_differ(self) -> None:
        """Test that ids minted without the clock advancing are bumped."""
        ids = IdGenerator(clock=lambda: 1000)

        minted = [ids.next_id("mat") for _ in range(3)]

        assert minted == ["mat-1000", "mat-1001", "mat-1002"]

    def test_clock_moving_backwards_stays_monotonic(self) -> None:
        """Test that a clock step backwards never reuses a value."""
        ticks = iter([5000, 4000, 6000])
        ids = IdGenerator(clock=lambda: next(ticks))

        assert ids.next_id("bill") == "bill-5000"
        assert ids.next_id("bill") == "bill-5001"
        assert ids.next_id("bill") == "bill-6000"

    def test_prefixes_are_independent(self) -> None:
        """Test that each prefix keeps its own high-water mark."""
        ids = IdGenerator(clock=lambda: 1000)

        assert ids.next_id("mat") == "mat-1000"
        assert ids.next_id("sch") == "sch-1000"
        assert ids.next_id("mat") == "mat-1001"

    def test_default_clock_uses_epoch_millis(self) -> None:
        """Test that the default clock produces a current millisecond value."""
        before = epoch_millis()
        value = int(IdGenerator().next_id("col").split("-", 1)[1])
        after = epoch_millis()

        assert before <= value <= after


class TestEpochMillis:
    """Tests for the epoch_millis helper."""

    def test_aware_datetime(self) -> None:
        """Test conversion of a timezone-aware datetime."""
        dt = datetime(2024, 1, 1, tzinfo=timezone.utc)

        assert epoch_millis(dt) == 1_704_067_200_000

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        """Test that naive datetimes are read as UTC."""
        assert epoch_millis(datetime(2024, 1, 1)) == 1_704_067_200_000
