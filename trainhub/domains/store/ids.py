# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Entity id minting.

Ids have the shape ``<prefix>-<millisecond timestamp>``. Each prefix keeps
its own high-water mark so two ids minted within the same millisecond (or
after the clock steps backwards) still differ: the second one is bumped to
``last + 1``.
"""

from collections.abc import Callable

from trainhub.utils.datetime import epoch_millis


class IdGenerator:
    """Monotonic, per-prefix id generator.

    Attributes:
        clock: Callable returning the current time in epoch milliseconds.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        """Initialize the generator.

        Args:
            clock: Millisecond clock. Defaults to the system UTC clock.
        """
        self.clock = clock or epoch_millis
        self._last: dict[str, int] = {}

    def next_id(self, prefix: str) -> str:
        """Mint the next id for a prefix.

        Args:
            prefix: Collection prefix such as ``mat`` or ``bill``.

        Returns:
            A new id, unique among ids minted by this generator for the prefix.
        """
        value = self.clock()
        last = self._last.get(prefix)
        if last is not None and value <= last:
            value = last + 1
        self._last[prefix] = value
        return f"{prefix}-{value}"
