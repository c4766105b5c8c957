"""Blockchain synchronisation state and progress."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def is_synchronized(
    last_block_height: int,
    known_block_height: int,
    last_block_timestamp: Optional[datetime],
) -> bool:
    """Tell whether the wallet has reached the top known block.

    Without any block (no timestamp, or one not after the epoch) it is not.
    """
    if last_block_timestamp is None:
        return False
    any_block = int(last_block_timestamp.timestamp() * 1000) > 0
    return any_block and last_block_height == known_block_height


class SyncProgress:
    """Progress of synchronisation from the height where it started to the known top.

    The range starts empty, which means progress is unknown. The first update
    that finds the wallet behind fixes the start of the range.
    """

    def __init__(self) -> None:
        self.minimum = 0
        self.maximum = 0
        self.value = 0
        self._minimum_fixed = False

    def update(self, last_block_height: int, known_block_height: int) -> None:
        """Record the wallet's last block height and the network's known top height."""
        self.maximum = known_block_height
        if self.minimum > self.maximum:
            self.minimum = self.maximum
        self.value = last_block_height

        if not self._minimum_fixed and last_block_height < known_block_height:
            self.minimum = last_block_height
            if self.maximum < self.minimum:
                self.maximum = self.minimum
            self._minimum_fixed = True

    def fraction(self) -> Optional[float]:
        """Completed part between 0 and 1, or ``None`` while the range is empty."""
        span = self.maximum - self.minimum
        if span <= 0:
            return None
        done = (self.value - self.minimum) / span
        return min(1.0, max(0.0, done))