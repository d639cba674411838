"""Incoming stock entries: one delivery of one variant."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IncomingEntry:

    product_id: str
    product_name: str  # snapshot
    volume: str
    set_size: int  # snapshot
    sets_received: int
    notes: str | None = None
    id: str | None = None
    timestamp: datetime | None = None

    @property
    def bottles(self) -> int:
        return self.sets_received * self.set_size
