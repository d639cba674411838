"""Abstract repository for the inventory snapshot.

Defined in the domain layer so the store never depends on
infrastructure.  The whole snapshot is read and written as one blob.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bevstock.domain.model.state import InventoryState


class StateRepository(ABC):

    @abstractmethod
    def load(self) -> InventoryState | None:
        """Return the persisted snapshot, or None if nothing was saved yet."""

    @abstractmethod
    def save(self, state: InventoryState) -> None:
        """Replace the persisted snapshot."""
