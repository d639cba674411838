"""Per-invocation state shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from bevstock.domain.exceptions import DomainException
from bevstock.domain.service.inventory_store import InventoryStore
from bevstock.infrastructure import bootstrap


class AppContext:
    """Holds the data directory and builds the store on first use."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir
        self._store: InventoryStore | None = None

    @property
    def store(self) -> InventoryStore:
        if self._store is None:
            try:
                self._store = bootstrap.inventory_store(self.data_dir)
            except DomainException as exc:
                raise click.ClickException(str(exc))
        return self._store
