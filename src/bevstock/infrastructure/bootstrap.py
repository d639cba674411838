"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from bevstock.domain.service.inventory_store import InventoryStore
from bevstock.infrastructure.export.xlsx_writer import XlsxActivityWriter
from bevstock.infrastructure.persistence.json_state_repository import (
    JsonStateRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

STATE_FILE_NAME = "inventory.json"


def state_repository(data_dir: Path | None = None) -> JsonStateRepository:
    return JsonStateRepository((data_dir or DEFAULT_DATA_DIR) / STATE_FILE_NAME)


def inventory_store(data_dir: Path | None = None) -> InventoryStore:
    """Load the saved inventory, seeding the default catalog on first run."""
    store = InventoryStore(state_repository(data_dir))
    store.load()
    store.initialize_products()
    return store


def activity_writer() -> XlsxActivityWriter:
    return XlsxActivityWriter()
