"""Application service: Record Incoming Stock use case.

A delivery usually brings several variants at once.  Every entry is
checked before the first one is recorded, then each is recorded as its
own store command (there is no rollback across entries).
"""

from __future__ import annotations

from bevstock.application.checks import require_positive
from bevstock.application.dto import IncomingDTO, IncomingSpec
from bevstock.application.lookup import find_variant
from bevstock.application.show_sales import incoming_to_dto
from bevstock.domain.exceptions import ValidationError
from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.service.inventory_store import InventoryStore


class RecordIncomingHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, specs: list[IncomingSpec]) -> list[IncomingDTO]:
        if not specs:
            raise ValidationError("Add at least one incoming entry")

        # Phase 1: resolve and validate everything
        entries: list[IncomingEntry] = []
        for spec in specs:
            ref = find_variant(self._store, spec.product, spec.volume)
            entries.append(
                IncomingEntry(
                    product_id=ref.product.id,
                    product_name=ref.product.name,
                    volume=ref.variant.volume,
                    set_size=ref.variant.set_size,
                    sets_received=require_positive(spec.sets, "Sets received"),
                    notes=spec.notes or None,
                )
            )

        # Phase 2: record
        return [incoming_to_dto(self._store.record_incoming(e)) for e in entries]
