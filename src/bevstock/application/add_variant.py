"""Application service: Add Variant use case."""

from __future__ import annotations

from bevstock.application.checks import (
    require_non_negative,
    require_positive,
    require_text,
)
from bevstock.application.lookup import find_product
from bevstock.domain.exceptions import DuplicateVariantError
from bevstock.domain.model.product import ProductVariant
from bevstock.domain.service.inventory_store import InventoryStore


class AddVariantHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        product: str,
        volume: str,
        set_size: int,
        current_sets: int,
        threshold: int,
    ) -> ProductVariant:
        owner = find_product(self._store, product)
        volume = require_text(volume, "Volume")
        if owner.has_volume(volume):
            raise DuplicateVariantError(f"{owner.name} already has a {volume} variant")

        variant = ProductVariant(
            volume=volume,
            set_size=require_positive(set_size, "Set size"),
            current_sets=require_non_negative(current_sets, "Current sets"),
            threshold=require_non_negative(threshold, "Threshold"),
        )
        self._store.add_new_variant(owner.id, variant)
        return variant
