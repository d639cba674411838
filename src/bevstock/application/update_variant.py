"""Application services: threshold, variant edit and variant delete."""

from __future__ import annotations

from bevstock.application.checks import (
    require_non_negative,
    require_positive,
    require_text,
)
from bevstock.application.lookup import find_variant
from bevstock.domain.exceptions import DuplicateVariantError, ValidationError
from bevstock.domain.model.product import ProductVariant
from bevstock.domain.service.inventory_store import InventoryStore


class UpdateThresholdHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product: str, volume: str, threshold: int) -> ProductVariant:
        ref = find_variant(self._store, product, volume)
        self._store.update_threshold(
            ref.product.id, volume, require_non_negative(threshold, "Threshold")
        )
        return self._store.get_product_variant(ref.product.id, volume).variant


class UpdateVariantHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        product: str,
        volume: str,
        new_volume: str | None = None,
        set_size: int | None = None,
        current_sets: int | None = None,
        threshold: int | None = None,
    ) -> ProductVariant:
        """Edit any subset of a variant's fields.

        A stock correction through ``current_sets`` does not create a
        sale or a delivery record.
        """
        ref = find_variant(self._store, product, volume)

        changes: dict[str, object] = {}
        if new_volume is not None:
            new_volume = require_text(new_volume, "Volume")
            if new_volume != volume and ref.product.has_volume(new_volume):
                raise DuplicateVariantError(
                    f"{ref.product.name} already has a {new_volume} variant"
                )
            changes["volume"] = new_volume
        if set_size is not None:
            changes["set_size"] = require_positive(set_size, "Set size")
        if current_sets is not None:
            changes["current_sets"] = require_non_negative(current_sets, "Current sets")
        if threshold is not None:
            changes["threshold"] = require_non_negative(threshold, "Threshold")
        if not changes:
            raise ValidationError("Nothing to update")

        self._store.update_variant(ref.product.id, volume, **changes)
        return self._store.get_product_variant(
            ref.product.id, changes.get("volume", volume)
        ).variant


class DeleteVariantHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product: str, volume: str) -> ProductVariant:
        ref = find_variant(self._store, product, volume)
        self._store.delete_variant(ref.product.id, volume)
        return ref.variant
