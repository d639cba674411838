"""Application services: Update Product and Delete Product use cases."""

from __future__ import annotations

from bevstock.application.checks import require_text
from bevstock.application.lookup import find_product
from bevstock.domain.exceptions import ValidationError
from bevstock.domain.model.product import Product
from bevstock.domain.service.inventory_store import InventoryStore


class UpdateProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        product: str,
        name: str | None = None,
        color: str | None = None,
    ) -> Product:
        """Rename a product and/or change its color.

        The id stays the same.  Existing sales and deliveries keep the
        old name; they captured a snapshot when they were recorded.
        """
        target = find_product(self._store, product)

        changes = {}
        if name is not None:
            changes["name"] = require_text(name, "Product name")
        if color is not None:
            changes["color"] = require_text(color, "Color")
        if not changes:
            raise ValidationError("Nothing to update")

        self._store.update_product(target.id, **changes)
        return self._store.state.find_product(target.id)


class DeleteProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, product: str) -> Product:
        """Remove a product and all its variants.  History is kept."""
        target = find_product(self._store, product)
        self._store.delete_product(target.id)
        return target
