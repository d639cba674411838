"""Application service: Add Product use case."""

from __future__ import annotations

from bevstock.application.checks import (
    require_non_negative,
    require_positive,
    require_text,
)
from bevstock.domain.exceptions import ValidationError
from bevstock.domain.model.product import Product, ProductVariant, slugify
from bevstock.domain.service.inventory_store import InventoryStore

DEFAULT_COLOR = "from-blue-500 to-blue-600"


class AddProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        name: str,
        volume: str,
        set_size: int,
        current_sets: int,
        threshold: int,
        color: str = DEFAULT_COLOR,
    ) -> Product:
        """Add a new flavor with its first volume variant.

        The id is derived from the name, so two flavors whose names
        differ only in case or spacing collide and are rejected.
        """
        name = require_text(name, "Product name")
        variant = ProductVariant(
            volume=require_text(volume, "Volume"),
            set_size=require_positive(set_size, "Set size"),
            current_sets=require_non_negative(current_sets, "Current sets"),
            threshold=require_non_negative(threshold, "Threshold"),
        )

        product_id = slugify(name)
        if self._store.state.find_product(product_id) is not None:
            raise ValidationError(f"Product '{name}' already exists")

        self._store.add_new_product(
            Product(id=product_id, name=name, color=color, variants=(variant,))
        )
        return self._store.state.find_product(product_id)
