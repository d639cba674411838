"""Resolve user-supplied product/volume references against the store."""

from __future__ import annotations

from bevstock.domain.exceptions import EntityNotFoundError
from bevstock.domain.model.product import Product
from bevstock.domain.model.state import VariantRef
from bevstock.domain.service.inventory_store import InventoryStore


def find_product(store: InventoryStore, product: str) -> Product:
    """Look a product up by id, falling back to a case-insensitive name match."""
    found = store.state.find_product(product)
    if found is not None:
        return found
    for candidate in store.products:
        if candidate.name.lower() == product.strip().lower():
            return candidate
    raise EntityNotFoundError(f"Product not found: '{product}'")


def find_variant(store: InventoryStore, product: str, volume: str) -> VariantRef:
    owner = find_product(store, product)
    ref = store.get_product_variant(owner.id, volume)
    if ref is None:
        raise EntityNotFoundError(f"{owner.name} has no {volume} variant")
    return ref
