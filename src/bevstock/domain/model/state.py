"""The inventory snapshot and the read-side shapes built from it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.model.product import Product, ProductVariant
from bevstock.domain.model.sale import Sale

# Bumped whenever the persisted shape of any record changes.
SCHEMA_VERSION = 2


@dataclass(frozen=True)
class InventoryState:
    """Everything the store owns, as one immutable value.

    Sales and incoming history are kept in insertion order, which is
    also timestamp order.
    """

    products: tuple[Product, ...] = ()
    sales: tuple[Sale, ...] = ()
    incoming_history: tuple[IncomingEntry, ...] = ()

    def find_product(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None


class VariantRef(NamedTuple):
    product: Product
    variant: ProductVariant


@dataclass(frozen=True)
class InventoryTotals:
    total_products: int
    total_variants: int
    total_sets: int
    low_stock_count: int
    critical_stock_count: int
