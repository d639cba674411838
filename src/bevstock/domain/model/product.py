"""Product aggregate and its volume variants.

A product (a flavor such as "Coca-Cola") owns an ordered tuple of
variants, one per packaging volume.  Stock is counted per variant in
*sets* (crates of ``set_size`` bottles).

Both classes are frozen: the inventory store replaces them wholesale on
every mutation, so a snapshot handed to a caller never changes under it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum


class StockLevel(Enum):
    CRITICAL = "CRITICAL"
    LOW = "LOW"
    HEALTHY = "HEALTHY"


@dataclass(frozen=True)
class ProductVariant:
    """One packaging size of a product, with its own stock and threshold."""

    volume: str
    set_size: int
    current_sets: int
    threshold: int

    @property
    def bottles(self) -> int:
        return self.current_sets * self.set_size

    @property
    def stock_level(self) -> StockLevel:
        """Critical at zero sets, low at or below the threshold."""
        if self.current_sets == 0:
            return StockLevel.CRITICAL
        if self.current_sets <= self.threshold:
            return StockLevel.LOW
        return StockLevel.HEALTHY

    @property
    def is_critical(self) -> bool:
        return self.stock_level is StockLevel.CRITICAL

    @property
    def is_low(self) -> bool:
        return self.stock_level is StockLevel.LOW

    def with_sets(self, current_sets: int) -> ProductVariant:
        return replace(self, current_sets=max(0, current_sets))


@dataclass(frozen=True)
class Product:
    """A flavor in the catalog.

    ``last_updated`` is ``None`` only for products that have not yet been
    handed to the store (``add_new_product`` stamps it).
    """

    id: str
    name: str
    color: str
    variants: tuple[ProductVariant, ...] = ()
    last_updated: datetime | None = None

    def find_variant(self, volume: str) -> ProductVariant | None:
        for variant in self.variants:
            if variant.volume == volume:
                return variant
        return None

    def has_volume(self, volume: str) -> bool:
        return self.find_variant(volume) is not None

    @property
    def total_sets(self) -> int:
        return sum(v.current_sets for v in self.variants)


_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Derive a product id from its display name ("Thums Up" -> "thums-up")."""
    return _WHITESPACE.sub("-", name.strip().lower())
