"""Data Transfer Objects: plain containers that cross layer boundaries.

Inputs are what a user typed; outputs are pre-formatted for display so
the CLI never touches domain objects directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: one line of a bill."""

    product: str  # product id or name
    volume: str
    sets: int
    price_per_set: str


@dataclass(frozen=True)
class IncomingSpec:
    """Input: one delivered variant."""

    product: str
    volume: str
    sets: int
    notes: str | None = None


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    volume: str
    set_size: int
    current_sets: int
    bottles: int
    threshold: int
    level: str


@dataclass(frozen=True)
class InventoryTotalsDTO:
    total_products: int
    total_variants: int
    total_sets: int
    low_stock_count: int
    critical_stock_count: int


@dataclass(frozen=True)
class AlertDTO:
    product_id: str
    product_name: str
    volume: str
    current_sets: int
    threshold: int
    level: str


@dataclass(frozen=True)
class SaleLineDTO:
    product_name: str
    volume: str
    sets_sold: int
    bottles: int
    price_per_set: str
    total_price: str


@dataclass(frozen=True)
class SaleDTO:
    id: str
    customer_name: str
    items: list[SaleLineDTO]
    total_amount: str
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class IncomingDTO:
    id: str
    product_name: str
    volume: str
    sets_received: int
    bottles: int
    notes: str | None
    created_at: str
