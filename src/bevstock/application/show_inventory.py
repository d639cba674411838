"""Application service: Show Inventory and Show Alerts use cases (queries)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bevstock.application.dto import AlertDTO, InventoryLineDTO, InventoryTotalsDTO
from bevstock.domain.model.state import VariantRef
from bevstock.domain.service.inventory_store import InventoryStore


@dataclass(frozen=True)
class InventoryOverviewDTO:
    lines: list[InventoryLineDTO]
    totals: InventoryTotalsDTO


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> InventoryOverviewDTO:
        lines = [
            InventoryLineDTO(
                product_id=product.id,
                product_name=product.name,
                volume=variant.volume,
                set_size=variant.set_size,
                current_sets=variant.current_sets,
                bottles=variant.bottles,
                threshold=variant.threshold,
                level=variant.stock_level.value,
            )
            for product in self._store.products
            for variant in product.variants
        ]
        totals = self._store.get_total_inventory_value()
        return InventoryOverviewDTO(
            lines=lines,
            totals=InventoryTotalsDTO(
                total_products=totals.total_products,
                total_variants=totals.total_variants,
                total_sets=totals.total_sets,
                low_stock_count=totals.low_stock_count,
                critical_stock_count=totals.critical_stock_count,
            ),
        )


class AlertSeverity(Enum):
    ALL = "all"
    CRITICAL = "critical"
    LOW = "low"


class AlertSort(Enum):
    URGENCY = "urgency"
    PRODUCT = "product"
    STOCK = "stock"


class ShowAlertsHandler:
    """Critical and low variants, optionally narrowed and reordered.

    *search* matches product name or volume, case-insensitively.  The
    default urgency order puts critical variants first, then the ones
    with the fewest sets.
    """

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        severity: AlertSeverity = AlertSeverity.ALL,
        search: str | None = None,
        sort: AlertSort = AlertSort.URGENCY,
    ) -> list[AlertDTO]:
        refs: list[VariantRef] = []
        if severity is not AlertSeverity.LOW:
            refs += self._store.get_critical_stock_variants()
        if severity is not AlertSeverity.CRITICAL:
            refs += self._store.get_low_stock_variants()

        term = (search or "").strip().lower()
        if term:
            refs = [
                r for r in refs
                if term in r.product.name.lower() or term in r.variant.volume.lower()
            ]

        if sort is AlertSort.PRODUCT:
            refs.sort(key=lambda r: r.product.name.casefold())
        elif sort is AlertSort.STOCK:
            refs.sort(key=lambda r: r.variant.current_sets)
        else:
            refs.sort(key=lambda r: (not r.variant.is_critical, r.variant.current_sets))
        return [self._to_dto(ref) for ref in refs]

    @staticmethod
    def _to_dto(ref: VariantRef) -> AlertDTO:
        return AlertDTO(
            product_id=ref.product.id,
            product_name=ref.product.name,
            volume=ref.variant.volume,
            current_sets=ref.variant.current_sets,
            threshold=ref.variant.threshold,
            level=ref.variant.stock_level.value,
        )
