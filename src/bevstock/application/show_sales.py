"""Application service: recent and today's sales / deliveries (queries)."""

from __future__ import annotations

from dataclasses import dataclass

from bevstock.application.dto import IncomingDTO, SaleDTO, SaleLineDTO
from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.model.sale import Sale
from bevstock.domain.model.value_objects import Money
from bevstock.domain.service.inventory_store import InventoryStore

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


@dataclass(frozen=True)
class SalesOverviewDTO:
    sales: list[SaleDTO]
    count: int
    revenue: str


class ShowSalesHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def recent(self) -> list[SaleDTO]:
        return [sale_to_dto(s) for s in self._store.get_recent_sales()]

    def today(self) -> SalesOverviewDTO:
        sales = self._store.get_todays_sales()
        revenue = Money.zero()
        for sale in sales:
            revenue = revenue + sale.total_amount
        return SalesOverviewDTO(
            sales=[sale_to_dto(s) for s in reversed(sales)],
            count=len(sales),
            revenue=str(revenue),
        )


class ShowIncomingHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def recent(self) -> list[IncomingDTO]:
        return [incoming_to_dto(e) for e in self._store.get_recent_incoming()]

    def today(self) -> list[IncomingDTO]:
        return [incoming_to_dto(e) for e in reversed(self._store.get_todays_incoming())]


# --- Mapping ------------------------------------------------------------------


def sale_to_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,  # type: ignore[arg-type]
        customer_name=sale.customer_name,
        items=[
            SaleLineDTO(
                product_name=item.product_name,
                volume=item.volume,
                sets_sold=item.sets_sold,
                bottles=item.bottles,
                price_per_set=str(item.price_per_set),
                total_price=str(item.total_price),
            )
            for item in sale.items
        ],
        total_amount=str(sale.total_amount),
        notes=sale.notes,
        created_at=sale.timestamp.strftime(TIMESTAMP_FORMAT),  # type: ignore[union-attr]
    )


def incoming_to_dto(entry: IncomingEntry) -> IncomingDTO:
    return IncomingDTO(
        id=entry.id,  # type: ignore[arg-type]
        product_name=entry.product_name,
        volume=entry.volume,
        sets_received=entry.sets_received,
        bottles=entry.bottles,
        notes=entry.notes,
        created_at=entry.timestamp.strftime(TIMESTAMP_FORMAT),  # type: ignore[union-attr]
    )
