"""Application service: Record Sale use case.

Builds a bill from user input and hands it to the store.  All the
checks the store does not make happen here, before anything is
recorded:

1. Customer name present, at least one item.
2. Every item names an existing product/volume with a positive set
   count and a valid price.
3. The sets requested per variant, summed across the bill, fit in the
   stock on hand.
"""

from __future__ import annotations

from collections import Counter

from bevstock.application.checks import require_positive, require_text
from bevstock.application.dto import SaleDTO, SaleItemSpec
from bevstock.application.lookup import find_variant
from bevstock.application.show_sales import sale_to_dto
from bevstock.domain.exceptions import InsufficientStockError, ValidationError
from bevstock.domain.model.sale import Sale, SaleItem
from bevstock.domain.model.value_objects import Money
from bevstock.domain.service.inventory_store import InventoryStore


class RecordSaleHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        customer_name: str,
        item_specs: list[SaleItemSpec],
        customer_address: str = "",
        customer_phone: str = "",
        notes: str | None = None,
    ) -> SaleDTO:
        customer_name = require_text(customer_name, "Customer name")
        if not item_specs:
            raise ValidationError("A sale must contain at least one item")

        items: list[SaleItem] = []
        requested: Counter = Counter()

        for spec in item_specs:
            ref = find_variant(self._store, spec.product, spec.volume)
            sets = require_positive(spec.sets, "Sets")
            price = Money.of(spec.price_per_set)

            key = (ref.product.id, ref.variant.volume)
            requested[key] += sets
            if requested[key] > ref.variant.current_sets:
                raise InsufficientStockError(
                    f"Insufficient stock for {ref.product.name} {ref.variant.volume} "
                    f"(need {requested[key]}, only {ref.variant.current_sets} sets available)"
                )

            items.append(
                SaleItem(
                    product_id=ref.product.id,
                    product_name=ref.product.name,  # <-- name snapshot
                    volume=ref.variant.volume,
                    set_size=ref.variant.set_size,
                    sets_sold=sets,
                    price_per_set=price,
                    total_price=price * sets,
                )
            )

        total = Money.zero()
        for item in items:
            total = total + item.total_price

        sale = self._store.record_sale(
            Sale(
                customer_name=customer_name,
                customer_address=(customer_address or "").strip(),
                customer_phone=(customer_phone or "").strip(),
                items=tuple(items),
                total_amount=total,
                notes=notes or None,
            )
        )
        return sale_to_dto(sale)
