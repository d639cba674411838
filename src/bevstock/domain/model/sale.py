"""Sale records.

A sale is append-only history.  Each SaleItem captures a snapshot of
the product name and set size at the time of sale, so renaming a
product later does not rewrite old bills.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from bevstock.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleItem:

    product_id: str
    product_name: str  # snapshot
    volume: str
    set_size: int  # snapshot
    sets_sold: int
    price_per_set: Money
    total_price: Money

    @property
    def bottles(self) -> int:
        return self.sets_sold * self.set_size


@dataclass(frozen=True)
class Sale:
    """A recorded bill.

    ``id`` and ``timestamp`` are ``None`` on drafts; the store assigns
    both when the sale is recorded.  ``total_amount`` is whatever the
    caller computed and is never re-derived from the items.
    """

    customer_name: str
    items: tuple[SaleItem, ...]
    total_amount: Money
    customer_address: str = ""
    customer_phone: str = ""
    notes: str | None = None
    id: str | None = None
    timestamp: datetime | None = None

    @property
    def total_sets(self) -> int:
        return sum(item.sets_sold for item in self.items)

    @property
    def total_bottles(self) -> int:
        return sum(item.bottles for item in self.items)
