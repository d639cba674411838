"""Domain service: the Inventory Store.

The store is the single source of truth for products, sales and
incoming deliveries.  It owns one immutable ``InventoryState``; every
command builds a complete new snapshot and swaps it in with a single
assignment, then hands the snapshot to the repository.  Readers
therefore never see a half-applied mutation (a sale is appended in the
same step its stock is deducted).

The store trusts its caller.  Commands aimed at an unknown product or
volume are silent no-ops, and a sale larger than the stock on hand
floors the variant at zero instead of being rejected.  Validation lives
in the application handlers.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import fields, replace
from datetime import datetime
from typing import Callable, Iterable, Sequence

from bevstock.domain.model.catalog import default_catalog
from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.model.product import Product, ProductVariant
from bevstock.domain.model.sale import Sale
from bevstock.domain.model.state import InventoryState, InventoryTotals, VariantRef
from bevstock.domain.repository.state_repository import StateRepository

logger = logging.getLogger(__name__)

RECENT_LIMIT = 10

_PRODUCT_FIELDS = frozenset({"name", "color"})
_VARIANT_FIELDS = frozenset(f.name for f in fields(ProductVariant))


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _next_record_id(records: Sequence[Sale | IncomingEntry], now: datetime) -> str:
    """Millisecond timestamp id, bumped past the last one if they collide."""
    candidate = int(now.timestamp() * 1000)
    last_id = records[-1].id if records else None
    if last_id is not None and last_id.isdigit():
        candidate = max(candidate, int(last_id) + 1)
    return str(candidate)


class InventoryStore:

    def __init__(
        self,
        repository: StateRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repository = repository
        self._clock = clock or _local_now
        self._state = InventoryState()

    # --- Lifecycle ------------------------------------------------------------

    def load(self) -> None:
        """Replace the in-memory state with the persisted snapshot, if any."""
        state = self._repository.load()
        if state is None:
            logger.info("No saved inventory found, starting empty")
            return
        self._state = state
        logger.info(
            "Loaded inventory: %d products, %d sales, %d incoming entries",
            len(state.products), len(state.sales), len(state.incoming_history),
        )

    def initialize_products(self) -> None:
        """Seed the default catalog when there are no products yet."""
        if self._state.products:
            return
        self._commit(replace(self._state, products=default_catalog(self._clock())))
        logger.info("Seeded default catalog (%d products)", len(self._state.products))

    # --- Read access ----------------------------------------------------------

    @property
    def state(self) -> InventoryState:
        return self._state

    @property
    def products(self) -> tuple[Product, ...]:
        return self._state.products

    @property
    def sales(self) -> tuple[Sale, ...]:
        return self._state.sales

    @property
    def incoming_history(self) -> tuple[IncomingEntry, ...]:
        return self._state.incoming_history

    # --- Catalog commands -----------------------------------------------------

    def add_new_product(self, product: Product) -> None:
        """Append *product*.  Id uniqueness is the caller's responsibility."""
        added = replace(product, variants=tuple(product.variants), last_updated=self._clock())
        self._commit(replace(self._state, products=self._state.products + (added,)))

    def add_new_variant(self, product_id: str, variant: ProductVariant) -> None:
        self._update_product_with(
            product_id, lambda p: replace(p, variants=p.variants + (variant,))
        )

    def update_threshold(self, product_id: str, volume: str, threshold: int) -> None:
        self._update_variant_with(
            product_id, volume, lambda v: replace(v, threshold=threshold)
        )

    def update_product(self, product_id: str, /, **changes: str) -> None:
        """Merge ``name`` and/or ``color`` into the product."""
        unknown = set(changes) - _PRODUCT_FIELDS
        if unknown:
            raise TypeError(f"Cannot update product fields: {', '.join(sorted(unknown))}")
        self._update_product_with(product_id, lambda p: replace(p, **changes))

    def delete_product(self, product_id: str) -> None:
        """Remove the product and its variants.  History is left untouched."""
        remaining = tuple(p for p in self._state.products if p.id != product_id)
        if len(remaining) == len(self._state.products):
            logger.debug("delete_product: no product %r", product_id)
            return
        self._commit(replace(self._state, products=remaining))

    def update_variant(self, product_id: str, volume: str, /, **changes: object) -> None:
        """Merge any of volume, set_size, current_sets, threshold into the variant."""
        unknown = set(changes) - _VARIANT_FIELDS
        if unknown:
            raise TypeError(f"Cannot update variant fields: {', '.join(sorted(unknown))}")
        self._update_variant_with(product_id, volume, lambda v: replace(v, **changes))

    def delete_variant(self, product_id: str, volume: str) -> None:
        product = self._state.find_product(product_id)
        if product is None or not product.has_volume(volume):
            logger.debug("delete_variant: no variant %r/%r", product_id, volume)
            return
        self._update_product_with(
            product_id,
            lambda p: replace(p, variants=tuple(v for v in p.variants if v.volume != volume)),
        )

    # --- Stock movements ------------------------------------------------------

    def record_sale(self, sale: Sale) -> Sale:
        """Append the sale and deduct every item from its variant.

        Stock is floored at zero.  Items naming an unknown product or
        volume are kept on the sale but move no stock.
        """
        now = self._clock()
        recorded = replace(
            sale,
            items=tuple(sale.items),
            id=_next_record_id(self._state.sales, now),
            timestamp=now,
        )

        sold = Counter()
        for item in recorded.items:
            sold[(item.product_id, item.volume)] += item.sets_sold

        products = self._apply_stock_deltas({key: -qty for key, qty in sold.items()}, now)
        self._commit(
            replace(self._state, products=products, sales=self._state.sales + (recorded,))
        )
        logger.info(
            "Recorded sale %s for %s: %d sets, %s",
            recorded.id, recorded.customer_name, recorded.total_sets, recorded.total_amount,
        )
        return recorded

    def record_incoming(self, entry: IncomingEntry) -> IncomingEntry:
        """Append the delivery and add its sets to the variant."""
        now = self._clock()
        recorded = replace(
            entry,
            id=_next_record_id(self._state.incoming_history, now),
            timestamp=now,
        )
        products = self._apply_stock_deltas(
            {(entry.product_id, entry.volume): entry.sets_received}, now
        )
        self._commit(
            replace(
                self._state,
                products=products,
                incoming_history=self._state.incoming_history + (recorded,),
            )
        )
        logger.info(
            "Recorded incoming %s: %d sets of %s %s",
            recorded.id, recorded.sets_received, recorded.product_name, recorded.volume,
        )
        return recorded

    # --- Derived queries ------------------------------------------------------

    def get_product_variant(self, product_id: str, volume: str) -> VariantRef | None:
        product = self._state.find_product(product_id)
        if product is None:
            return None
        variant = product.find_variant(volume)
        if variant is None:
            return None
        return VariantRef(product, variant)

    def get_low_stock_variants(self) -> list[VariantRef]:
        return [ref for ref in self._all_variants() if ref.variant.is_low]

    def get_critical_stock_variants(self) -> list[VariantRef]:
        return [ref for ref in self._all_variants() if ref.variant.is_critical]

    def get_total_inventory_value(self) -> InventoryTotals:
        products = self._state.products
        return InventoryTotals(
            total_products=len(products),
            total_variants=sum(len(p.variants) for p in products),
            total_sets=sum(p.total_sets for p in products),
            low_stock_count=len(self.get_low_stock_variants()),
            critical_stock_count=len(self.get_critical_stock_variants()),
        )

    def get_todays_sales(self) -> list[Sale]:
        midnight = self._start_of_today()
        return [s for s in self._state.sales if s.timestamp >= midnight]

    def get_recent_sales(self, limit: int = RECENT_LIMIT) -> list[Sale]:
        """Newest first."""
        if limit <= 0:
            return []
        return list(reversed(self._state.sales[-limit:]))

    def get_todays_incoming(self) -> list[IncomingEntry]:
        midnight = self._start_of_today()
        return [e for e in self._state.incoming_history if e.timestamp >= midnight]

    def get_recent_incoming(self, limit: int = RECENT_LIMIT) -> list[IncomingEntry]:
        if limit <= 0:
            return []
        return list(reversed(self._state.incoming_history[-limit:]))

    def now(self) -> datetime:
        return self._clock()

    # --- Internal helpers -----------------------------------------------------

    def _commit(self, state: InventoryState) -> None:
        self._state = state
        try:
            self._repository.save(state)
        except OSError:
            # Best-effort: the in-memory state stays authoritative.
            logger.warning("Could not persist inventory snapshot", exc_info=True)

    def _all_variants(self) -> Iterable[VariantRef]:
        for product in self._state.products:
            for variant in product.variants:
                yield VariantRef(product, variant)

    def _start_of_today(self) -> datetime:
        return self._clock().replace(hour=0, minute=0, second=0, microsecond=0)

    def _update_product_with(
        self, product_id: str, change: Callable[[Product], Product]
    ) -> None:
        now = self._clock()
        found = False
        products = []
        for product in self._state.products:
            if product.id == product_id:
                product = replace(change(product), last_updated=now)
                found = True
            products.append(product)
        if not found:
            logger.debug("No product %r, nothing to update", product_id)
            return
        self._commit(replace(self._state, products=tuple(products)))

    def _update_variant_with(
        self,
        product_id: str,
        volume: str,
        change: Callable[[ProductVariant], ProductVariant],
    ) -> None:
        if self.get_product_variant(product_id, volume) is None:
            logger.debug("No variant %r/%r, nothing to update", product_id, volume)
            return
        self._update_product_with(
            product_id,
            lambda p: replace(
                p,
                variants=tuple(
                    change(v) if v.volume == volume else v for v in p.variants
                ),
            ),
        )

    def _apply_stock_deltas(
        self, deltas: dict[tuple[str, str], int], now: datetime
    ) -> tuple[Product, ...]:
        """Return products with each (product_id, volume) moved by its delta."""
        products = []
        matched = set()
        for product in self._state.products:
            touched = False
            variants = []
            for variant in product.variants:
                key = (product.id, variant.volume)
                if key in deltas:
                    variant = variant.with_sets(variant.current_sets + deltas[key])
                    matched.add(key)
                    touched = True
                variants.append(variant)
            if touched:
                product = replace(product, variants=tuple(variants), last_updated=now)
            products.append(product)
        for product_id, volume in set(deltas) - matched:
            logger.debug("No variant %r/%r, stock unchanged", product_id, volume)
        return tuple(products)
