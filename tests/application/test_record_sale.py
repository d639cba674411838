"""Integration tests for the RecordSale use case.

Uses the in-memory fake repository, so there is no file I/O.
"""

import pytest

from bevstock.application.dto import SaleItemSpec
from bevstock.application.record_sale import RecordSaleHandler
from bevstock.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from tests.fakes import seeded_store


def _setup():
    store, repo = seeded_store()
    return RecordSaleHandler(store), store, repo


def _sets(store, product_id, volume):
    return store.get_product_variant(product_id, volume).variant.current_sets


class TestRecordSaleHappyPath:

    def test_records_bill_with_total(self):
        handler, store, _ = _setup()
        dto = handler.handle("Sharma Stores", [
            SaleItemSpec("coca-cola", "200ml", 3, "120"),
            SaleItemSpec("sprite", "750ml", 2, "310.50"),
        ])
        assert dto.total_amount == "₹981.00"
        assert dto.customer_name == "Sharma Stores"
        assert [i.total_price for i in dto.items] == ["₹360.00", "₹621.00"]
        assert len(store.sales) == 1

    def test_deducts_stock(self):
        handler, store, _ = _setup()
        handler.handle("Sharma Stores", [SaleItemSpec("coca-cola", "200ml", 40, "120")])
        assert _sets(store, "coca-cola", "200ml") == 5

    def test_accepts_product_name(self):
        handler, store, _ = _setup()
        handler.handle("Sharma Stores", [SaleItemSpec("Thums Up", "300ml", 1, "200")])
        assert _sets(store, "thums-up", "300ml") == 17

    def test_snapshots_name_and_set_size(self):
        handler, store, _ = _setup()
        handler.handle("Sharma Stores", [SaleItemSpec("kinley", "2L", 2, "90")])
        item = store.sales[0].items[0]
        assert (item.product_name, item.set_size) == ("Kinley", 6)
        assert item.bottles == 12

    def test_selling_entire_stock_is_allowed(self):
        handler, store, _ = _setup()
        handler.handle("Sharma Stores", [SaleItemSpec("limca", "750ml", 15, "250")])
        assert _sets(store, "limca", "750ml") == 0

    def test_optional_fields_stored(self):
        handler, store, _ = _setup()
        handler.handle(
            "  Sharma Stores ",
            [SaleItemSpec("limca", "750ml", 1, "250")],
            customer_address="MG Road",
            customer_phone="98450 00000",
            notes="deliver by 5pm",
        )
        sale = store.sales[0]
        assert sale.customer_name == "Sharma Stores"
        assert sale.customer_address == "MG Road"
        assert sale.customer_phone == "98450 00000"
        assert sale.notes == "deliver by 5pm"


class TestRecordSaleValidation:

    def test_customer_name_required(self):
        handler, store, _ = _setup()
        with pytest.raises(ValidationError, match="Customer name is required"):
            handler.handle("  ", [SaleItemSpec("limca", "750ml", 1, "250")])
        assert store.sales == ()

    def test_items_required(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("Sharma Stores", [])

    def test_unknown_product_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            handler.handle("Sharma Stores", [SaleItemSpec("pepsi", "200ml", 1, "10")])

    def test_unknown_volume_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="no 5L variant"):
            handler.handle("Sharma Stores", [SaleItemSpec("sprite", "5L", 1, "10")])

    @pytest.mark.parametrize("sets", [0, -2])
    def test_non_positive_sets_rejected(self, sets):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("Sharma Stores", [SaleItemSpec("sprite", "200ml", sets, "10")])

    def test_bad_price_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            handler.handle("Sharma Stores", [SaleItemSpec("sprite", "200ml", 1, "abc")])

    def test_more_than_stock_rejected(self):
        handler, store, _ = _setup()
        with pytest.raises(InsufficientStockError, match="only 45 sets available"):
            handler.handle("Sharma Stores", [SaleItemSpec("coca-cola", "200ml", 46, "120")])
        assert _sets(store, "coca-cola", "200ml") == 45

    def test_stock_check_sums_lines_for_same_variant(self):
        handler, store, _ = _setup()
        with pytest.raises(InsufficientStockError):
            handler.handle("Sharma Stores", [
                SaleItemSpec("limca", "750ml", 10, "250"),
                SaleItemSpec("Limca", "750ml", 6, "250"),
            ])
        assert store.sales == ()
