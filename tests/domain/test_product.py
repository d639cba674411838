"""Unit tests for products, variants and stock classification."""

import pytest

from bevstock.domain.model.product import Product, ProductVariant, StockLevel, slugify


class TestStockLevel:

    @pytest.mark.parametrize("current_sets, expected", [
        (0, StockLevel.CRITICAL),
        (1, StockLevel.LOW),
        (10, StockLevel.LOW),
        (11, StockLevel.HEALTHY),
        (500, StockLevel.HEALTHY),
    ])
    def test_boundaries(self, current_sets, expected):
        variant = ProductVariant("200ml", set_size=24, current_sets=current_sets, threshold=10)
        assert variant.stock_level is expected

    def test_zero_threshold_only_flags_empty(self):
        variant = ProductVariant("1L", set_size=12, current_sets=1, threshold=0)
        assert variant.stock_level is StockLevel.HEALTHY
        assert variant.with_sets(0).is_critical

    def test_critical_is_never_low(self):
        variant = ProductVariant("1L", set_size=12, current_sets=0, threshold=5)
        assert variant.is_critical
        assert not variant.is_low


class TestProductVariant:

    def test_bottles(self):
        assert ProductVariant("750ml", set_size=12, current_sets=3, threshold=1).bottles == 36

    def test_with_sets_floors_at_zero(self):
        variant = ProductVariant("750ml", set_size=12, current_sets=3, threshold=1)
        assert variant.with_sets(-4).current_sets == 0
        assert variant.current_sets == 3


class TestProduct:

    def test_find_variant(self):
        product = Product(
            id="sprite",
            name="Sprite",
            color="green",
            variants=(
                ProductVariant("200ml", 24, 5, 2),
                ProductVariant("750ml", 12, 7, 2),
            ),
        )
        assert product.find_variant("750ml").current_sets == 7
        assert product.find_variant("2L") is None
        assert product.total_sets == 12

    @pytest.mark.parametrize("name, slug", [
        ("Coca-Cola", "coca-cola"),
        ("Thums Up", "thums-up"),
        ("  Mountain   Dew ", "mountain-dew"),
    ])
    def test_slugify(self, name, slug):
        assert slugify(name) == slug
