"""Unit tests for the Money value object."""

from decimal import Decimal

import pytest

from bevstock.domain.exceptions import ValidationError
from bevstock.domain.model.value_objects import Money


class TestMoney:

    def test_defaults_to_rupees(self):
        m = Money(Decimal("10.50"))
        assert m.currency == "INR"
        assert str(m) == "₹10.50"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.3")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_multiplication_by_sets(self):
        assert Money.of("120.50") * 4 == Money.of("482.00")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10") + Money.of("5", "USD")

    def test_zero(self):
        assert Money.zero() == Money.of("0")
        assert str(Money.zero("USD")) == "$0.00"
