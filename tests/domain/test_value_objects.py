"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("1000"))
        assert m.amount == Decimal("1000")
        assert m.currency == "CLP"

    def test_of_factory_from_string(self):
        m = Money.of("25.99", "USD")
        assert m.amount == Decimal("25.99")
        assert m.currency == "USD"

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("900") * 7 == Money.of("6300")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("900") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10", "USD") + Money.of("5", "EUR")

    def test_str_formatting(self):
        assert str(Money.of("1000")) == "$1,000"
        assert str(Money.of("9.5", "USD")) == "$9.50"

    def test_total_of_amounts(self):
        assert Money.total([Money.of("1"), Money.of("2")]) == Money.of("3")

    def test_total_of_nothing_is_zero_in_currency(self):
        assert Money.total([], "USD") == Money.zero("USD")

    def test_greater_or_equal(self):
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") >= Money.of("5")
        assert not Money.of("5") >= Money.of("10")

    def test_greater_or_equal_refuses_mixed_currencies(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10", "USD") >= Money.of("10")
