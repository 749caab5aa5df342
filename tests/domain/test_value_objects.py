"""Unit tests for the Money value object."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        # goes through str(), so no binary float noise
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("Infinity"))
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("NaN")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero


class TestMoneyPercentage:

    def test_ten_percent(self):
        assert Money.of("80").percentage(10) == Money.of("8")

    def test_full_percentage(self):
        assert Money.of("42.42").percentage(100) == Money.of("42.42")

    def test_fraction_of_a_cent_is_kept(self):
        assert Money.of("33.33").percentage(15).amount == Decimal("4.9995")

    def test_keeps_currency(self):
        assert Money(Decimal("10"), "EUR").percentage(50).currency == "EUR"


class TestMoneyDisplay:

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_str_rounds_to_cents(self):
        assert str(Money.of("4.9995")) == "$5.00"
