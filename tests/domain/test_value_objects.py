"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pizzapos.domain.exceptions import ValidationError
from pizzapos.domain.model.value_objects import TAX_RATE, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("12.99"))
        assert m.amount == Decimal("12.99")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("14.99").amount == Decimal("14.99")

    def test_of_factory_from_float_keeps_printed_value(self):
        assert Money.of(12.99).amount == Decimal("12.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("twelve")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    def test_addition(self):
        assert Money.of("12.99") + Money.of("14.99") == Money.of("27.98")

    def test_multiplication_by_int(self):
        assert Money.of("12.99") * 2 == Money.of("25.98")

    def test_tax_multiplication_is_exact(self):
        assert (Money.of("40.97") * TAX_RATE).amount == Decimal("6.5552")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("6.5552")) == "$6.56"

    def test_zero(self):
        assert Money.zero().is_zero
        assert not Money.of("0.01").is_zero

    def test_amounts_are_not_ordered(self):
        with pytest.raises(TypeError):
            Money.of("1") < Money.of("2")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            Quantity(True)

    def test_increment(self):
        assert Quantity(1).increment() == Quantity(2)

    def test_no_upper_bound(self):
        assert Quantity(1_000_000).value == 1_000_000
