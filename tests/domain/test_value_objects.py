"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import (
    BusinessRuleViolation,
    CurrencyMismatchError,
    InsufficientStockError,
    ValidationError,
)
from catalog.domain.model.value_objects import Money, StockQuantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation_defaults_to_brl(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "BRL"

    def test_of_factory_from_string(self):
        m = Money.of("25.99", "USD")
        assert m.amount == Decimal("25.99")
        assert m.currency == "USD"

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_zero_is_allowed(self):
        assert Money.zero("USD") == Money(Decimal("0"), "USD")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-0.01"))

    def test_blank_currency_rejected(self):
        with pytest.raises(ValidationError, match="Currency cannot be empty"):
            Money(Decimal("1"), "  ")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert not Money.of("10") < Money.of("10")

    def test_equality_includes_currency(self):
        assert Money.of("10", "BRL") != Money.of("10", "USD")

    @pytest.mark.parametrize("op", [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a > b,
        lambda a, b: a < b,
    ])
    def test_currency_mismatch_rejected(self, op):
        with pytest.raises(CurrencyMismatchError, match="different currencies"):
            op(Money.of("0", "BRL"), Money.of("1000", "USD"))

    def test_currency_mismatch_is_a_business_rule(self):
        assert issubclass(CurrencyMismatchError, BusinessRuleViolation)

    def test_str(self):
        assert str(Money.of("15", "USD")) == "USD 15.00"


# ── StockQuantity ────────────────────────────────────────────────────────────


class TestStockQuantity:

    def test_negative_rejected_not_clamped(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockQuantity(-1)

    def test_zero_is_both_low_and_out_of_stock(self):
        stock = StockQuantity(0)
        assert stock.is_out_of_stock
        assert stock.is_low_stock

    def test_low_stock_boundary(self):
        assert StockQuantity(9).is_low_stock
        assert not StockQuantity(10).is_low_stock

    def test_out_of_stock_only_at_zero(self):
        assert not StockQuantity(1).is_out_of_stock

    def test_add_returns_new_instance(self):
        stock = StockQuantity(5)
        assert stock.add(3) == StockQuantity(8)
        assert stock.quantity == 5

    def test_add_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockQuantity(5).add(-1)

    def test_subtract(self):
        assert StockQuantity(5).subtract(5) == StockQuantity(0)

    def test_subtract_more_than_available_rejected(self):
        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            StockQuantity(5).subtract(6)

    def test_subtract_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockQuantity(5).subtract(-2)

    def test_update_replaces_and_is_idempotent(self):
        assert StockQuantity(3).update(7).update(7) == StockQuantity(7)

    def test_update_still_validates(self):
        with pytest.raises(ValidationError):
            StockQuantity(3).update(-4)
