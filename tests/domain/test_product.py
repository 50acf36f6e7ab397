"""Unit tests for the Product aggregate."""

import pytest

from catalog.domain.exceptions import (
    BusinessRuleViolation,
    InsufficientStockError,
    ValidationError,
)
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, StockQuantity


def _product(stock: int = 5) -> Product:
    return Product.create(
        name="Widget",
        price=Money.of("10.00"),
        category_id="cat-1",
        stock_quantity=StockQuantity(stock),
    )


class TestProductCreate:

    def test_defaults(self):
        p = _product()
        assert p.id is None
        assert p.status == ProductStatus.ACTIVE
        assert p.created_at == p.updated_at

    def test_name_is_trimmed(self):
        p = Product.create("  Widget ", Money.of("1"), "cat-1", StockQuantity(0))
        assert p.name == "Widget"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            Product.create(name, Money.of("1"), "cat-1", StockQuantity(0))

    def test_name_over_200_chars_rejected(self):
        with pytest.raises(ValidationError, match="200 characters"):
            Product.create("x" * 201, Money.of("1"), "cat-1", StockQuantity(0))

    def test_name_of_exactly_200_chars_accepted(self):
        p = Product.create("x" * 200, Money.of("1"), "cat-1", StockQuantity(0))
        assert len(p.name) == 200

    def test_blank_category_rejected(self):
        with pytest.raises(ValidationError, match="Category ID"):
            Product.create("Widget", Money.of("1"), " ", StockQuantity(0))


class TestProductUpdate:

    def test_update_replaces_fields(self):
        p = _product()
        p.update("Gadget", Money.of("20", "USD"), "cat-2", "Shiny", ProductStatus.INACTIVE)
        assert p.name == "Gadget"
        assert p.price == Money.of("20", "USD")
        assert p.category_id == "cat-2"
        assert p.description == "Shiny"
        assert p.status == ProductStatus.INACTIVE

    def test_update_without_status_keeps_it(self):
        p = _product()
        p.mark_as_discontinued()
        p.update("Gadget", Money.of("20"), "cat-2")
        assert p.status == ProductStatus.DISCONTINUED

    def test_invalid_update_leaves_state_unchanged(self):
        p = _product()
        with pytest.raises(ValidationError):
            p.update("", Money.of("99"), "cat-9")
        assert p.name == "Widget"
        assert p.price == Money.of("10.00")
        assert p.category_id == "cat-1"


class TestProductStock:

    def test_update_stock_replaces_wholesale(self):
        p = _product(stock=5)
        p.update_stock(42)
        assert p.stock_quantity == StockQuantity(42)

    def test_add_stock(self):
        p = _product(stock=5)
        p.add_stock(5)
        assert p.stock_quantity.quantity == 10
        assert not p.is_low_stock()

    def test_remove_stock(self):
        p = _product(stock=5)
        p.remove_stock(5)
        assert p.is_out_of_stock()

    def test_remove_more_than_available_keeps_stock(self):
        p = _product(stock=5)
        with pytest.raises(InsufficientStockError):
            p.remove_stock(10)
        assert p.stock_quantity.quantity == 5

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_deltas_rejected(self, qty):
        p = _product()
        with pytest.raises(BusinessRuleViolation, match="greater than zero"):
            p.add_stock(qty)
        with pytest.raises(BusinessRuleViolation, match="greater than zero"):
            p.remove_stock(qty)

    def test_stock_value(self):
        p = _product(stock=3)
        assert p.stock_value == Money.of("30.00")


class TestProductStatus:

    def test_any_status_can_follow_any_other(self):
        p = _product()
        p.mark_as_discontinued()
        p.mark_as_inactive()
        assert p.status == ProductStatus.INACTIVE
        p.update(p.name, p.price, p.category_id, status=ProductStatus.ACTIVE)
        assert p.status == ProductStatus.ACTIVE
