"""Small factories for test entities."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money, StockQuantity

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def category(name: str = "Electronics", category_id: str | None = None) -> Category:
    return Category(id=category_id, name=name, description=None)


def product(
    name: str = "Widget",
    price: str = "10.00",
    stock: int = 20,
    category_id: str = "cat-1",
    status: ProductStatus = ProductStatus.ACTIVE,
    currency: str = "BRL",
    age: int = 0,
) -> Product:
    """A persisted-looking product; larger ``age`` means created earlier."""
    created = BASE_TIME - timedelta(minutes=age)
    return Product(
        id=None,
        name=name,
        price=Money.of(price, currency),
        category_id=category_id,
        stock_quantity=StockQuantity(stock),
        status=status,
        created_at=created,
        updated_at=created,
    )
