"""Product aggregate.

Products have their own lifecycle: prices change, stock is replenished and
sold, and products are retired from the catalog. A product points at its
category by id; it never holds the Category itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from catalog.domain.exceptions import BusinessRuleViolation, ValidationError
from catalog.domain.model.value_objects import Money, StockQuantity

MAX_NAME_LENGTH = 200


class ProductStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DISCONTINUED = "Discontinued"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. Every change goes through a method that
    validates first and mutates second, so a rejected call leaves the
    product exactly as it was.

    Use ``Product.create()`` for new products; ``__init__`` is for
    reconstituting persisted ones.
    """

    id: str | None
    name: str
    price: Money
    category_id: str
    stock_quantity: StockQuantity
    description: str | None = None
    status: ProductStatus = ProductStatus.ACTIVE
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        category_id: str,
        stock_quantity: StockQuantity,
        description: str | None = None,
        status: ProductStatus = ProductStatus.ACTIVE,
    ) -> Product:
        _validate_name(name)
        _validate_category_id(category_id)
        now = _utcnow()
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            category_id=category_id,
            stock_quantity=stock_quantity,
            description=_clean(description),
            status=status,
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str,
        price: Money,
        category_id: str,
        description: str | None = None,
        status: ProductStatus | None = None,
    ) -> None:
        """Replace the editable fields. ``status=None`` keeps the current one."""
        _validate_name(name)
        _validate_category_id(category_id)

        self.name = name.strip()
        self.price = price
        self.category_id = category_id
        self.description = _clean(description)
        if status is not None:
            self.status = status
        self._touch()

    def update_stock(self, new_quantity: int) -> None:
        """Replace the on-hand quantity wholesale (not a delta)."""
        self.stock_quantity = self.stock_quantity.update(new_quantity)
        self._touch()

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise BusinessRuleViolation("Quantity to add must be greater than zero")
        self.stock_quantity = self.stock_quantity.add(quantity)
        self._touch()

    def remove_stock(self, quantity: int) -> None:
        """Take units out of stock.

        Raises InsufficientStockError if more than the on-hand quantity
        is requested.
        """
        if quantity <= 0:
            raise BusinessRuleViolation("Quantity to remove must be greater than zero")
        self.stock_quantity = self.stock_quantity.subtract(quantity)
        self._touch()

    def mark_as_inactive(self) -> None:
        self.status = ProductStatus.INACTIVE
        self._touch()

    def mark_as_discontinued(self) -> None:
        self.status = ProductStatus.DISCONTINUED
        self._touch()

    # --- Queries --------------------------------------------------------------

    def is_low_stock(self) -> bool:
        return self.stock_quantity.is_low_stock

    def is_out_of_stock(self) -> bool:
        return self.stock_quantity.is_out_of_stock

    @property
    def stock_value(self) -> Money:
        return self.price * self.stock_quantity.quantity

    # --- Internal helpers -----------------------------------------------------

    def _touch(self) -> None:
        self.updated_at = _utcnow()


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Product name cannot be empty")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
        )


def _validate_category_id(category_id: str) -> None:
    if not category_id or not category_id.strip():
        raise ValidationError("Category ID cannot be empty")


def _clean(description: str | None) -> str | None:
    return description.strip() if description is not None else None
