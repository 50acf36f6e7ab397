"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data out of the application layer without exposing domain
entities to callers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProductDTO:
    """A product as handed to callers.

    ``category_name`` is filled in by a separate lookup and stays ``None``
    when that lookup fails.
    """

    id: str
    name: str
    description: str | None
    price: Decimal
    currency: str
    category_id: str
    category_name: str | None
    stock_quantity: int
    is_low_stock: bool
    is_out_of_stock: bool
    status: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results plus what the caller needs to derive page metadata."""

    items: list[T]
    page_number: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1


@dataclass(frozen=True)
class DashboardStatsDTO:
    """Headline numbers for the inventory dashboard.

    ``low_stock_products_count`` and ``out_of_stock_products_count`` overlap:
    a product with zero units is counted in both.
    ``mixed_currencies`` is True when some valued product is priced in a
    currency other than ``currency``; ``total_stock_value`` then adds
    unlike amounts.
    """

    total_products: int
    total_categories: int
    low_stock_products_count: int
    out_of_stock_products_count: int
    total_stock_value: Decimal
    currency: str
    mixed_currencies: bool = False


@dataclass(frozen=True)
class CategoryProductCountDTO:
    category_id: str
    category_name: str
    product_count: int
