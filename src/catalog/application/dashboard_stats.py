"""Application service: Dashboard Statistics use case (query).

Counts come from three independent sources:

- ``total_products`` / ``total_categories`` from the repositories' counts
- ``low_stock_products_count`` from the storage-level low-stock query
- ``out_of_stock_products_count`` and ``total_stock_value`` from a full
  product scan

The low-stock and out-of-stock counts overlap: a product with zero units
is in both. Only ACTIVE products contribute to the stock value.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.application.dto import DashboardStatsDTO
from catalog.domain.model.product import ProductStatus
from catalog.domain.model.value_objects import DEFAULT_CURRENCY
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DashboardStatsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        reporting_currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._reporting_currency = reporting_currency

    async def handle(self) -> DashboardStatsDTO:
        total_products = await self._product_repo.count()
        total_categories = await self._category_repo.count()
        low_stock = await self._product_repo.get_low_stock()
        all_products = await self._product_repo.list_all()

        out_of_stock_count = sum(1 for p in all_products if p.is_out_of_stock())

        active = [p for p in all_products if p.status == ProductStatus.ACTIVE]
        total_value = sum(
            (p.stock_value.amount for p in active),
            Decimal("0"),
        )

        # The total is reported in one fixed currency regardless of what
        # the products are priced in.
        currencies = {p.price.currency for p in active}
        mixed = bool(currencies - {self._reporting_currency})
        if mixed:
            logger.warning(
                "Stock value reported as %s but active products are priced in %s",
                self._reporting_currency,
                ", ".join(sorted(currencies)),
            )

        return DashboardStatsDTO(
            total_products=total_products,
            total_categories=total_categories,
            low_stock_products_count=len(low_stock),
            out_of_stock_products_count=out_of_stock_count,
            total_stock_value=total_value,
            currency=self._reporting_currency,
            mixed_currencies=mixed,
        )
