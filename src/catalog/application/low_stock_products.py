"""Application service: Low Stock Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_enriched_dtos
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class LowStockProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self) -> list[ProductDTO]:
        products = await self._product_repo.get_low_stock()
        return await to_enriched_dtos(products, self._category_repo)
