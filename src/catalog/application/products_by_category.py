"""Application service: Products By Category use case (query)."""

from __future__ import annotations

from collections import Counter

from catalog.application.dto import CategoryProductCountDTO
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class ProductsByCategoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self) -> list[CategoryProductCountDTO]:
        """One row per category, in name order, including empty categories.

        Products pointing at a category that no longer exists are not
        reported.
        """
        categories = await self._category_repo.list_all()
        products = await self._product_repo.list_all()

        counts = Counter(p.category_id for p in products)
        return [
            CategoryProductCountDTO(
                category_id=c.id,  # type: ignore[arg-type]
                category_name=c.name,
                product_count=counts.get(c.id, 0),
            )
            for c in categories
        ]
