"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_enriched_dto
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self, product_id: str) -> ProductDTO | None:
        """Return the enriched product, or None when the id does not resolve."""
        product = await self._product_repo.get_by_id(product_id)
        if product is None:
            return None
        return await to_enriched_dto(product, self._category_repo)
