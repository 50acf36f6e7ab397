"""Application service: List Products use case (paged query).

The page size must already be clamped by the caller (see
``clamp_page_size``); the query model rejects anything above the maximum.
"""

from __future__ import annotations

from catalog.application.commands import ListProductsQuery
from catalog.application.dto import PagedResult, ProductDTO
from catalog.application.mapping import to_enriched_dtos
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self, query: ListProductsQuery) -> PagedResult[ProductDTO]:
        products, total_count = await self._product_repo.get_paged(
            query.page_number,
            query.page_size,
            category_id=query.category_id or None,
            status=query.status,
        )
        items = await to_enriched_dtos(products, self._category_repo)
        return PagedResult(
            items=items,
            page_number=query.page_number,
            page_size=query.page_size,
            total_count=total_count,
        )
