"""Application service: List Categories use case (query)."""

from __future__ import annotations

from catalog.application.dto import CategoryDTO
from catalog.application.mapping import category_to_dto
from catalog.domain.repository.category_repository import CategoryRepository


class ListCategoriesHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(self) -> list[CategoryDTO]:
        categories = await self._category_repo.list_all()
        return [category_to_dto(c) for c in categories]
