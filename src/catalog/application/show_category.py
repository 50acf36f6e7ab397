"""Application service: Show Category use case (query)."""

from __future__ import annotations

from catalog.application.dto import CategoryDTO
from catalog.application.mapping import category_to_dto
from catalog.domain.repository.category_repository import CategoryRepository


class ShowCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(self, category_id: str) -> CategoryDTO | None:
        """Return the category, or None when the id does not resolve."""
        category = await self._category_repo.get_by_id(category_id)
        if category is None:
            return None
        return category_to_dto(category)
