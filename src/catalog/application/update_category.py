"""Application service: Update Category use case."""

from __future__ import annotations

import logging

from catalog.application.commands import UpdateCategoryCommand
from catalog.application.dto import CategoryDTO
from catalog.application.mapping import category_to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(self, command: UpdateCategoryCommand) -> CategoryDTO:
        category = await self._category_repo.get_by_id(command.id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID {command.id} not found")

        category.update(command.name, command.description)
        await self._category_repo.update(category)
        logger.info("Updated category %s", category.id)
        return category_to_dto(category)
