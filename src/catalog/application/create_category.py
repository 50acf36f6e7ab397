"""Application service: Create Category use case."""

from __future__ import annotations

import logging

from catalog.application.commands import CreateCategoryCommand
from catalog.application.dto import CategoryDTO
from catalog.application.mapping import category_to_dto
from catalog.domain.exceptions import DuplicateNameError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    async def handle(self, command: CreateCategoryCommand) -> CategoryDTO:
        """Add a new category.

        The name pre-check gives a friendly error; the storage unique index
        still catches two concurrent creations of the same name.
        """
        if await self._category_repo.exists_by_name(command.name):
            raise DuplicateNameError(
                f"Category with name '{command.name}' already exists"
            )

        category = Category.create(command.name, command.description)
        created = await self._category_repo.add(category)
        logger.info("Created category %s (%s)", created.id, created.name)
        return category_to_dto(created)
