"""Application service: Delete Category use case.

A category can only go once nothing references it. The check is a plain
query, so it is not transient: retrying without removing the products
fails the same way.
"""

from __future__ import annotations

import logging

from catalog.application.commands import DeleteCategoryCommand
from catalog.domain.exceptions import CategoryInUseError, EntityNotFoundError
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    async def handle(self, command: DeleteCategoryCommand) -> None:
        category = await self._category_repo.get_by_id(command.id)
        if category is None:
            raise EntityNotFoundError(f"Category with ID {command.id} not found")

        products = await self._product_repo.get_by_category_id(command.id)
        if products:
            raise CategoryInUseError(command.id, len(products))

        await self._category_repo.delete(command.id)
        logger.info("Deleted category %s", command.id)
