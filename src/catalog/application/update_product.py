"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.commands import UpdateProductCommand
from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_enriched_dto
from catalog.domain.exceptions import EntityNotFoundError, InvalidCategoryError
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """Replace a product's editable fields.

        Stock is untouched here; use the update-stock use case for that.
        """
        product = await self._product_repo.get_by_id(command.id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {command.id} not found")

        if not await self._category_repo.exists_by_id(command.category_id):
            raise InvalidCategoryError(command.category_id)

        product.update(
            name=command.name,
            price=Money(command.price, command.currency),
            category_id=command.category_id,
            description=command.description,
            status=command.status,
        )
        await self._product_repo.update(product)
        logger.info("Updated product %s", product.id)
        return await to_enriched_dto(product, self._category_repo)
