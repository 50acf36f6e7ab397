"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.commands import CreateProductCommand
from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_enriched_dto
from catalog.domain.exceptions import InvalidCategoryError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, StockQuantity
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """Add a new product to the catalog.

        The category name on the returned record is looked up after the
        product is saved; if that lookup fails the product still exists
        and the name is simply left empty.
        """
        if not await self._category_repo.exists_by_id(command.category_id):
            raise InvalidCategoryError(command.category_id)

        product = Product.create(
            name=command.name,
            price=Money(command.price, command.currency),
            category_id=command.category_id,
            stock_quantity=StockQuantity(command.stock_quantity),
            description=command.description,
        )
        created = await self._product_repo.add(product)
        logger.info("Created product %s (%s)", created.id, created.name)
        return await to_enriched_dto(created, self._category_repo)
