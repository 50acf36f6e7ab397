"""Application service: Update Stock use case.

Sets the on-hand quantity to an absolute value; it is not a delta.
"""

from __future__ import annotations

import logging

from catalog.application.commands import UpdateStockCommand
from catalog.application.dto import ProductDTO
from catalog.application.mapping import to_enriched_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateStockHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    async def handle(self, command: UpdateStockCommand) -> ProductDTO:
        product = await self._product_repo.get_by_id(command.id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {command.id} not found")

        previous = product.stock_quantity.quantity
        product.update_stock(command.quantity)
        await self._product_repo.update(product)
        logger.info(
            "Stock for product %s changed from %d to %d",
            product.id, previous, command.quantity,
        )
        if product.is_low_stock():
            logger.warning(
                "Product %s (%s) is low on stock: %d unit(s) left",
                product.id, product.name, command.quantity,
            )
        return await to_enriched_dto(product, self._category_repo)
