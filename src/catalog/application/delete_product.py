"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.application.commands import DeleteProductCommand
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def handle(self, command: DeleteProductCommand) -> None:
        if not await self._product_repo.exists_by_id(command.id):
            raise EntityNotFoundError(f"Product with ID {command.id} not found")

        await self._product_repo.delete(command.id)
        logger.info("Deleted product %s", command.id)
