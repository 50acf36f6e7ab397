"""Entity -> DTO mapping and category-name enrichment.

Product never knows about Category. Attaching the category name to a
product record is a separate step: collect the distinct category ids,
look them up concurrently, then apply the resulting id -> name map.
A lookup that fails only leaves that name empty; it never fails the batch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from catalog.application.dto import CategoryDTO, ProductDTO
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


def product_to_dto(product: Product, category_name: str | None = None) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=product.price.amount,
        currency=product.price.currency,
        category_id=product.category_id,
        category_name=category_name,
        stock_quantity=product.stock_quantity.quantity,
        is_low_stock=product.is_low_stock(),
        is_out_of_stock=product.is_out_of_stock(),
        status=product.status.value,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


async def fetch_category_names(
    category_repo: CategoryRepository,
    category_ids: Iterable[str],
) -> dict[str, str]:
    """Resolve each distinct category id to its name.

    Missing categories and failed lookups are simply absent from the
    returned mapping.
    """
    distinct_ids = list(dict.fromkeys(category_ids))
    if not distinct_ids:
        return {}

    async def lookup(category_id: str) -> Category | None:
        try:
            return await category_repo.get_by_id(category_id)
        except Exception:
            logger.warning(
                "Category lookup failed for %s; leaving name empty",
                category_id,
                exc_info=True,
            )
            return None

    categories = await asyncio.gather(*(lookup(cid) for cid in distinct_ids))
    return {c.id: c.name for c in categories if c is not None and c.id is not None}


async def to_enriched_dtos(
    products: list[Product],
    category_repo: CategoryRepository,
) -> list[ProductDTO]:
    names = await fetch_category_names(category_repo, (p.category_id for p in products))
    return [product_to_dto(p, names.get(p.category_id)) for p in products]


async def to_enriched_dto(
    product: Product,
    category_repo: CategoryRepository,
) -> ProductDTO:
    (dto,) = await to_enriched_dtos([product], category_repo)
    return dto
