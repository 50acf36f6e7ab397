"""Sample data for a fresh database.

Seeds only when no category exists yet, so running it twice is harmless.
"""

from __future__ import annotations

import logging

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, StockQuantity
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SAMPLE_CATEGORIES = [
    ("Electronics", "Electronic products and technology"),
    ("Clothing", "Apparel and accessories"),
    ("Food", "Groceries and food products"),
    ("Books", "Books and reading material"),
]

# (name, price, category name, stock, description)
SAMPLE_PRODUCTS = [
    ("Samsung Galaxy Smartphone", "1299.99", "Electronics", 25,
     "Android smartphone with 128GB storage"),
    ("Dell Inspiron Notebook", "3499.99", "Electronics", 15,
     "Notebook with Intel i7 processor and 16GB RAM"),
    ("Basic T-Shirt", "49.90", "Clothing", 100,
     "Cotton t-shirt, several colours"),
    ("Running Shoes", "299.90", "Clothing", 8,
     "Lightweight shoes for running"),
    ("Rice 5kg", "24.90", "Food", 50, "5kg bag of white rice"),
    ("Black Beans 1kg", "8.50", "Food", 3, "1kg bag of black beans"),
    ("Book: Clean Code", "89.90", "Books", 12,
     "A handbook of agile software craftsmanship"),
    ("Book: Domain-Driven Design", "99.90", "Books", 5,
     "Tackling complexity in the heart of software"),
]


async def seed_catalog(
    category_repo: CategoryRepository,
    product_repo: ProductRepository,
    currency: str = "BRL",
) -> bool:
    """Insert the sample catalog. Returns False if data was already present."""
    if await category_repo.count() > 0:
        logger.info("Catalog already has categories; skipping seed")
        return False

    category_ids: dict[str, str] = {}
    for name, description in SAMPLE_CATEGORIES:
        created = await category_repo.add(Category.create(name, description))
        category_ids[name] = created.id  # type: ignore[assignment]

    for name, price, category_name, stock, description in SAMPLE_PRODUCTS:
        await product_repo.add(
            Product.create(
                name=name,
                price=Money.of(price, currency),
                category_id=category_ids[category_name],
                stock_quantity=StockQuantity(stock),
                description=description,
            )
        )

    logger.info(
        "Seeded %d categories and %d products",
        len(SAMPLE_CATEGORIES), len(SAMPLE_PRODUCTS),
    )
    return True
