"""MongoDB-backed implementation of ProductRepository.

Expects a text index on ``name`` plus single-field indexes on
``category_id`` and ``status`` in the ``products`` collection.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from bson.decimal128 import Decimal128
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import LOW_STOCK_THRESHOLD, Money, StockQuantity
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.documents import as_utc, to_object_id

COLLECTION = "products"


def build_paged_filter(
    category_id: str | None = None,
    status: ProductStatus | None = None,
) -> dict[str, Any]:
    """Filter for the paged listing; the conditions present are AND-ed."""
    query: dict[str, Any] = {}
    if category_id and category_id.strip():
        query["category_id"] = category_id
    if status is not None:
        query["status"] = status.value
    return query


LOW_STOCK_FILTER: dict[str, Any] = {"stock_quantity": {"$lt": LOW_STOCK_THRESHOLD}}


def build_search_filter(term: str) -> dict[str, Any]:
    return {"$text": {"$search": term}}


class MongoProductRepository(ProductRepository):

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._collection = database[COLLECTION]

    # --- ProductRepository interface ------------------------------------------

    async def get_by_id(self, product_id: str) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        raw = await self._collection.find_one({"_id": oid})
        return self._to_domain(raw) if raw is not None else None

    async def list_all(self) -> list[Product]:
        return await self._find({})

    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        category_id: str | None = None,
        status: ProductStatus | None = None,
    ) -> tuple[list[Product], int]:
        query = build_paged_filter(category_id, status)
        total_count = await self._collection.count_documents(query)
        cursor = (
            self._collection.find(query)
            .sort("created_at", DESCENDING)
            .skip((page_number - 1) * page_size)
            .limit(page_size)
        )
        items = [self._to_domain(raw) async for raw in cursor]
        return items, total_count

    async def search_by_name(self, term: str) -> list[Product]:
        return await self._find(build_search_filter(term))

    async def get_low_stock(self) -> list[Product]:
        return await self._find(LOW_STOCK_FILTER)

    async def get_by_category_id(self, category_id: str) -> list[Product]:
        return await self._find({"category_id": category_id})

    async def add(self, product: Product) -> Product:
        result = await self._collection.insert_one(self._to_document(product))
        product.id = str(result.inserted_id)
        return product

    async def update(self, product: Product) -> None:
        oid = to_object_id(product.id or "")
        if oid is not None:
            await self._collection.replace_one({"_id": oid}, self._to_document(product))

    async def delete(self, product_id: str) -> None:
        oid = to_object_id(product_id)
        if oid is not None:
            await self._collection.delete_one({"_id": oid})

    async def exists_by_id(self, product_id: str) -> bool:
        oid = to_object_id(product_id)
        if oid is None:
            return False
        return await self._collection.count_documents({"_id": oid}, limit=1) > 0

    async def count(self) -> int:
        return await self._collection.count_documents({})

    # --- Internal helpers -----------------------------------------------------

    async def _find(self, query: dict[str, Any]) -> list[Product]:
        return [self._to_domain(raw) async for raw in self._collection.find(query)]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(product: Product) -> dict[str, Any]:
        return {
            "name": product.name,
            "description": product.description,
            "price": {
                "amount": Decimal128(product.price.amount),
                "currency": product.price.currency,
            },
            "category_id": product.category_id,
            "stock_quantity": product.stock_quantity.quantity,
            "status": product.status.value,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Product:
        amount = raw["price"]["amount"]
        if isinstance(amount, Decimal128):
            amount = amount.to_decimal()
        return Product(
            id=str(raw["_id"]),
            name=raw["name"],
            description=raw.get("description"),
            price=Money(Decimal(str(amount)), raw["price"]["currency"]),
            category_id=raw["category_id"],
            stock_quantity=StockQuantity(int(raw["stock_quantity"])),
            status=ProductStatus(raw["status"]),
            created_at=as_utc(raw["created_at"]),
            updated_at=as_utc(raw["updated_at"]),
        )
