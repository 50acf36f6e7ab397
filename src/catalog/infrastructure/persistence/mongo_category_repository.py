"""MongoDB-backed implementation of CategoryRepository.

Expects a unique index on ``name`` in the ``categories`` collection.
"""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from catalog.domain.exceptions import ConflictError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.infrastructure.persistence.documents import as_utc, to_object_id

COLLECTION = "categories"


class MongoCategoryRepository(CategoryRepository):

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._collection = database[COLLECTION]

    # --- CategoryRepository interface -----------------------------------------

    async def get_by_id(self, category_id: str) -> Category | None:
        oid = to_object_id(category_id)
        if oid is None:
            return None
        raw = await self._collection.find_one({"_id": oid})
        return self._to_domain(raw) if raw is not None else None

    async def list_all(self) -> list[Category]:
        cursor = self._collection.find({}).sort("name", ASCENDING)
        return [self._to_domain(raw) async for raw in cursor]

    async def add(self, category: Category) -> Category:
        try:
            result = await self._collection.insert_one(self._to_document(category))
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"A category named '{category.name}' already exists"
            ) from exc
        category.id = str(result.inserted_id)
        return category

    async def update(self, category: Category) -> None:
        oid = to_object_id(category.id or "")
        if oid is None:
            return
        try:
            await self._collection.replace_one({"_id": oid}, self._to_document(category))
        except DuplicateKeyError as exc:
            raise ConflictError(
                f"A category named '{category.name}' already exists"
            ) from exc

    async def delete(self, category_id: str) -> None:
        oid = to_object_id(category_id)
        if oid is not None:
            await self._collection.delete_one({"_id": oid})

    async def exists_by_id(self, category_id: str) -> bool:
        oid = to_object_id(category_id)
        if oid is None:
            return False
        return await self._collection.count_documents({"_id": oid}, limit=1) > 0

    async def exists_by_name(self, name: str) -> bool:
        return await self._collection.count_documents({"name": name}, limit=1) > 0

    async def count(self) -> int:
        return await self._collection.count_documents({})

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(category: Category) -> dict[str, Any]:
        return {
            "name": category.name,
            "description": category.description,
            "created_at": category.created_at,
            "updated_at": category.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict[str, Any]) -> Category:
        return Category(
            id=str(raw["_id"]),
            name=raw["name"],
            description=raw.get("description"),
            created_at=as_utc(raw["created_at"]),
            updated_at=as_utc(raw["updated_at"]),
        )
