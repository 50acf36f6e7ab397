"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

One motor client is shared by every repository for the life of the
process; the driver pools connections and is safe to share.
"""

from __future__ import annotations

from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from catalog.infrastructure.config import get_settings
from catalog.infrastructure.persistence.mongo_category_repository import (
    MongoCategoryRepository,
)
from catalog.infrastructure.persistence.mongo_product_repository import (
    MongoProductRepository,
)


@lru_cache
def mongo_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(get_settings().MONGODB_URL, tz_aware=True)


def database() -> AsyncIOMotorDatabase:
    return mongo_client()[get_settings().MONGODB_DB]


def category_repository() -> MongoCategoryRepository:
    return MongoCategoryRepository(database())


def product_repository() -> MongoProductRepository:
    return MongoProductRepository(database())


def reporting_currency() -> str:
    return get_settings().REPORTING_CURRENCY
