"""Abstract repository for Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product, ProductStatus


class ProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    async def get_paged(
        self,
        page_number: int,
        page_size: int,
        category_id: str | None = None,
        status: ProductStatus | None = None,
    ) -> tuple[list[Product], int]:
        """Return one page of products plus the total number matching.

        ``page_number`` is 1-based and ``page_size`` must already be
        clamped by the caller. Items are newest first. The optional
        filters are AND-combined.
        """

    @abstractmethod
    async def search_by_name(self, term: str) -> list[Product]:
        """Case-insensitive free-text match against product names."""

    @abstractmethod
    async def get_low_stock(self) -> list[Product]:
        """Products whose stock quantity is below the low-stock threshold."""

    @abstractmethod
    async def get_by_category_id(self, category_id: str) -> list[Product]:
        """Every product that references the given category."""

    @abstractmethod
    async def add(self, product: Product) -> Product:
        """Persist a new product, assigning its ID."""

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Replace the stored product with the same ID."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Remove a product by ID."""

    @abstractmethod
    async def exists_by_id(self, product_id: str) -> bool:
        """True if a product with this ID exists."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored products."""
