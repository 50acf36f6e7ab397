"""Abstract repository for Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Every method is a coroutine: implementations talk to a
document store over the network.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> list[Category]:
        """Return every category, sorted by name ascending."""

    @abstractmethod
    async def add(self, category: Category) -> Category:
        """Persist a new category, assigning its ID."""

    @abstractmethod
    async def update(self, category: Category) -> None:
        """Replace the stored category with the same ID."""

    @abstractmethod
    async def delete(self, category_id: str) -> None:
        """Remove a category by ID."""

    @abstractmethod
    async def exists_by_id(self, category_id: str) -> bool:
        """True if a category with this ID exists."""

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """True if a category has exactly this name (case-sensitive)."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored categories."""
