"""Category aggregate.

Categories group products. Products reference a category by id only;
a category never owns its products' lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Category:
    """Aggregate root for product categories.

    Use ``Category.create()`` for new categories. The ``__init__`` is kept
    simple so repositories can reconstitute persisted documents.
    Name uniqueness is enforced by storage, not here.
    """

    id: str | None
    name: str
    description: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(name: str, description: str | None = None) -> Category:
        _validate_name(name)
        now = _utcnow()
        return Category(
            id=None,
            name=name.strip(),
            description=_clean(description),
            created_at=now,
            updated_at=now,
        )

    def update(self, name: str, description: str | None = None) -> None:
        _validate_name(name)
        self.name = name.strip()
        self.description = _clean(description)
        self.updated_at = _utcnow()


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Category name cannot be empty")


def _clean(description: str | None) -> str | None:
    return description.strip() if description is not None else None
