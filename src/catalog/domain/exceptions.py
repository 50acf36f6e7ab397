"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
boundary layer can catch them uniformly and display user-friendly messages.
Each class carries a ``kind`` tag; callers switch on the tag rather than
on the concrete class.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "VALIDATION"
    BUSINESS_RULE = "BUSINESS_RULE"
    NOT_FOUND = "NOT_FOUND"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.BUSINESS_RULE


class ValidationError(DomainException):
    """An input or invariant check failed (blank name, negative amount, ...)."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class BusinessRuleViolation(DomainException):
    """A business rule rejected an otherwise well-formed request."""

    kind = ErrorKind.BUSINESS_RULE


class DuplicateNameError(BusinessRuleViolation):
    """A category with the same name already exists."""


class CategoryInUseError(BusinessRuleViolation):
    """A category still has products attached and cannot be deleted."""

    def __init__(self, category_id: str, product_count: int) -> None:
        super().__init__(
            f"Cannot delete category {category_id}: "
            f"it has {product_count} associated product(s)"
        )
        self.category_id = category_id
        self.product_count = product_count


class InvalidCategoryError(BusinessRuleViolation):
    """A product references a category that does not exist."""

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category with ID {category_id} does not exist")
        self.category_id = category_id


class InsufficientStockError(BusinessRuleViolation):
    """More units were requested than are on hand."""


class CurrencyMismatchError(BusinessRuleViolation):
    """Money values in different currencies were combined."""


class ConflictError(BusinessRuleViolation):
    """The storage layer rejected a write that violates a uniqueness rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND
