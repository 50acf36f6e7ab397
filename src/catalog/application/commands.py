"""Command and query inputs.

Each use case receives one of these immutable models. Field-level rules
(required fields, lengths, ranges) are checked here, when the input is
built, so handlers only deal with business rules. A violation raises
``pydantic.ValidationError`` listing every offending field.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.domain.model.product import ProductStatus

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10
# Prices are stored as BSON Decimal128, which holds 34 significant digits.
PRICE_MAX_DIGITS = 34


def clamp_page_size(page_size: int, maximum: int = MAX_PAGE_SIZE) -> int:
    """Cap a caller-supplied page size before it reaches the paging query.

    A configured ``maximum`` can only lower the cap, never raise it past
    ``MAX_PAGE_SIZE``.
    """
    return min(page_size, maximum, MAX_PAGE_SIZE)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class _Input(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Categories ---------------------------------------------------------------


class CreateCategoryCommand(_Input):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class UpdateCategoryCommand(_Input):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

    @field_validator("id", "name")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class DeleteCategoryCommand(_Input):
    id: str = Field(..., min_length=1)

    @field_validator("id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


# --- Products -----------------------------------------------------------------


class CreateProductCommand(_Input):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: Decimal = Field(..., gt=0, max_digits=PRICE_MAX_DIGITS)
    currency: str = Field("BRL", min_length=3, max_length=3)
    category_id: str = Field(..., min_length=1)
    stock_quantity: int = Field(0, ge=0)

    @field_validator("name", "category_id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class UpdateProductCommand(_Input):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price: Decimal = Field(..., gt=0, max_digits=PRICE_MAX_DIGITS)
    currency: str = Field("BRL", min_length=3, max_length=3)
    category_id: str = Field(..., min_length=1)
    status: Optional[ProductStatus] = None

    @field_validator("id", "name", "category_id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class UpdateStockCommand(_Input):
    id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)

    @field_validator("id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


class DeleteProductCommand(_Input):
    id: str = Field(..., min_length=1)

    @field_validator("id")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)


# --- Queries ------------------------------------------------------------------


class ListProductsQuery(_Input):
    page_number: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    category_id: Optional[str] = None
    status: Optional[ProductStatus] = None


class SearchProductsQuery(_Input):
    term: str = Field(..., min_length=1)

    @field_validator("term")
    @classmethod
    def check_not_blank(cls, value: str) -> str:
        return _not_blank(value)
