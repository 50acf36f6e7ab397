"""Tests for paged listing, search, low-stock and single-product queries."""

import asyncio

import pytest

from catalog.application.commands import (
    ListProductsQuery,
    SearchProductsQuery,
    clamp_page_size,
)
from catalog.application.list_products import ListProductsHandler
from catalog.application.low_stock_products import LowStockProductsHandler
from catalog.application.mapping import to_enriched_dtos
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.domain.model.product import ProductStatus
from tests import builders
from tests.fakes import (
    BlockingCategoryRepository,
    FailingCategoryRepository,
    FakeCategoryRepository,
    FakeProductRepository,
)


def _categories():
    return FakeCategoryRepository([
        builders.category("Electronics"),
        builders.category("Books"),
    ])


class TestListProducts:

    @pytest.mark.asyncio
    async def test_first_page_of_25(self):
        products = FakeProductRepository(
            [builders.product(f"P{i}", age=i) for i in range(25)]
        )
        page = await ListProductsHandler(products, _categories()).handle(
            ListProductsQuery(page_number=1, page_size=10)
        )
        assert len(page.items) == 10
        assert page.total_count == 25
        assert page.total_pages == 3
        assert page.has_next_page
        assert not page.has_previous_page

    @pytest.mark.asyncio
    async def test_last_page_is_partial(self):
        products = FakeProductRepository(
            [builders.product(f"P{i}", age=i) for i in range(25)]
        )
        page = await ListProductsHandler(products, _categories()).handle(
            ListProductsQuery(page_number=3, page_size=10)
        )
        assert len(page.items) == 5
        assert not page.has_next_page
        assert page.has_previous_page

    @pytest.mark.asyncio
    async def test_newest_first(self):
        products = FakeProductRepository([
            builders.product("Old", age=30),
            builders.product("New", age=0),
            builders.product("Middle", age=10),
        ])
        page = await ListProductsHandler(products, _categories()).handle(ListProductsQuery())
        assert [p.name for p in page.items] == ["New", "Middle", "Old"]

    @pytest.mark.asyncio
    async def test_filters_are_combined(self):
        products = FakeProductRepository([
            builders.product("A", category_id="cat-1"),
            builders.product("B", category_id="cat-1", status=ProductStatus.INACTIVE),
            builders.product("C", category_id="cat-2", status=ProductStatus.INACTIVE),
        ])
        handler = ListProductsHandler(products, _categories())

        both = await handler.handle(
            ListProductsQuery(category_id="cat-1", status=ProductStatus.INACTIVE)
        )
        assert [p.name for p in both.items] == ["B"]

        by_status = await handler.handle(ListProductsQuery(status=ProductStatus.INACTIVE))
        assert by_status.total_count == 2

        by_category = await handler.handle(ListProductsQuery(category_id="cat-1"))
        assert by_category.total_count == 2

    @pytest.mark.asyncio
    async def test_enriches_with_one_lookup_per_category(self):
        categories = _categories()
        products = FakeProductRepository([
            builders.product("A", category_id="cat-1", age=1),
            builders.product("B", category_id="cat-1", age=2),
            builders.product("C", category_id="cat-2", age=3),
        ])
        page = await ListProductsHandler(products, categories).handle(ListProductsQuery())

        assert [p.category_name for p in page.items] == ["Electronics", "Electronics", "Books"]
        assert sorted(categories.lookups) == ["cat-1", "cat-2"]

    @pytest.mark.asyncio
    async def test_failed_lookup_leaves_only_that_name_empty(self):
        categories = FailingCategoryRepository(
            [builders.category("Electronics"), builders.category("Books")],
            failing_ids={"cat-2"},
        )
        products = FakeProductRepository([
            builders.product("A", category_id="cat-1", age=1),
            builders.product("B", category_id="cat-2", age=2),
            builders.product("C", category_id="deleted", age=3),
        ])
        page = await ListProductsHandler(products, categories).handle(ListProductsQuery())
        assert [p.category_name for p in page.items] == ["Electronics", None, None]

    def test_page_size_clamped_by_caller(self):
        assert clamp_page_size(500) == 100
        assert clamp_page_size(100) == 100
        assert clamp_page_size(7) == 7

    def test_configured_maximum_only_lowers_the_cap(self):
        assert clamp_page_size(150, maximum=200) == 100
        assert clamp_page_size(150, maximum=50) == 50


class TestEnrichmentCancellation:

    @pytest.mark.asyncio
    async def test_cancelling_a_pending_lookup_propagates(self):
        categories = BlockingCategoryRepository([builders.category("Electronics")])
        products = [builders.product("Phone"), builders.product("Laptop")]

        task = asyncio.create_task(to_enriched_dtos(products, categories))
        await categories.started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert task.cancelled()


class TestShowProduct:

    @pytest.mark.asyncio
    async def test_returns_enriched_dto(self):
        products = FakeProductRepository([builders.product("Phone")])
        dto = await ShowProductHandler(products, _categories()).handle("prod-1")
        assert dto.category_name == "Electronics"

    @pytest.mark.asyncio
    async def test_missing_returns_none(self):
        handler = ShowProductHandler(FakeProductRepository(), _categories())
        assert await handler.handle("nope") is None


class TestSearchProducts:

    @pytest.mark.asyncio
    async def test_matches_name_case_insensitively(self):
        products = FakeProductRepository([
            builders.product("Book: Clean Code", category_id="cat-2"),
            builders.product("Running Shoes"),
        ])
        found = await SearchProductsHandler(products, _categories()).handle(
            SearchProductsQuery(term=" clean ")
        )
        assert [p.name for p in found] == ["Book: Clean Code"]
        assert found[0].category_name == "Books"


class TestLowStockProducts:

    @pytest.mark.asyncio
    async def test_returns_products_below_ten(self):
        products = FakeProductRepository([
            builders.product("Zero", stock=0),
            builders.product("Nine", stock=9),
            builders.product("Ten", stock=10),
        ])
        found = await LowStockProductsHandler(products, _categories()).handle()
        assert sorted(p.name for p in found) == ["Nine", "Zero"]
        assert all(p.category_name == "Electronics" for p in found)
