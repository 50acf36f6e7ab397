"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    ListProductsQuery,
    SearchProductsQuery,
    UpdateProductCommand,
    UpdateStockCommand,
    clamp_page_size,
)
from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.low_stock_products import LowStockProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.application.update_stock import UpdateStockHandler
from catalog.domain.model.product import ProductStatus
from catalog.infrastructure.bootstrap import category_repository, product_repository
from catalog.infrastructure.cli.output import echo_product, echo_product_table
from catalog.infrastructure.cli.runner import run
from catalog.infrastructure.config import get_settings

STATUS_CHOICE = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


def _status(value: str | None) -> ProductStatus | None:
    return ProductStatus(value) if value else None


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--currency", default="BRL", show_default=True, help="ISO currency code.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--stock", default=0, type=int, show_default=True, help="Units on hand.")
@click.option("--description", default=None, help="Optional description.")
def product_add(
    name: str,
    price: str,
    currency: str,
    category_id: str,
    stock: int,
    description: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    dto = run(lambda: handler.handle(CreateProductCommand(
        name=name,
        description=description,
        price=price,
        currency=currency,
        category_id=category_id,
        stock_quantity=stock,
    )))
    click.echo(f"Product {dto.id} '{dto.name}' added.")
    echo_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price.")
@click.option("--currency", default="BRL", show_default=True, help="ISO currency code.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--description", default=None, help="Description.")
@click.option("--status", type=STATUS_CHOICE, default=None, help="New status.")
def product_update(
    product_id: str,
    name: str,
    price: str,
    currency: str,
    category_id: str,
    description: str | None,
    status: str | None,
) -> None:
    """Replace a product's details (stock is left alone)."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    dto = run(lambda: handler.handle(UpdateProductCommand(
        id=product_id,
        name=name,
        description=description,
        price=price,
        currency=currency,
        category_id=category_id,
        status=_status(status),
    )))
    click.echo(f"Product {dto.id} updated.")
    echo_product(dto)


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New on-hand quantity.")
def product_stock(product_id: str, quantity: int) -> None:
    """Set the stock level of a product."""
    handler = UpdateStockHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    dto = run(lambda: handler.handle(UpdateStockCommand(id=product_id, quantity=quantity)))
    click.echo(f"Stock for product {dto.id} set to {dto.stock_quantity}.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())
    run(lambda: handler.handle(DeleteProductCommand(id=product_id)))
    click.echo(f"Product {product_id} deleted.")


@click.command("list")
@click.option("--page", "page_number", default=1, type=int, show_default=True)
@click.option("--page-size", default=None, type=int, help="Items per page (capped).")
@click.option("--category", "category_id", default=None, help="Only this category.")
@click.option("--status", type=STATUS_CHOICE, default=None, help="Only this status.")
def product_list(
    page_number: int,
    page_size: int | None,
    category_id: str | None,
    status: str | None,
) -> None:
    """List products, newest first, one page at a time."""
    settings = get_settings()
    size = clamp_page_size(
        page_size if page_size is not None else settings.DEFAULT_PAGE_SIZE,
        settings.MAX_PAGE_SIZE,
    )
    handler = ListProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    page = run(lambda: handler.handle(ListProductsQuery(
        page_number=page_number,
        page_size=size,
        category_id=category_id,
        status=_status(status),
    )))

    echo_product_table(page.items)
    click.echo()
    click.echo(
        f"Page {page.page_number} of {page.total_pages} "
        f"({page.total_count} product(s), {page.page_size} per page)"
    )
    if page.has_next_page:
        click.echo(f"Next page: --page {page.page_number + 1}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    dto = run(lambda: handler.handle(product_id))
    if dto is None:
        raise click.ClickException("Product not found")
    echo_product(dto)


@click.command("search")
@click.argument("term")
def product_search(term: str) -> None:
    """Search products by name."""
    handler = SearchProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    echo_product_table(run(lambda: handler.handle(SearchProductsQuery(term=term))))


@click.command("low-stock")
def product_low_stock() -> None:
    """List products that are running low."""
    handler = LowStockProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    echo_product_table(run(handler.handle))
