"""Table and detail formatting shared by the CLI commands."""

from __future__ import annotations

import click

from catalog.application.dto import CategoryDTO, ProductDTO


def echo_category(dto: CategoryDTO) -> None:
    click.echo(f"Category {dto.id}")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Description: {dto.description or '-'}")
    click.echo(f"  Created:     {dto.created_at:%Y-%m-%d %H:%M} UTC")
    click.echo(f"  Updated:     {dto.updated_at:%Y-%m-%d %H:%M} UTC")


def echo_category_table(categories: list[CategoryDTO]) -> None:
    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<26} {'Name':<30} Description")
    click.echo("-" * 80)
    for c in categories:
        click.echo(f"{c.id:<26} {c.name:<30} {c.description or ''}")


def echo_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  (status={dto.status})")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Description: {dto.description or '-'}")
    click.echo(f"  Price:       {dto.currency} {dto.price:.2f}")
    click.echo(f"  Category:    {dto.category_name or '?'} ({dto.category_id})")
    click.echo(f"  Stock:       {dto.stock_quantity}{_stock_flag(dto)}")
    click.echo(f"  Created:     {dto.created_at:%Y-%m-%d %H:%M} UTC")
    click.echo(f"  Updated:     {dto.updated_at:%Y-%m-%d %H:%M} UTC")


def echo_product_table(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<26} {'Name':<28} {'Category':<16} {'Price':>14} {'Stock':>6}  Status"
    )
    click.echo("-" * 104)
    for p in products:
        price = f"{p.currency} {p.price:.2f}"
        click.echo(
            f"{p.id:<26} {p.name[:28]:<28} {(p.category_name or '?')[:16]:<16} "
            f"{price:>14} {p.stock_quantity:>6}  {p.status}{_stock_flag(p)}"
        )


def _stock_flag(dto: ProductDTO) -> str:
    if dto.is_out_of_stock:
        return " [out of stock]"
    if dto.is_low_stock:
        return " [low stock]"
    return ""
