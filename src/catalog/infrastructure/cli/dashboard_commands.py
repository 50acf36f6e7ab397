"""CLI commands for dashboard aggregates."""

from __future__ import annotations

import click

from catalog.application.dashboard_stats import DashboardStatsHandler
from catalog.application.products_by_category import ProductsByCategoryHandler
from catalog.infrastructure.bootstrap import (
    category_repository,
    product_repository,
    reporting_currency,
)
from catalog.infrastructure.cli.runner import run


@click.command("stats")
def dashboard_stats() -> None:
    """Show headline inventory numbers."""
    handler = DashboardStatsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
        reporting_currency=reporting_currency(),
    )
    stats = run(handler.handle)

    click.echo(f"{'Products':<20} {stats.total_products:>12}")
    click.echo(f"{'Categories':<20} {stats.total_categories:>12}")
    click.echo(f"{'Low stock':<20} {stats.low_stock_products_count:>12}")
    click.echo(f"{'Out of stock':<20} {stats.out_of_stock_products_count:>12}")
    click.echo(
        f"{'Stock value':<20} {stats.currency} {stats.total_stock_value:>8.2f}"
    )
    if stats.mixed_currencies:
        click.echo(
            f"Warning: some products are not priced in {stats.currency}; "
            "the stock value mixes currencies."
        )


@click.command("by-category")
def dashboard_by_category() -> None:
    """Show how many products each category holds."""
    handler = ProductsByCategoryHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )
    rows = run(handler.handle)

    if not rows:
        click.echo("No categories found.")
        return

    click.echo(f"{'Category':<30} {'Products':>8}")
    click.echo("-" * 39)
    for row in rows:
        click.echo(f"{row.category_name:<30} {row.product_count:>8}")
