import click

from catalog.infrastructure.bootstrap import category_repository, product_repository
from catalog.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from catalog.infrastructure.cli.dashboard_commands import (
    dashboard_by_category,
    dashboard_stats,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_search,
    product_show,
    product_stock,
    product_update,
)
from catalog.infrastructure.cli.runner import run
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.log import configure_logging
from catalog.infrastructure.persistence.seed import seed_catalog


@click.group()
@click.option("--log-level", default=None, help="Override CATALOG_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Catalog: product and category inventory."""
    configure_logging(log_level or get_settings().LOG_LEVEL)


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def dashboard() -> None:
    """Inventory dashboard."""


@cli.command("seed")
def seed() -> None:
    """Load sample categories and products into an empty database."""
    seeded = run(lambda: seed_catalog(
        category_repository(),
        product_repository(),
        get_settings().REPORTING_CURRENCY,
    ))
    click.echo("Sample data loaded." if seeded else "Database already has data; nothing seeded.")


# Register subcommands
category.add_command(category_add)
category.add_command(category_update)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_show)
product.add_command(product_add)
product.add_command(product_update)
product.add_command(product_stock)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_search)
product.add_command(product_low_stock)
dashboard.add_command(dashboard_stats)
dashboard.add_command(dashboard_by_category)
