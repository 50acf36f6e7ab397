"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from catalog.application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from catalog.application.create_category import CreateCategoryHandler
from catalog.application.delete_category import DeleteCategoryHandler
from catalog.application.list_categories import ListCategoriesHandler
from catalog.application.show_category import ShowCategoryHandler
from catalog.application.update_category import UpdateCategoryHandler
from catalog.infrastructure.bootstrap import category_repository, product_repository
from catalog.infrastructure.cli.output import echo_category, echo_category_table
from catalog.infrastructure.cli.runner import run


@click.command("add")
@click.option("--name", required=True, help="Category name (unique).")
@click.option("--description", default=None, help="Optional description.")
def category_add(name: str, description: str | None) -> None:
    """Create a new category."""
    handler = CreateCategoryHandler(category_repo=category_repository())
    dto = run(lambda: handler.handle(
        CreateCategoryCommand(name=name, description=description)
    ))
    click.echo(f"Category {dto.id} '{dto.name}' created.")


@click.command("update")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default=None, help="New description.")
def category_update(category_id: str, name: str, description: str | None) -> None:
    """Rename or re-describe a category."""
    handler = UpdateCategoryHandler(category_repo=category_repository())
    dto = run(lambda: handler.handle(
        UpdateCategoryCommand(id=category_id, name=name, description=description)
    ))
    click.echo(f"Category {dto.id} updated.")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_delete(category_id: str) -> None:
    """Delete a category that has no products."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(),
        product_repo=product_repository(),
    )
    run(lambda: handler.handle(DeleteCategoryCommand(id=category_id)))
    click.echo(f"Category {category_id} deleted.")


@click.command("list")
def category_list() -> None:
    """List all categories by name."""
    handler = ListCategoriesHandler(category_repo=category_repository())
    echo_category_table(run(handler.handle))


@click.command("show")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_show(category_id: str) -> None:
    """Show one category."""
    handler = ShowCategoryHandler(category_repo=category_repository())
    dto = run(lambda: handler.handle(category_id))
    if dto is None:
        raise click.ClickException("Category not found")
    echo_category(dto)
