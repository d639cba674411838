"""CLI commands for flavors (the Product aggregate)."""

from __future__ import annotations

import click

from bevstock.application.add_product import DEFAULT_COLOR, AddProductHandler
from bevstock.application.update_product import (
    DeleteProductHandler,
    UpdateProductHandler,
)
from bevstock.domain.exceptions import DomainException
from bevstock.infrastructure.cli.context import AppContext


@click.command("list")
@click.pass_obj
def product_list(app: AppContext) -> None:
    """List all flavors and their volumes."""
    products = app.store.products

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<14} {'Name':<18} {'Volumes':<28} {'Sets':>6}")
    click.echo("-" * 69)
    for p in products:
        volumes = ", ".join(v.volume for v in p.variants) or "-"
        click.echo(f"{p.id:<14} {p.name:<18} {volumes:<28} {p.total_sets:>6}")


@click.command("add")
@click.option("--name", required=True, help="Flavor name, e.g. 'Mountain Dew'.")
@click.option("--volume", required=True, help="First volume, e.g. 500ml.")
@click.option("--set-size", required=True, type=int, help="Bottles per set.")
@click.option("--sets", "current_sets", required=True, type=int, help="Sets in stock now.")
@click.option("--threshold", required=True, type=int, help="Low-stock threshold in sets.")
@click.option("--color", default=DEFAULT_COLOR, show_default=True, help="Display color token.")
@click.pass_obj
def product_add(
    app: AppContext,
    name: str,
    volume: str,
    set_size: int,
    current_sets: int,
    threshold: int,
    color: str,
) -> None:
    """Add a new flavor with its first volume."""
    handler = AddProductHandler(app.store)

    try:
        product = handler.handle(
            name=name,
            volume=volume,
            set_size=set_size,
            current_sets=current_sets,
            threshold=threshold,
            color=color,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added (id={product.id})")


@click.command("update")
@click.option("--product", "product_ref", required=True, help="Product id or name.")
@click.option("--name", default=None, help="New display name.")
@click.option("--color", default=None, help="New color token.")
@click.pass_obj
def product_update(
    app: AppContext, product_ref: str, name: str | None, color: str | None
) -> None:
    """Rename a flavor or change its color."""
    handler = UpdateProductHandler(app.store)

    try:
        product = handler.handle(product_ref, name=name, color=color)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.id}' updated: {product.name} ({product.color})")


@click.command("delete")
@click.option("--product", "product_ref", required=True, help="Product id or name.")
@click.confirmation_option(prompt="Delete this flavor and all its volumes?")
@click.pass_obj
def product_delete(app: AppContext, product_ref: str) -> None:
    """Delete a flavor.  Past sales and deliveries are kept."""
    handler = DeleteProductHandler(app.store)

    try:
        product = handler.handle(product_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' deleted.")
