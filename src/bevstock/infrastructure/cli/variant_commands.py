"""CLI commands for volume variants."""

from __future__ import annotations

import click

from bevstock.application.add_variant import AddVariantHandler
from bevstock.application.update_variant import (
    DeleteVariantHandler,
    UpdateThresholdHandler,
    UpdateVariantHandler,
)
from bevstock.domain.exceptions import DomainException
from bevstock.infrastructure.cli.context import AppContext

product_option = click.option(
    "--product", "product_ref", required=True, help="Product id or name."
)
volume_option = click.option("--volume", required=True, help="Volume label, e.g. 750ml.")


@click.command("add")
@product_option
@volume_option
@click.option("--set-size", required=True, type=int, help="Bottles per set.")
@click.option("--sets", "current_sets", required=True, type=int, help="Sets in stock now.")
@click.option("--threshold", required=True, type=int, help="Low-stock threshold in sets.")
@click.pass_obj
def variant_add(
    app: AppContext,
    product_ref: str,
    volume: str,
    set_size: int,
    current_sets: int,
    threshold: int,
) -> None:
    """Add a volume to an existing flavor."""
    handler = AddVariantHandler(app.store)

    try:
        handler.handle(product_ref, volume, set_size, current_sets, threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Volume {volume} added to '{product_ref}'")


@click.command("threshold")
@product_option
@volume_option
@click.option("--value", "threshold", required=True, type=int, help="New threshold in sets.")
@click.pass_obj
def variant_threshold(app: AppContext, product_ref: str, volume: str, threshold: int) -> None:
    """Change the low-stock threshold of a volume."""
    handler = UpdateThresholdHandler(app.store)

    try:
        updated = handler.handle(product_ref, volume, threshold)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Threshold for '{product_ref}' {volume} set to {updated.threshold} sets")


@click.command("update")
@product_option
@volume_option
@click.option("--new-volume", default=None, help="Rename the volume label.")
@click.option("--set-size", default=None, type=int, help="Bottles per set.")
@click.option("--sets", "current_sets", default=None, type=int, help="Correct the stock count.")
@click.option("--threshold", default=None, type=int, help="Low-stock threshold in sets.")
@click.pass_obj
def variant_update(
    app: AppContext,
    product_ref: str,
    volume: str,
    new_volume: str | None,
    set_size: int | None,
    current_sets: int | None,
    threshold: int | None,
) -> None:
    """Edit a volume's label, set size, stock or threshold."""
    handler = UpdateVariantHandler(app.store)

    try:
        updated = handler.handle(
            product_ref,
            volume,
            new_volume=new_volume,
            set_size=set_size,
            current_sets=current_sets,
            threshold=threshold,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Volume {updated.volume} of '{product_ref}': {updated.current_sets} sets "
        f"x {updated.set_size} bottles, threshold {updated.threshold}"
    )


@click.command("delete")
@product_option
@volume_option
@click.confirmation_option(prompt="Delete this volume?")
@click.pass_obj
def variant_delete(app: AppContext, product_ref: str, volume: str) -> None:
    """Remove a volume from a flavor."""
    handler = DeleteVariantHandler(app.store)

    try:
        handler.handle(product_ref, volume)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Volume {volume} removed from '{product_ref}'.")
