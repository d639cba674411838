from __future__ import annotations

from pathlib import Path

import click

from bevstock.infrastructure.cli.context import AppContext
from bevstock.infrastructure.cli.export_commands import export
from bevstock.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from bevstock.infrastructure.cli.stock_commands import (
    incoming_recent,
    incoming_today,
    incoming_record,
    sale_recent,
    sale_record,
    sale_today,
    stock_alerts,
    stock_show,
)
from bevstock.infrastructure.cli.variant_commands import (
    variant_add,
    variant_delete,
    variant_threshold,
    variant_update,
)
from bevstock.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="BEVSTOCK_DATA_DIR",
    default=None,
    help="Directory holding inventory.json (default: ./data in the project).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    envvar="BEVSTOCK_LOG_LEVEL",
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str) -> None:
    """bevstock: beverage stock, sales and deliveries"""
    setup_logging(log_level)
    ctx.obj = AppContext(data_dir)


@cli.group()
def product() -> None:
    """Manage flavors."""


@cli.group()
def variant() -> None:
    """Manage volume variants of a flavor."""


@cli.group()
def sale() -> None:
    """Record and review sales."""


@cli.group()
def incoming() -> None:
    """Record and review incoming stock."""


@cli.group()
def stock() -> None:
    """Stock levels and alerts."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
variant.add_command(variant_add)
variant.add_command(variant_delete)
variant.add_command(variant_threshold)
variant.add_command(variant_update)
sale.add_command(sale_record)
sale.add_command(sale_recent)
sale.add_command(sale_today)
incoming.add_command(incoming_record)
incoming.add_command(incoming_recent)
incoming.add_command(incoming_today)
stock.add_command(stock_show)
stock.add_command(stock_alerts)
cli.add_command(export)
