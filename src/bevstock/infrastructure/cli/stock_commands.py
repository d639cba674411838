"""CLI commands for stock movements (sales, deliveries) and stock views."""

from __future__ import annotations

import click

from bevstock.application.dto import IncomingDTO, IncomingSpec, SaleDTO, SaleItemSpec
from bevstock.application.record_incoming import RecordIncomingHandler
from bevstock.application.record_sale import RecordSaleHandler
from bevstock.application.show_inventory import (
    AlertSeverity,
    AlertSort,
    ShowAlertsHandler,
    ShowInventoryHandler,
)
from bevstock.application.show_sales import ShowIncomingHandler, ShowSalesHandler
from bevstock.domain.exceptions import DomainException
from bevstock.infrastructure.cli.context import AppContext


def _split_fields(pair: str, expected: int, fmt: str) -> list[str]:
    fields = [f.strip() for f in pair.split(":")]
    if len(fields) != expected or not all(fields):
        raise click.BadParameter(f"Invalid item format '{pair}'. Expected '{fmt}'.")
    return fields


def _parse_int(raw: str, pair: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid set count '{raw}' in '{pair}'.")


def _parse_sale_items(raw: str) -> list[SaleItemSpec]:
    """Parse 'coca-cola:200ml:5:120, sprite:750ml:2:310' into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        product, volume, sets, price = _split_fields(pair, 4, "Product:Volume:Sets:Price")
        specs.append(SaleItemSpec(product, volume, _parse_int(sets, pair), price))
    return specs


def _parse_incoming_items(raw: str, notes: str | None) -> list[IncomingSpec]:
    """Parse 'coca-cola:200ml:20, kinley:1L:10' into IncomingSpec list."""
    specs: list[IncomingSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        product, volume, sets = _split_fields(pair, 3, "Product:Volume:Sets")
        specs.append(IncomingSpec(product, volume, _parse_int(sets, pair), notes))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    click.echo(f"Sale #{dto.id}  {dto.created_at}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo()
    click.echo(f"  {'Product':<16} {'Volume':<8} {'Sets':>5} {'Bottles':>8} {'Price':>10} {'Total':>11}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<16} {item.volume:<8} {item.sets_sold:>5} "
            f"{item.bottles:>8} {item.price_per_set:>10} {item.total_price:>11}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Bill Total':<40} {dto.total_amount:>22}")
    if dto.notes:
        click.echo(f"  Notes: {dto.notes}")


def _display_sale_rows(sales: list[SaleDTO]) -> None:
    click.echo(f"{'When':<17} {'Customer':<20} {'Sets':>5} {'Amount':>12}")
    click.echo("-" * 57)
    for s in sales:
        sets = sum(item.sets_sold for item in s.items)
        click.echo(f"{s.created_at:<17} {s.customer_name:<20} {sets:>5} {s.total_amount:>12}")


def _display_incoming_rows(entries: list[IncomingDTO]) -> None:
    click.echo(f"{'When':<17} {'Product':<16} {'Volume':<8} {'Sets':>5} {'Bottles':>8}")
    click.echo("-" * 58)
    for e in entries:
        click.echo(
            f"{e.created_at:<17} {e.product_name:<16} {e.volume:<8} "
            f"{e.sets_received:>5} {e.bottles:>8}"
        )


# --- Sales --------------------------------------------------------------------


@click.command("record")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--address", default="", help="Customer address.")
@click.option("--phone", default="", help="Customer phone.")
@click.option("--items", required=True, help="Items as 'Product:Volume:Sets:Price,...'.")
@click.option("--notes", default=None, help="Free-text notes for the bill.")
@click.pass_obj
def sale_record(
    app: AppContext,
    customer: str,
    address: str,
    phone: str,
    items: str,
    notes: str | None,
) -> None:
    """Record a sale and deduct its sets from stock."""
    specs = _parse_sale_items(items)
    handler = RecordSaleHandler(app.store)

    try:
        dto = handler.handle(
            customer_name=customer,
            item_specs=specs,
            customer_address=address,
            customer_phone=phone,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("recent")
@click.pass_obj
def sale_recent(app: AppContext) -> None:
    """Show the last 10 sales, newest first."""
    sales = ShowSalesHandler(app.store).recent()

    if not sales:
        click.echo("No sales recorded yet.")
        return
    _display_sale_rows(sales)


@click.command("today")
@click.pass_obj
def sale_today(app: AppContext) -> None:
    """Show today's sales and revenue."""
    overview = ShowSalesHandler(app.store).today()

    if not overview.sales:
        click.echo("No sales today.")
        return
    _display_sale_rows(overview.sales)
    click.echo("-" * 57)
    click.echo(f"{overview.count} sale(s) today, revenue {overview.revenue}")


# --- Incoming -----------------------------------------------------------------


@click.command("record")
@click.option("--items", required=True, help="Entries as 'Product:Volume:Sets,...'.")
@click.option("--notes", default=None, help="Delivery notes (applied to every entry).")
@click.pass_obj
def incoming_record(app: AppContext, items: str, notes: str | None) -> None:
    """Record a delivery and add its sets to stock."""
    specs = _parse_incoming_items(items, notes)
    handler = RecordIncomingHandler(app.store)

    try:
        entries = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{len(entries)} incoming entr{'y' if len(entries) == 1 else 'ies'} saved.")
    _display_incoming_rows(entries)


@click.command("recent")
@click.pass_obj
def incoming_recent(app: AppContext) -> None:
    """Show the last 10 deliveries, newest first."""
    entries = ShowIncomingHandler(app.store).recent()

    if not entries:
        click.echo("No incoming stock recorded yet.")
        return
    _display_incoming_rows(entries)


@click.command("today")
@click.pass_obj
def incoming_today(app: AppContext) -> None:
    """Show today's deliveries, newest first."""
    entries = ShowIncomingHandler(app.store).today()

    if not entries:
        click.echo("No incoming stock today.")
        return
    _display_incoming_rows(entries)
    click.echo("-" * 58)
    click.echo(f"{sum(e.sets_received for e in entries)} set(s) received today")


# --- Stock views --------------------------------------------------------------


@click.command("show")
@click.pass_obj
def stock_show(app: AppContext) -> None:
    """Show current stock for every flavor and volume."""
    overview = ShowInventoryHandler(app.store).handle()

    if not overview.lines:
        click.echo("No products found.")
        return

    click.echo(
        f"{'Product':<16} {'Volume':<8} {'Sets':>6} {'Bottles':>8} {'Threshold':>10} {'Status':>9}"
    )
    click.echo("-" * 62)
    for line in overview.lines:
        click.echo(
            f"{line.product_name:<16} {line.volume:<8} {line.current_sets:>6} "
            f"{line.bottles:>8} {line.threshold:>10} {line.level:>9}"
        )
    totals = overview.totals
    click.echo("-" * 62)
    click.echo(
        f"{totals.total_products} products, {totals.total_variants} variants, "
        f"{totals.total_sets} sets | low: {totals.low_stock_count}, "
        f"critical: {totals.critical_stock_count}"
    )


@click.command("alerts")
@click.option(
    "--severity",
    type=click.Choice([s.value for s in AlertSeverity]),
    default=AlertSeverity.ALL.value,
    show_default=True,
)
@click.option("--search", default=None, help="Match on product name or volume.")
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice([s.value for s in AlertSort]),
    default=AlertSort.URGENCY.value,
    show_default=True,
)
@click.pass_obj
def stock_alerts(app: AppContext, severity: str, search: str | None, sort_by: str) -> None:
    """List critical (out of stock) and low-stock volumes."""
    alerts = ShowAlertsHandler(app.store).handle(
        severity=AlertSeverity(severity),
        search=search,
        sort=AlertSort(sort_by),
    )

    if not alerts:
        if severity == AlertSeverity.ALL.value and not search:
            click.echo("All stock levels are healthy.")
        else:
            click.echo("No alerts match.")
        return

    click.echo(f"{'Status':<9} {'Product':<16} {'Volume':<8} {'Sets':>6} {'Threshold':>10}")
    click.echo("-" * 53)
    for alert in alerts:
        click.echo(
            f"{alert.level:<9} {alert.product_name:<16} {alert.volume:<8} "
            f"{alert.current_sets:>6} {alert.threshold:>10}"
        )
