"""CLI command for the spreadsheet export."""

from __future__ import annotations

from pathlib import Path

import click

from bevstock.application.export_activity import ExportActivityHandler, ExportRange
from bevstock.domain.exceptions import DomainException
from bevstock.infrastructure import bootstrap
from bevstock.infrastructure.cli.context import AppContext


@click.command("export")
@click.option(
    "--range",
    "range_name",
    type=click.Choice([r.value for r in ExportRange]),
    default=ExportRange.ALL.value,
    show_default=True,
    help="Which activity to export.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Where to write the .xlsx file.",
)
@click.option("--search", default=None, help="Only rows matching product, volume, type or customer.")
@click.pass_obj
def export(app: AppContext, range_name: str, output_dir: Path, search: str | None) -> None:
    """Export sales and incoming stock to an Excel file."""
    handler = ExportActivityHandler(app.store, bootstrap.activity_writer())

    try:
        result = handler.handle(ExportRange(range_name), output_dir, search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    summary = result.summary
    click.echo(f"Exported {result.rows} record(s) to {result.path}")
    click.echo(
        f"  {summary.sales} sale(s), {summary.incoming} incoming, "
        f"{summary.sets} sets, {summary.bottles} bottles, revenue {summary.revenue}"
    )
