"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from bevstock.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args, input=None):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args], input=input)

    return _run


def _stored(tmp_path):
    return json.loads((tmp_path / "inventory.json").read_text(encoding="utf-8"))


def test_first_run_seeds_catalog(run, tmp_path):
    result = run("product", "list")
    assert result.exit_code == 0, result.output
    assert "coca-cola" in result.output
    assert "kinley" in result.output
    assert len(_stored(tmp_path)["products"]) == 7


def test_sale_then_alerts_then_delivery(run):
    result = run("sale", "record", "--customer", "Sharma Stores",
                 "--items", "coca-cola:200ml:40:120")
    assert result.exit_code == 0, result.output
    assert "₹4800.00" in result.output

    result = run("stock", "alerts")
    assert "LOW" in result.output
    assert "Coca-Cola" in result.output

    run("sale", "record", "--customer", "Sharma Stores", "--items", "coca-cola:200ml:5:120")
    assert "CRITICAL" in run("stock", "alerts").output

    result = run("incoming", "record", "--items", "coca-cola:200ml:20")
    assert result.exit_code == 0, result.output
    assert "1 incoming entry saved." in result.output
    assert run("stock", "alerts").output.strip() == "All stock levels are healthy."


def test_oversell_is_refused(run):
    result = run("sale", "record", "--customer", "A", "--items", "limca:750ml:16:10")
    assert result.exit_code == 1
    assert "only 15 sets available" in result.output


def test_bad_item_format(run):
    result = run("sale", "record", "--customer", "A", "--items", "limca:750ml:2")
    assert result.exit_code == 2
    assert "Product:Volume:Sets:Price" in result.output


def test_recent_and_today(run):
    assert "No sales recorded yet." in run("sale", "recent").output
    run("sale", "record", "--customer", "Alpha", "--items", "sprite:200ml:1:100")
    run("sale", "record", "--customer", "Beta", "--items", "sprite:200ml:1:50")
    recent = run("sale", "recent").output
    assert recent.index("Beta") < recent.index("Alpha")
    assert "revenue ₹150.00" in run("sale", "today").output


def test_product_and_variant_management(run, tmp_path):
    result = run("product", "add", "--name", "Mountain Dew", "--volume", "500ml",
                 "--set-size", "24", "--sets", "10", "--threshold", "3")
    assert result.exit_code == 0, result.output
    assert "id=mountain-dew" in result.output

    result = run("variant", "add", "--product", "mountain-dew", "--volume", "500ml",
                 "--set-size", "24", "--sets", "1", "--threshold", "1")
    assert result.exit_code == 1
    assert "already has a 500ml variant" in result.output

    assert run("variant", "threshold", "--product", "Mountain Dew",
               "--volume", "500ml", "--value", "12").exit_code == 0
    assert "LOW" in run("stock", "alerts").output

    assert run("product", "update", "--product", "mountain-dew", "--name", "Dew").exit_code == 0
    assert run("variant", "delete", "--product", "Dew", "--volume", "500ml", "--yes").exit_code == 0
    assert run("product", "delete", "--product", "dew", input="y\n").exit_code == 0
    assert "mountain-dew" not in [p["id"] for p in _stored(tmp_path)["products"]]


def test_unknown_product(run):
    result = run("variant", "threshold", "--product", "pepsi", "--volume", "1L", "--value", "1")
    assert result.exit_code == 1
    assert "Product not found: 'pepsi'" in result.output


def test_stock_show_totals(run):
    result = run("stock", "show")
    assert result.exit_code == 0, result.output
    assert "7 products, 20 variants, 520 sets" in result.output


def test_export(run, tmp_path):
    out = tmp_path / "exports"
    result = run("export", "--range", "today", "--output-dir", str(out))
    assert result.exit_code == 1
    assert "No data to export" in result.output

    run("incoming", "record", "--items", "sprite:750ml:4", "--notes", "truck")
    result = run("export", "--range", "all", "--output-dir", str(out))
    assert result.exit_code == 0, result.output
    assert "Exported 1 record(s)" in result.output
    assert "0 sale(s), 1 incoming, 4 sets, 48 bottles, revenue ₹0.00" in result.output
    assert len(list(out.glob("coca-cola-all-activity-*.xlsx"))) == 1


def test_undecodable_data_file_is_reported(run, tmp_path):
    (tmp_path / "inventory.json").write_bytes(b"\xff\xfe")
    result = run("stock", "show")
    assert result.exit_code == 1
    assert "Cannot read" in result.output
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_alert_filters(run):
    run("sale", "record", "--customer", "A", "--items", "coca-cola:200ml:40:1,kinley:2L:16:1")

    critical = run("stock", "alerts", "--severity", "critical").output
    assert "Kinley" in critical
    assert "Coca-Cola" not in critical

    assert "Kinley" not in run("stock", "alerts", "--search", "200ml").output
    by_product = run("stock", "alerts", "--sort", "product").output
    assert by_product.index("Coca-Cola") < by_product.index("Kinley")
    assert run("stock", "alerts", "--search", "pepsi").output.strip() == "No alerts match."


def test_incoming_today(run):
    assert "No incoming stock today." in run("incoming", "today").output
    run("incoming", "record", "--items", "maaza:1.2L:3,kinley:1L:2")
    result = run("incoming", "today")
    assert result.exit_code == 0, result.output
    assert "Maaza" in result.output
    assert "5 set(s) received today" in result.output
