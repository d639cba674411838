"""Tests for the openpyxl activity writer."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from openpyxl import load_workbook

from bevstock.application.export_activity import ActivityRecord
from bevstock.domain.model.value_objects import Money
from bevstock.infrastructure.export.xlsx_writer import XlsxActivityWriter

IST = timezone(timedelta(hours=5, minutes=30))


def test_writes_headers_rows_and_widths(tmp_path):
    records = [
        ActivityRecord(
            timestamp=datetime(2024, 6, 15, 11, 45, tzinfo=IST),
            type="Sale",
            product="Coca-Cola 200ml",
            volume="200ml",
            sets=2,
            bottles=48,
            customer="Sharma Stores",
            notes="cash",
            amount=Money.of("240"),
        ),
        ActivityRecord(
            timestamp=datetime(2024, 6, 1, 10, 0, tzinfo=IST),
            type="Incoming",
            product="Sprite",
            volume="750ml",
            sets=5,
            bottles=60,
        ),
    ]
    path = tmp_path / "exports" / "activity.xlsx"

    XlsxActivityWriter().write(records, path)

    sheet = load_workbook(path).active
    assert sheet.title == "Activity Data"
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0] == (
        "Date", "Time", "Type", "Product", "Volume", "Sets", "Bottles", "Customer", "Notes", "Amount",
    )
    assert rows[1][:8] == ("Jun 15, 2024", "11:45", "Sale", "Coca-Cola 200ml", "200ml", 2, 48, "Sharma Stores")
    assert Decimal(str(rows[1][9])) == Decimal("240")
    assert rows[2][2] == "Incoming"
    assert rows[2][7] is None
    assert sheet.column_dimensions["D"].width == 25
    assert sheet.column_dimensions["I"].width == 30
