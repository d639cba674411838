"""Tests for the ExportActivity use case, with an in-memory writer."""

from datetime import datetime
from pathlib import Path

import pytest

from bevstock.application.dto import IncomingSpec, SaleItemSpec
from bevstock.application.export_activity import (
    ActivityWriter,
    ExportActivityHandler,
    ExportRange,
    export_filename,
)
from bevstock.application.record_incoming import RecordIncomingHandler
from bevstock.application.record_sale import RecordSaleHandler
from bevstock.domain.exceptions import ValidationError
from tests.fakes import IST, FakeClock, seeded_store


class CapturingWriter(ActivityWriter):

    def __init__(self) -> None:
        self.records = None
        self.path = None

    def write(self, records, path):
        self.records = records
        self.path = path


def _store_with_activity():
    """Activity on May 20, June 1 and June 15 (the clock's today)."""
    clock = FakeClock(datetime(2024, 5, 20, 9, 0, tzinfo=IST))
    store, _ = seeded_store(clock)
    sell = RecordSaleHandler(store)
    receive = RecordIncomingHandler(store)

    sell.handle("May Customer", [SaleItemSpec("sprite", "200ml", 1, "100")])
    clock.now = datetime(2024, 6, 1, 10, 0, tzinfo=IST)
    receive.handle([IncomingSpec("coca-cola", "750ml", 5, "June truck")])
    clock.now = datetime(2024, 6, 15, 11, 45, tzinfo=IST)
    sell.handle("Today Customer", [
        SaleItemSpec("coca-cola", "200ml", 2, "120"),
        SaleItemSpec("fanta", "750ml", 1, "300"),
    ], notes="cash")
    return store, clock


class TestActivityRecords:

    def test_all_newest_first(self):
        store, _ = _store_with_activity()
        records = ExportActivityHandler(store, CapturingWriter()).activity()
        assert [r.type for r in records] == ["Sale", "Incoming", "Sale"]

    def test_sale_row(self):
        store, _ = _store_with_activity()
        row = ExportActivityHandler(store, CapturingWriter()).activity()[0]
        assert row.product == "Coca-Cola 200ml, Fanta 750ml"
        assert row.volume == "200ml, 750ml"
        assert row.sets == 3
        assert row.bottles == 2 * 24 + 12
        assert row.customer == "Today Customer"
        assert row.notes == "cash"
        assert str(row.amount) == "₹540.00"
        assert (row.date_label, row.time_label) == ("Jun 15, 2024", "11:45")

    def test_incoming_row(self):
        store, _ = _store_with_activity()
        row = ExportActivityHandler(store, CapturingWriter()).activity()[1]
        assert (row.product, row.volume, row.sets, row.bottles) == ("Coca-Cola", "750ml", 5, 60)
        assert row.customer is None
        assert row.amount is None
        assert row.notes == "June truck"

    @pytest.mark.parametrize("export_range, count", [
        (ExportRange.TODAY, 1),
        (ExportRange.MONTH, 2),
        (ExportRange.ALL, 3),
    ])
    def test_ranges(self, export_range, count):
        store, _ = _store_with_activity()
        assert len(ExportActivityHandler(store, CapturingWriter()).activity(export_range)) == count


class TestExport:

    def test_writes_to_named_file(self):
        store, _ = _store_with_activity()
        writer = CapturingWriter()
        result = ExportActivityHandler(store, writer).handle(ExportRange.MONTH, Path("/tmp/out"))
        assert result.path == Path("/tmp/out/coca-cola-month-2024-06.xlsx")
        assert result.rows == 2
        assert writer.path == result.path
        assert len(writer.records) == 2

    def test_empty_range_rejected(self):
        store, _ = seeded_store(FakeClock())
        writer = CapturingWriter()
        with pytest.raises(ValidationError, match="No data to export"):
            ExportActivityHandler(store, writer).handle(ExportRange.TODAY, Path("."))
        assert writer.records is None

    @pytest.mark.parametrize("export_range, name", [
        (ExportRange.TODAY, "coca-cola-today-2024-06-15.xlsx"),
        (ExportRange.MONTH, "coca-cola-month-2024-06.xlsx"),
        (ExportRange.ALL, "coca-cola-all-activity-2024-06-15.xlsx"),
    ])
    def test_filenames(self, export_range, name):
        assert export_filename(export_range, datetime(2024, 6, 15, tzinfo=IST)) == name


class TestSearchAndSummary:

    @pytest.mark.parametrize("search, customers", [
        ("FANTA", ["Today Customer"]),
        ("may cust", ["May Customer"]),
        ("incoming", [None]),
        ("750ml", ["Today Customer", None]),
        ("  ", ["Today Customer", None, "May Customer"]),
    ])
    def test_search_narrows_rows(self, search, customers):
        store, _ = _store_with_activity()
        records = ExportActivityHandler(store, CapturingWriter()).activity(search=search)
        assert [r.customer for r in records] == customers

    def test_summary_totals(self):
        store, _ = _store_with_activity()
        result = ExportActivityHandler(store, CapturingWriter()).handle(ExportRange.ALL, Path("."))
        summary = result.summary
        assert (summary.sales, summary.incoming) == (2, 1)
        assert (summary.sets, summary.bottles) == (9, 144)
        assert str(summary.revenue) == "₹640.00"

    def test_summary_follows_search(self):
        store, _ = _store_with_activity()
        writer = CapturingWriter()
        result = ExportActivityHandler(store, writer).handle(
            ExportRange.ALL, Path("."), search="coca-cola"
        )
        assert result.rows == 2
        assert len(writer.records) == 2
        assert result.summary.incoming == 1
        assert str(result.summary.revenue) == "₹540.00"

    def test_search_with_no_match_is_rejected(self):
        store, _ = _store_with_activity()
        with pytest.raises(ValidationError, match="No data to export"):
            ExportActivityHandler(store, CapturingWriter()).handle(
                ExportRange.ALL, Path("."), search="pepsi"
            )
