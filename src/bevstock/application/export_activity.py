"""Application service: Export Activity use case.

Merges sales and incoming deliveries into one activity log, narrows it
to a date range and hands the rows to a spreadsheet writer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from bevstock.domain.exceptions import ValidationError
from bevstock.domain.model.incoming import IncomingEntry
from bevstock.domain.model.sale import Sale
from bevstock.domain.model.value_objects import Money
from bevstock.domain.service.inventory_store import InventoryStore

FILENAME_PREFIX = "coca-cola"

# (header, width in characters)
COLUMNS = [
    ("Date", 12),
    ("Time", 8),
    ("Type", 10),
    ("Product", 25),
    ("Volume", 10),
    ("Sets", 8),
    ("Bottles", 10),
    ("Customer", 20),
    ("Notes", 30),
    ("Amount", 12),
]


class ExportRange(Enum):
    TODAY = "today"
    MONTH = "month"
    ALL = "all"


@dataclass(frozen=True)
class ActivityRecord:
    """One row of the activity log, either a sale or a delivery."""

    timestamp: datetime
    type: str  # "Sale" | "Incoming"
    product: str
    volume: str
    sets: int
    bottles: int
    customer: str | None = None
    notes: str | None = None
    amount: Money | None = None

    @property
    def date_label(self) -> str:
        return f"{self.timestamp:%b} {self.timestamp.day}, {self.timestamp:%Y}"

    @property
    def time_label(self) -> str:
        return f"{self.timestamp:%H:%M}"


@dataclass(frozen=True)
class ExportSummary:
    sales: int
    incoming: int
    sets: int
    bottles: int
    revenue: Money


@dataclass(frozen=True)
class ExportResult:
    path: Path
    rows: int
    summary: ExportSummary


class ActivityWriter(ABC):

    @abstractmethod
    def write(self, records: list[ActivityRecord], path: Path) -> None:
        """Write *records* as a spreadsheet at *path*."""


def sale_record(sale: Sale) -> ActivityRecord:
    return ActivityRecord(
        timestamp=sale.timestamp,  # type: ignore[arg-type]
        type="Sale",
        product=", ".join(f"{i.product_name} {i.volume}" for i in sale.items),
        volume=", ".join(i.volume for i in sale.items),
        sets=sale.total_sets,
        bottles=sale.total_bottles,
        customer=sale.customer_name,
        notes=sale.notes,
        amount=sale.total_amount,
    )


def incoming_record(entry: IncomingEntry) -> ActivityRecord:
    return ActivityRecord(
        timestamp=entry.timestamp,  # type: ignore[arg-type]
        type="Incoming",
        product=entry.product_name,
        volume=entry.volume,
        sets=entry.sets_received,
        bottles=entry.bottles,
        notes=entry.notes,
    )


def export_filename(export_range: ExportRange, now: datetime) -> str:
    if export_range is ExportRange.TODAY:
        return f"{FILENAME_PREFIX}-today-{now:%Y-%m-%d}.xlsx"
    if export_range is ExportRange.MONTH:
        return f"{FILENAME_PREFIX}-month-{now:%Y-%m}.xlsx"
    return f"{FILENAME_PREFIX}-all-activity-{now:%Y-%m-%d}.xlsx"


def matches(record: ActivityRecord, search: str | None) -> bool:
    """Case-insensitive match on product, volume, type or customer."""
    term = (search or "").strip().lower()
    if not term:
        return True
    fields = (record.product, record.volume, record.type, record.customer or "")
    return any(term in field.lower() for field in fields)


def summarize(records: list[ActivityRecord]) -> ExportSummary:
    sales = [r for r in records if r.type == "Sale"]
    revenue = Money.zero()
    for record in sales:
        if record.amount is not None:
            revenue = revenue + record.amount
    return ExportSummary(
        sales=len(sales),
        incoming=len(records) - len(sales),
        sets=sum(r.sets for r in records),
        bottles=sum(r.bottles for r in records),
        revenue=revenue,
    )


def in_range(record: ActivityRecord, export_range: ExportRange, now: datetime) -> bool:
    when = record.timestamp.astimezone(now.tzinfo)
    if export_range is ExportRange.TODAY:
        return when.date() == now.date()
    if export_range is ExportRange.MONTH:
        return (when.year, when.month) == (now.year, now.month)
    return True


class ExportActivityHandler:

    def __init__(self, store: InventoryStore, writer: ActivityWriter) -> None:
        self._store = store
        self._writer = writer

    def activity(
        self,
        export_range: ExportRange = ExportRange.ALL,
        search: str | None = None,
    ) -> list[ActivityRecord]:
        """Sales and deliveries in *export_range* matching *search*, newest first."""
        now = self._store.now()
        records = [sale_record(s) for s in self._store.sales]
        records += [incoming_record(e) for e in self._store.incoming_history]
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return [r for r in records if in_range(r, export_range, now) and matches(r, search)]

    def handle(
        self,
        export_range: ExportRange,
        directory: Path,
        search: str | None = None,
    ) -> ExportResult:
        records = self.activity(export_range, search)
        if not records:
            raise ValidationError("No data to export for the selected range")

        path = Path(directory) / export_filename(export_range, self._store.now())
        self._writer.write(records, path)
        return ExportResult(path=path, rows=len(records), summary=summarize(records))
