"""Excel (.xlsx) writer for the activity export, built on openpyxl."""

from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from bevstock.application.export_activity import COLUMNS, ActivityRecord, ActivityWriter

logger = logging.getLogger(__name__)

SHEET_TITLE = "Activity Data"


class XlsxActivityWriter(ActivityWriter):

    def write(self, records: list[ActivityRecord], path: Path) -> None:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE

        sheet.append([header for header, _ in COLUMNS])
        for cell in sheet[1]:
            cell.font = Font(bold=True)

        for record in records:
            sheet.append([
                record.date_label,
                record.time_label,
                record.type,
                record.product,
                record.volume,
                record.sets,
                record.bottles,
                record.customer,
                record.notes,
                record.amount.amount if record.amount is not None else None,
            ])

        for index, (_, width) in enumerate(COLUMNS, start=1):
            sheet.column_dimensions[get_column_letter(index)].width = width

        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
        logger.info("Wrote %d activity rows to %s", len(records), path)
