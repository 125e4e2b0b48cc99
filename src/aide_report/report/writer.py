"""Spreadsheet report writer.

A report is created once with both sheets and their table ranges already
declared, then filled column by column and saved as a single final step.
Column writes raise :class:`ReportError` so the caller can decide whether a
failure is fatal; creation and save failures always are.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import suppress
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import column_index_from_string, range_boundaries
from openpyxl.worksheet.table import Table, TableStyleInfo

from ..errors import ReportError
from .summary import ASN_SHEET, COUNTRY_SHEET

logger = logging.getLogger(__name__)

CellValue = Union[str, int]

SUMMARY_CELLS = ("D3", "D4")
REPORT_TITLE = "AIDE Attack Origins"
TABLE_STYLE = "TableStyleMedium9"

TITLE_FONT = Font(size=14, bold=True, color="1F4E79")
HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")

# sheet name -> (table display name, name column heading)
_SHEET_LAYOUT = {
    ASN_SHEET: ("AttacksByASN", "AS Organization"),
    COUNTRY_SHEET: ("AttacksByCountry", "Country"),
}


@dataclass
class Report:
    path: Path
    workbook: Workbook
    identity: str
    table_ranges: Dict[str, str] = field(default_factory=dict)


def _report_filename(created_at: datetime) -> str:
    return f"aide-origin-report-{created_at.strftime('%Y%m%dT%H%M%SZ')}.xlsx"


def _atomic_save(workbook: Workbook, path: Path) -> None:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    os.close(fd)
    try:
        workbook.save(tmp_name)
        os.replace(tmp_name, path)
    except Exception:
        with suppress(OSError):
            os.unlink(tmp_name)
        raise


def _provision_sheet(
    workbook: Workbook,
    sheet_name: str,
    table_range: str,
    identity: str,
    created_at: datetime,
) -> None:
    display_name, name_heading = _SHEET_LAYOUT[sheet_name]
    ws = workbook.create_sheet(sheet_name)

    ws["A1"] = f"{REPORT_TITLE}: {sheet_name}"
    ws["A1"].font = TITLE_FONT
    ws["A2"] = (
        f"Generated for {identity or 'unknown'} at "
        f"{created_at.strftime('%Y-%m-%d %H:%M:%S UTC')}"
    )

    for cell_ref, heading in (("A3", name_heading), ("B3", "Attacks")):
        ws[cell_ref] = heading
        ws[cell_ref].font = HEADER_FONT
        ws[cell_ref].fill = HEADER_FILL
        ws[cell_ref].alignment = Alignment(horizontal="center")

    ws.column_dimensions["A"].width = 48
    ws.column_dimensions["B"].width = 12
    ws.column_dimensions["D"].width = 70

    _, min_row, _, max_row = range_boundaries(table_range)
    if max_row <= min_row:
        # Excel tables need at least one data row
        return
    table = Table(displayName=display_name, ref=table_range)
    table.tableStyleInfo = TableStyleInfo(name=TABLE_STYLE, showRowStripes=True)
    ws.add_table(table)


def create_report(
    identity: str,
    asn_range: str,
    country_range: str,
    output_dir: Union[str, Path] = ".",
    created_at: Optional[datetime] = None,
) -> Report:
    """Create the report file with both sheets and their table ranges."""
    created_at = created_at or datetime.now(timezone.utc)
    directory = Path(output_dir)
    path = directory / _report_filename(created_at)
    ranges = {ASN_SHEET: asn_range, COUNTRY_SHEET: country_range}

    try:
        for table_range in ranges.values():
            range_boundaries(table_range)
        workbook = Workbook()
        workbook.remove(workbook.active)
        for sheet_name, table_range in ranges.items():
            _provision_sheet(workbook, sheet_name, table_range, identity, created_at)
        directory.mkdir(parents=True, exist_ok=True)
        _atomic_save(workbook, path)
    except (OSError, ValueError, TypeError) as exc:
        raise ReportError(f"cannot create report {path}: {exc}") from exc

    logger.info("Report created at %s (ranges=%s)", path, ranges)
    return Report(path=path, workbook=workbook, identity=identity, table_ranges=ranges)


def _check_cell_value(value: object) -> CellValue:
    # bool is an int subclass but is not a count
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ReportError(f"unsupported cell value {value!r} ({type(value).__name__})")
    if isinstance(value, str) and ILLEGAL_CHARACTERS_RE.search(value):
        raise ReportError(f"cell value {value!r} contains control characters")
    return value


def populate_column(
    values: Sequence[CellValue],
    column: str,
    start_row: int,
    sheet_name: str,
    report: Report,
) -> int:
    """Write *values* down *column* of *sheet_name* starting at *start_row*.

    Returns the number of cells written. Nothing is written if any value
    is rejected.
    """
    if sheet_name not in report.workbook.sheetnames:
        raise ReportError(f"sheet {sheet_name!r} does not exist in {report.path}")
    try:
        column_index = column_index_from_string(column)
    except ValueError as exc:
        raise ReportError(f"invalid column {column!r}: {exc}") from exc
    if start_row < 1:
        raise ReportError(f"start row must be >= 1, got {start_row}")

    checked = [_check_cell_value(value) for value in values]
    ws = report.workbook[sheet_name]
    for offset, value in enumerate(checked):
        cell = ws.cell(row=start_row + offset, column=column_index, value=value)
        # keys are names, never formulas
        if cell.data_type == "f":
            cell.data_type = "s"

    logger.debug(
        "Populated %s!%s%d with %d values", sheet_name, column, start_row, len(checked)
    )
    return len(checked)


def write_summary(report: Report, sheet_name: str, lines: Sequence[str]) -> None:
    """Write the summary sentences of one sheet to the fixed summary cells."""
    if sheet_name not in report.workbook.sheetnames:
        raise ReportError(f"sheet {sheet_name!r} does not exist in {report.path}")
    if len(lines) != len(SUMMARY_CELLS):
        raise ReportError(
            f"expected {len(SUMMARY_CELLS)} summary lines for {sheet_name!r}, "
            f"got {len(lines)}"
        )
    ws = report.workbook[sheet_name]
    for cell_ref, line in zip(SUMMARY_CELLS, lines):
        ws[cell_ref] = line


def save_report(report: Report) -> Path:
    """Atomically replace the report file with the populated workbook."""
    try:
        _atomic_save(report.workbook, report.path)
    except Exception as exc:
        raise ReportError(f"cannot save report {report.path}: {exc}") from exc
    logger.info("Report saved to %s", report.path)
    return report.path
