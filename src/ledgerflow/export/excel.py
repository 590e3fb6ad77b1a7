"""Excel export of cash-flow statements."""

from datetime import date
from decimal import Decimal
from io import BytesIO
from pathlib import Path
from typing import Any, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ledgerflow.domain.entities import CashFlowReport, CashFlowTotals, ClassifiedRow
from ledgerflow.utils.date_parser import format_display_date

STATEMENT_SHEET = "Statement"
DETAILS_SHEET = "Details"

DETAIL_HEADER = ("Date", "Reference", "Description", "Section", "Cash Impact", "Currency")

TITLE_FONT = Font(name="Calibri", size=14, bold=True)
HEADER_FONT = Font(name="Calibri", size=11, bold=True)
MONEY_FORMAT = "#,##0.00;[Red]-#,##0.00"


def default_filename(start_date: date, end_date: date) -> str:
    """Return the conventional export filename for a period."""
    return f"CashFlow_{start_date.isoformat()}_to_{end_date.isoformat()}.xlsx"


def statement_rows(
    totals: CashFlowTotals, start_date: date, end_date: date
) -> list[list[Any]]:
    """Build the summary sheet: title, period, then section/amount pairs."""
    return [
        ["Cash Flow Statement"],
        [f"Period: {start_date.isoformat()} to {end_date.isoformat()}"],
        [""],
        ["Section", "Amount"],
        ["Operating Activities", totals.operating],
        ["Investing Activities", totals.investing],
        ["Financing Activities", totals.financing],
        ["Net Change in Cash", totals.net_change],
    ]


def detail_rows(rows: Sequence[ClassifiedRow]) -> list[list[Any]]:
    """Build the detail sheet: a header and one line per cash movement."""
    table: list[list[Any]] = [list(DETAIL_HEADER)]
    for row in rows:
        table.append(
            [
                format_display_date(row.date),
                row.reference,
                row.description,
                row.section.value,
                row.cash_impact,
                row.currency,
            ]
        )
    return table


class ExcelCashFlowExporter:
    """Writes a cash-flow report as a two-sheet workbook."""

    def generate(self, report: CashFlowReport) -> bytes:
        wb = Workbook()
        default_sheet = wb.active
        if default_sheet is not None:
            wb.remove(default_sheet)

        statement = wb.create_sheet(title=STATEMENT_SHEET)
        self._fill(statement, statement_rows(report.totals, report.start_date, report.end_date))
        statement["A1"].font = TITLE_FONT
        for cell in statement[4]:
            cell.font = HEADER_FONT

        details = wb.create_sheet(title=DETAILS_SHEET)
        self._fill(details, detail_rows(report.rows))
        for cell in details[1]:
            cell.font = HEADER_FONT
        details.freeze_panes = "A2"

        output = BytesIO()
        wb.save(output)
        return output.getvalue()

    def write(self, report: CashFlowReport, path: str | Path) -> Path:
        """Write the workbook to path and return it."""
        path = Path(path)
        path.write_bytes(self.generate(report))
        return path

    def _fill(self, ws: Worksheet, table: list[list[Any]]) -> None:
        widths: dict[int, int] = {}
        for row in table:
            ws.append([float(v) if isinstance(v, Decimal) else v for v in row])
            for col, value in enumerate(row, start=1):
                widths[col] = max(widths.get(col, 0), len(str(value)))

        for row in ws.iter_rows():
            for cell in row:
                if isinstance(cell.value, float):
                    cell.number_format = MONEY_FORMAT

        for col, width in widths.items():
            ws.column_dimensions[get_column_letter(col)].width = min(max(width + 2, 10), 60)
