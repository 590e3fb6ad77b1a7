"""Tests for the Excel cash-flow export."""

from datetime import date
from decimal import Decimal
from io import BytesIO

import pytest
from openpyxl import load_workbook

from ledgerflow.domain.entities import CashFlowTotals
from ledgerflow.export.excel import (
    DETAIL_HEADER,
    ExcelCashFlowExporter,
    default_filename,
    detail_rows,
    statement_rows,
)


@pytest.fixture
def january_report(cash_flow_service):
    return cash_flow_service.build_report(date(2024, 1, 1), date(2024, 1, 31))


def test_default_filename():
    assert default_filename(date(2024, 1, 1), date(2024, 1, 31)) == "CashFlow_2024-01-01_to_2024-01-31.xlsx"


def test_statement_rows():
    totals = CashFlowTotals(
        operating=Decimal("1000"), investing=Decimal("-500"), financing=Decimal("2000")
    )

    rows = statement_rows(totals, date(2024, 1, 1), date(2024, 1, 31))

    assert rows[0] == ["Cash Flow Statement"]
    assert rows[1] == ["Period: 2024-01-01 to 2024-01-31"]
    assert rows[3] == ["Section", "Amount"]
    assert rows[4:] == [
        ["Operating Activities", Decimal("1000")],
        ["Investing Activities", Decimal("-500")],
        ["Financing Activities", Decimal("2000")],
        ["Net Change in Cash", Decimal("2500")],
    ]


def test_detail_rows(january_report):
    rows = detail_rows(january_report.rows)

    assert rows[0] == list(DETAIL_HEADER)
    assert rows[1] == ["Jan 5, 2024", "INV-001", "Consulting revenue", "Operating", Decimal("1000.00"), "USD"]
    assert [r[3] for r in rows[1:]] == ["Operating", "Financing", "Investing"]


def test_generate_workbook(january_report):
    content = ExcelCashFlowExporter().generate(january_report)

    wb = load_workbook(BytesIO(content))
    assert wb.sheetnames == ["Statement", "Details"]

    statement = wb["Statement"]
    assert statement["A1"].value == "Cash Flow Statement"
    assert statement["A8"].value == "Net Change in Cash"
    assert statement["B8"].value == pytest.approx(2500)

    details = wb["Details"]
    assert [c.value for c in details[1]] == list(DETAIL_HEADER)
    assert details.max_row == 4
    assert details["E4"].value == pytest.approx(-500)


def test_write_workbook(tmp_path, january_report):
    path = ExcelCashFlowExporter().write(january_report, tmp_path / "cash.xlsx")

    assert path.exists()
    assert load_workbook(path)["Details"]["B2"].value == "INV-001"
