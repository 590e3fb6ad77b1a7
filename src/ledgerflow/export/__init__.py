"""Cash-flow statement export."""

from ledgerflow.export.excel import (
    ExcelCashFlowExporter,
    default_filename,
    detail_rows,
    statement_rows,
)

__all__ = ["ExcelCashFlowExporter", "default_filename", "detail_rows", "statement_rows"]
