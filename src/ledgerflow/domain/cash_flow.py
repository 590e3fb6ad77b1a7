"""Cash-flow statement domain service.

Builds a direct-method cash-flow statement from journal entries. Each entry
that touches a cash or bank account contributes its signed cash movement to
exactly one section, chosen from the entry's largest non-cash line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Sequence

from ledgerflow.domain.entities import (
    CashFlowReport,
    CashFlowTotals,
    ChartOfAccount,
    ClassifiedRow,
    JournalEntry,
    JournalEntryLine,
    Section,
)
from ledgerflow.domain.errors import ValidationError, invalid_date_window
from ledgerflow.utils.date_parser import day_bounds, parse_timestamp

if TYPE_CHECKING:
    from ledgerflow.source.base import EntrySource

logger = logging.getLogger(__name__)

DEFAULT_CASH_NAME_HINTS = ("cash and cash equivalents", "cash", "bank")
DEFAULT_CASH_ACCOUNT_NUMBERS = ("1000",)


@dataclass(frozen=True)
class ClassifierConfig:
    """Heuristics used to recognise cash accounts."""

    cash_name_hints: tuple[str, ...] = DEFAULT_CASH_NAME_HINTS
    cash_account_numbers: tuple[str, ...] = DEFAULT_CASH_ACCOUNT_NUMBERS


DEFAULT_CONFIG = ClassifierConfig()


def is_cash_line(line: JournalEntryLine, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """Return True if the line posts to a cash-like account."""
    account = line.chart_of_account
    name = ((account.account_name if account else "") or "").lower()
    number = ((account.account_no if account else "") or "").lower()
    if any(hint.lower() in name for hint in config.cash_name_hints):
        return True
    return number in {n.lower() for n in config.cash_account_numbers}


def classify_account(account: Optional[ChartOfAccount]) -> Section:
    """Assign a cash-flow section to the counter account of a cash movement.

    Rules are evaluated in order and the first match wins. Income statement
    accounts are operating; non-current and fixed assets are investing;
    equity and long-term liabilities are financing. Account numbers starting
    with 3 (equity) or 2 (liabilities, unless typed current) are financing.
    Everything else, working capital included, is operating.
    """
    statement = ((account.financial_statement if account else "") or "").lower()
    account_type = ((account.account_type if account else "") or "").lower()
    number = ((account.account_no if account else "") or "").strip()

    if "income" in statement:
        return Section.OPERATING

    if "non" in account_type and "asset" in account_type:
        return Section.INVESTING
    if any(word in account_type for word in ("fixed", "property", "equipment", "intangible")):
        return Section.INVESTING

    if (
        "equity" in account_type
        or ("long" in account_type and "liability" in account_type)
        or ("non" in account_type and "liability" in account_type)
    ):
        return Section.FINANCING

    if number.startswith("3"):
        return Section.FINANCING
    if number.startswith("2") and "current" not in account_type:
        return Section.FINANCING

    if "current asset" in account_type or "current liability" in account_type:
        return Section.OPERATING

    return Section.OPERATING


def dominant_line(lines: Sequence[JournalEntryLine]) -> Optional[JournalEntryLine]:
    """Return the line with the largest debit or credit, first one on ties."""
    dominant = None
    for line in lines:
        if dominant is None or line.magnitude > dominant.magnitude:
            dominant = line
    return dominant


def classify_entry(
    entry: JournalEntry, config: ClassifierConfig = DEFAULT_CONFIG
) -> Optional[tuple[Section, Decimal]]:
    """Classify the cash movement of one entry.

    Returns:
        Tuple of (section, signed cash impact), or None if the entry has no
        cash line or nothing to attribute the movement to.
    """
    cash = next((line for line in entry.lines if is_cash_line(line, config)), None)
    if cash is None:
        return None

    impact = cash.debit_amount - cash.credit_amount

    counter = dominant_line([line for line in entry.lines if not is_cash_line(line, config)])
    if counter is None:
        return None

    return classify_account(counter.chart_of_account), impact


def calculate_totals(rows: Sequence[ClassifiedRow]) -> CashFlowTotals:
    """Sum cash impact per section."""
    sums = {section: Decimal("0") for section in Section}
    for row in rows:
        sums[row.section] += row.cash_impact
    return CashFlowTotals(
        operating=sums[Section.OPERATING],
        investing=sums[Section.INVESTING],
        financing=sums[Section.FINANCING],
    )


def classify(
    entries: Sequence[JournalEntry],
    from_date: date,
    to_date: date,
    config: Optional[ClassifierConfig] = None,
) -> tuple[list[ClassifiedRow], CashFlowTotals]:
    """Classify the cash movements of entries dated within a window.

    Args:
        entries: Journal entries in any order
        from_date: First day of the window (from 00:00:00)
        to_date: Last day of the window (through 23:59:59)
        config: Cash account heuristics, defaults when omitted

    Returns:
        Tuple of (rows sorted by date, section totals)
    """
    config = config or DEFAULT_CONFIG
    start, end = day_bounds(from_date, to_date)

    rows: list[ClassifiedRow] = []
    for entry in entries:
        timestamp = parse_timestamp(entry.transaction_date)
        if timestamp is None or not (start <= timestamp <= end):
            continue

        result = classify_entry(entry, config)
        if result is None:
            logger.debug("Entry %s has no classifiable cash movement", entry.id)
            continue

        section, impact = result
        rows.append(
            ClassifiedRow(
                entry_id=entry.id,
                date=entry.transaction_date,
                timestamp=timestamp,
                reference=entry.reference_number,
                description=entry.description,
                section=section,
                cash_impact=impact,
                currency=entry.currency_code,
            )
        )

    rows.sort(key=lambda row: row.timestamp)
    return rows, calculate_totals(rows)


class CashFlowService:
    """Service for building cash-flow statements."""

    def __init__(self, source: EntrySource, config: Optional[ClassifierConfig] = None):
        """Initialize cash-flow service.

        Args:
            source: Where journal entries are fetched from
            config: Cash account heuristics
        """
        self.source = source
        self.config = config or DEFAULT_CONFIG

    def build_report(self, start_date: date, end_date: date) -> CashFlowReport:
        """Fetch entries and classify those dated within the window.

        Raises:
            ValidationError: If start_date is after end_date
            SourceError: If entries cannot be fetched
        """
        if start_date > end_date:
            raise ValidationError(invalid_date_window(start_date, end_date))

        entries = self.source.list_journal_entries()
        rows, totals = classify(entries, start_date, end_date, self.config)
        logger.info(
            "Classified %d of %d journal entries between %s and %s",
            len(rows),
            len(entries),
            start_date,
            end_date,
        )

        return CashFlowReport(
            start_date=start_date,
            end_date=end_date,
            rows=tuple(rows),
            totals=totals,
            currency_hint=self.get_currency_hint(rows, entries),
            entry_count=len(entries),
        )

    def list_entries(self, start_date: date, end_date: date) -> list[JournalEntry]:
        """List fetched entries dated within the window, oldest first."""
        start, end = day_bounds(start_date, end_date)
        dated = []
        for entry in self.source.list_journal_entries():
            timestamp = parse_timestamp(entry.transaction_date)
            if timestamp is not None and start <= timestamp <= end:
                dated.append((timestamp, entry))
        dated.sort(key=lambda item: item[0])
        return [entry for _, entry in dated]

    @staticmethod
    def get_currency_hint(
        rows: Sequence[ClassifiedRow], entries: Sequence[JournalEntry]
    ) -> str:
        """Currency of the first row, else of the first entry, else empty."""
        if rows:
            return rows[0].currency
        if entries and entries[0].currency is not None:
            return entries[0].currency.code or ""
        return ""
