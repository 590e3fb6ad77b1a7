"""Domain model entities for ledgerflow.

These are pure data classes representing accounting concepts, independent of
the wire format of the accounting API. Mappers in ``ledgerflow.source`` build
them from API payloads so the classifier never sees raw JSON.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

MISSING_CURRENCY = "—"


@dataclass(frozen=True)
class Currency:
    """Currency domain entity."""

    id: str
    code: str
    name: str = ""
    symbol: str = ""
    is_default: bool = False
    is_active: bool = True


@dataclass(frozen=True)
class ChartOfAccount:
    """Ledger account from the chart of accounts."""

    id: str
    account_no: str
    account_name: str
    account_type: str = ""
    financial_statement: str = ""


@dataclass(frozen=True)
class JournalEntryLine:
    """One debit or credit leg of a journal entry."""

    id: str
    journal_entry_id: str
    chart_of_account_id: str
    debit_amount: Decimal
    credit_amount: Decimal
    description: str = ""
    vat_amount: Decimal = Decimal("0")
    chart_of_account: Optional[ChartOfAccount] = None

    @property
    def magnitude(self) -> Decimal:
        """Larger of the debit and credit amounts."""
        return max(self.debit_amount, self.credit_amount)


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry domain entity.

    ``transaction_date`` keeps the timestamp text exactly as received; it is
    parsed only where a comparison or display needs it.
    """

    id: str
    transaction_date: str
    reference_number: str
    description: str
    total_amount: Decimal
    currency_id: Optional[str] = None
    status: str = ""
    lines: tuple[JournalEntryLine, ...] = ()
    currency: Optional[Currency] = None

    @property
    def currency_code(self) -> str:
        if self.currency is not None and self.currency.code:
            return self.currency.code
        return MISSING_CURRENCY


class Section(str, Enum):
    """Cash-flow statement section."""

    OPERATING = "Operating"
    INVESTING = "Investing"
    FINANCING = "Financing"


@dataclass(frozen=True)
class ClassifiedRow:
    """Cash movement of a single journal entry attributed to a section."""

    entry_id: str
    date: str
    timestamp: datetime
    reference: str
    description: str
    section: Section
    cash_impact: Decimal
    currency: str


@dataclass(frozen=True)
class CashFlowTotals:
    """Signed cash movement per section."""

    operating: Decimal = Decimal("0")
    investing: Decimal = Decimal("0")
    financing: Decimal = Decimal("0")

    @property
    def net_change(self) -> Decimal:
        return self.operating + self.investing + self.financing

    def get(self, section: Section) -> Decimal:
        """Return the total for a section."""
        return {
            Section.OPERATING: self.operating,
            Section.INVESTING: self.investing,
            Section.FINANCING: self.financing,
        }[section]

    def as_dict(self) -> dict[str, Decimal]:
        """Return the section totals plus the net change keyed by label."""
        return {
            Section.OPERATING.value: self.operating,
            Section.INVESTING.value: self.investing,
            Section.FINANCING.value: self.financing,
            "NetChange": self.net_change,
        }


@dataclass(frozen=True)
class CashFlowReport:
    """Classified cash movements for a date window."""

    start_date: date
    end_date: date
    rows: tuple[ClassifiedRow, ...] = ()
    totals: CashFlowTotals = field(default_factory=CashFlowTotals)
    currency_hint: str = ""
    entry_count: int = 0
