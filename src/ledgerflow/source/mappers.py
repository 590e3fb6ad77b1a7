"""Mapper functions to convert accounting API payloads into domain entities.

The API uses camelCase keys and encodes amounts as strings. Payloads are
treated as untrusted: missing keys become empty values and amounts that do
not parse become zero, so a malformed record never aborts a report.
"""

from typing import Any, Optional

from ledgerflow.domain import entities as domain
from ledgerflow.domain.errors import SourceError, fetch_failed
from ledgerflow.utils.amount_parser import to_decimal


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return "" if value is None else str(value)


def _mapping(value: Any) -> Optional[dict[str, Any]]:
    return value if isinstance(value, dict) else None


def currency_to_domain(payload: dict[str, Any]) -> domain.Currency:
    """Convert a currency payload to a domain Currency entity."""
    return domain.Currency(
        id=_text(payload, "id"),
        code=_text(payload, "code"),
        name=_text(payload, "name"),
        symbol=_text(payload, "symbol"),
        is_default=bool(payload.get("isDefault", False)),
        is_active=bool(payload.get("isActive", True)),
    )


def chart_of_account_to_domain(payload: dict[str, Any]) -> domain.ChartOfAccount:
    """Convert a chart-of-account payload to a domain ChartOfAccount entity."""
    return domain.ChartOfAccount(
        id=_text(payload, "id"),
        account_no=_text(payload, "accountNo"),
        account_name=_text(payload, "accountName"),
        account_type=_text(payload, "accountType"),
        financial_statement=_text(payload, "financialStatement"),
    )


def journal_entry_line_to_domain(payload: dict[str, Any]) -> domain.JournalEntryLine:
    """Convert a journal entry line payload to a domain JournalEntryLine entity."""
    account = _mapping(payload.get("chartOfAccount"))
    return domain.JournalEntryLine(
        id=_text(payload, "id"),
        journal_entry_id=_text(payload, "journalEntryId"),
        chart_of_account_id=_text(payload, "chartOfAccountId"),
        debit_amount=to_decimal(payload.get("debitAmount")),
        credit_amount=to_decimal(payload.get("creditAmount")),
        description=_text(payload, "description"),
        vat_amount=to_decimal(payload.get("vatAmount")),
        chart_of_account=chart_of_account_to_domain(account) if account else None,
    )


def journal_entry_to_domain(payload: dict[str, Any]) -> domain.JournalEntry:
    """Convert a journal entry payload to a domain JournalEntry entity."""
    currency = _mapping(payload.get("currency"))
    raw_lines = payload.get("journalEntryLines")
    lines = tuple(
        journal_entry_line_to_domain(line)
        for line in (raw_lines if isinstance(raw_lines, list) else [])
        if isinstance(line, dict)
    )
    return domain.JournalEntry(
        id=_text(payload, "id"),
        transaction_date=_text(payload, "transactionDate"),
        reference_number=_text(payload, "referenceNumber"),
        description=_text(payload, "description"),
        total_amount=to_decimal(payload.get("totalAmount")),
        currency_id=payload.get("currencyId"),
        status=_text(payload, "status"),
        lines=lines,
        currency=currency_to_domain(currency) if currency else None,
    )


def records_from_envelope(payload: Any) -> list[dict[str, Any]]:
    """Extract the record list from a ``{success, message, data}`` envelope.

    A bare JSON list is accepted as-is. Non-dict records are skipped.

    Raises:
        SourceError: If the envelope reports failure or carries no list
    """
    if isinstance(payload, list):
        data = payload
    elif isinstance(payload, dict):
        data = payload.get("data")
        if not payload.get("success") or not isinstance(data, list):
            raise SourceError(fetch_failed(payload.get("message")))
    else:
        raise SourceError(fetch_failed())
    return [record for record in data if isinstance(record, dict)]
