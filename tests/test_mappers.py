"""Tests for accounting API payload mappers."""

from decimal import Decimal

import pytest

from ledgerflow.domain.entities import ChartOfAccount, Currency
from ledgerflow.domain.errors import SourceError
from ledgerflow.source.mappers import (
    chart_of_account_to_domain,
    currency_to_domain,
    journal_entry_line_to_domain,
    journal_entry_to_domain,
    records_from_envelope,
)


class TestCurrencyMapper:
    """Tests for Currency mapper."""

    def test_currency_to_domain(self):
        currency = currency_to_domain(
            {"id": "c1", "code": "ZAR", "name": "South African Rand", "symbol": "R", "isDefault": True}
        )

        assert currency == Currency(
            id="c1", code="ZAR", name="South African Rand", symbol="R", is_default=True, is_active=True
        )

    def test_currency_inactive(self):
        assert currency_to_domain({"code": "ZWL", "isActive": False}).is_active is False


class TestChartOfAccountMapper:
    """Tests for ChartOfAccount mapper."""

    def test_chart_of_account_to_domain(self):
        account = chart_of_account_to_domain(
            {
                "id": "coa-1",
                "accountNo": "1000",
                "accountName": "Cash",
                "accountType": "Current Asset",
                "financialStatement": "Balance Sheet",
            }
        )

        assert account == ChartOfAccount(
            id="coa-1",
            account_no="1000",
            account_name="Cash",
            account_type="Current Asset",
            financial_statement="Balance Sheet",
        )

    def test_missing_fields_become_empty(self):
        account = chart_of_account_to_domain({"accountNo": None})

        assert account.account_no == ""
        assert account.account_name == ""
        assert account.financial_statement == ""


class TestJournalEntryMapper:
    """Tests for JournalEntry and JournalEntryLine mappers."""

    def test_line_amounts_are_decimals(self):
        line = journal_entry_line_to_domain(
            {"id": "l1", "debitAmount": "1500.00", "creditAmount": "0.00", "vatAmount": None}
        )

        assert line.debit_amount == Decimal("1500.00")
        assert line.credit_amount == Decimal("0")
        assert line.vat_amount == Decimal("0")
        assert line.chart_of_account is None

    def test_unparseable_amounts_become_zero(self):
        line = journal_entry_line_to_domain({"debitAmount": "n/a", "creditAmount": {}})

        assert line.debit_amount == Decimal("0")
        assert line.credit_amount == Decimal("0")

    def test_journal_entry_to_domain(self, entries_payload):
        entry = journal_entry_to_domain(entries_payload["data"][0])

        assert entry.id == "je-1"
        assert entry.transaction_date == "2024-01-05T09:30:00"
        assert entry.reference_number == "INV-001"
        assert entry.total_amount == Decimal("1000.00")
        assert entry.currency.code == "USD"
        assert entry.currency_code == "USD"
        assert len(entry.lines) == 2
        assert entry.lines[0].chart_of_account.account_no == "1000"
        assert entry.lines[1].credit_amount == Decimal("1000.00")

    def test_entry_without_lines_or_currency(self):
        entry = journal_entry_to_domain({"id": "je-x", "journalEntryLines": None, "currency": None})

        assert entry.lines == ()
        assert entry.currency is None
        assert entry.currency_code == "—"

    def test_non_dict_lines_are_skipped(self):
        entry = journal_entry_to_domain({"id": "je-y", "journalEntryLines": ["junk", {"id": "l1"}]})

        assert [line.id for line in entry.lines] == ["l1"]


class TestEnvelope:
    """Tests for API response envelope handling."""

    def test_success_envelope(self):
        assert records_from_envelope({"success": True, "data": [{"id": "a"}, "junk"]}) == [{"id": "a"}]

    def test_bare_list(self):
        assert records_from_envelope([{"id": "a"}]) == [{"id": "a"}]

    def test_failure_uses_server_message(self):
        with pytest.raises(SourceError, match="Token expired"):
            records_from_envelope({"success": False, "message": "Token expired", "data": []})

    @pytest.mark.parametrize("payload", [{"success": True, "data": None}, "oops", None])
    def test_malformed_envelope(self, payload):
        with pytest.raises(SourceError, match="Failed to fetch"):
            records_from_envelope(payload)
