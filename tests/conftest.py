"""Shared pytest fixtures for ledgerflow tests."""

import json
from pathlib import Path

import pytest

from ledgerflow.domain.cash_flow import CashFlowService
from ledgerflow.domain.currency import CurrencyService
from ledgerflow.source.file_source import JsonFileEntrySource


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def entries_path(fixtures_dir):
    """Path to a saved journal-entries API response."""
    return fixtures_dir / "journal_entries.json"


@pytest.fixture
def currencies_path(fixtures_dir):
    """Path to a saved currencies API response."""
    return fixtures_dir / "currencies.json"


@pytest.fixture
def entries_payload(entries_path):
    """The journal-entries response envelope as parsed JSON."""
    with open(entries_path, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def file_source(entries_path, currencies_path):
    """Create a JsonFileEntrySource over the sample fixtures."""
    return JsonFileEntrySource(entries_path, currencies_path=currencies_path)


@pytest.fixture
def cash_flow_service(file_source):
    """Create a CashFlowService reading the sample fixtures."""
    return CashFlowService(file_source)


@pytest.fixture
def currency_service(file_source):
    """Create a CurrencyService reading the sample fixtures."""
    return CurrencyService(file_source)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
