"""Currency domain service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ledgerflow.domain.entities import Currency

if TYPE_CHECKING:
    from ledgerflow.source.base import EntrySource


class CurrencyService:
    """Service for reading the currencies configured on the ledger."""

    def __init__(self, source: EntrySource):
        self.source = source

    def list_currencies(self, include_inactive: bool = False) -> list[Currency]:
        """List currencies, the default one first and the rest by code."""
        currencies = self.source.list_currencies()
        if not include_inactive:
            currencies = [c for c in currencies if c.is_active]
        return sorted(currencies, key=lambda c: (not c.is_default, c.code))

    def get_default_currency(self) -> Optional[Currency]:
        """Return the default currency, if one is marked."""
        for currency in self.source.list_currencies():
            if currency.is_default:
                return currency
        return None
