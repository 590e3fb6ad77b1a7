"""Journal entry source backed by a JSON export of the accounting API."""

import json
from pathlib import Path
from typing import Any, Optional

from ledgerflow.domain.entities import Currency, JournalEntry
from ledgerflow.domain.errors import SourceError, fetch_failed, input_file_not_found
from ledgerflow.source.base import EntrySource
from ledgerflow.source.mappers import (
    currency_to_domain,
    journal_entry_to_domain,
    records_from_envelope,
)


class JsonFileEntrySource(EntrySource):
    """Reads journal entries from a saved API response.

    The file holds either the journal-entries response envelope or a bare
    list of entries. Currencies are taken from the entries themselves,
    unless a separate currencies file is given.
    """

    def __init__(self, path: str | Path, currencies_path: Optional[str | Path] = None):
        self.path = Path(path)
        self.currencies_path = Path(currencies_path) if currencies_path else None

    @staticmethod
    def _load(path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            raise SourceError(input_file_not_found(str(path)))
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SourceError(fetch_failed(f"Invalid JSON in '{path}': {e}")) from e
        except OSError as e:
            raise SourceError(fetch_failed(f"Could not read '{path}': {e}")) from e
        return records_from_envelope(payload)

    def list_journal_entries(self) -> list[JournalEntry]:
        return [journal_entry_to_domain(r) for r in self._load(self.path)]

    def list_currencies(self) -> list[Currency]:
        if self.currencies_path is not None:
            return [currency_to_domain(r) for r in self._load(self.currencies_path)]

        seen: dict[str, Currency] = {}
        for entry in self.list_journal_entries():
            if entry.currency is not None and entry.currency.code not in seen:
                seen[entry.currency.code] = entry.currency
        return list(seen.values())
