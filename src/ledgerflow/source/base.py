"""Abstract journal entry source interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerflow.domain.entities import Currency, JournalEntry


class EntrySource(ABC):
    """Read-only access to the ledger's journal entries and currencies."""

    @abstractmethod
    def list_journal_entries(self) -> list[JournalEntry]:
        """List all journal entries with their lines."""
        pass

    @abstractmethod
    def list_currencies(self) -> list[Currency]:
        """List configured currencies."""
        pass

    def close(self) -> None:
        """Release any held resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
