"""Journal entry sources for ledgerflow."""

from ledgerflow.source.base import EntrySource
from ledgerflow.source.factories import create_entry_source

__all__ = ["EntrySource", "create_entry_source"]
